from __future__ import annotations

"""
Translation Aggregator and Serializer.

Merges the flattened contributions of every located file into a single
per-language table and renders it as pretty-printed JSON. Files are
processed in the order given; on a key collision within a language the
later file wins.
"""

import json
import logging
from typing import Sequence

from localeflat.core.flattener import flatten
from localeflat.core.reader import load_locale_tree
from localeflat.domain.constants import DEFAULT_INDENT
from localeflat.domain.errors import LocaleParseError
from localeflat.domain.models import LocaleFile, TranslationTable

logger = logging.getLogger(__name__)


def build_table(files: Sequence[LocaleFile]) -> TranslationTable:
    """
    Parse, flatten and merge locale files into a translation table.

    Args:
        files: Located files, in processing order.

    Returns:
        TranslationTable: language -> flat key -> entry.

    Raises:
        LocaleParseError: If any file is malformed. Nothing is returned in
                          that case; the run is expected to abort.
    """
    table = TranslationTable()

    for locale_file in files:
        tree = load_locale_tree(locale_file)
        if tree is None:
            logger.warning(f"Locale file '{locale_file.rel_path}' is empty; skipping.")
            continue

        for language, subtree in tree.items():
            try:
                entries = flatten(subtree, "", locale_file)
            except ValueError as e:
                raise LocaleParseError(locale_file.rel_path, str(e)) from e
            replaced = table.merge(language, entries)
            if replaced:
                logger.debug(
                    f"'{locale_file.rel_path}' overrides {len(replaced)} '{language}' "
                    f"key(s), e.g. '{replaced[0]}'."
                )

    logger.debug(
        f"Aggregated {table.key_count} key(s) across {len(table)} language(s) "
        f"from {len(files)} file(s)."
    )
    return table


def serialize(
        table: TranslationTable,
        include_source_file: bool = False,
        indent: int = DEFAULT_INDENT,
) -> str:
    """
    Render the table as a pretty-printed JSON document.

    Args:
        table: The aggregated translations.
        include_source_file: Emit {translation, file} records instead of
                             bare translation strings.
        indent: Spaces per indentation level.

    Returns:
        str: JSON text shaped language -> key -> entry (no trailing newline).
    """
    return json.dumps(
        table.to_dict(include_source_file=include_source_file),
        ensure_ascii=False,
        indent=indent,
    )
