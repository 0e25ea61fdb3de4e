from __future__ import annotations

"""
Flattening Pipeline Engine.

Runs the linear locate -> parse -> flatten -> merge -> serialize pipeline
for one validated configuration and packages the outcome for the
interface layer.
"""

import logging
import os
from typing import Any, Dict

from localeflat.core.aggregator import build_table, serialize
from localeflat.core.locator import locate
from localeflat.domain.models import FlattenResult
from localeflat.infra.fs import normalize_path, write_text_file

logger = logging.getLogger(__name__)


def run_pipeline(config: Dict[str, Any]) -> FlattenResult:
    """
    Execute a complete flattening run.

    A malformed locale file aborts the run: the LocaleParseError propagates
    and no document is produced or written.

    Args:
        config: Normalized configuration (see validate_config).

    Returns:
        FlattenResult: Serialized document plus run metadata.

    Raises:
        LocaleParseError: If any located file cannot be parsed.
        OSError: If a file cannot be read or the output cannot be written.
    """
    base_path = normalize_path(config.get("input_path"), fallback=os.getcwd())
    logger.debug(f"Scanning project root: {base_path}")

    files = locate(
        base_path,
        locale_dir=config["locale_dir"],
        extensions=config["extensions"],
        sort=config["sort_files"],
    )

    table = build_table(files)
    document = serialize(
        table,
        include_source_file=config["include_source_file"],
        indent=config["indent"],
    )

    output_path = ""
    if config.get("output_path"):
        output_path = write_text_file(config["output_path"], document)
        logger.info(f"Translation table written to: {output_path}")

    return FlattenResult(
        base_path=base_path,
        files=[f.rel_path for f in files],
        languages=table.languages,
        key_count=table.key_count,
        output=document,
        output_path=output_path,
    )
