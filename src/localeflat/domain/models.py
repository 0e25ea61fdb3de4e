from __future__ import annotations

"""
Locale Domain Data Models.

Defines the immutable units that flow through the flattening pipeline:
discovered files, the tagged locale tree, flat entries, the per-language
translation table and the result object handed to interface layers.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Union

from localeflat.domain.constants import FILE_KEY, TRANSLATION_KEY

# -----------------------------------------------------------------------------
# SOURCE MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LocaleFile:
    """
    A discovered translation source.

    Attributes:
        path: Absolute filesystem path.
        rel_path: Path relative to the project root (POSIX separators).
    """
    path: str
    rel_path: str


def stringify_scalar(value: Any) -> str:
    """
    Convert a parsed scalar into its translation text.

    The same rule applies to keys and leaf values everywhere in the tool:
    null becomes an empty string, booleans are lower case, sequences are
    rendered as compact JSON and anything else goes through str().
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple, set, dict)):
        items = sorted(value, key=str) if isinstance(value, set) else value
        return json.dumps(items, ensure_ascii=False, default=str)
    return str(value)


@dataclass(frozen=True)
class Leaf:
    """Scalar leaf of a locale tree (string, number, boolean, null...)."""
    value: Any

    @property
    def text(self) -> str:
        return stringify_scalar(self.value)


@dataclass(frozen=True)
class Node:
    """Nested mapping of a locale tree, keyed by stringified keys."""
    children: Dict[str, LocaleTree] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.children)

    def items(self) -> Iterator[tuple[str, LocaleTree]]:
        return iter(self.children.items())


LocaleTree = Union[Node, Leaf]

# -----------------------------------------------------------------------------
# OUTPUT MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FlatEntry:
    """
    One flattened translation and the file that contributed it.

    Attributes:
        translation: Stringified leaf value.
        file: Relative path of the source file.
    """
    translation: str
    file: str = ""

    def to_output(self, include_source_file: bool) -> Union[str, Dict[str, str]]:
        """Render the entry in the simple or the annotated variant."""
        if include_source_file:
            return {TRANSLATION_KEY: self.translation, FILE_KEY: self.file}
        return self.translation


class TranslationTable:
    """
    Per-language mapping of flat keys to entries.

    Built incrementally while files are processed. A key merged twice for
    the same language keeps the most recently merged entry, while its
    position stays where it was first inserted.
    """

    def __init__(self) -> None:
        self._languages: Dict[str, Dict[str, FlatEntry]] = {}

    def merge(self, language: str, entries: Mapping[str, FlatEntry]) -> List[str]:
        """
        Merge flattened entries into a language, last write wins.

        Args:
            language: Language code (top-level key of a locale document).
            entries: Flattened entries contributed by one file.

        Returns:
            List[str]: Keys that replaced an existing entry.
        """
        bucket = self._languages.setdefault(language, {})
        replaced = [key for key in entries if key in bucket]
        bucket.update(entries)
        return replaced

    def get(self, language: str) -> Dict[str, FlatEntry]:
        return dict(self._languages.get(language, {}))

    @property
    def languages(self) -> List[str]:
        return list(self._languages)

    @property
    def key_count(self) -> int:
        return sum(len(bucket) for bucket in self._languages.values())

    def __len__(self) -> int:
        return len(self._languages)

    def __contains__(self, language: object) -> bool:
        return language in self._languages

    def to_dict(self, include_source_file: bool = False) -> Dict[str, Dict[str, Any]]:
        """Render the two-level language -> key -> entry structure."""
        return {
            language: {
                key: entry.to_output(include_source_file)
                for key, entry in bucket.items()
            }
            for language, bucket in self._languages.items()
        }

# -----------------------------------------------------------------------------
# RESULT MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FlattenResult:
    """
    Outcome of a complete flattening run.

    Attributes:
        base_path: Normalized project root that was scanned.
        files: Relative paths of the processed locale files, in order.
        languages: Language codes present in the output.
        key_count: Total number of flat keys across languages.
        output: The serialized JSON document.
        output_path: File the document was written to, if any.
    """
    base_path: str
    files: List[str] = field(default_factory=list)
    languages: List[str] = field(default_factory=list)
    key_count: int = 0
    output: str = ""
    output_path: str = ""
