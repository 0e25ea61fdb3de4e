from __future__ import annotations

"""
Locale Tree Flattener.

Turns a nested locale tree into a single-level mapping whose keys are the
dot-joined paths of their ancestors, and provides the inverse operation.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from localeflat.domain.constants import KEY_SEPARATOR
from localeflat.domain.models import FlatEntry, Leaf, LocaleFile, LocaleTree, Node


def flatten(
        tree: LocaleTree,
        prefix: str = "",
        source: Optional[LocaleFile] = None,
) -> Dict[str, FlatEntry]:
    """
    Flatten a locale subtree into dot-joined keys.

    Produces exactly one entry per Leaf, in document order. An empty Node
    contributes nothing.

    Args:
        tree: Subtree of one language.
        prefix: Key path accumulated so far ('' at the top of a language).
        source: File the subtree came from, recorded on every entry.

    Returns:
        Dict[str, FlatEntry]: Flat key -> entry mapping.
    """
    file_ref = source.rel_path if source else ""
    result: Dict[str, FlatEntry] = {}

    if isinstance(tree, Leaf):
        # A bare leaf only has a key if we were given one
        if prefix:
            result[prefix] = FlatEntry(tree.text, file_ref)
        return result

    # Children are pushed in reverse so they pop in document order
    stack: List[Tuple[str, LocaleTree]] = [
        (_join(prefix, key), child) for key, child in reversed(list(tree.items()))
    ]
    while stack:
        full_key, node = stack.pop()
        if isinstance(node, Node):
            stack.extend(
                (_join(full_key, key), child) for key, child in reversed(list(node.items()))
            )
        else:
            result[full_key] = FlatEntry(node.text, file_ref)

    return result


def unflatten(flat: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Rebuild a nested mapping by splitting flat keys on the separator.

    Values are kept as given; FlatEntry values are reduced to their
    translation text.

    Raises:
        ValueError: If a key is both a leaf and a parent of other keys.
    """
    nested: Dict[str, Any] = {}
    for flat_key, value in flat.items():
        if isinstance(value, FlatEntry):
            value = value.translation

        parts = flat_key.split(KEY_SEPARATOR)
        cursor = nested
        for part in parts[:-1]:
            cursor = cursor.setdefault(part, {})
            if not isinstance(cursor, dict):
                raise ValueError(f"Key '{flat_key}' collides with a leaf at '{part}'")
        if isinstance(cursor.get(parts[-1]), dict):
            raise ValueError(f"Key '{flat_key}' collides with a nested mapping")
        cursor[parts[-1]] = value
    return nested


def _join(prefix: str, key: str) -> str:
    return key if not prefix else f"{prefix}{KEY_SEPARATOR}{key}"
