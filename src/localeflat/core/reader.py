from __future__ import annotations

"""
Locale Document Reader.

Loads YAML locale documents and converts them into the tagged Node/Leaf
tree consumed by the flattener. Any syntax or shape problem is reported as
a LocaleParseError naming the offending file.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple, cast

import yaml

from localeflat.domain.errors import LocaleParseError
from localeflat.domain.models import Leaf, LocaleFile, LocaleTree, Node, stringify_scalar

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# DOCUMENT LOADING
# -----------------------------------------------------------------------------

def load_locale_tree(locale_file: LocaleFile) -> Optional[Node]:
    """
    Read and parse one locale file into a language -> subtree Node.

    The top level must be a mapping of language codes. Each language maps
    to a nested mapping; a language left empty (``en:``) counts as an empty
    mapping.

    Args:
        locale_file: The discovered file to load.

    Returns:
        Optional[Node]: The parsed tree, or None for an empty document.

    Raises:
        LocaleParseError: On invalid YAML or an unexpected document shape.
    """
    try:
        with open(locale_file.path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LocaleParseError(locale_file.rel_path, _describe_yaml_error(e)) from e
    except UnicodeDecodeError as e:
        raise LocaleParseError(locale_file.rel_path, f"not valid UTF-8 ({e.reason})") from e

    if raw is None:
        return None

    if not isinstance(raw, dict):
        raise LocaleParseError(
            locale_file.rel_path,
            f"top level must be a mapping of language codes, got {_kind(raw)}",
        )

    for language, subtree in raw.items():
        if subtree is not None and not isinstance(subtree, dict):
            raise LocaleParseError(
                locale_file.rel_path,
                f"language '{stringify_scalar(language)}' must map to nested keys, "
                f"got {_kind(subtree)}",
            )

    normalized = {key: ({} if value is None else value) for key, value in raw.items()}
    try:
        tree = build_tree(normalized)
    except ValueError as e:
        raise LocaleParseError(locale_file.rel_path, str(e)) from e

    logger.debug(f"Parsed '{locale_file.rel_path}': {len(normalized)} language(s).")
    return cast(Node, tree)


# -----------------------------------------------------------------------------
# TREE CONSTRUCTION
# -----------------------------------------------------------------------------

def build_tree(raw: Any) -> LocaleTree:
    """
    Convert parsed YAML data into a tagged Node/Leaf tree.

    Mappings become Nodes (keys stringified with the tool-wide scalar rule,
    document order preserved); everything else becomes a Leaf. Uses an
    explicit stack so deeply nested documents do not hit the recursion
    limit.

    Args:
        raw: Output of the YAML loader.

    Returns:
        LocaleTree: Root of the tagged tree.

    Raises:
        ValueError: If a mapping contains itself (recursive YAML alias).
    """
    if not isinstance(raw, dict):
        return Leaf(raw)

    root = Node()
    stack: List[Tuple[Dict[Any, Any], Node, Tuple[int, ...]]] = [(raw, root, (id(raw),))]

    while stack:
        mapping, node, ancestors = stack.pop()
        for key, value in mapping.items():
            name = stringify_scalar(key)
            if isinstance(value, dict):
                if id(value) in ancestors:
                    raise ValueError(f"recursive alias under key '{name}'")
                child = Node()
                node.children[name] = child
                stack.append((value, child, ancestors + (id(value),)))
            else:
                node.children[name] = Leaf(value)

    return root


# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _describe_yaml_error(error: yaml.YAMLError) -> str:
    mark = getattr(error, "problem_mark", None)
    problem = getattr(error, "problem", None)
    if mark is not None and problem:
        return f"{problem} (line {mark.line + 1}, column {mark.column + 1})"
    return str(error).replace("\n", " ")


def _kind(value: Any) -> str:
    if isinstance(value, list):
        return "a sequence"
    return f"a scalar ({type(value).__name__})"
