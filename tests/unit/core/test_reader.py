from __future__ import annotations

"""
Unit tests for the Locale Document Reader.

Verifies:
1. YAML documents become tagged Node/Leaf trees.
2. Malformed documents raise LocaleParseError naming the file.
3. Empty documents and empty languages are tolerated.
"""

from pathlib import Path

import pytest

from localeflat.core.reader import build_tree, load_locale_tree
from localeflat.domain.errors import LocaleParseError
from localeflat.domain.models import Leaf, LocaleFile, Node


def _locale_file(path: Path, rel_path: str = "config/locales/en.yml") -> LocaleFile:
    return LocaleFile(path=str(path), rel_path=rel_path)


def test_build_tree_tags_nodes_and_leaves():
    tree = build_tree({"en": {"greeting": {"hello": "Hello"}, "count": 2}})

    assert isinstance(tree, Node)
    en = tree.children["en"]
    assert isinstance(en, Node)
    assert isinstance(en.children["greeting"], Node)
    assert en.children["count"] == Leaf(2)


def test_build_tree_stringifies_keys():
    """Non-string YAML keys go through the same scalar rule as leaves."""
    tree = build_tree({2: "two", True: "yes", None: "nothing", 1.5: "float"})
    assert list(tree.children) == ["2", "true", "", "1.5"]


def test_build_tree_scalar_input_is_leaf():
    assert build_tree("just text") == Leaf("just text")


def test_build_tree_rejects_recursive_mapping():
    raw = {"a": {}}
    raw["a"]["loop"] = raw["a"]
    with pytest.raises(ValueError):
        build_tree(raw)


def test_build_tree_allows_shared_non_recursive_mapping():
    """The same mapping reached twice (YAML alias) is not a cycle."""
    shared = {"x": "1"}
    tree = build_tree({"a": shared, "b": shared})
    assert set(tree.children) == {"a", "b"}


def test_load_locale_tree_reads_yaml(write_file):
    path = write_file("config/locales/en.yml", "en:\n  greeting:\n    hello: Hello\n")

    tree = load_locale_tree(_locale_file(path))

    assert tree is not None
    assert list(tree.children) == ["en"]


def test_load_locale_tree_multiple_languages(write_file):
    path = write_file("config/locales/all.yml", "en:\n  a: A\nde:\n  a: B\n")
    tree = load_locale_tree(_locale_file(path, "config/locales/all.yml"))
    assert list(tree.children) == ["en", "de"]


def test_load_locale_tree_empty_document_returns_none(write_file):
    path = write_file("config/locales/empty.yml", "# nothing yet\n")
    assert load_locale_tree(_locale_file(path)) is None


def test_load_locale_tree_empty_language_is_empty_node(write_file):
    path = write_file("config/locales/en.yml", "en:\n")
    tree = load_locale_tree(_locale_file(path))
    assert tree.children["en"] == Node()


def test_load_locale_tree_invalid_syntax_names_file(write_file):
    path = write_file("config/locales/broken.yml", "en:\n  hello: [unclosed\n")

    with pytest.raises(LocaleParseError) as exc_info:
        load_locale_tree(_locale_file(path, "config/locales/broken.yml"))

    assert exc_info.value.rel_path == "config/locales/broken.yml"
    assert "config/locales/broken.yml" in str(exc_info.value)


@pytest.mark.parametrize(
    "content",
    [
        "- en\n- de\n",
        "just a string\n",
    ],
)
def test_load_locale_tree_rejects_non_mapping_top_level(write_file, content):
    path = write_file("config/locales/odd.yml", content)
    with pytest.raises(LocaleParseError, match="top level must be a mapping"):
        load_locale_tree(_locale_file(path, "config/locales/odd.yml"))


def test_load_locale_tree_rejects_scalar_language(write_file):
    path = write_file("config/locales/en.yml", "en: Hello\n")
    with pytest.raises(LocaleParseError, match="language 'en'"):
        load_locale_tree(_locale_file(path))


def test_load_locale_tree_rejects_invalid_utf8(tmp_path):
    path = tmp_path / "en.yml"
    path.write_bytes(b"en:\n  hello: \xff\xfe\n")
    with pytest.raises(LocaleParseError):
        load_locale_tree(_locale_file(path))


def test_load_locale_tree_missing_file_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        load_locale_tree(_locale_file(tmp_path / "missing.yml"))
