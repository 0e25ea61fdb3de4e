from __future__ import annotations

"""
Unit tests for the Aggregator / Serializer.

Verifies per-language merging, last-write-wins collision resolution and
both output variants of the serialized document.
"""

import json
from pathlib import Path

import pytest

from localeflat.core.aggregator import build_table, serialize
from localeflat.core.locator import locate
from localeflat.domain.errors import LocaleParseError
from localeflat.domain.models import FlatEntry, TranslationTable


def test_build_table_simple_scenario(sample_project: Path):
    table = build_table(locate(str(sample_project)))

    assert table.to_dict() == {
        "de": {"greeting.hello": "Hallo"},
        "en": {"greeting.hello": "Hello"},
    }


def test_build_table_annotated_scenario(sample_project: Path):
    table = build_table(locate(str(sample_project)))

    assert table.to_dict(include_source_file=True)["en"] == {
        "greeting.hello": {"translation": "Hello", "file": "config/locales/en.yml"},
    }


def test_build_table_merges_disjoint_keys(tmp_path: Path, write_file):
    write_file("config/locales/a.yml", "en:\n  one: One\n")
    write_file("config/locales/b.yml", "en:\n  two: Two\n")

    table = build_table(locate(str(tmp_path)))

    assert table.to_dict() == {"en": {"one": "One", "two": "Two"}}


def test_build_table_later_file_wins_on_collision(tmp_path: Path, write_file):
    write_file("config/locales/a.yml", "en:\n  greeting:\n    hello: First\n")
    write_file("config/locales/b.yml", "en:\n  greeting:\n    hello: Second\n")

    table = build_table(locate(str(tmp_path)))

    entry = table.get("en")["greeting.hello"]
    assert entry.translation == "Second"
    assert entry.file == "config/locales/b.yml"


def test_build_table_processing_order_decides_winner(tmp_path: Path, write_file):
    write_file("config/locales/a.yml", "en:\n  k: A\n")
    write_file("config/locales/b.yml", "en:\n  k: B\n")
    files = locate(str(tmp_path))

    assert build_table(files).get("en")["k"].translation == "B"
    assert build_table(list(reversed(files))).get("en")["k"].translation == "A"


def test_build_table_multiple_languages_in_one_file(tmp_path: Path, write_file):
    write_file("config/locales/all.yml", "en:\n  a: A\nde:\n  a: Ä\n")

    table = build_table(locate(str(tmp_path)))

    assert table.languages == ["en", "de"]
    assert table.get("de")["a"].translation == "Ä"


def test_build_table_skips_empty_documents(tmp_path: Path, write_file):
    write_file("config/locales/empty.yml", "")
    write_file("config/locales/en.yml", "en:\n  a: A\n")

    table = build_table(locate(str(tmp_path)))

    assert table.to_dict() == {"en": {"a": "A"}}


def test_build_table_empty_input_yields_empty_table():
    table = build_table([])
    assert len(table) == 0
    assert serialize(table) == "{}"


def test_build_table_aborts_on_malformed_file(tmp_path: Path, write_file):
    write_file("config/locales/a.yml", "en:\n  ok: fine\n")
    write_file("config/locales/b.yml", "en:\n  bad: 'unterminated\n")

    with pytest.raises(LocaleParseError) as exc_info:
        build_table(locate(str(tmp_path)))

    assert exc_info.value.rel_path == "config/locales/b.yml"


def test_build_table_rejects_self_referencing_sequence(tmp_path: Path, write_file):
    write_file("config/locales/en.yml", "en:\n  loop: &x [1, *x]\n")

    with pytest.raises(LocaleParseError) as exc_info:
        build_table(locate(str(tmp_path)))

    assert exc_info.value.rel_path == "config/locales/en.yml"
    assert "config/locales/en.yml" in str(exc_info.value)


def test_serialize_is_pretty_printed_json(sample_project: Path):
    text = serialize(build_table(locate(str(sample_project))))

    assert text.startswith("{\n  \"de\": {\n    \"greeting.hello\": \"Hallo\"")
    assert json.loads(text) == {
        "de": {"greeting.hello": "Hallo"},
        "en": {"greeting.hello": "Hello"},
    }


def test_serialize_keeps_non_ascii_characters(tmp_path: Path, write_file):
    write_file("config/locales/ja.yml", "ja:\n  hello: こんにちは\n")

    text = serialize(build_table(locate(str(tmp_path))))

    assert "こんにちは" in text


def test_serialize_annotated_variant(sample_project: Path):
    data = json.loads(serialize(build_table(locate(str(sample_project))), include_source_file=True))

    assert data["de"]["greeting.hello"] == {
        "translation": "Hallo",
        "file": "config/locales/de.yml",
    }


def test_serialize_respects_indent():
    table = TranslationTable()
    table.merge("en", {"a": FlatEntry("A", "config/locales/en.yml")})

    assert serialize(table, indent=4) == '{\n    "en": {\n        "a": "A"\n    }\n}'
