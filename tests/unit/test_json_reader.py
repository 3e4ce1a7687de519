"""Tests for parsing raw JSON text."""

import io
from pathlib import Path

import pytest

from json_tree_visualizer.core.importer.json_reader import load_json_source, parse_json_text


def test_parse_valid_document() -> None:
    assert parse_json_text('{"a": [1, null, true]}') == {"a": [1, None, True]}


@pytest.mark.parametrize("text", ["", "{", "{'a': 1}", "[1,]", "nope"])
def test_parse_invalid_document_raises_value_error(text: str) -> None:
    with pytest.raises(ValueError):
        parse_json_text(text)


def test_parse_error_message_names_the_problem() -> None:
    with pytest.raises(ValueError, match="line 1"):
        parse_json_text('{"a": }')


def test_overly_deep_document_raises_value_error() -> None:
    depth = 100_000
    with pytest.raises(ValueError):
        parse_json_text("[" * depth + "]" * depth)


def test_load_from_file(tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    path.write_text('{"x": 1}', encoding="utf-8")
    assert load_json_source(path) == {"x": 1}


def test_load_from_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("[1, 2]"))
    assert load_json_source("-") == [1, 2]


def test_load_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_json_source(tmp_path / "missing.json")
