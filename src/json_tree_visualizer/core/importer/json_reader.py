"""Parse raw JSON text into documents the tree builder accepts."""

import json
import sys
from pathlib import Path

from json_tree_visualizer.models.node import JSONValue


def parse_json_text(text: str) -> JSONValue:
    """Parse JSON text.

    Raises:
        ValueError: If the text is not valid JSON (or nests too deeply to parse).
    """
    try:
        return json.loads(text)  # type: ignore[no-any-return]
    except json.JSONDecodeError as e:
        raise ValueError(str(e)) from e
    except RecursionError as e:
        msg = "Document is nested too deeply to parse"
        raise ValueError(msg) from e


def read_json_source(source: str | Path) -> str:
    """Read JSON text from a file path, or from stdin when ``source`` is ``-``."""
    if str(source) == "-":
        return sys.stdin.read()
    return Path(source).expanduser().read_text(encoding="utf-8")


def load_json_source(source: str | Path) -> JSONValue:
    """Read and parse a JSON document from a file path or stdin."""
    return parse_json_text(read_json_source(source))
