"""Configuration constants for json-tree-visualizer."""

import os
from pathlib import Path

# Layout spacing between depth columns (x) and sibling rows (y).
SPACING_X: int = 220
SPACING_Y: int = 80

# Clipboard commands, first one found on PATH is used.
CLIPBOARD_COMMANDS: list[list[str]] = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
]

# Seconds to wait for a clipboard command before giving up.
CLIPBOARD_TIMEOUT: float = 2.0

# Env var naming a JSON file to load into a fresh MCP session.
DOCUMENT_ENV_VAR: str = "JSON_TREE_DOCUMENT"

SAMPLE_DOCUMENT: str = """\
{
  "user": {
    "id": 123,
    "name": "Alice",
    "address": {
      "city": "Wonderland",
      "zip": "12345"
    },
    "tags": ["admin", "editor"]
  },
  "items": [
    { "name": "Item A", "price": 9.99 },
    { "name": "Item B", "price": 19.99 }
  ]
}"""


def resolve_initial_document() -> str:
    """Return the JSON text a new session starts with.

    Uses the file named by ``JSON_TREE_DOCUMENT`` when set, else the sample document.
    """
    document_path = os.environ.get(DOCUMENT_ENV_VAR)
    if not document_path:
        return SAMPLE_DOCUMENT
    path = Path(document_path).expanduser()
    if not path.is_file():
        msg = f"{DOCUMENT_ENV_VAR} points to a missing file: {str(path)!r}"
        raise RuntimeError(msg)
    return path.read_text(encoding="utf-8")
