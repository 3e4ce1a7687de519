"""Split path expressions like ``$.user.address.city`` into key tokens."""

import re

_ROOT_MARKER = re.compile(r"^\$\.?")


def strip_root_marker(path: str) -> str:
    """Remove a single leading ``$`` and the ``.`` right after it, if present."""
    return _ROOT_MARKER.sub("", path, count=1)


def tokenize(expression: str) -> list[str]:
    """Convert a path expression to an ordered list of key tokens.

    - ``$`` / ``$.`` root markers are stripped, surrounding whitespace trimmed
    - Tokens are separated by ``.``; empty segments are dropped
    - Bracket indices stay attached to their key (``items[0]`` is one token)

    No syntax validation happens here; malformed tokens just fail to match later.
    """
    remainder = strip_root_marker(expression.strip())
    if not remainder:
        return []
    return [part for part in remainder.split(".") if part]
