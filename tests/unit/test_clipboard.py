"""Tests for the system clipboard writer."""

import sys

from json_tree_visualizer.core.clipboard import NullClipboard, SystemClipboard
from json_tree_visualizer.protocols import ClipboardProtocol


def test_clipboards_satisfy_protocol() -> None:
    assert isinstance(SystemClipboard(), ClipboardProtocol)
    assert isinstance(NullClipboard(), ClipboardProtocol)


def test_missing_command_returns_false() -> None:
    clipboard = SystemClipboard([["no-such-clipboard-command-xyz"]])
    assert clipboard.find_command() is None
    assert clipboard.write_text("a.b") is False


def test_first_available_command_is_used() -> None:
    clipboard = SystemClipboard([["no-such-clipboard-command-xyz"], [sys.executable, "-V"]])
    assert clipboard.find_command() == [sys.executable, "-V"]


def test_successful_command_returns_true() -> None:
    clipboard = SystemClipboard([[sys.executable, "-c", "import sys; sys.stdin.read()"]])
    assert clipboard.write_text("user.address.city") is True


def test_failing_command_returns_false() -> None:
    clipboard = SystemClipboard([[sys.executable, "-c", "import sys; sys.exit(3)"]])
    assert clipboard.write_text("a") is False


def test_null_clipboard_never_copies() -> None:
    assert NullClipboard().write_text("a") is False
