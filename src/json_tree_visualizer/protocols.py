"""Protocols for dependency injection in the visualizer."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClipboardProtocol(Protocol):
    """Protocol for clipboard writers used when a node is selected."""

    def write_text(self, text: str) -> bool:
        """Put text on the clipboard, returning True on success."""
        ...
