"""Clipboard writers used to copy node paths."""

import shutil
import subprocess

from loguru import logger

from json_tree_visualizer.config import CLIPBOARD_COMMANDS, CLIPBOARD_TIMEOUT


class SystemClipboard:
    """Copy text through the first available platform clipboard command.

    Failures are reported only through the return value and debug logs;
    copying is best-effort and never interrupts the caller.
    """

    def __init__(
        self,
        commands: list[list[str]] | None = None,
        *,
        timeout: float = CLIPBOARD_TIMEOUT,
    ) -> None:
        self.commands = commands if commands is not None else CLIPBOARD_COMMANDS
        self.timeout = timeout

    def find_command(self) -> list[str] | None:
        """Return the first configured command whose executable is on PATH."""
        for command in self.commands:
            if shutil.which(command[0]):
                return command
        return None

    def write_text(self, text: str) -> bool:
        command = self.find_command()
        if command is None:
            logger.debug("No clipboard command available, tried {!r}", self.commands)
            return False
        try:
            subprocess.run(command, input=text, text=True, check=True, timeout=self.timeout)
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("Clipboard command {!r} failed: {}", command, e)
            return False
        return True


class NullClipboard:
    """Clipboard that never copies anything."""

    def write_text(self, text: str) -> bool:
        return False
