"""
Clipboard access through the platform's command-line tools.

  - macOS:   pbpaste / pbcopy
  - Linux:   wl-paste / wl-copy (only under Wayland), then xclip, then xsel
  - Windows: PowerShell Get-Clipboard / Set-Clipboard
"""

import logging
import os
import platform
import subprocess

from boh_linker.errors import ClipboardError, ConfigurationError

logger = logging.getLogger(__name__)

READ_COMMANDS = {
    "Darwin": [["pbpaste"]],
    "Linux": [
        ["wl-paste", "--no-newline"],
        ["xclip", "-selection", "clipboard", "-o"],
        ["xsel", "--clipboard", "--output"],
    ],
    "Windows": [["powershell", "-command", "Get-Clipboard -Raw"]],
}

WRITE_COMMANDS = {
    "Darwin": [["pbcopy"]],
    "Linux": [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard", "-i"],
        ["xsel", "--clipboard", "--input"],
    ],
    "Windows": [["powershell", "-command", "Set-Clipboard -Value $input"]],
}


class SystemClipboard:
    """Reads and writes clipboard text, remembering the first tool that works."""

    def __init__(
        self,
        system: str | None = None,
        timeout: float = 3,
        wayland: bool | None = None,
    ):
        self.system = system or platform.system()
        self.timeout = timeout
        if wayland is None:
            wayland = bool(os.getenv("WAYLAND_DISPLAY"))
        self.wayland = wayland
        self._reader: list[str] | None = None
        self._writer: list[str] | None = None

    def _candidates(self, commands: dict) -> list[list[str]]:
        return [
            cmd
            for cmd in commands.get(self.system, [])
            if self.wayland or not cmd[0].startswith("wl-")
        ]

    def read_text(self) -> str:
        if self._reader:
            return self._read(self._reader)
        for cmd in self._candidates(READ_COMMANDS):
            try:
                text = self._read(cmd)
            except FileNotFoundError:
                continue
            self._reader = cmd
            return text
        raise ConfigurationError(f"No usable clipboard reader found on {self.system}")

    def write_text(self, text: str) -> None:
        if self._writer:
            try:
                self._run(self._writer, text)
            except subprocess.CalledProcessError as exc:
                raise ClipboardError(f"{self._writer[0]} failed: {exc}") from exc
            return
        for cmd in self._candidates(WRITE_COMMANDS):
            try:
                self._run(cmd, text)
            except (FileNotFoundError, subprocess.CalledProcessError):
                continue
            self._writer = cmd
            return
        raise ConfigurationError(f"No usable clipboard writer found on {self.system}")

    def _read(self, cmd: list[str]) -> str:
        try:
            return self._run(cmd).stdout
        except subprocess.CalledProcessError:
            # wl-paste and xclip exit non-zero on an empty clipboard
            return ""

    def _run(self, cmd: list[str], text: str | None = None):
        logger.debug("Clipboard command: %s", cmd[0])
        try:
            return subprocess.run(
                cmd,
                input=text,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=True,
            )
        except subprocess.TimeoutExpired as exc:
            raise ClipboardError(f"{cmd[0]} timed out after {self.timeout}s") from exc
