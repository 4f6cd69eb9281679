"""
Purpose: Console I/O for the chat loop.
Reads one line at a time and paints user, assistant, metrics and error text
with ANSI colours. Streams are injectable so tests can use io.StringIO.
"""

from __future__ import annotations
import logging
import os
import subprocess
import sys
from typing import Callable, Optional, TextIO

BRIGHT_GREEN = "\033[92m"
BRIGHT_MAGENTA = "\033[95m"
BRIGHT_YELLOW = "\033[93m"
RED = "\033[31m"
RESET = "\033[0m"


def clear_screen(stdout: Optional[TextIO] = None) -> None:
    """Run the platform's clear command; failures are logged, not raised."""
    command = ["cmd", "/c", "cls"] if sys.platform.startswith("win") else ["clear"]
    try:
        subprocess.run(command, stdout=stdout or sys.stdout, check=False)
    except (OSError, ValueError) as exc:
        logging.warning("Could not clear the screen with %s: %s", command[0], exc)


def _color_supported(stream: TextIO) -> bool:
    if os.getenv("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Terminal:
    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        *,
        color: Optional[bool] = None,
        clear_fn: Optional[Callable[[], None]] = None,
    ) -> None:
        self.stdin = stdin or sys.stdin
        # Undecodable input bytes become U+FFFD instead of ending the session.
        reconfigure = getattr(self.stdin, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="replace")
        self.stdout = stdout or sys.stdout
        self.color = _color_supported(self.stdout) if color is None else color
        self._clear_fn = clear_fn

    def _paint(self, text: str, color: str) -> str:
        if not self.color:
            return text
        return f"{color}{text}{RESET}"

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def read_line(self, prompt: str = "") -> Optional[str]:
        """Return the next line without its newline, or None at end of input."""
        if prompt:
            self.user(prompt)
        try:
            line = self.stdin.readline()
        except UnicodeDecodeError as exc:
            logging.warning("Dropped undecodable input: %s", exc)
            self.error(f"Error reading input: {exc}")
            return ""
        if not line:
            return None
        return line.rstrip("\r\n")

    def user(self, text: str) -> None:
        self._write(self._paint(text, BRIGHT_GREEN))

    def assistant(self, text: str) -> None:
        self._write(self._paint(text, BRIGHT_MAGENTA))

    def metrics(self, text: str) -> None:
        self._write(self._paint(text, BRIGHT_YELLOW) + "\n")

    def error(self, text: str) -> None:
        self._write(self._paint(text, RED) + "\n")

    def info(self, text: str) -> None:
        self._write(text + "\n")

    def newline(self) -> None:
        self._write("\n")

    def clear(self) -> None:
        if self._clear_fn is not None:
            self._clear_fn()
            return
        self.stdout.flush()
        clear_screen(self.stdout)
