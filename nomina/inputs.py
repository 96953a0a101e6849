"""Prompting the user for values on a text console."""

from __future__ import annotations

import re
import sys
from typing import Optional, TextIO

_INT = re.compile(r"[+-]?\d+")
_FLOAT = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class Prompter:
    """Writes prompts to ``stdout`` and reads answers from ``stdin``.

    Numbers are read as tokens, so several may share one line; strings and
    characters discard whatever is left of the current line first.
    """

    def __init__(
        self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._pending = ""

    def _show(self, message: str) -> None:
        self._stdout.write(message)
        self._stdout.flush()

    def _read_line(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line

    def _token(self, pattern: re.Pattern, kind: str) -> str:
        while not self._pending.strip():
            self._pending = self._read_line()
        text = self._pending.lstrip()
        match = pattern.match(text)
        if match is None:
            self._pending = text
            raise ValueError(f"expected {kind}, got {text.split()[0]!r}")
        self._pending = text[match.end():]
        return match.group(0)

    def get_int(self, message: str) -> int:
        """Prompt with ``message`` and read an integer."""
        self._show(message)
        return int(self._token(_INT, "an integer"))

    def get_float(self, message: str) -> float:
        """Prompt with ``message`` and read a number."""
        self._show(message)
        return float(self._token(_FLOAT, "a number"))

    def get_string(self, message: str) -> str:
        """Prompt with ``message`` and read a whole line."""
        self._show(message)
        self._pending = ""
        return self._read_line().rstrip("\r\n")

    def get_char(self, message: str) -> str:
        """Prompt with ``message`` and read a single character."""
        self._show(message)
        line = self._read_line()
        self._pending = line[1:]
        return line[0]