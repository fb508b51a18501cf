"""Token reader for the whitespace- and comment-separated text data files."""

from __future__ import annotations

import re
from typing import TextIO

_SEPARATORS = ("\n", "#", " ", "\t")
_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _to_int(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _to_float(text: str) -> float:
    match = _FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


class TextReader:
    """Reads tokens from a text stream one character at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def skip_comment(self) -> None:
        """Skip to the end of the current line."""
        while True:
            char = self._stream.read(1)
            if char in ("", "\n"):
                return

    def skip_equal(self) -> None:
        """Skip the three characters of ' = '."""
        self._stream.read(3)

    def skip_blank(self) -> None:
        """Skip a single character."""
        self._stream.read(1)

    def _read_token(self) -> str:
        chars = []
        while True:
            char = self._stream.read(1)
            if char == "" or char in _SEPARATORS:
                break
            chars.append(char)
        if char == "#":
            self.skip_comment()
        return "".join(chars)

    def read_int(self) -> int:
        """Read a token and parse its leading integer (0 if none)."""
        return _to_int(self._read_token())

    def read_float(self) -> float:
        """Read a token and parse its leading number (0.0 if none)."""
        return _to_float(self._read_token())

    def read_path(self) -> str:
        """Read a token as a string."""
        return self._read_token()