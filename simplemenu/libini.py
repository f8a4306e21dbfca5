"""A streaming INI reader that walks sections and key/value pairs in order."""

from __future__ import annotations

import re

_COMMENTS = re.compile(r"(?:[\r\n]|#[^\n]*)*")
_SECTION_NAME = re.compile(r"[^\]\n]*")
_KEY_REST = re.compile(r"[^=\n]*")
_BLANKS = re.compile(r"[ \t]*")


class IniFormatError(ValueError):
    """Raised when INI data is malformed."""


class IniReader:
    """Reads sections and pairs from INI text, advancing a read position."""

    def __init__(self, data: str | bytes) -> None:
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8", "surrogateescape")
        self._data = data
        self._pos = 0

    @classmethod
    def from_file(cls, path) -> IniReader:
        """Read a whole file; an empty file is an error."""
        with open(path, "rb") as handle:
            data = handle.read()
        if not data:
            raise IniFormatError(f"{path}: empty file")
        return cls(data)

    @property
    def position(self) -> int:
        """The current read offset."""
        return self._pos

    def _error(self, message: str, offset: int) -> IniFormatError:
        return IniFormatError(f"line {self.line_number(offset)}: {message}")

    def _skip_comments(self) -> bool:
        self._pos = _COMMENTS.match(self._data, self._pos).end()
        return self._pos == len(self._data)

    def _skip_line(self) -> bool:
        newline = self._data.find("\n", self._pos)
        if newline < 0:
            self._pos = len(self._data)
            return True
        self._pos = newline + 1
        return False

    def _at(self, offset: int) -> str:
        return self._data[offset] if offset < len(self._data) else ""

    def next_section(self) -> str | None:
        """Move to the next section and return its name, or None at the end."""
        data = self._data
        end = len(data)
        if self._pos == end:
            return None
        if self._pos == 0:
            if self._skip_comments() or data[self._pos] != "[":
                raise self._error("expected a section header", self._pos)
        else:
            while self._at(self._pos) != "[" and not self._skip_line():
                pass
        if self._pos == end:
            return None

        start = self._pos + 1
        close = _SECTION_NAME.match(data, start).end()
        if close == end or data[close] == "\n":
            raise self._error("unterminated section header", self._pos)
        self._pos = close + 1
        return data[start:close]

    def read_pair(self) -> tuple[str, str] | None:
        """Return the next ``(key, value)`` of the section, or None at its end."""
        if self._skip_comments():
            return None
        data = self._data
        end = len(data)
        key_start = self._pos
        if data[key_start] == "[":
            return None

        eq = _KEY_REST.match(data, key_start + 1).end()
        if eq == end or data[eq] == "\n":
            raise self._error("expected '=' in key/value pair", key_start)
        key = data[key_start] + data[key_start + 1 : eq].rstrip(" \t")

        value_start = _BLANKS.match(data, eq + 1).end()
        if value_start == end:
            raise self._error("missing value", key_start)
        newline = data.find("\n", value_start)
        if newline < 0:
            raise self._error("value not terminated by a newline", key_start)
        value_end = newline - 1 if data[newline - 1] == "\r" else newline
        self._pos = newline + 1
        return key, data[value_start : max(value_start, value_end)]

    def set_read_pointer(self, offset: int) -> None:
        """Move the read position, clamped to the data."""
        self._pos = min(max(offset, 0), len(self._data))

    def line_number(self, offset: int) -> int:
        """Return the 1-based line that holds ``offset``."""
        if not 0 <= offset <= len(self._data):
            raise ValueError(f"offset {offset} outside the INI data")
        return self._data.count("\n", 0, offset) + 1