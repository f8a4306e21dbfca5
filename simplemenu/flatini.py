"""A small INI reader: sections, keys and values, looked up case-insensitively."""

from __future__ import annotations

import re
import string
from collections.abc import Callable, Iterable
from typing import Any

_WHITESPACE = "\r\n\t \0"
_SECTION_NAME = re.compile(r"[^\]\n]*")
_KEY = re.compile(r"[^=\n]*")
_BLANKS = re.compile(r"[ \r\t]*")
_QUOTED = re.compile(r'(?:\\[^\r\n\0]|[^"\\\r\n])*')
_ESCAPE = re.compile(r"\\(.)", re.DOTALL)
_ESCAPES = {"r": "\r", "n": "\n", "t": "\t"}
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _fold(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _line_end(text: str, pos: int) -> int:
    end = text.find("\n", pos)
    return len(text) if end < 0 else end


def _read_pair(text: str, start: int, tokens: list[str]) -> int:
    """Read a ``key=value`` line starting at ``start``; return the next position."""
    size = len(text)
    eq = _KEY.match(text, start).end()
    if eq >= size or text[eq] != "=":
        return _line_end(text, start)
    key = text[start:eq].rstrip(" \t\r")
    pos = _BLANKS.match(text, eq + 1).end()
    if pos >= size or text[pos] in "\n\0":
        return _line_end(text, start)

    if text[pos] == '"':
        match = _QUOTED.match(text, pos + 1)
        value = _ESCAPE.sub(lambda m: _ESCAPES.get(m[1], m[1]), match.group())
        if not value:
            return _line_end(text, start)
        end = _line_end(text, match.end())
    else:
        end = _line_end(text, pos)
        value = text[pos:end].rstrip(" \t\r")

    if key:
        tokens.append(key)
    tokens.append(value)
    return end


def _tokenise(text: str) -> list[str]:
    tokens: list[str] = []
    size = len(text)
    pos = 0
    while pos < size:
        char = text[pos]
        if char in _WHITESPACE:
            pos += 1
        elif char == "[":
            end = _SECTION_NAME.match(text, pos).end()
            tokens.append(text[pos:end])
            pos = end + 1
        elif char == ";":
            pos = _line_end(text, pos)
        else:
            pos = _read_pair(text, pos, tokens)
    return tokens


def _pair_up(tokens: list[str]) -> list[tuple[str, str, str]]:
    entries: list[tuple[str, str, str]] = []
    section = ""
    items = iter(tokens)
    for token in items:
        if token.startswith("["):
            section = token[1:]
        else:
            entries.append((section, token, next(items, "")))
    return entries


class IniFile:
    """Parsed INI contents as ordered ``(section, key, value)`` entries."""

    def __init__(self, entries: Iterable[tuple[str, str, str]]) -> None:
        self.entries = [tuple(entry) for entry in entries]

    def get(self, section: str | None, key: str) -> str | None:
        """Return the first value of ``key`` in ``section`` (any section if None)."""
        wanted_key = _fold(key)
        wanted_section = None if section is None else _fold(section)
        for entry_section, entry_key, value in self.entries:
            if wanted_section is not None and _fold(entry_section) != wanted_section:
                continue
            if _fold(entry_key) == wanted_key:
                return value
        return None

    def sget(
        self,
        section: str | None,
        key: str,
        convert: Callable[[str], Any] | None = None,
    ) -> Any:
        """Return the value converted with ``convert``, or None when missing."""
        value = self.get(section, key)
        if value is None or convert is None:
            return value
        return convert(value)


def parse_ini(text: str) -> IniFile:
    """Parse INI text."""
    return IniFile(_pair_up(_tokenise(text)))


def load_ini(path) -> IniFile:
    """Read and parse an INI file."""
    with open(path, "rb") as handle:
        data = handle.read()
    return parse_ini(data.decode("utf-8", "surrogateescape"))