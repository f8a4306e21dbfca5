"""Reading the desktop-entry metadata that describes a packaged application."""

from __future__ import annotations

from collections.abc import Iterator

from simplemenu.libini import IniFormatError, IniReader

HEADER = "Desktop Entry"


class OpkError(Exception):
    """Raised when package metadata cannot be read."""


class MetadataReader:
    """Reads key/value pairs from the ``[Desktop Entry]`` section of metadata."""

    def __init__(self, name: str, data: str | bytes) -> None:
        self.name = name
        self._reader = IniReader(data)
        try:
            section = self._reader.next_section()
        except IniFormatError as exc:
            raise OpkError(f"{name}: {exc}") from exc
        # The desktop entry must be the first section of the file.
        if section is None or not HEADER.startswith(section):
            raise OpkError(f"{name}: not a proper desktop entry file")
        self.section = section

    def read_pair(self) -> tuple[str, str] | None:
        """Return the next ``(key, value)``, or None when the section ends."""
        try:
            return self._reader.read_pair()
        except IniFormatError as exc:
            raise OpkError(f"{self.name}: {exc}") from exc

    def __iter__(self) -> Iterator[tuple[str, str]]:
        while (pair := self.read_pair()) is not None:
            yield pair


def read_desktop_entry(name: str, data: str | bytes) -> dict[str, str]:
    """Return the desktop entry of a metadata file as a dictionary."""
    return dict(MetadataReader(name, data))