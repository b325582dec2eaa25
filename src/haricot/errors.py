"""Exception types raised by haricot.

Every operation either succeeds completely or raises one of these. The CLI
maps all of them to exit code 1.
"""

from __future__ import annotations


class HaricotError(Exception):
    """Base class for all haricot errors."""


class ParseError(HaricotError, ValueError):
    """Raised when a HAR document cannot be decoded.

    Attributes:
        path: Location of the failure (field path like ``log.entries[0].request``,
            or the file path when the file itself could not be read)
    """

    def __init__(self, message: str, path: str = "") -> None:
        self.message = message
        self.path = path
        full_message = f"Invalid HAR document: {message}"
        if path:
            full_message += f" (at {path})"
        super().__init__(full_message)


class EntryIndexError(HaricotError, IndexError):
    """Raised when an entry number is outside the entries sequence."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"Entry {index} out of range (document has {count} entries)")


class UrlError(HaricotError, ValueError):
    """Raised when a request URL cannot be parsed during the overview."""

    def __init__(self, url: str, reason: str, entry_index: int | None = None) -> None:
        self.url = url
        self.reason = reason
        self.entry_index = entry_index
        where = f"entry {entry_index}: " if entry_index is not None else ""
        super().__init__(f"{where}invalid URL {url!r}: {reason}")


class ExpansionError(HaricotError, ValueError):
    """Raised when private data cannot be expanded."""

    def __init__(self, reason: str, path: str = "") -> None:
        self.reason = reason
        self.path = path
        message = f"Cannot expand private data: {reason}"
        if path:
            message += f" (at {path})"
        super().__init__(message)


class SettingsError(HaricotError):
    """Raised when configuration cannot be loaded."""
