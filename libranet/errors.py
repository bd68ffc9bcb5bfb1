"""
Error taxonomy for the circulation desk.

Every failure the core can report is a ``LibraryError``; callers catch the
subclass they care about and everything else propagates.
"""

from __future__ import annotations


class LibraryError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ItemNotFoundError(LibraryError):
    pass


class ItemUnavailableError(LibraryError):
    pass


class ItemNotBorrowedError(LibraryError):
    pass


class InvalidFormatError(LibraryError):
    """Malformed input string."""


class InvalidIdFormatError(InvalidFormatError):
    pass


class InvalidDurationFormatError(InvalidFormatError):
    pass


class UnsupportedDurationUnitError(InvalidDurationFormatError):
    """Duration looks like ``<n><unit>`` but the unit is not a day or week form."""
