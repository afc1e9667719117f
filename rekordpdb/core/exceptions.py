"""Custom exceptions for the export database reader."""
from typing import Optional


class PdbException(Exception):
    """Base exception for errors raised while reading an export database."""
    pass


class PdbIOError(PdbException):
    """Raised when the underlying file cannot be opened, seeked or read."""
    pass


class TruncatedDataError(PdbException):
    """Raised when a buffer ends before a fixed-width field is complete."""
    pass


class MalformedDataError(PdbException):
    """Base class for structural inconsistencies in the file."""
    pass


class MalformedHeaderError(MalformedDataError):
    """Raised when the file prologue or the table directory is inconsistent."""
    pass


class MalformedPageError(MalformedDataError):
    """Raised when a page is truncated or its header contradicts the chain."""

    def __init__(self, message: str, page_index: Optional[int] = None):
        super().__init__(message)
        self.page_index = page_index


class MalformedRowError(MalformedDataError):
    """Raised when a live row slot does not decode as its table's row type."""
    pass
