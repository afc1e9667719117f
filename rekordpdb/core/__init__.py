from .exceptions import (
    PdbException,
    PdbIOError,
    TruncatedDataError,
    MalformedDataError,
    MalformedHeaderError,
    MalformedPageError,
    MalformedRowError,
)

__all__ = [
    "PdbException",
    "PdbIOError",
    "TruncatedDataError",
    "MalformedDataError",
    "MalformedHeaderError",
    "MalformedPageError",
    "MalformedRowError",
]
