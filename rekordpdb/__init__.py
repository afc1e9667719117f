"""
Reader for the DeviceSQL database that Rekordbox exports to DJ media.

    >>> from rekordpdb import iter_pdb_rows, DatabaseType
    >>> rows = iter_pdb_rows("PIONEER/rekordbox/export.pdb", DatabaseType.PLAIN)
    >>> len(rows)
"""

from .core.exceptions import (
    PdbException,
    PdbIOError,
    MalformedDataError,
    MalformedHeaderError,
    MalformedPageError,
    MalformedRowError,
)
from .core.rows import Row, UnknownRow
from .primitives import DatabaseType, Endian, PageIndex, PlainTableType, ExtTableType
from .query.iterator import RowCollection, RowIterator
from .database import (
    iter_pdb_rows,
    open_and_read,
    stream_pdb_rows,
    read_rows,
    iter_rows,
    read_table_rows,
)

__all__ = [
    "PdbException",
    "PdbIOError",
    "MalformedDataError",
    "MalformedHeaderError",
    "MalformedPageError",
    "MalformedRowError",
    "Row",
    "UnknownRow",
    "DatabaseType",
    "Endian",
    "PageIndex",
    "PlainTableType",
    "ExtTableType",
    "RowCollection",
    "RowIterator",
    "iter_pdb_rows",
    "open_and_read",
    "stream_pdb_rows",
    "read_rows",
    "iter_rows",
    "read_table_rows",
]
