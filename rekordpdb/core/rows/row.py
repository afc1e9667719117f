from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional

from ...primitives import TableType
from ...storage.binary import ByteReader
from ..types import DeviceSQLString


class Row(ABC):
    """
    Abstract base class for all decoded rows.

    Each subclass is a frozen dataclass describing the fixed-width prefix
    of one table's rows plus the strings it points at. Strings are stored
    after the prefix and addressed by offsets relative to the row start,
    so decoders receive the row start position instead of a row slice.

    Rows are plain values: they keep no reference to the page or file
    they were decoded from.
    """

    TABLE: ClassVar[TableType]

    @property
    def table_type(self) -> TableType:
        return self.TABLE

    @classmethod
    @abstractmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'Row':
        """
        Decode one row starting at ``row_start`` within the page buffer.

        Raises:
            ValueError: If a string or field is invalid
            TruncatedDataError: If the row runs past the page
        """
        pass

    @staticmethod
    def read_string(reader: ByteReader, row_start: int, offset: int) -> str:
        return DeviceSQLString.read_at(reader, row_start + offset)


@dataclass(frozen=True)
class UnknownRow(Row):
    """
    Raw bytes of a row whose table type has no decoder.

    ``data`` spans from the row start to the next live row offset on the page
    (or the end of the used heap), which is the best available estimate
    of the row length without knowing its layout.
    """

    unknown_table: TableType
    data: bytes

    @property
    def table_type(self) -> TableType:
        return self.unknown_table

    @classmethod
    def read(cls,
             reader: ByteReader,
             row_start: int,
             row_end: Optional[int] = None,
             unknown_table: Optional[TableType] = None) -> 'UnknownRow':
        """
        Take the raw bytes between ``row_start`` and ``row_end``.

        Without ``row_end`` the row runs to the end of the buffer.
        """
        if row_end is None:
            row_end = len(reader)
        return cls(unknown_table=unknown_table, data=reader.read_at(row_start, row_end - row_start))

    @classmethod
    def from_bytes(cls, table_type: TableType, data: bytes) -> 'UnknownRow':
        return cls(unknown_table=table_type, data=bytes(data))
