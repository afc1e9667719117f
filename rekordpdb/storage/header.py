import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from ..config import DATA_PAGE_HEADER_SIZE, FILE_HEADER_SIZE, TABLE_POINTER_SIZE
from ..core.exceptions import MalformedHeaderError, TruncatedDataError
from ..primitives import DatabaseType, Endian, PageIndex, TableType
from .binary import ByteReader
from .disk import PageSource
from .page import Page
from .page_reader import read_pages

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableDescriptor:
    """
    Table directory entry: where the page chain of one table starts and ends.

    ``empty_candidate`` is the page the exporting software would use next
    for this table; it is not part of the chain.
    """

    table_type: TableType
    empty_candidate: PageIndex
    first_page: PageIndex
    last_page: PageIndex


@dataclass
class Header:
    """
    File prologue stored at the start of page 0.

    Header Layout:
    0x00: u32 zero
    0x04: u32 page size
    0x08: u32 number of tables
    0x0C: u32 next unused page
    0x10: u32 unknown
    0x14: u32 sequence (incremented on every write)
    0x18: u32 gap (zero)
    0x1C: table directory, 16 bytes per table

    The header is decoded once per file and is immutable afterwards.
    """

    page_size: int
    next_unused_page: PageIndex
    unknown: int
    sequence: int
    database_type: DatabaseType
    tables: List[TableDescriptor] = field(default_factory=list)

    def get_num_tables(self) -> int:
        return len(self.tables)

    @classmethod
    def read(cls,
             source: PageSource,
             database_type: DatabaseType,
             endian: Endian = Endian.LITTLE) -> 'Header':
        """
        Decode the prologue and table directory from offset 0.

        Raises:
            MalformedHeaderError: If the prologue or directory is truncated,
                                  the page size is unusable or the declared
                                  table count does not fit in the header page
            PdbIOError: If the underlying read fails
        """
        prologue = source.read_at(0, FILE_HEADER_SIZE)
        if len(prologue) < FILE_HEADER_SIZE:
            raise MalformedHeaderError(
                f"File header needs {FILE_HEADER_SIZE} bytes, got {len(prologue)}")

        reader = ByteReader(prologue, endian)
        reader.u32()  # zero
        page_size = reader.u32()
        num_tables = reader.u32()
        next_unused_page = PageIndex(reader.u32())
        unknown = reader.u32()
        sequence = reader.u32()
        reader.u32()  # gap

        if page_size < DATA_PAGE_HEADER_SIZE:
            raise MalformedHeaderError(f"Invalid page size: {page_size}")

        directory_size = num_tables * TABLE_POINTER_SIZE
        if FILE_HEADER_SIZE + directory_size > page_size:
            raise MalformedHeaderError(
                f"Declared table count {num_tables} does not fit in a "
                f"{page_size} byte header page")

        directory = source.read_at(FILE_HEADER_SIZE, directory_size)
        if len(directory) < directory_size:
            raise MalformedHeaderError(
                f"Table directory needs {directory_size} bytes for {num_tables} "
                f"tables, only {len(directory)} readable")

        try:
            tables = cls._read_directory(ByteReader(directory, endian), num_tables, database_type)
        except TruncatedDataError as e:
            raise MalformedHeaderError(f"Truncated table directory: {e}") from e

        logger.info("PDB header - # of tables: %d, page size: %d", num_tables, page_size)
        return cls(page_size, next_unused_page, unknown, sequence, database_type, tables)

    @staticmethod
    def _read_directory(reader: ByteReader,
                        num_tables: int,
                        database_type: DatabaseType) -> List[TableDescriptor]:
        tables = []
        for _ in range(num_tables):
            table_type = database_type.table_type(reader.u32())
            empty_candidate = PageIndex(reader.u32())
            first_page = PageIndex(reader.u32())
            last_page = PageIndex(reader.u32())
            tables.append(TableDescriptor(table_type, empty_candidate, first_page, last_page))
        return tables

    def read_pages(self,
                   source: PageSource,
                   endian: Endian,
                   pointers: Tuple[PageIndex, PageIndex, DatabaseType],
                   table_type: Optional[TableType] = None) -> Iterator[Page]:
        """Walk the page chain between ``pointers``; see page_reader.read_pages."""
        return read_pages(source, self.page_size, endian, pointers, table_type)

