import bisect
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from ...config import (
    DATA_PAGE_HEADER_SIZE,
    HEAP_START,
    PAGE_FLAG_NOT_DATA,
    PAGE_HEADER_SIZE,
    ROW_COUNT_SHIFT,
    ROW_GROUP_SIZE,
    ROW_OFFSETS_MASK,
    ROWS_PER_GROUP,
)
from ...core.exceptions import MalformedPageError, MalformedRowError, TruncatedDataError
from ...core.rows import Row, UnknownRow, row_type_for
from ...primitives import DatabaseType, Endian, PageIndex, TableType
from ..binary import ByteReader
from .row_group import RowGroup

logger = logging.getLogger(__name__)


@dataclass
class PageHeader:
    """
    Fixed 0x20-byte prefix shared by every page.

    Header Layout:
    0x00: u32 zero            0x10: u32 unknown1 (sequence)
    0x04: u32 page index      0x14: u32 unknown2
    0x08: u32 page type       0x18: u24 packed row counts
    0x0C: u32 next page       0x1B: u8  page flags
    0x1C: u16 free size       0x1E: u16 used size

    The packed row counts hold ``num_row_offsets`` (low 13 bits, slots ever
    allocated, deleted ones included) and ``num_rows`` (high 11 bits).
    """

    page_index: PageIndex
    page_type: TableType
    next_page: PageIndex
    unknown1: int
    unknown2: int
    num_row_offsets: int
    num_rows: int
    page_flags: int
    free_size: int
    used_size: int

    @classmethod
    def read(cls, reader: ByteReader, database_type: DatabaseType) -> 'PageHeader':
        reader.seek(0)
        reader.u32()  # zero
        page_index = PageIndex(reader.u32())
        page_type = database_type.table_type(reader.u32())
        next_page = PageIndex(reader.u32())
        unknown1 = reader.u32()
        unknown2 = reader.u32()
        packed_row_counts = reader.u24()
        page_flags = reader.u8()
        free_size = reader.u16()
        used_size = reader.u16()
        return cls(
            page_index=page_index,
            page_type=page_type,
            next_page=next_page,
            unknown1=unknown1,
            unknown2=unknown2,
            num_row_offsets=packed_row_counts & ROW_OFFSETS_MASK,
            num_rows=packed_row_counts >> ROW_COUNT_SHIFT,
            page_flags=page_flags,
            free_size=free_size,
            used_size=used_size,
        )

    def is_data_page(self) -> bool:
        return (self.page_flags & PAGE_FLAG_NOT_DATA) == 0

    def get_row_group_count(self) -> int:
        """Number of row groups needed to hold every allocated row offset."""
        if not self.is_data_page():
            return 0
        return (self.num_row_offsets + ROWS_PER_GROUP - 1) // ROWS_PER_GROUP


@dataclass
class DataContent:
    """Content of a data page: the extra header words and its row groups."""

    unknown5: int
    num_rows_large: int
    unknown6: int
    unknown7: int
    row_groups: List[RowGroup] = field(default_factory=list)


@dataclass
class OtherContent:
    """Content of a non-data (index) page, kept as raw bytes."""

    data: bytes


PageContent = Union[DataContent, OtherContent]


@dataclass
class Page:
    """
    One fixed-size page of the export database.

    Pages are decoded from a page-sized byte window without consulting any
    other page. Only data pages are expanded into rows; the table type in
    the page header selects the row variant for every row on the page.
    """

    header: PageHeader
    content: PageContent

    @property
    def page_index(self) -> PageIndex:
        return self.header.page_index

    @property
    def page_type(self) -> TableType:
        return self.header.page_type

    @property
    def next_page(self) -> PageIndex:
        return self.header.next_page

    def is_data_page(self) -> bool:
        return isinstance(self.content, DataContent)

    def get_row_groups(self) -> List[RowGroup]:
        if isinstance(self.content, DataContent):
            return self.content.row_groups
        return []

    def present_rows(self) -> List[Row]:
        """Return every live row on the page in group, then slot order."""
        rows: List[Row] = []
        for row_group in self.get_row_groups():
            rows.extend(row_group.present_rows())
        return rows

    @classmethod
    def read(cls,
             data: bytes,
             page_size: int,
             database_type: DatabaseType,
             endian: Endian = Endian.LITTLE,
             expected_index: Optional[PageIndex] = None) -> 'Page':
        """
        Decode a single page.

        Args:
            data: Raw page bytes, exactly ``page_size`` long
            page_size: Page size declared in the file header
            database_type: Selects how table-type tags are interpreted
            endian: Byte order of integer fields
            expected_index: Index the page was read from, checked against
                            the index stored in the page header

        Raises:
            MalformedPageError: If the page is short or its header is inconsistent
            MalformedRowError: If a live row fails to decode
        """
        if len(data) != page_size:
            raise MalformedPageError(
                f"Page data must be exactly {page_size} bytes, got {len(data)}",
                int(expected_index) if expected_index is not None else None)

        reader = ByteReader(data, endian)
        try:
            header = PageHeader.read(reader, database_type)
        except TruncatedDataError as e:
            raise MalformedPageError(f"Truncated page header: {e}") from e

        if expected_index is not None and header.page_index != expected_index:
            raise MalformedPageError(
                f"Page at {expected_index} claims to be {header.page_index}",
                int(expected_index))

        if not header.is_data_page():
            return cls(header, OtherContent(data[PAGE_HEADER_SIZE:]))

        return cls(header, cls._read_data_content(reader, header, page_size, database_type))

    @classmethod
    def _read_data_content(cls,
                           reader: ByteReader,
                           header: PageHeader,
                           page_size: int,
                           database_type: DatabaseType) -> DataContent:
        page_number = int(header.page_index)
        group_count = header.get_row_group_count()
        groups_start = page_size - group_count * ROW_GROUP_SIZE
        if groups_start < DATA_PAGE_HEADER_SIZE:
            raise MalformedPageError(
                f"{group_count} row groups do not fit in a {page_size} byte page",
                page_number)

        reader.seek(PAGE_HEADER_SIZE)
        unknown5 = reader.u16()
        num_rows_large = reader.u16()
        unknown6 = reader.u16()
        unknown7 = reader.u16()

        layout = []
        for group_index in range(group_count):
            slot_count = min(ROWS_PER_GROUP,
                             header.num_row_offsets - group_index * ROWS_PER_GROUP)
            layout.append((RowGroup.group_end(page_size, group_index), slot_count))

        boundaries = sorted({
            HEAP_START + offset
            for group_end, slot_count in layout
            for offset in RowGroup.read_live_offsets(reader, group_end, slot_count)
        })
        heap_end = groups_start
        if HEAP_START < HEAP_START + header.used_size < groups_start:
            heap_end = HEAP_START + header.used_size

        def decode_row(offset: int) -> Row:
            return cls._decode_row(reader, header, database_type, offset,
                                   boundaries, heap_end, groups_start)

        row_groups = [RowGroup.read(reader, group_end, slot_count, decode_row)
                      for group_end, slot_count in layout]

        logger.debug("Page %d (%s): %d row groups, %d offsets",
                     page_number, database_type.table_type_name(int(header.page_type)),
                     group_count, header.num_row_offsets)
        return DataContent(unknown5, num_rows_large, unknown6, unknown7, row_groups)

    @staticmethod
    def _decode_row(reader: ByteReader,
                    header: PageHeader,
                    database_type: DatabaseType,
                    offset: int,
                    boundaries: List[int],
                    heap_end: int,
                    groups_start: int) -> Row:
        page_number = int(header.page_index)
        row_start = HEAP_START + offset
        if row_start >= groups_start:
            raise MalformedRowError(
                f"Row offset {offset:#x} on page {page_number} points past the heap")

        row_cls = row_type_for(database_type, header.page_type)
        if row_cls is None:
            position = bisect.bisect_right(boundaries, row_start)
            row_end = boundaries[position] if position < len(boundaries) else heap_end
            row_end = min(row_end, heap_end)
            if row_end <= row_start:
                row_end = groups_start
            return UnknownRow.read(reader, row_start, row_end, header.page_type)

        try:
            return row_cls.read(reader, row_start)
        except (ValueError, TruncatedDataError) as e:
            raise MalformedRowError(
                f"Invalid {row_cls.__name__} row at offset {offset:#x} "
                f"on page {page_number}: {e}") from e
