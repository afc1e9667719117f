"""Fixed layout constants of the DeviceSQL export database."""

FILE_HEADER_SIZE = 0x1C  # zero, page size, table count, next unused, unknown, sequence, gap
TABLE_POINTER_SIZE = 16  # type, empty candidate, first page, last page

PAGE_HEADER_SIZE = 0x20
DATA_PAGE_HEADER_SIZE = 0x28
HEAP_START = 0x28  # row offsets are relative to this position

PAGE_FLAG_NOT_DATA = 0x40  # set on index/"strange" pages

ROWS_PER_GROUP = 16
ROW_GROUP_SIZE = ROWS_PER_GROUP * 2 + 2 + 2  # offsets, presence flags, unknown

ROW_OFFSETS_MASK = 0x1FFF  # low 13 bits of the packed row counts
ROW_COUNT_SHIFT = 13
