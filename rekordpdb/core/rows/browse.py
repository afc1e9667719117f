"""Rows configuring the player's browse menu and column layout."""
from dataclasses import dataclass

from ...primitives import PlainTableType
from ...storage.binary import ByteReader
from .row import Row


@dataclass(frozen=True)
class Column(Row):
    """Browse column; names are usually UTF-16 with decoration characters."""

    TABLE = PlainTableType.COLUMNS

    id: int
    unknown0: int
    name: str

    @classmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'Column':
        reader.seek(row_start)
        column_id = reader.u16()
        unknown0 = reader.u16()
        return cls(column_id, unknown0, cls.read_string(reader, row_start, 4))


@dataclass(frozen=True)
class Menu(Row):
    TABLE = PlainTableType.MENU

    category_id: int
    content_pointer: int
    unknown: int
    visibility: int
    sort_order: int

    @classmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'Menu':
        reader.seek(row_start)
        category_id = reader.u16()
        content_pointer = reader.u16()
        unknown = reader.u8()
        visibility = reader.u8()
        sort_order = reader.u16()
        return cls(category_id, content_pointer, unknown, visibility, sort_order)
