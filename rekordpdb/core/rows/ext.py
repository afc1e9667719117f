"""Rows of ``exportExt.pdb`` (My Tag categories and assignments)."""
from dataclasses import dataclass

from ...primitives import ExtTableType
from ...storage.binary import ByteReader
from .row import Row


@dataclass(frozen=True)
class Tag(Row):
    """
    My Tag entry, or a tag category when ``raw_is_category`` is set.

    Tags point at their category through ``category``; categories use
    ``category_pos`` for their order in the browser.
    """

    TABLE = ExtTableType.TAGS

    subtype: int
    tag_index: int
    category: int
    category_pos: int
    id: int
    raw_is_category: int
    unknown: int
    name: str

    @property
    def is_category(self) -> bool:
        return self.raw_is_category != 0

    @classmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'Tag':
        reader.seek(row_start)
        subtype = reader.u16()
        tag_index = reader.u16()
        reader.read(8)
        category = reader.u32()
        category_pos = reader.u32()
        tag_id = reader.u32()
        raw_is_category = reader.u32()
        unknown = reader.u8()
        name_offset = reader.u8()
        name = cls.read_string(reader, row_start, name_offset)
        return cls(subtype, tag_index, category, category_pos, tag_id,
                   raw_is_category, unknown, name)


@dataclass(frozen=True)
class TagTrack(Row):
    """Assignment of a tag to a track."""

    TABLE = ExtTableType.TAG_TRACKS

    unknown1: int
    track_id: int
    tag_id: int
    unknown2: int

    @classmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'TagTrack':
        reader.seek(row_start)
        return cls(reader.u32(), reader.u32(), reader.u32(), reader.u32())
