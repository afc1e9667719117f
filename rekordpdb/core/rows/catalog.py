"""Rows of the small lookup tables referenced by tracks."""
from dataclasses import dataclass

from ...primitives import PlainTableType
from ...storage.binary import ByteReader
from .row import Row


@dataclass(frozen=True)
class Artist(Row):
    """
    Row of the artists table.

    The name offset is a u8 for subtype 0x60. Subtype 0x64 is used when the
    name lives further than 255 bytes away and stores a u16 offset at 0x0A.
    """

    TABLE = PlainTableType.ARTISTS
    FAR_NAME_SUBTYPE = 0x64

    subtype: int
    index_shift: int
    id: int
    unknown1: int
    name: str

    @classmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'Artist':
        reader.seek(row_start)
        subtype = reader.u16()
        index_shift = reader.u16()
        artist_id = reader.u32()
        unknown1 = reader.u8()
        name_offset = reader.u8()
        if subtype == cls.FAR_NAME_SUBTYPE:
            name_offset = reader.u16_at(row_start + 0x0A)
        name = cls.read_string(reader, row_start, name_offset)
        return cls(subtype, index_shift, artist_id, unknown1, name)


@dataclass(frozen=True)
class Album(Row):
    """Row of the albums table. Subtype bit 0x04 selects a u16 name offset at 0x16."""

    TABLE = PlainTableType.ALBUMS
    FAR_NAME_FLAG = 0x04

    subtype: int
    index_shift: int
    unknown2: int
    artist_id: int
    id: int
    unknown3: int
    unknown4: int
    name: str

    @classmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'Album':
        reader.seek(row_start)
        subtype = reader.u16()
        index_shift = reader.u16()
        unknown2 = reader.u32()
        artist_id = reader.u32()
        album_id = reader.u32()
        unknown3 = reader.u32()
        unknown4 = reader.u8()
        name_offset = reader.u8()
        if subtype & cls.FAR_NAME_FLAG:
            name_offset = reader.u16_at(row_start + 0x16)
        name = cls.read_string(reader, row_start, name_offset)
        return cls(subtype, index_shift, unknown2, artist_id, album_id,
                   unknown3, unknown4, name)


@dataclass(frozen=True)
class Genre(Row):
    TABLE = PlainTableType.GENRES

    id: int
    name: str

    @classmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'Genre':
        reader.seek(row_start)
        genre_id = reader.u32()
        return cls(genre_id, cls.read_string(reader, row_start, 4))


@dataclass(frozen=True)
class Label(Row):
    TABLE = PlainTableType.LABELS

    id: int
    name: str

    @classmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'Label':
        reader.seek(row_start)
        label_id = reader.u32()
        return cls(label_id, cls.read_string(reader, row_start, 4))


@dataclass(frozen=True)
class Key(Row):
    """Musical key. ``id2`` always repeats ``id`` in observed exports."""

    TABLE = PlainTableType.KEYS

    id: int
    id2: int
    name: str

    @classmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'Key':
        reader.seek(row_start)
        key_id = reader.u32()
        id2 = reader.u32()
        return cls(key_id, id2, cls.read_string(reader, row_start, 8))


@dataclass(frozen=True)
class Color(Row):
    TABLE = PlainTableType.COLORS

    unknown1: int
    unknown2: int
    id: int
    unknown3: int
    name: str

    @classmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'Color':
        reader.seek(row_start)
        unknown1 = reader.u32()
        unknown2 = reader.u8()
        color_id = reader.u16()
        unknown3 = reader.u8()
        name = cls.read_string(reader, row_start, 8)
        return cls(unknown1, unknown2, color_id, unknown3, name)


@dataclass(frozen=True)
class Artwork(Row):
    """Artwork reference; ``path`` points at the JPEG on the export media."""

    TABLE = PlainTableType.ARTWORK

    id: int
    path: str

    @classmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'Artwork':
        reader.seek(row_start)
        artwork_id = reader.u32()
        return cls(artwork_id, cls.read_string(reader, row_start, 4))
