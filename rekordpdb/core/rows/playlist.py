"""Rows describing playlists, their contents and play history."""
from dataclasses import dataclass

from ...primitives import PlainTableType
from ...storage.binary import ByteReader
from .row import Row


@dataclass(frozen=True)
class PlaylistTreeNode(Row):
    """
    Node of the playlist tree: either a folder or a playlist.

    ``parent_id`` is 0 for nodes at the root. Siblings are ordered by
    ``sort_order``, not by their position in the table.
    """

    TABLE = PlainTableType.PLAYLIST_TREE
    NAME_OFFSET = 0x14

    parent_id: int
    unknown: int
    sort_order: int
    id: int
    raw_is_folder: int
    name: str

    @property
    def is_folder(self) -> bool:
        return self.raw_is_folder != 0

    @classmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'PlaylistTreeNode':
        reader.seek(row_start)
        parent_id = reader.u32()
        unknown = reader.u32()
        sort_order = reader.u32()
        node_id = reader.u32()
        raw_is_folder = reader.u32()
        name = cls.read_string(reader, row_start, cls.NAME_OFFSET)
        return cls(parent_id, unknown, sort_order, node_id, raw_is_folder, name)


@dataclass(frozen=True)
class PlaylistEntry(Row):
    TABLE = PlainTableType.PLAYLIST_ENTRIES

    entry_index: int
    track_id: int
    playlist_id: int

    @classmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'PlaylistEntry':
        reader.seek(row_start)
        return cls(reader.u32(), reader.u32(), reader.u32())


@dataclass(frozen=True)
class HistoryPlaylist(Row):
    TABLE = PlainTableType.HISTORY_PLAYLISTS

    id: int
    name: str

    @classmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'HistoryPlaylist':
        reader.seek(row_start)
        playlist_id = reader.u32()
        return cls(playlist_id, cls.read_string(reader, row_start, 4))


@dataclass(frozen=True)
class HistoryEntry(Row):
    TABLE = PlainTableType.HISTORY_ENTRIES

    track_id: int
    playlist_id: int
    entry_index: int

    @classmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'HistoryEntry':
        reader.seek(row_start)
        return cls(reader.u32(), reader.u32(), reader.u32())
