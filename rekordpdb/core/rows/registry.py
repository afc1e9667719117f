from typing import Dict, Optional, Type

from ...primitives import DatabaseType, TableType
from .row import Row
from .track import Track
from .catalog import Artist, Album, Genre, Label, Key, Color, Artwork
from .playlist import PlaylistTreeNode, PlaylistEntry, HistoryPlaylist, HistoryEntry
from .browse import Column, Menu
from .ext import Tag, TagTrack

# Tags collide between the two files (3 is albums in export.pdb and tags in
# exportExt.pdb), so lookups are always scoped by database type.
ROW_TYPES: Dict[DatabaseType, Dict[TableType, Type[Row]]] = {
    DatabaseType.PLAIN: {
        row_cls.TABLE: row_cls
        for row_cls in (
            Track, Genre, Artist, Album, Label, Key, Color, PlaylistTreeNode,
            PlaylistEntry, HistoryPlaylist, HistoryEntry, Artwork, Column, Menu,
        )
    },
    DatabaseType.EXT: {
        row_cls.TABLE: row_cls
        for row_cls in (Tag, TagTrack)
    },
}


def row_type_for(database_type: DatabaseType, table_type: TableType) -> Optional[Type[Row]]:
    """Return the row class decoding ``table_type``, or None when unsupported."""
    return ROW_TYPES[database_type].get(int(table_type))
