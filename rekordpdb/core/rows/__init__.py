"""
Row variants, one per known table type.

``ROW_TYPES`` maps a database type and table type to its decoder; tables
without an entry are surfaced as ``UnknownRow`` values.
"""

from .row import Row, UnknownRow
from .track import Track
from .catalog import Artist, Album, Genre, Label, Key, Color, Artwork
from .playlist import PlaylistTreeNode, PlaylistEntry, HistoryPlaylist, HistoryEntry
from .browse import Column, Menu
from .ext import Tag, TagTrack
from .registry import ROW_TYPES, row_type_for

__all__ = [
    "Row", "UnknownRow", "Track", "Artist", "Album", "Genre", "Label", "Key",
    "Color", "Artwork", "PlaylistTreeNode", "PlaylistEntry", "HistoryPlaylist",
    "HistoryEntry", "Column", "Menu", "Tag", "TagTrack", "ROW_TYPES",
    "row_type_for",
]
