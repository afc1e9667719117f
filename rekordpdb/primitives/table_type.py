from enum import IntEnum


class PlainTableType(IntEnum):
    """
    Table-type tags used by ``export.pdb``.

    Tags missing here (9, 10, 14, 15, 18) exist in real exports but their
    content has never been identified.
    """
    TRACKS = 0
    GENRES = 1
    ARTISTS = 2
    ALBUMS = 3
    LABELS = 4
    KEYS = 5
    COLORS = 6
    PLAYLIST_TREE = 7
    PLAYLIST_ENTRIES = 8
    HISTORY_PLAYLISTS = 11
    HISTORY_ENTRIES = 12
    ARTWORK = 13
    COLUMNS = 16
    MENU = 17
    HISTORY = 19


class ExtTableType(IntEnum):
    """Table-type tags used by ``exportExt.pdb``."""
    TAGS = 3
    TAG_TRACKS = 4
