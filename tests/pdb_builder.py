"""
Helpers that synthesise export database bytes for tests.

Everything is little endian and follows the on-disk layout exactly, so the
files built here could be opened by a player.
"""
import struct
from typing import Dict, List, Optional, Sequence, Tuple

HEAP_START = 0x28
ROW_GROUP_SIZE = 36
DATA_PAGE_FLAGS = 0x24
INDEX_PAGE_FLAGS = 0x64


def short_string(text: str) -> bytes:
    encoded = text.encode("ascii")
    length = len(encoded) + 1
    assert length < 128
    return bytes([(length << 1) | 1]) + encoded


def long_ascii_string(text: str) -> bytes:
    encoded = text.encode("ascii")
    return b"\x40" + struct.pack("<H", len(encoded) + 4) + b"\x00" + encoded


def long_utf16_string(text: str) -> bytes:
    encoded = text.encode("utf-16-le")
    return b"\x90" + struct.pack("<H", len(encoded) + 4) + b"\x00" + encoded


def isrc_string(code: str) -> bytes:
    encoded = b"\x03" + code.encode("ascii") + b"\x00"
    return b"\x90" + struct.pack("<H", len(encoded) + 4) + b"\x00" + encoded


# Row builders ----------------------------------------------------------------

def genre_row(genre_id: int, name: str) -> bytes:
    return struct.pack("<I", genre_id) + short_string(name)


def label_row(label_id: int, name: str) -> bytes:
    return struct.pack("<I", label_id) + short_string(name)


def key_row(key_id: int, name: str) -> bytes:
    return struct.pack("<II", key_id, key_id) + short_string(name)


def color_row(color_id: int, name: str) -> bytes:
    return struct.pack("<IBHB", 0, 0, color_id, 0) + short_string(name)


def artwork_row(artwork_id: int, path: str) -> bytes:
    return struct.pack("<I", artwork_id) + short_string(path)


def artist_row(artist_id: int, name: str, far: bool = False) -> bytes:
    if far:
        return (struct.pack("<HHIBB", 0x64, 0, artist_id, 0x03, 0)
                + struct.pack("<H", 12) + short_string(name))
    return struct.pack("<HHIBB", 0x60, 0, artist_id, 0x03, 10) + short_string(name)


def album_row(album_id: int, artist_id: int, name: str) -> bytes:
    return struct.pack("<HHIIIIBB", 0x80, 0, 0, artist_id, album_id, 0, 0x03, 22) + short_string(name)


def playlist_tree_row(node_id: int, parent_id: int, name: str,
                      is_folder: bool = False, sort_order: int = 0) -> bytes:
    return struct.pack("<IIIII", parent_id, 0, sort_order, node_id, int(is_folder)) + short_string(name)


def playlist_entry_row(entry_index: int, track_id: int, playlist_id: int) -> bytes:
    return struct.pack("<III", entry_index, track_id, playlist_id)


def history_playlist_row(playlist_id: int, name: str) -> bytes:
    return struct.pack("<I", playlist_id) + short_string(name)


def history_entry_row(track_id: int, playlist_id: int, entry_index: int) -> bytes:
    return struct.pack("<III", track_id, playlist_id, entry_index)


def column_row(column_id: int, name: str) -> bytes:
    return struct.pack("<HH", column_id, 0) + long_utf16_string(name)


def menu_row(category_id: int, content_pointer: int, visibility: int, sort_order: int) -> bytes:
    return struct.pack("<HHBBH", category_id, content_pointer, 0, visibility, sort_order)


def tag_row(tag_id: int, category: int, name: str, is_category: bool = False) -> bytes:
    return (struct.pack("<HH8xIIIIBB", 0x0680, 0, category, 0, tag_id, int(is_category), 0x03, 30)
            + short_string(name))


def tag_track_row(track_id: int, tag_id: int) -> bytes:
    return struct.pack("<IIII", 0, track_id, tag_id, 3)


TRACK_STRING_COUNT = 21
TRACK_TITLE_INDEX = 17
TRACK_FILE_PATH_INDEX = 20


def track_row(track_id: int, title: str, file_path: str = "/Contents/a.mp3",
              artist_id: int = 1, tempo: int = 12800, isrc: str = "") -> bytes:
    fixed = struct.pack(
        "<HHIIIIIHH" + "I" * 12 + "HHHHHHBBHH",
        0x24, 0, 0, 44100, 0, 1000, 0, 0, 0,
        0, 0, 0, 0, 0, 320, 1, tempo, 0, 0, artist_id, track_id,
        1, 0, 2020, 16, 240, 0x29, 0, 0, 1, 0,
    )
    assert len(fixed) == 0x5E

    strings = [short_string("") for _ in range(TRACK_STRING_COUNT)]
    strings[0] = isrc_string(isrc) if isrc else short_string("")
    strings[TRACK_TITLE_INDEX] = short_string(title)
    strings[TRACK_FILE_PATH_INDEX] = short_string(file_path)

    offsets = []
    heap = b""
    position = 0x5E + 2 * TRACK_STRING_COUNT
    for encoded in strings:
        offsets.append(position + len(heap))
        heap += encoded
    return fixed + struct.pack("<" + "H" * TRACK_STRING_COUNT, *offsets) + heap


# Page builders ---------------------------------------------------------------

def page_header(page_index: int, page_type: int, next_page: int, num_row_offsets: int,
                num_rows: int, flags: int, free_size: int = 0, used_size: int = 0) -> bytes:
    packed = num_row_offsets | (num_rows << 13)
    return (struct.pack("<IIIIII", 0, page_index, page_type, next_page, 1, 0)
            + packed.to_bytes(3, "little") + bytes([flags])
            + struct.pack("<HH", free_size, used_size))


def data_page(page_index: int, page_type: int, next_page: int, rows: Sequence[bytes],
              present: Optional[Sequence[bool]] = None, page_size: int = 4096) -> bytes:
    """Build a data page holding ``rows``; ``present`` marks live slots (default all)."""
    if present is None:
        present = [True] * len(rows)
    assert len(present) == len(rows)

    heap = b""
    offsets = []
    for row in rows:
        offsets.append(len(heap))
        heap += row
        if len(heap) % 4:
            heap += b"\x00" * (4 - len(heap) % 4)

    group_count = (len(rows) + 15) // 16
    groups_start = page_size - group_count * ROW_GROUP_SIZE
    assert HEAP_START + len(heap) <= groups_start, "rows do not fit in page"

    num_rows = sum(1 for flag in present if flag)
    page = bytearray(page_size)
    page[0:0x20] = page_header(page_index, page_type, next_page, len(rows), num_rows,
                               DATA_PAGE_FLAGS, groups_start - HEAP_START - len(heap), len(heap))
    page[0x20:0x28] = struct.pack("<HHHH", 0, num_rows, 0, 0)
    page[HEAP_START:HEAP_START + len(heap)] = heap

    for group in range(group_count):
        group_end = page_size - group * ROW_GROUP_SIZE
        slots = offsets[group * 16:(group + 1) * 16]
        flags = present[group * 16:(group + 1) * 16]
        for slot, offset in enumerate(slots):
            position = group_end - 4 - 2 * (slot + 1)
            page[position:position + 2] = struct.pack("<H", offset)
        mask = sum(1 << slot for slot, flag in enumerate(flags) if flag)
        page[group_end - 4:group_end] = struct.pack("<HH", mask, 0)
    return bytes(page)


def set_row_offset(page: bytes, slot: int, offset: int) -> bytes:
    """Overwrite the heap offset stored for ``slot`` (0-based, across row groups)."""
    group, position_in_group = divmod(slot, 16)
    group_end = len(page) - group * ROW_GROUP_SIZE
    position = group_end - 4 - 2 * (position_in_group + 1)
    patched = bytearray(page)
    patched[position:position + 2] = struct.pack("<H", offset)
    return bytes(patched)


def index_page(page_index: int, page_type: int, next_page: int, page_size: int = 4096) -> bytes:
    page = bytearray(page_size)
    page[0:0x20] = page_header(page_index, page_type, next_page, 0, 0, INDEX_PAGE_FLAGS)
    page[0x20:0x28] = b"\x1f\x1f\x1f\x1f\xff\xff\xff\x03"
    return bytes(page)


def file_header(page_size: int, tables: Sequence[Tuple[int, int, int]],
                num_tables: Optional[int] = None, next_unused_page: int = 0,
                sequence: int = 1) -> bytes:
    """Build page 0. ``tables`` holds ``(table_type, first_page, last_page)`` tuples."""
    if num_tables is None:
        num_tables = len(tables)
    header = struct.pack("<IIIIIII", 0, page_size, num_tables, next_unused_page, 5, sequence, 0)
    for table_type, first_page, last_page in tables:
        header += struct.pack("<IIII", table_type, last_page + 1, first_page, last_page)
    return header + b"\x00" * (page_size - len(header))


def build_file(tables: Sequence[Tuple[int, int, int]], pages: Dict[int, bytes],
               page_size: int = 4096, num_tables: Optional[int] = None) -> bytes:
    """Assemble page 0 and the given pages; gaps are filled with zero pages."""
    page_count = max(pages) + 1 if pages else 1
    data = bytearray(file_header(page_size, tables, num_tables, page_count))
    for index in range(1, page_count):
        data += pages.get(index, bytes(page_size))
    return bytes(data)


def simple_table_pages(page_type: int, first_page: int,
                       pages_rows: List[Sequence[bytes]], page_size: int = 4096) -> Dict[int, bytes]:
    """Chain one index page and one data page per entry of ``pages_rows``."""
    pages = {first_page: index_page(first_page, page_type, first_page + 1, page_size)}
    for position, rows in enumerate(pages_rows):
        index = first_page + 1 + position
        pages[index] = data_page(index, page_type, index + 1, rows, page_size=page_size)
    return pages
