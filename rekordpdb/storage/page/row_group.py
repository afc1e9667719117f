from dataclasses import dataclass, field
from typing import Callable, List, TYPE_CHECKING

from ...config import ROWS_PER_GROUP, ROW_GROUP_SIZE
from ..binary import ByteReader
from .slots.bitmap_slot import PresenceBitmap

if TYPE_CHECKING:
    from ...core.rows import Row


@dataclass
class RowGroup:
    """
    A batch of up to 16 row slots governed by one presence bitmask.

    Row groups are stored at the end of a data page and grow backwards:
    group 0 occupies the last 36 bytes of the page, group 1 the 36 bytes
    before it, and so on.

    Group Layout (file order, 36 bytes):
    ┌───────────────────────────────┬──────────────┬──────────┐
    │ u16 offsets, slot 15 ... 0    │ presence (2) │ u16 ???  │
    └───────────────────────────────┴──────────────┴──────────┘

    Slot offsets are relative to the page heap. Slots whose presence bit
    is clear point at deleted or overwritten bytes and are never decoded.
    """

    row_offsets: List[int]
    presence: PresenceBitmap
    unknown: int
    rows: List['Row'] = field(default_factory=list)

    PRESENCE_SIZE = 2

    @staticmethod
    def group_end(page_size: int, group_index: int) -> int:
        """Return the position just past the given group's bytes."""
        return page_size - group_index * ROW_GROUP_SIZE

    @staticmethod
    def read_offsets(reader: ByteReader, group_end: int, slot_count: int) -> List[int]:
        """Read the heap-relative row offsets of the first ``slot_count`` slots."""
        offsets_end = group_end - RowGroup.PRESENCE_SIZE - 2
        return [reader.u16_at(offsets_end - 2 * (slot + 1))
                for slot in range(slot_count)]

    @staticmethod
    def read_presence(reader: ByteReader, group_end: int) -> PresenceBitmap:
        presence_position = group_end - RowGroup.PRESENCE_SIZE - 2
        return PresenceBitmap(ROWS_PER_GROUP,
                              reader.read_at(presence_position, RowGroup.PRESENCE_SIZE))

    @classmethod
    def read_live_offsets(cls, reader: ByteReader, group_end: int, slot_count: int) -> List[int]:
        """Read the offsets of present slots only; deleted slots may hold garbage."""
        offsets = cls.read_offsets(reader, group_end, slot_count)
        presence = cls.read_presence(reader, group_end)
        return [offsets[slot] for slot in presence.present_slots(slot_count)]

    @classmethod
    def read(cls,
             reader: ByteReader,
             group_end: int,
             slot_count: int,
             decode_row: Callable[[int], 'Row']) -> 'RowGroup':
        """
        Decode one row group and its present rows.

        Args:
            reader: Reader over the whole page
            group_end: Position just past this group's 36 bytes
            slot_count: Number of meaningful slots (at most 16)
            decode_row: Decodes the row at a heap-relative offset using the
                        row variant of the page's table type

        Raises:
            TruncatedDataError: If the group lies outside the page
            MalformedRowError: If a present slot fails to decode
        """
        if not 0 <= slot_count <= ROWS_PER_GROUP:
            raise ValueError(f"Row group slot count out of range: {slot_count}")

        presence = cls.read_presence(reader, group_end)
        unknown = reader.u16_at(group_end - 2)
        row_offsets = cls.read_offsets(reader, group_end, slot_count)

        rows = [decode_row(row_offsets[slot])
                for slot in presence.present_slots(slot_count)]
        return cls(row_offsets, presence, unknown, rows)

    def present_rows(self) -> List['Row']:
        """Return the live rows of this group in slot order."""
        return list(self.rows)

    def get_slot_count(self) -> int:
        return len(self.row_offsets)

    def __str__(self) -> str:
        return f"RowGroup(rows={len(self.rows)}/{self.get_slot_count()}, {self.presence})"
