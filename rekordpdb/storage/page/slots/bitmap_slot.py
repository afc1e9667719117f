from typing import List
import math


class PresenceBitmap:
    """
    🗂️ Read-only view of a row group's presence flags 🗂️

    💡 Each bit tells whether the matching row slot holds a live row.
    1 = present, 0 = deleted or never written. The bitmap is computed once
    from the raw bytes and never modified afterwards.

    Bitmap Structure:
    ---------------------------------------------------
     Byte 0         │ Byte 1          │
     7 6 5 4 3 2 1 0│ 7 6 5 4 3 2 1 0│
     Slot positions │                │
     7 6 5 4 3 2 1 0│15 ...         8│
    ---------------------------------------------------

    Bits are least-significant first: slot 0 is bit 0 of byte 0, slot 8
    is bit 0 of byte 1.

    Example with 10 slots (slots 0, 2, 7 and 8 present):
    -----------------------------------------
     Byte 0: 10000101 (0x85)     │  Slots 0,2,7 present
     Byte 1: 00000001 (0x01)     │  Slot 8 present
     Bits beyond slot 9 ignored  │
    -----------------------------------------
    """

    BITS_PER_BYTE = 8

    def __init__(self, num_slots: int, bitmap_data: bytes):
        if num_slots < 0:
            raise ValueError(f"Slot count must be non-negative, got {num_slots}")

        self.num_slots = num_slots
        self.bitmap_size_bytes = math.ceil(
            num_slots / PresenceBitmap.BITS_PER_BYTE)

        if len(bitmap_data) != self.bitmap_size_bytes:
            raise ValueError(
                f"Bitmap data size mismatch: expected {self.bitmap_size_bytes}, got {len(bitmap_data)}")
        self.bitmap = bytes(bitmap_data)

    def is_slot_present(self, slot_number: int) -> bool:
        """
        🔍 Check if a slot holds a live row 🔍

        1. 📍 Byte position: slot_number // 8   (slot 10 → byte 1)
        2. 🎯 Bit position:  slot_number % 8    (slot 10 → bit 2)
        3. ✅ Test bit:      byte & (1 << bit) != 0
        """
        if slot_number < 0 or slot_number >= self.num_slots:
            raise IndexError(
                f"Slot {slot_number} out of range (max: {self.num_slots-1})")

        byte_index = slot_number // PresenceBitmap.BITS_PER_BYTE
        bit_index = slot_number % PresenceBitmap.BITS_PER_BYTE
        return bool(self.bitmap[byte_index] & (1 << bit_index))

    def present_slots(self, limit: int = None) -> List[int]:
        """
        Return the present slot numbers in ascending order.

        Args:
            limit: Only consider slots below this number (the row group's
                   used slot count); defaults to every slot
        """
        upper = self.num_slots if limit is None else min(limit, self.num_slots)
        return [slot for slot in range(upper) if self.is_slot_present(slot)]

    def get_present_count(self, limit: int = None) -> int:
        """📊 Count present slots below ``limit``."""
        return len(self.present_slots(limit))

    def __str__(self) -> str:
        bits = "".join("1" if self.is_slot_present(slot) else "0"
                       for slot in range(self.num_slots))
        return f"PresenceBitmap({bits})"
