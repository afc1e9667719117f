import struct
import sys
from typing import Union

from ..core.exceptions import TruncatedDataError
from ..primitives import Endian


class ByteReader:
    """
    Cursor over an in-memory byte buffer.

    Decodes fixed-width unsigned integers at the current position (or at
    an absolute offset) using the configured byte order. Every page is
    read from disk in one piece and then decoded through a ByteReader,
    so no method here performs I/O.

    Reads past the end of the buffer raise TruncatedDataError; callers
    translate that into the malformed-header/page/row error of their layer.
    """

    def __init__(self, data: Union[bytes, bytearray, memoryview], endian: Endian = Endian.LITTLE):
        self.data = bytes(data)
        self.endian = endian
        self.position = 0
        self._prefix = endian.get_struct_prefix()

    def __len__(self) -> int:
        return len(self.data)

    def tell(self) -> int:
        return self.position

    def seek(self, position: int) -> None:
        if position < 0 or position > len(self.data):
            raise TruncatedDataError(
                f"Cannot seek to {position}: buffer holds {len(self.data)} bytes")
        self.position = position

    def remaining(self) -> int:
        return len(self.data) - self.position

    def read(self, size: int) -> bytes:
        """Read exactly ``size`` raw bytes and advance the cursor."""
        if size < 0 or self.position + size > len(self.data):
            raise TruncatedDataError(
                f"Need {size} bytes at offset {self.position}, "
                f"only {len(self.data) - self.position} available")
        chunk = self.data[self.position:self.position + size]
        self.position += size
        return chunk

    def _unpack(self, fmt: str, size: int) -> int:
        return struct.unpack(self._prefix + fmt, self.read(size))[0]

    def u8(self) -> int:
        return self._unpack("B", 1)

    def u16(self) -> int:
        return self._unpack("H", 2)

    def u24(self) -> int:
        """Read a 3-byte unsigned integer (used by packed row counts)."""
        raw = self.read(3)
        byteorder = {"<": "little", ">": "big"}.get(self._prefix, sys.byteorder)
        return int.from_bytes(raw, byteorder)

    def u32(self) -> int:
        return self._unpack("I", 4)

    def u16_at(self, offset: int) -> int:
        self.seek(offset)
        return self.u16()

    def u32_at(self, offset: int) -> int:
        self.seek(offset)
        return self.u32()

    def read_at(self, offset: int, size: int) -> bytes:
        self.seek(offset)
        return self.read(size)
