import pytest

from rekordpdb.core.exceptions import TruncatedDataError
from rekordpdb.primitives import Endian
from rekordpdb.storage.binary import ByteReader


class TestByteReader:
    """Tests for the in-memory integer decoder."""

    def test_sequential_little_endian(self):
        reader = ByteReader(b"\x01\x02\x00\x03\x00\x00\x00\x04\x05\x06")

        assert reader.u8() == 1
        assert reader.u16() == 2
        assert reader.u32() == 3
        assert reader.u24() == 0x060504
        assert reader.remaining() == 0
        assert reader.tell() == 10

    def test_big_endian(self):
        reader = ByteReader(b"\x00\x02\x00\x00\x00\x03\x01\x02\x03", Endian.BIG)

        assert reader.u16() == 2
        assert reader.u32() == 3
        assert reader.u24() == 0x010203

    def test_absolute_reads_move_cursor(self):
        reader = ByteReader(b"\xAA\xBB\x34\x12\x78\x56\x34\x12")

        assert reader.u16_at(2) == 0x1234
        assert reader.tell() == 4
        assert reader.u32_at(4) == 0x12345678
        assert reader.read_at(0, 2) == b"\xAA\xBB"

    def test_read_past_end_raises(self):
        reader = ByteReader(b"\x01\x02\x03")
        reader.u16()

        with pytest.raises(TruncatedDataError, match="Need 2 bytes at offset 2"):
            reader.u16()

    def test_failed_read_keeps_position(self):
        reader = ByteReader(b"\x01\x02\x03")
        reader.u8()

        with pytest.raises(TruncatedDataError):
            reader.u32()

        assert reader.tell() == 1
        assert reader.u16() == 0x0302

    def test_seek_bounds(self):
        reader = ByteReader(b"\x00" * 4)

        reader.seek(4)
        assert reader.remaining() == 0
        with pytest.raises(TruncatedDataError):
            reader.seek(5)
        with pytest.raises(TruncatedDataError):
            reader.seek(-1)

    def test_accepts_memoryview(self):
        reader = ByteReader(memoryview(bytearray(b"\x05\x00")))
        assert len(reader) == 2
        assert reader.u16() == 5
