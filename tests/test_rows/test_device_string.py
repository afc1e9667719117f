import pytest

from pdb_builder import isrc_string, long_ascii_string, long_utf16_string, short_string
from rekordpdb.core.exceptions import TruncatedDataError
from rekordpdb.core.types import DeviceSQLString
from rekordpdb.storage.binary import ByteReader


def decode(data: bytes) -> str:
    return DeviceSQLString.read(ByteReader(data))


class TestDeviceSQLString:
    """Tests for the string encodings embedded in rows."""

    def test_short_ascii(self):
        assert decode(short_string("Deep House")) == "Deep House"

    def test_short_ascii_empty(self):
        assert decode(b"\x03") == ""

    def test_short_ascii_advances_cursor(self):
        reader = ByteReader(short_string("abc") + b"\xff")
        DeviceSQLString.read(reader)
        assert reader.tell() == 4

    def test_long_ascii(self):
        text = "x" * 300
        assert decode(long_ascii_string(text)) == text

    def test_long_utf16(self):
        assert decode(long_utf16_string("Ünïcødé ♫")) == "Ünïcødé ♫"

    def test_isrc(self):
        assert decode(isrc_string("GBAYE0601498")) == "GBAYE0601498"

    def test_read_at(self):
        reader = ByteReader(b"\x00\x00" + short_string("hi"))
        assert DeviceSQLString.read_at(reader, 2) == "hi"

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown string kind: 0x42"):
            decode(b"\x42abc")

    def test_zero_length_short_string(self):
        with pytest.raises(ValueError, match="Invalid short string length"):
            decode(b"\x01")

    def test_long_string_length_below_header(self):
        with pytest.raises(ValueError, match="Invalid long string length"):
            decode(b"\x40\x02\x00\x00")

    def test_truncated_content(self):
        with pytest.raises(TruncatedDataError):
            decode(short_string("abcdef")[:3])

    def test_invalid_ascii(self):
        with pytest.raises(ValueError, match="ascii"):
            decode(b"\x05\xff\xfe")
