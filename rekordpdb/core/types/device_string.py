from ...storage.binary import ByteReader


class DeviceSQLString:
    """
    Decoder for the variable-length strings embedded in rows.

    Storage format (first byte is the kind marker):
    - kind & 0x01: short ASCII. ``kind >> 1`` is the total length
      including the marker byte, content follows immediately.
    - 0x40: long ASCII. u16 total length (including the 4 header bytes),
      one padding byte, then the content.
    - 0x90: long UTF-16LE with the same 4-byte header. Content that starts
      with 0x03 is an ISRC code stored as NUL-terminated ASCII.

    Any other marker is not a string, which usually means the row offset
    is pointing into garbage.
    """

    SHORT_ASCII_FLAG = 0x01
    LONG_ASCII = 0x40
    LONG_UTF16LE = 0x90
    LONG_HEADER_SIZE = 4
    ISRC_MARKER = 0x03

    @classmethod
    def read(cls, reader: ByteReader) -> str:
        """
        Decode a string at the reader's current position.

        Raises:
            ValueError: If the kind marker or length is invalid
            TruncatedDataError: If the string runs past the buffer
        """
        kind = reader.u8()

        if kind & cls.SHORT_ASCII_FLAG:
            length = kind >> 1
            if length < 1:
                raise ValueError(f"Invalid short string length: {length}")
            content = reader.read(length - 1)
            return cls._decode(content, "ascii")

        if kind not in (cls.LONG_ASCII, cls.LONG_UTF16LE):
            raise ValueError(f"Unknown string kind: {kind:#04x}")

        length = reader.u16()
        reader.u8()  # padding
        if length < cls.LONG_HEADER_SIZE:
            raise ValueError(f"Invalid long string length: {length}")
        content = reader.read(length - cls.LONG_HEADER_SIZE)

        if kind == cls.LONG_ASCII:
            return cls._decode(content, "ascii")

        if content[:1] == bytes([cls.ISRC_MARKER]):
            return cls._decode(content[1:].split(b"\x00", 1)[0], "ascii")
        return cls._decode(content, "utf-16-le")

    @classmethod
    def read_at(cls, reader: ByteReader, offset: int) -> str:
        reader.seek(offset)
        return cls.read(reader)

    @staticmethod
    def _decode(content: bytes, encoding: str) -> str:
        try:
            return content.decode(encoding).rstrip("\x00")
        except UnicodeDecodeError as e:
            raise ValueError(f"Invalid {encoding} string data: {e}")

