from dataclasses import dataclass

from ...primitives import PlainTableType
from ...storage.binary import ByteReader
from .row import Row


@dataclass(frozen=True)
class Track(Row):
    """
    Row of the tracks table.

    Row Layout:
    0x00-0x5D: fixed-width fields (ids, counters, audio properties)
    0x5E-0x87: 21 u16 string offsets, relative to the row start
    0x88-    : string heap referenced by the offsets

    Ids reference rows of other tables (artists, albums, keys, ...); they
    are kept as plain integers and never resolved here.
    """

    TABLE = PlainTableType.TRACKS
    STRING_FIELDS = (
        "isrc", "lyricist", "unknown_string2", "unknown_string3",
        "unknown_string4", "message", "kuvo_public", "autoload_hotcues",
        "unknown_string5", "unknown_string6", "date_added", "release_date",
        "mix_name", "unknown_string7", "analyze_path", "analyze_date",
        "comment", "title", "unknown_string8", "filename", "file_path",
    )

    subtype: int
    index_shift: int
    bitmask: int
    sample_rate: int
    composer_id: int
    file_size: int
    unknown2: int
    unknown3: int
    unknown4: int
    artwork_id: int
    key_id: int
    orig_artist_id: int
    label_id: int
    remixer_id: int
    bitrate: int
    track_number: int
    tempo: int
    genre_id: int
    album_id: int
    artist_id: int
    id: int
    disc_number: int
    play_count: int
    year: int
    sample_depth: int
    duration: int
    unknown5: int
    color_id: int
    rating: int
    file_type: int
    unknown7: int
    isrc: str
    lyricist: str
    unknown_string2: str
    unknown_string3: str
    unknown_string4: str
    message: str
    kuvo_public: str
    autoload_hotcues: str
    unknown_string5: str
    unknown_string6: str
    date_added: str
    release_date: str
    mix_name: str
    unknown_string7: str
    analyze_path: str
    analyze_date: str
    comment: str
    title: str
    unknown_string8: str
    filename: str
    file_path: str

    @property
    def bpm(self) -> float:
        """Tempo in beats per minute (stored as hundredths)."""
        return self.tempo / 100

    @classmethod
    def read(cls, reader: ByteReader, row_start: int) -> 'Track':
        reader.seek(row_start)
        fields = {
            "subtype": reader.u16(),
            "index_shift": reader.u16(),
            "bitmask": reader.u32(),
            "sample_rate": reader.u32(),
            "composer_id": reader.u32(),
            "file_size": reader.u32(),
            "unknown2": reader.u32(),
            "unknown3": reader.u16(),
            "unknown4": reader.u16(),
        }
        for name in ("artwork_id", "key_id", "orig_artist_id", "label_id",
                     "remixer_id", "bitrate", "track_number", "tempo",
                     "genre_id", "album_id", "artist_id", "id"):
            fields[name] = reader.u32()
        for name in ("disc_number", "play_count", "year", "sample_depth",
                     "duration", "unknown5"):
            fields[name] = reader.u16()
        fields["color_id"] = reader.u8()
        fields["rating"] = reader.u8()
        fields["file_type"] = reader.u16()
        fields["unknown7"] = reader.u16()

        offsets = [reader.u16() for _ in cls.STRING_FIELDS]
        for name, offset in zip(cls.STRING_FIELDS, offsets):
            fields[name] = cls.read_string(reader, row_start, offset)

        return cls(**fields)
