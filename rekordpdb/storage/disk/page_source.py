from dataclasses import dataclass
from typing import BinaryIO

from ...core.exceptions import PdbIOError
from ...primitives import PageIndex


@dataclass
class PageSourceStats:
    pages_read: int = 0
    bytes_read: int = 0


class PageSource:
    """
    Positioned reads over a borrowed binary stream.

    The stream is owned by the caller; PageSource never closes it. Short
    reads are returned as-is so the layer above can report them as
    malformed data, while failures of the stream itself (including reading
    from a closed file) become PdbIOError.
    """

    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self.stats = PageSourceStats()

    def read_at(self, offset: int, size: int) -> bytes:
        """
        Read up to ``size`` bytes starting at ``offset``.

        Raises:
            PdbIOError: If seeking or reading fails
        """
        try:
            self.stream.seek(offset)
            data = self.stream.read(size)
        except (OSError, ValueError) as e:
            raise PdbIOError(f"Failed to read {size} bytes at offset {offset}: {e}") from e

        self.stats.bytes_read += len(data)
        return data

    def read_page(self, page_index: PageIndex, page_size: int) -> bytes:
        """Read the raw bytes of one page; may be short at end of file."""
        data = self.read_at(page_index.offset(page_size), page_size)
        self.stats.pages_read += 1
        return data
