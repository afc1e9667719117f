import logging
from typing import Iterator, Optional, Set, Tuple

from ..core.exceptions import MalformedPageError
from ..primitives import DatabaseType, Endian, PageIndex, TableType
from .disk import PageSource
from .page import Page

logger = logging.getLogger(__name__)


def read_pages(source: PageSource,
               page_size: int,
               endian: Endian,
               pointers: Tuple[PageIndex, PageIndex, DatabaseType],
               table_type: Optional[TableType] = None) -> Iterator[Page]:
    """
    Lazily walk one table's page chain.

    The chain is stored in the file itself: each page header carries the
    index of the next page. Walking it needs nothing more than the current
    index and the index of the last page, so pages are read, decoded and
    handed out one at a time.

    Walk:
    1. Seek to ``first_page * page_size`` and decode the page
    2. Yield it; stop if its index equals ``last_page``
    3. Otherwise continue with the page's ``next_page`` pointer

    Args:
        source: Borrowed byte source, positioned freely by the walk
        page_size: Page size from the file header
        endian: Byte order of integer fields
        pointers: ``(first_page, last_page, database_type)``
        table_type: When given, every page must carry this table type

    Raises:
        MalformedPageError: On a short page, a page whose header contradicts
                            the chain, or a chain that loops back on itself.
                            Pages yielded before the error remain valid.
        MalformedRowError: If a live row on a data page fails to decode
        PdbIOError: If the underlying read fails
    """
    first_page, last_page, database_type = pointers
    visited: Set[PageIndex] = set()
    page_index = first_page

    while True:
        if page_index in visited:
            raise MalformedPageError(
                f"Page chain loops back to page {int(page_index)}", int(page_index))
        visited.add(page_index)

        data = source.read_page(page_index, page_size)
        if len(data) < page_size:
            raise MalformedPageError(
                f"Page {int(page_index)} is truncated: expected {page_size} bytes, "
                f"got {len(data)}", int(page_index))

        page = Page.read(data, page_size, database_type, endian, expected_index=page_index)
        if table_type is not None and int(page.page_type) != int(table_type):
            raise MalformedPageError(
                f"Page {int(page_index)} belongs to table type {int(page.page_type)}, "
                f"expected {int(table_type)}", int(page_index))

        logger.debug("Read page %d, next page %d", int(page_index), int(page.next_page))
        yield page

        if page.page_index == last_page:
            return
        page_index = page.next_page
