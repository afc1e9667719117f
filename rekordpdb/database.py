import logging
from pathlib import Path
from typing import BinaryIO, Iterator, Union

from .core.exceptions import PdbIOError
from .core.rows import Row, row_type_for
from .primitives import DatabaseType, Endian
from .query.iterator import RowCollection
from .storage.disk import PageSource
from .storage.header import Header, TableDescriptor

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_table_rows(source: PageSource,
                    header: Header,
                    table: TableDescriptor,
                    endian: Endian = Endian.LITTLE) -> Iterator[Row]:
    """
    Yield the live rows of one table in page-chain, group and slot order.

    Tables whose type has no row decoder are still walked; their rows come
    out as UnknownRow values carrying the raw bytes.
    """
    database_type = header.database_type
    if row_type_for(database_type, table.table_type) is None:
        logger.warning("No row decoder for table %s, keeping raw rows",
                       database_type.table_type_name(int(table.table_type)))

    pages = header.read_pages(
        source, endian, (table.first_page, table.last_page, database_type),
        table_type=table.table_type)
    for page in pages:
        for row_group in page.get_row_groups():
            yield from row_group.present_rows()


def iter_rows(stream: BinaryIO,
              database_type: DatabaseType,
              endian: Endian = Endian.LITTLE) -> Iterator[Row]:
    """
    Yield every live row of an open export database, one at a time.

    Rows are produced while the page chains are walked, so memory use stays
    bounded by a single page. The stream must stay open until the generator
    is exhausted.
    """
    source = PageSource(stream)
    header = Header.read(source, database_type, endian)
    for table in header.tables:
        yield from read_table_rows(source, header, table, endian)
    logger.debug("Read %d pages (%d bytes)", source.stats.pages_read, source.stats.bytes_read)


def read_rows(stream: BinaryIO,
              database_type: DatabaseType,
              endian: Endian = Endian.LITTLE) -> RowCollection:
    """
    Decode every live row of an open export database into a RowCollection.

    Either the complete collection is returned or an exception is raised;
    rows decoded before a failure are discarded.

    Raises:
        MalformedHeaderError: If the prologue or table directory is inconsistent
        MalformedPageError: If a page is truncated or contradicts its chain
        MalformedRowError: If a live row fails to decode
        PdbIOError: If the stream cannot be read
    """
    rows = list(iter_rows(stream, database_type, endian))
    collection = RowCollection(rows)
    logger.info("total rows read: %d", len(collection))
    return collection


def _open(path: PathLike) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as e:
        raise PdbIOError(f"Cannot open export database {path}: {e}") from e


def iter_pdb_rows(path: PathLike,
                  database_type: DatabaseType = DatabaseType.PLAIN,
                  endian: Endian = Endian.LITTLE) -> RowCollection:
    """
    Open an export database file and return all of its live rows.

    Rows of different tables are concatenated in table-directory order.
    No sorting, deduplication or cross-table linking is performed.
    """
    with _open(path) as stream:
        return read_rows(stream, database_type, endian)


open_and_read = iter_pdb_rows


def stream_pdb_rows(path: PathLike,
                    database_type: DatabaseType = DatabaseType.PLAIN,
                    endian: Endian = Endian.LITTLE) -> Iterator[Row]:
    """
    Row-at-a-time variant of iter_pdb_rows for very large exports.

    The file stays open while the generator is alive and is closed when it
    is exhausted or closed.
    """
    with _open(path) as stream:
        yield from iter_rows(stream, database_type, endian)
