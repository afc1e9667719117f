from typing import Iterator, List, Optional, Sequence

from ...core.rows import Row
from ...primitives import TableType


class RowIterator:
    """
    Double-ended iterator over a borrowed list of rows.

    Rows can be taken from the front (``next()``) and from the back
    (``next_back()``); both ends move towards each other, so every row is
    returned exactly once. ``len()`` always reports the rows still left.
    """

    def __init__(self, rows: Sequence[Row]):
        self._rows = rows
        self._front = 0
        self._back = len(rows)

    def __iter__(self) -> 'RowIterator':
        return self

    def __next__(self) -> Row:
        if self._front >= self._back:
            raise StopIteration("No more rows")
        row = self._rows[self._front]
        self._front += 1
        return row

    def next_back(self) -> Row:
        """Return the last remaining row and shrink the iterator from the back."""
        if self._front >= self._back:
            raise StopIteration("No more rows")
        self._back -= 1
        return self._rows[self._back]

    def has_next(self) -> bool:
        return self._front < self._back

    def __len__(self) -> int:
        return self._back - self._front

    def __length_hint__(self) -> int:
        return len(self)

    def __reversed__(self) -> Iterator[Row]:
        while self.has_next():
            yield self.next_back()


class RowCollection:
    """
    Rows extracted from one export file.

    Rows are kept in table-directory order, then page-chain order, then
    row-group and slot order. The collection is read-only: iterating it
    hands out references to the same row values every time.

    ``into_rows()`` transfers the underlying list to the caller; the
    collection is unusable afterwards.
    """

    def __init__(self, rows: List[Row]):
        self._rows: Optional[List[Row]] = rows

    def _get_rows(self) -> List[Row]:
        if self._rows is None:
            raise RuntimeError("RowCollection has already been consumed")
        return self._rows

    def __len__(self) -> int:
        return len(self._get_rows())

    def is_empty(self) -> bool:
        return len(self) == 0

    def is_consumed(self) -> bool:
        return self._rows is None

    def iterate(self) -> RowIterator:
        """Return a fresh double-ended iterator over the rows."""
        return RowIterator(self._get_rows())

    def __iter__(self) -> RowIterator:
        return self.iterate()

    def __reversed__(self) -> Iterator[Row]:
        return reversed(self.iterate())

    def __getitem__(self, index: int) -> Row:
        return self._get_rows()[index]

    def rows_of(self, table_type: TableType) -> List[Row]:
        """
        Return the rows of a single table type, in collection order.

        Enum members are compared together with their class, since the same
        number means different tables in export.pdb and exportExt.pdb. A
        plain ``int`` matches on the tag value alone, which is unambiguous
        for a collection read from a single file.
        """
        match_class = type(table_type) is not int
        return [row for row in self._get_rows()
                if int(row.table_type) == int(table_type)
                and (not match_class or type(row.table_type) is type(table_type))]

    def into_rows(self) -> List[Row]:
        """Hand the row list over to the caller and consume the collection."""
        rows = self._get_rows()
        self._rows = None
        return rows

    def __repr__(self) -> str:
        if self._rows is None:
            return "RowCollection(<consumed>)"
        return f"RowCollection(rows={len(self._rows)})"
