from .row_collection import RowCollection, RowIterator

__all__ = ["RowCollection", "RowIterator"]
