from enum import Enum
from typing import Union

from .table_type import PlainTableType, ExtTableType

TableType = Union[PlainTableType, ExtTableType, int]


class DatabaseType(Enum):
    """
    Top-level discriminant of the export file flavour.

    The same page/row-group container is used by both files, but the
    meaning of a table-type tag depends on which file is being read.
    """
    PLAIN = "plain"  # export.pdb
    EXT = "ext"      # exportExt.pdb

    def table_type(self, tag: int) -> TableType:
        """
        Resolve a raw table-type tag to its enum member.

        Unrecognized tags are returned unchanged as ``int`` so that tables
        introduced by newer firmware can still be walked.
        """
        enum_cls = PlainTableType if self is DatabaseType.PLAIN else ExtTableType
        try:
            return enum_cls(tag)
        except ValueError:
            return tag

    def table_type_name(self, tag: int) -> str:
        resolved = self.table_type(tag)
        if isinstance(resolved, (PlainTableType, ExtTableType)):
            return resolved.name.lower()
        return f"unknown({tag})"
