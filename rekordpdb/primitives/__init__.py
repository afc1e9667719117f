"""
Primitive types and identifiers used throughout the reader.

This module contains basic types that have no dependencies on other parts
of the package, avoiding circular imports.
"""

from .page_index import PageIndex
from .endian import Endian
from .table_type import PlainTableType, ExtTableType
from .database_type import DatabaseType, TableType

__all__ = ["PageIndex", "Endian", "PlainTableType",
           "ExtTableType", "DatabaseType", "TableType"]
