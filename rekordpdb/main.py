"""
Command-line summary of an export database.

Usage:
    python -m rekordpdb.main PIONEER/rekordbox/export.pdb
    python -m rekordpdb.main PIONEER/rekordbox/exportExt.pdb --ext
"""
import argparse
import logging
import sys
from collections import Counter
from typing import List, Optional

from .core.exceptions import PdbException
from .database import iter_pdb_rows
from .primitives import DatabaseType

logger = logging.getLogger(__name__)


def summarize(collection) -> List[str]:
    """Return one ``<row type>: <count>`` line per row type, in first-seen order."""
    counts = Counter(type(row).__name__ for row in collection)
    return [f"{name}: {count}" for name, count in counts.items()]


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point of the application."""
    parser = argparse.ArgumentParser(description="Dump row counts of a Rekordbox export database")
    parser.add_argument("path", help="export.pdb or exportExt.pdb")
    parser.add_argument("--ext", action="store_true", help="read as exportExt.pdb")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s: %(message)s")

    database_type = DatabaseType.EXT if args.ext else DatabaseType.PLAIN
    try:
        collection = iter_pdb_rows(args.path, database_type)
    except PdbException as e:
        logger.error("Cannot read %s: %s", args.path, e)
        return 1

    for line in summarize(collection):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
