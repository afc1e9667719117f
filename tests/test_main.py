"""
Tests for the command-line entry point.
"""

from pdb_builder import build_file, genre_row, simple_table_pages, tag_row
from rekordpdb.main import main, summarize
from rekordpdb.core.rows import Genre, Label
from rekordpdb.primitives import ExtTableType, PlainTableType
from rekordpdb.query.iterator import RowCollection


def test_summarize_counts_in_first_seen_order():
    collection = RowCollection([Label(1, "a"), Genre(1, "b"), Label(2, "c")])
    assert summarize(collection) == ["Label: 2", "Genre: 1"]


def test_main_prints_summary(tmp_path, capsys):
    pages = simple_table_pages(PlainTableType.GENRES, 1, [[genre_row(1, "Techno"), genre_row(2, "House")]])
    path = tmp_path / "export.pdb"
    path.write_bytes(build_file([(PlainTableType.GENRES, 1, 2)], pages))

    assert main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["Genre: 2"]


def test_main_ext_flag(tmp_path, capsys):
    pages = simple_table_pages(ExtTableType.TAGS, 1, [[tag_row(1, 0, "Vocal")]])
    path = tmp_path / "exportExt.pdb"
    path.write_bytes(build_file([(ExtTableType.TAGS, 1, 2)], pages))

    assert main([str(path), "--ext"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Tag: 1"]


def test_main_reports_errors(tmp_path, capsys):
    """An unreadable file exits with status 1 and prints no summary."""
    assert main([str(tmp_path / "missing.pdb")]) == 1
    assert capsys.readouterr().out == ""
