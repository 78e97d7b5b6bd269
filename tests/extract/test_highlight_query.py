"""Tests for the attached connection and the highlight query.

These tests seed real SQLite files shaped like the Apple Books annotation
and library databases.
"""

import sqlite3
from datetime import datetime, timezone

import pytest

from extract.connection import AttachedConnection
from extract.query import HighlightQuery
from extract.types import QueryError, SourceConnectionError

ANNOTATION_SCHEMA = """
CREATE TABLE ZAEANNOTATION (
    ZANNOTATIONASSETID TEXT,
    ZANNOTATIONSELECTEDTEXT TEXT,
    ZANNOTATIONNOTE TEXT,
    ZFUTUREPROOFING5 TEXT,
    ZANNOTATIONMODIFICATIONDATE REAL,
    ZANNOTATIONDELETED INTEGER DEFAULT 0,
    ZPLLOCATIONRANGESTART INTEGER DEFAULT 0
)
"""

LIBRARY_SCHEMA = """
CREATE TABLE ZBKLIBRARYASSET (
    ZASSETID TEXT,
    ZTITLE TEXT,
    ZAUTHOR TEXT
)
"""


def seed(path, schema, table, rows):
    conn = sqlite3.connect(path)
    conn.execute(schema)
    placeholders = ", ".join("?" * len(rows[0]))
    conn.executemany(f"INSERT INTO {table} VALUES ({placeholders})", rows)
    conn.commit()
    conn.close()


@pytest.fixture
def databases(tmp_path):
    """Annotation and library databases with two books."""
    annotations = tmp_path / "annotations.sqlite"
    library = tmp_path / "library.sqlite"

    seed(
        annotations,
        ANNOTATION_SCHEMA,
        "ZAEANNOTATION",
        [
            ("asset1", "Second highlight", None, None, 726_019_300.0, 0, 20),
            ("asset1", "First highlight", "my note", "Chapter 1", 726_019_200.0, 0, 10),
            ("asset1", "Deleted highlight", None, None, 726_019_400.0, 1, 30),
            ("asset1", None, "note on nothing", None, 726_019_500.0, 0, 40),
            ("asset2", "Another book", None, None, None, 0, 1),
        ],
    )
    seed(
        library,
        LIBRARY_SCHEMA,
        "ZBKLIBRARYASSET",
        [
            ("asset1", "Test Book", "Test Author"),
            ("asset2", "A First Book", None),
        ],
    )
    return annotations, library


class TestAttachedConnection:
    """Tests for AttachedConnection."""

    def test_attaches_secondary_database_as_books(self, databases):
        connection = AttachedConnection(*databases)

        with connection.open() as conn:
            rows = conn.execute("SELECT name FROM books.sqlite_master WHERE type='table'").fetchall()

        assert [row["name"] for row in rows] == ["ZBKLIBRARYASSET"]

    def test_closes_connection_on_exit(self, databases):
        connection = AttachedConnection(*databases)

        with connection.open() as conn:
            pass

        with pytest.raises(sqlite3.ProgrammingError):
            conn.execute("SELECT 1")

    def test_unopenable_primary_raises(self, tmp_path):
        connection = AttachedConnection(tmp_path / "missing" / "a.sqlite", tmp_path / "b.sqlite")

        with pytest.raises(SourceConnectionError):
            with connection.open():
                pass


class TestHighlightQuery:
    """Tests for HighlightQuery."""

    def test_groups_rows_into_books_ordered_by_title(self, databases):
        library = HighlightQuery(AttachedConnection(*databases)).fetch()

        assert library.count == 2
        assert [book.title for book in library.books] == ["A First Book", "Test Book"]

    def test_builds_book_fields(self, databases):
        library = HighlightQuery(AttachedConnection(*databases)).fetch()
        book = library.books[1]

        assert book.identifier == "asset1"
        assert book.author == "Test Author"

    def test_orders_annotations_by_location(self, databases):
        book = HighlightQuery(AttachedConnection(*databases)).fetch().books[1]

        assert [a.text for a in book.annotations] == ["First highlight", "Second highlight"]

    def test_excludes_deleted_and_null_text_highlights(self, databases):
        book = HighlightQuery(AttachedConnection(*databases)).fetch().books[1]

        assert book.count == 2

    def test_nulls_become_empty_strings(self, databases):
        library = HighlightQuery(AttachedConnection(*databases)).fetch()
        first, second = library.books[1].annotations

        assert first.note == "my note"
        assert first.chapter == "Chapter 1"
        assert second.note == ""
        assert second.chapter == ""
        assert library.books[0].author == ""

    def test_converts_modified_to_utc(self, databases):
        library = HighlightQuery(AttachedConnection(*databases)).fetch()

        assert library.books[1].annotations[0].modified == datetime(2024, 1, 4, tzinfo=timezone.utc)
        assert library.books[0].annotations[0].modified == datetime(2001, 1, 1, tzinfo=timezone.utc)

    def test_missing_table_raises_query_error(self, tmp_path):
        primary = tmp_path / "empty.sqlite"
        attached = tmp_path / "other.sqlite"
        sqlite3.connect(primary).close()
        sqlite3.connect(attached).close()

        with pytest.raises(QueryError):
            HighlightQuery(AttachedConnection(primary, attached)).fetch()
