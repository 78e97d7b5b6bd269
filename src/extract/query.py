"""Highlight query against the attached Apple Books databases."""

import sqlite3

from common.logger import get_logger

from .connection import AttachedConnection
from .epoch import apple_epoch_to_datetime
from .models import Annotation, Book, Library
from .types import QueryError

logger = get_logger(__name__)

HIGHLIGHT_SQL = """
SELECT
  ZANNOTATIONASSETID          AS asset_id,
  ZTITLE                      AS title,
  ZAUTHOR                     AS author,
  ZANNOTATIONSELECTEDTEXT     AS text,
  ZANNOTATIONNOTE             AS note,
  ZFUTUREPROOFING5            AS chapter,
  ZANNOTATIONMODIFICATIONDATE AS modified
FROM ZAEANNOTATION
LEFT JOIN books.ZBKLIBRARYASSET
  ON ZANNOTATIONASSETID = ZASSETID
WHERE ZANNOTATIONSELECTEDTEXT IS NOT NULL
  AND ZANNOTATIONDELETED = 0
ORDER BY ZTITLE, ZPLLOCATIONRANGESTART
"""


def _text(value) -> str:
    return "" if value is None else str(value)


class HighlightQuery:
    """Runs the highlight query and builds a Library from the rows."""

    def __init__(self, connection: AttachedConnection):
        self.connection = connection

    def fetch(self) -> Library:
        """Fetch every live highlight, grouped into books.

        Returns:
            Library with one Book per asset id, in query order

        Raises:
            QueryError: If the query fails
        """
        with self.connection.open() as conn:
            try:
                rows = conn.execute(HIGHLIGHT_SQL).fetchall()
            except sqlite3.Error as e:
                raise QueryError(f"Highlight query failed: {e}") from e

        grouped: dict[str, list[sqlite3.Row]] = {}
        for row in rows:
            grouped.setdefault(_text(row["asset_id"]), []).append(row)

        books = [self._build_book(asset_id, group) for asset_id, group in grouped.items()]
        logger.debug(f"Fetched {len(rows)} highlights across {len(books)} books")
        return Library(books=books)

    def _build_book(self, asset_id: str, rows: list[sqlite3.Row]) -> Book:
        first = rows[0]
        return Book(
            identifier=asset_id,
            title=_text(first["title"]),
            author=_text(first["author"]),
            annotations=[self._build_annotation(row) for row in rows],
        )

    @staticmethod
    def _build_annotation(row: sqlite3.Row) -> Annotation:
        modified = row["modified"]
        return Annotation(
            text=_text(row["text"]),
            note=_text(row["note"]),
            chapter=_text(row["chapter"]),
            modified=apple_epoch_to_datetime(modified or 0.0),
        )
