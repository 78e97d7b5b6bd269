"""SQLite connection with a second database attached.

The annotation rows and the book titles live in separate files; attaching
the library file as schema ``books`` lets a single query join them.
"""

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from .types import SourceConnectionError

ATTACHED_SCHEMA = "books"


class AttachedConnection:
    """Opens a primary SQLite database and attaches a secondary one."""

    def __init__(self, primary: str | Path, attached: str | Path):
        """Initialize the connection wrapper.

        Args:
            primary: Path to the annotation database
            attached: Path to the library database, attached as ``books``
        """
        self.primary = Path(primary)
        self.attached = Path(attached)

    @contextmanager
    def open(self) -> Iterator[sqlite3.Connection]:
        """Yield an open connection; it is closed when the block exits.

        Raises:
            SourceConnectionError: If either database can't be opened
        """
        try:
            conn = sqlite3.connect(str(self.primary))
        except sqlite3.Error as e:
            raise SourceConnectionError(f"Failed to open {self.primary}: {e}") from e

        try:
            conn.row_factory = sqlite3.Row
            try:
                conn.execute(f"ATTACH DATABASE ? AS {ATTACHED_SCHEMA}", (str(self.attached),))
            except sqlite3.Error as e:
                raise SourceConnectionError(f"Failed to attach {self.attached}: {e}") from e
            yield conn
        finally:
            conn.close()
