"""Data models for extracted highlights."""

from dataclasses import dataclass
from datetime import datetime

from common.constants import DEFAULT_STATUS


@dataclass(frozen=True)
class Annotation:
    """A single highlighted passage."""

    text: str
    note: str
    chapter: str
    modified: datetime

    @property
    def noted(self) -> bool:
        """Check if the reader attached a note."""
        return self.note != ""


@dataclass(frozen=True)
class Book:
    """A book with its highlights, in position-in-book order."""

    identifier: str
    title: str
    author: str
    annotations: tuple[Annotation, ...] = ()

    def __post_init__(self):
        # Own a private copy so the caller's list can't change us later
        object.__setattr__(self, "annotations", tuple(self.annotations))

    @property
    def count(self) -> int:
        return len(self.annotations)


@dataclass(frozen=True)
class Library:
    """Every book returned by the highlight query."""

    books: tuple[Book, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "books", tuple(self.books))

    @property
    def count(self) -> int:
        return len(self.books)


@dataclass(frozen=True)
class PreservedMetadata:
    """Front matter fields the reader owns and re-exports must keep."""

    themes: tuple[str, ...] = ()
    status: str = DEFAULT_STATUS

    def __post_init__(self):
        object.__setattr__(self, "themes", tuple(self.themes))
