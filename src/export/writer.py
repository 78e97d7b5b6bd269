"""Write one Markdown file per book into a target directory.

Books whose titles sanitize to the same filename are merged into a single
file. Re-exporting over an existing directory keeps each file's ``themes``
and ``status`` front matter and rewrites everything else.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path

from common.constants import MARKDOWN_EXTENSION, UNSAFE_FILENAME_CHARS
from common.logger import get_logger
from extract.models import Book, Library

from .frontmatter import read_preserved
from .markdown import is_renderable, render_book

logger = get_logger(__name__)

UNSAFE_PATTERN = re.compile(f"[{re.escape(UNSAFE_FILENAME_CHARS)}]")


@dataclass
class ExportSummary:
    """Outcome of an export run."""

    written: list[Path] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def slug_stem(title: str) -> str:
    """
    Sanitize a title into a filename stem.

    Drops ``/ \\ : * ? " < > |``, trims whitespace, then removes one leading
    and one trailing dot. Titles that differ only in those characters share
    a stem, which is how duplicate books get merged.

    Examples:
        'Hello: World' -> 'Hello World'
        '"Dance First"' -> 'Dance First'
    """
    stem = UNSAFE_PATTERN.sub("", title).strip()
    return stem.removeprefix(".").removesuffix(".")


def slugify(title: str) -> str:
    """Filename for a book title, extension included."""
    return slug_stem(title) + MARKDOWN_EXTENSION


def merge_books(books: list[Book]) -> Book:
    """
    Combine books that share a filename into one.

    The first book supplies identifier, title and author. Annotations are
    concatenated in group order, each book's own order kept.
    """
    if len(books) == 1:
        return books[0]

    return Book(
        identifier=books[0].identifier,
        title=books[0].title,
        author=books[0].author,
        annotations=[a for book in books for a in book.annotations],
    )


class MarkdownExport:
    """Exports a Library as Markdown files."""

    def __init__(self, library: Library, directory: str | Path):
        """Initialize the export.

        Args:
            library: Books to export
            directory: Target directory, created if missing
        """
        self.library = library
        self.directory = Path(directory)

    def group(self) -> dict[str, list[Book]]:
        """Group exportable books by output filename, in encounter order."""
        groups: dict[str, list[Book]] = {}

        for book in self.library.books:
            if not book.title.strip():
                logger.debug(f"Skipping book {book.identifier!r} with blank title")
                continue

            groups.setdefault(slugify(book.title), []).append(book)

        return groups

    def save(self) -> ExportSummary:
        """Write every exportable book.

        Returns:
            Paths written and titles skipped for having no visible highlights

        Raises:
            OSError: If the directory or a file can't be written
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        summary = ExportSummary()

        for filename, books in self.group().items():
            book = merge_books(books)
            if len(books) > 1:
                logger.debug(f"Merged {len(books)} books into {filename}")

            path = self.write(book, filename)
            if path is None:
                summary.skipped.append(book.title)
            else:
                summary.written.append(path)

        logger.info(f"Exported {len(summary.written)} books to {self.directory}")
        return summary

    def write(self, book: Book, filename: str) -> Path | None:
        """Render and write a single book.

        Books with no visible highlights are skipped and any existing file
        at their path is left alone.

        Returns:
            Path written, or None if skipped
        """
        if not any(is_renderable(a) for a in book.annotations):
            logger.debug(f"Skipping {filename}: no highlights with text")
            return None

        path = self.directory / filename
        content = render_book(book, read_preserved(path))

        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)

        return path
