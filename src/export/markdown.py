"""Render a book as a Markdown file with YAML front matter."""

import re

import yaml

from common.constants import DOCUMENT_KIND, FRONTMATTER_MARKER
from extract.models import Annotation, Book, PreservedMetadata

LEADING_INDENT = re.compile(r"^[ \t]+", re.MULTILINE)
SPACE_RUN = re.compile(r" {2,}")


def is_renderable(annotation: Annotation) -> bool:
    """Check if an annotation has any visible text."""
    return bool(annotation.text.strip())


def render_header(book: Book, preserved: PreservedMetadata) -> str:
    """Render the front matter block, markers included."""
    fields = {
        "kind": DOCUMENT_KIND,
        "status": preserved.status,
        "themes": list(preserved.themes),
        "title": book.title,
        "author": book.author,
        "asset_id": book.identifier,
        "annotations": sum(1 for a in book.annotations if is_renderable(a)),
    }
    body = yaml.safe_dump(
        fields,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=float("inf"),
    )
    return f"{FRONTMATTER_MARKER}\n{body}{FRONTMATTER_MARKER}\n"


def quote(text: str) -> str:
    """
    Format highlighted text as a blockquote.

    Indentation at the start of each line is dropped, runs of spaces become
    one space, and every line gets the ``> `` marker.
    """
    cleaned = SPACE_RUN.sub(" ", LEADING_INDENT.sub("", text))
    return "> " + cleaned.replace("\n", "\n> ")


def render_body(annotations: tuple[Annotation, ...]) -> str:
    """
    Render highlights in order, grouped under chapter headings.

    A heading is written when an annotation's chapter is set and differs
    from the last chapter written. Annotations without a chapter leave that
    state alone, so a chapter interrupted by unlabelled highlights is not
    repeated.
    """
    lines: list[str] = []
    last_chapter = None

    for annotation in annotations:
        if not is_renderable(annotation):
            continue

        if annotation.chapter and annotation.chapter != last_chapter:
            lines.extend([f"### {annotation.chapter}", ""])

        lines.extend([quote(annotation.text), ""])

        if annotation.noted:
            lines.extend([f"*Note: {annotation.note}*", ""])

        if annotation.chapter:
            last_chapter = annotation.chapter

    return "\n" + "\n".join(lines)


def render_book(book: Book, preserved: PreservedMetadata) -> str:
    """
    Render the complete Markdown document for one book.

    Args:
        book: Book to render
        preserved: Themes and status carried over from the previous export

    Returns:
        Front matter followed by the highlight body
    """
    return render_header(book, preserved) + render_body(book.annotations)
