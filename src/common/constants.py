"""Shared constants for books-export.

Environment-dependent settings live in common.env:
    from common.env import env
    output = env.export_dir()
"""

from pathlib import Path

# Apple Books sandbox containers
BOOKS_CONTAINER = Path.home() / "Library" / "Containers" / "com.apple.iBooksX" / "Data" / "Documents"
DEFAULT_ANNOTATIONS_DIR = BOOKS_CONTAINER / "AEAnnotation"
DEFAULT_LIBRARY_DIR = BOOKS_CONTAINER / "BKLibrary"
DEFAULT_EXPORT_DIR = Path("./highlights")

# Core Data timestamps count seconds from 2001-01-01T00:00:00Z
APPLE_EPOCH_OFFSET = 978_307_200

# Front matter
FRONTMATTER_MARKER = "---"
DOCUMENT_KIND = "book"
DEFAULT_STATUS = "raw"

# Output file naming
MARKDOWN_EXTENSION = ".md"
UNSAFE_FILENAME_CHARS = '/\\:*?"<>|'
