"""Environment configuration for books-export.

All environment variable access goes through this module. A `.env` file in
the working directory is loaded on import.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from common.constants import (
    DEFAULT_ANNOTATIONS_DIR,
    DEFAULT_EXPORT_DIR,
    DEFAULT_LIBRARY_DIR,
)

load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def annotations_dir() -> Path:
        """Directory holding the Apple Books annotation database.

        Returns:
            Path from BOOKS_ANNOTATIONS_DIR, defaults to the AEAnnotation container
        """
        value = os.getenv("BOOKS_ANNOTATIONS_DIR")
        return Path(value).expanduser() if value else DEFAULT_ANNOTATIONS_DIR

    @staticmethod
    def library_dir() -> Path:
        """Directory holding the Apple Books library database.

        Returns:
            Path from BOOKS_LIBRARY_DIR, defaults to the BKLibrary container
        """
        value = os.getenv("BOOKS_LIBRARY_DIR")
        return Path(value).expanduser() if value else DEFAULT_LIBRARY_DIR

    @staticmethod
    def export_dir() -> Path:
        """Directory the Markdown files are written to.

        Returns:
            Path from BOOKS_EXPORT_DIR, defaults to ./highlights
        """
        return Path(os.getenv("BOOKS_EXPORT_DIR", str(DEFAULT_EXPORT_DIR))).expanduser()


env = Environment()
