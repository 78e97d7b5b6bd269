"""Locate the Apple Books SQLite files."""

from pathlib import Path

from common.logger import get_logger

from .types import DatabaseNotFoundError

logger = get_logger(__name__)


def find_database(directory: Path) -> Path:
    """
    Find the first *.sqlite file inside a directory.

    Args:
        directory: Directory to search (not recursive)

    Returns:
        Path to the first matching file, in name order

    Raises:
        DatabaseNotFoundError: If the directory holds no .sqlite file
    """
    directory = Path(directory)
    candidates = sorted(directory.glob("*.sqlite"))

    if not candidates:
        raise DatabaseNotFoundError(f"No .sqlite file found in {directory}")

    logger.debug(f"Using database {candidates[0]}")
    return candidates[0]
