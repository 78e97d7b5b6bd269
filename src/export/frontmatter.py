"""Read the reader-owned fields back out of an exported file.

Exported files start with a YAML front matter block. The reader may edit
``themes`` and ``status`` by hand; every re-export carries those two fields
over and recomputes the rest. Anything unexpected in the block falls back
to the defaults rather than failing the export.
"""

from pathlib import Path

import yaml

from common.constants import DEFAULT_STATUS, FRONTMATTER_MARKER
from common.logger import get_logger
from extract.models import PreservedMetadata

logger = get_logger(__name__)

DEFAULTS = PreservedMetadata()


def extract_block(content: str) -> str | None:
    """
    Return the text between the opening and closing ``---`` lines.

    Leading blank lines are skipped; the first non-empty line must be the
    opening marker.

    Args:
        content: Full file content

    Returns:
        The interior of the block, or None if there is no complete block
    """
    lines = content.split("\n")
    start = 0
    while start < len(lines) and not lines[start].strip():
        start += 1

    if start == len(lines) or lines[start].rstrip(" \t\r") != FRONTMATTER_MARKER:
        return None

    for end in range(start + 1, len(lines)):
        if lines[end].rstrip(" \t\r") == FRONTMATTER_MARKER:
            return "\n".join(lines[start + 1 : end])

    return None


def _coerce_themes(value) -> tuple:
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)


def parse_preserved(content: str) -> PreservedMetadata:
    """
    Parse the preserved fields from file content.

    Args:
        content: Full file content

    Returns:
        Themes and status from the front matter, or the defaults when the
        block is missing, malformed, or not a mapping
    """
    block = extract_block(content)
    if not block or not block.strip():
        return DEFAULTS

    try:
        data = yaml.safe_load(block)
    except (yaml.YAMLError, ValueError) as e:
        logger.debug(f"Ignoring malformed front matter: {e}")
        return DEFAULTS

    if not isinstance(data, dict):
        return DEFAULTS

    status = data.get("status")
    return PreservedMetadata(
        themes=_coerce_themes(data.get("themes")),
        status=DEFAULT_STATUS if status is None else status,
    )


def read_preserved(path: Path) -> PreservedMetadata:
    """
    Read the preserved fields from an existing export, if there is one.

    Args:
        path: Output file path

    Returns:
        Preserved metadata, defaults when the file is absent or unreadable
    """
    path = Path(path)
    if not path.is_file():
        return DEFAULTS

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {path}, using default front matter: {e}")
        return DEFAULTS

    return parse_preserved(content)
