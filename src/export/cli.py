#!/usr/bin/env python3
"""CLI for exporting Apple Books highlights."""

import argparse
from pathlib import Path

from common.env import env
from common.logger import error, get_logger, setup_logging, success
from extract.connection import AttachedConnection
from extract.database_path import find_database
from extract.query import HighlightQuery
from extract.types import ExtractError

from .writer import MarkdownExport

logger = get_logger(__name__)


def cmd_export(args):
    """Export highlights from the Apple Books databases to Markdown.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        annotations_db = find_database(args.annotations_dir)
        library_db = find_database(args.library_dir)

        connection = AttachedConnection(annotations_db, library_db)
        library = HighlightQuery(connection).fetch()
        logger.info(f"Found {library.count} books with highlights")

        summary = MarkdownExport(library, args.output_dir).save()
    except ExtractError as e:
        error(str(e))
        return 1
    except OSError as e:
        error(f"Could not write to {args.output_dir}: {e}")
        return 1

    success(f"Wrote {len(summary.written)} files to {args.output_dir}")
    return 0


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Export Apple Books highlights as Markdown files"
    )
    parser.add_argument(
        "--annotations-dir",
        type=Path,
        default=env.annotations_dir(),
        help="Directory containing the annotation .sqlite file",
    )
    parser.add_argument(
        "--library-dir",
        type=Path,
        default=env.library_dir(),
        help="Directory containing the library .sqlite file",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=env.export_dir(),
        help="Directory to write Markdown files to (default: ./highlights)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file",
    )
    parser.set_defaults(func=cmd_export)

    args = parser.parse_args(argv)
    setup_logging(log_file=args.log_file)
    return args.func(args)


if __name__ == "__main__":
    exit(main())
