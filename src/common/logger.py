"""Logging helpers for the books-export CLI.

Standard library loggers routed through rich's console handler.

Usage:
    from common.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Exporting 12 books...")
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

# Shared console so log records and status lines interleave correctly
console = Console()
error_console = Console(stderr=True)


def _rich_handler(show_time: bool = False, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_time=show_time,
        show_path=show_path,
        rich_tracebacks=True,
        markup=True,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def get_logger(
    name: str,
    level: str | None = None,
    show_time: bool = False,
    show_path: bool = False,
) -> logging.Logger:
    """Get a logger that writes through the shared rich console.

    Args:
        name: Logger name (typically __name__ of the module)
        level: Logging level name. Falls back to LOG_LEVEL, then INFO.
        show_time: Show timestamp in log output
        show_path: Show source path in log output

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Already configured by an earlier call
    if logger.handlers:
        return logger

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")

    logger.setLevel(level.upper())
    logger.addHandler(_rich_handler(show_time=show_time, show_path=show_path))

    # pytest's caplog listens on the root logger
    logger.propagate = True

    return logger


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure the root logger once, at the CLI entry point.

    Loggers from get_logger already print to the console and propagate
    here, so the root logger only gets the optional file handler.

    Args:
        level: Default logging level, overridden by LOG_LEVEL
        log_file: Optional file path that also receives every record
    """
    level = os.getenv("LOG_LEVEL", level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(file_handler)


def success(message: str) -> None:
    """Print a success line with a green checkmark."""
    console.print(f"[green]✓[/green] {message}")


def error(message: str) -> None:
    """Print an error line with a red cross to stderr."""
    error_console.print(f"[red]✗[/red] {message}")
