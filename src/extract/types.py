"""Exceptions raised while reading the Apple Books databases."""


class ExtractError(Exception):
    """Base exception for source-side failures."""

    pass


class DatabaseNotFoundError(ExtractError):
    """No SQLite database in the searched directory."""

    pass


class SourceConnectionError(ExtractError):
    """Error opening or attaching a source database."""

    pass


class QueryError(ExtractError):
    """Error running the highlight query."""

    pass
