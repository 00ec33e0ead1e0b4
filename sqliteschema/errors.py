"""Errors raised while discovering the schema of an SQLite database."""

from __future__ import annotations


class SqliteDiscoveryError(Exception):
    """Base class of every error raised during schema discovery."""

    default_message = "Schema Discovery Error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class ParseIntegerError(SqliteDiscoveryError, ValueError):
    """A value read from the database could not be read as an integer."""

    default_message = "Parse Integer Error"


class ParseFloatError(SqliteDiscoveryError, ValueError):
    """A value read from the database could not be read as a float."""

    default_message = "Parse Float Error Error"


class DatabaseError(SqliteDiscoveryError):
    """The database driver reported an error."""

    def __init__(self, error: BaseException) -> None:
        self.error = error
        super().__init__(f"Database Error: {error!r}")


class NoIndexesFound(SqliteDiscoveryError):
    """Index discovery was asked for on a table that has no indexes."""

    default_message = "No Indexes Found Error"