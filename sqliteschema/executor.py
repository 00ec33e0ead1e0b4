"""Running queries against an SQLite database."""

from __future__ import annotations

import sqlite3
from typing import Any, Iterable

from .errors import DatabaseError

Row = tuple[Any, ...]


class Executor:
    """Runs queries on one SQLite connection and returns plain tuples."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def _execute(self, sql: str, params: Iterable[Any]) -> sqlite3.Cursor:
        try:
            return self.connection.execute(sql, tuple(params))
        except sqlite3.Error as error:
            raise DatabaseError(error) from error

    def fetch_all(self, sql: str, params: Iterable[Any] = ()) -> list[Row]:
        """Every row the query returns."""
        cursor = self._execute(sql, params)
        try:
            return [tuple(row) for row in cursor.fetchall()]
        except sqlite3.Error as error:
            raise DatabaseError(error) from error

    def fetch_one(self, sql: str, params: Iterable[Any] = ()) -> Row:
        """The first row the query returns; a query with no rows is an error."""
        cursor = self._execute(sql, params)
        try:
            row = cursor.fetchone()
        except sqlite3.Error as error:
            raise DatabaseError(error) from error
        if row is None:
            raise DatabaseError(LookupError("query returned no rows"))
        return tuple(row)

    def fetch_all_raw(self, sql: str) -> list[Row]:
        """Every row of a statement that takes no parameters, such as a PRAGMA."""
        return self.fetch_all(sql, ())


def connect(path: str) -> Executor:
    """Open the database at `path` and return an Executor for it."""
    try:
        return Executor(sqlite3.connect(path))
    except sqlite3.Error as error:
        raise DatabaseError(error) from error