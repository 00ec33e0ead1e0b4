"""Discovery of the tables and indexes of an SQLite database."""

from __future__ import annotations

import sqlite3

from .column import IndexInfo
from .executor import Executor
from .table import Schema, TableDef

_TABLE_NAMES_SQL = "SELECT name FROM sqlite_master WHERE type = ? AND name <> ?"


class SchemaDiscovery:
    """Reads the schema of the database behind a connection."""

    def __init__(self, connection: sqlite3.Connection | Executor) -> None:
        if isinstance(connection, Executor):
            self.executor = connection
        else:
            self.executor = Executor(connection)

    def _table_names(self) -> list[str]:
        rows = self.executor.fetch_all(_TABLE_NAMES_SQL, ("table", "sqlite_sequence"))
        return [row[0] for row in rows]

    def discover(self) -> Schema:
        """Every table with its columns, foreign keys and autoincrement flag."""
        tables = []
        for name in self._table_names():
            table = TableDef(name=name)
            table.pk_is_autoincrement(self.executor)
            table.get_foreign_keys(self.executor)
            table.get_column_info(self.executor)
            tables.append(table)
        return Schema(tables=tables)

    def discover_indexes(self) -> list[IndexInfo]:
        """Every index of every table, primary key indexes left out."""
        return [
            index
            for name in self._table_names()
            for index in TableDef(name=name).get_indexes(self.executor)
        ]