"""Queries that probe an SQLite database for tables and columns."""

from __future__ import annotations


def _literal(text: str) -> str:
    return "'" + text.replace("'", "''") + "'"


def query_tables() -> str:
    """A query returning one ``table_name`` row per user table."""
    return (
        'SELECT "name" AS "table_name" FROM "sqlite_master" '
        "WHERE \"type\" = 'table' AND \"name\" <> 'sqlite_sequence'"
    )


def has_column(table: str, column: str) -> str:
    """A query returning one ``has_column`` row, true if the table has the column."""
    return (
        f'SELECT COUNT(*) > 0 AS "has_column" FROM pragma_table_info({_literal(table)}) '
        f'WHERE "name" = {_literal(column)}'
    )