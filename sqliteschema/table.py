"""Table definitions discovered from an SQLite database."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field

from .column import (
    ColumnInfo,
    ForeignKeysInfo,
    IndexedColumns,
    IndexInfo,
    column_from_row,
    foreign_key_from_row,
    indexed_columns_from_row,
    partial_index_from_row,
)
from .executor import Executor
from .types import DefaultKind, DefaultValue


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


def _literal(text: str) -> str:
    return "'" + text.replace("'", "''") + "'"


def _pragma(name: str, table: str) -> str:
    return f"PRAGMA {name}({_literal(table)})"


def _single(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _format_float(value: float) -> str:
    if not math.isfinite(value):
        return repr(value)
    for precision in range(1, 10):
        text = f"{value:.{precision}g}"
        if _single(float(text)) == value:
            return text
    return repr(value)


def _default_sql(default: DefaultValue) -> str | None:
    if default.kind is DefaultKind.INTEGER:
        return str(default.value)
    if default.kind is DefaultKind.FLOAT:
        return _format_float(default.value)
    if default.kind is DefaultKind.STRING:
        return _literal(default.value)
    return None


@dataclass
class TableDef:
    """A table with its columns, foreign keys and autoincrement flag."""

    name: str = ""
    foreign_keys: list[ForeignKeysInfo] = field(default_factory=list)
    columns: list[ColumnInfo] = field(default_factory=list)
    auto_increment: bool = False

    def pk_is_autoincrement(self, executor: Executor) -> TableDef:
        """Mark the table as autoincrementing if its SQL says AUTOINCREMENT."""
        rows = executor.fetch_all(
            "SELECT 1 FROM sqlite_master WHERE type = ? AND name = ? AND sql LIKE ?",
            ("table", self.name, "%AUTOINCREMENT%"),
        )
        if rows:
            self.auto_increment = True
        return self

    def get_indexes(self, executor: Executor) -> list[IndexInfo]:
        """Every index of the table except the one behind its primary key."""
        partial_indexes = [
            info
            for info in map(partial_index_from_row, executor.fetch_all_raw(_pragma("index_list", self.name)))
            if info.origin != "pk"
        ]
        indexes = []
        for partial in partial_indexes:
            indexed = self._get_single_indexinfo(executor, partial.name)
            indexes.append(
                IndexInfo(
                    type=indexed.type,
                    index_name=indexed.name,
                    table_name=indexed.table,
                    unique=partial.unique,
                    origin=partial.origin,
                    partial=partial.partial,
                    columns=indexed.indexed_columns,
                )
            )
        return indexes

    def get_foreign_keys(self, executor: Executor) -> TableDef:
        """Append the table's foreign keys."""
        rows = executor.fetch_all_raw(_pragma("foreign_key_list", self.name))
        self.foreign_keys.extend(foreign_key_from_row(row) for row in rows)
        return self

    def get_column_info(self, executor: Executor) -> TableDef:
        """Append the table's columns."""
        rows = executor.fetch_all_raw(_pragma("table_info", self.name))
        self.columns.extend(column_from_row(row) for row in rows)
        return self

    def _get_single_indexinfo(self, executor: Executor, index_name: str) -> IndexedColumns:
        row = executor.fetch_one("SELECT * FROM sqlite_master WHERE name = ?", (index_name,))
        return indexed_columns_from_row(row)

    def write(self) -> str:
        """The CREATE TABLE statement that recreates this table."""
        definitions = []
        primary_keys = []
        for column in self.columns:
            parts = [_quote(column.name), column.type.column_sql()]
            if column.not_null:
                parts.append("NOT NULL")
            if self.auto_increment and column.primary_key:
                parts.append("PRIMARY KEY AUTOINCREMENT")
            elif column.primary_key:
                primary_keys.append(column.name)
            default = _default_sql(column.default_value)
            if default is not None:
                parts.append(f"DEFAULT {default}")
            definitions.append(" ".join(parts))

        if primary_keys:
            keys = ", ".join(_quote(key) for key in primary_keys)
            definitions.append(f"PRIMARY KEY ({keys})")

        for key in self.foreign_keys:
            definitions.append(
                f"FOREIGN KEY ({_quote(key.from_column)}) "
                f"REFERENCES {_quote(key.table)} ({_quote(key.to_column)}) "
                f"ON DELETE {key.on_delete.value} ON UPDATE {key.on_update.value}"
            )

        return f"CREATE TABLE {_quote(self.name)} ( {', '.join(definitions)} )"


@dataclass
class Schema:
    """Every table discovered in a database."""

    tables: list[TableDef] = field(default_factory=list)