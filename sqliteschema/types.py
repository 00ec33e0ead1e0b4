"""SQLite column types and column default values."""

from __future__ import annotations

import enum
import math
import re
import struct
from dataclasses import dataclass
from typing import Any

from .errors import ParseIntegerError

_VARIABLE_LENGTH = 255


class TypeKind(enum.Enum):
    """The SQLite type names that are recognised."""

    INT = "INT"
    INTEGER = "INTEGER"
    TINY_INT = "TINYINT"
    SMALL_INT = "SMALLINT"
    MEDIUM_INT = "MEDIUMINT"
    BIG_INT = "BIGINT"
    UNSIGNED_BIG_INT = "UNSIGNEDBIGINT"
    INT2 = "INT2"
    INT8 = "INT8"
    CHARACTER = "CHARACTER"
    VARCHAR = "VARCHAR"
    VARYING_CHARACTER = "VARYING CHARACTER"
    NCHAR = "NCHAR"
    NATIVE_CHARACTER = "NATIVE CHARACTER"
    NVARCHAR = "NVARCHAR"
    TEXT = "TEXT"
    CLOB = "CLOB"
    BLOB = "BLOB"
    REAL = "REAL"
    DOUBLE = "DOUBLE"
    DOUBLE_PRECISION = "DOUBLE PRECISION"
    FLOAT = "FLOAT"
    NUMERIC = "NUMERIC"
    DECIMAL = "DECIMAL"
    BOOLEAN = "BOOLEAN"
    DATE = "DATE"
    DATETIME = "DATETIME"
    TIMESTAMP = "TIMESTAMP"


_FIXED_NAMES: dict[str, TypeKind] = {
    "INT": TypeKind.INT,
    "INTEGER": TypeKind.INTEGER,
    "TINY INT": TypeKind.TINY_INT,
    "TINYINT": TypeKind.TINY_INT,
    "SMALL INT": TypeKind.SMALL_INT,
    "SMALLINT": TypeKind.SMALL_INT,
    "MEDIUM INT": TypeKind.MEDIUM_INT,
    "MEDIUMINT": TypeKind.MEDIUM_INT,
    "BIG INT": TypeKind.BIG_INT,
    "BIGINT": TypeKind.BIG_INT,
    "UNSIGNED INT": TypeKind.UNSIGNED_BIG_INT,
    "UNSIGNEDBIGINT": TypeKind.UNSIGNED_BIG_INT,
    "INT2": TypeKind.INT2,
    "INT8": TypeKind.INT8,
    "TEXT": TypeKind.TEXT,
    "CLOB": TypeKind.CLOB,
    "BLOB": TypeKind.BLOB,
    "REAL": TypeKind.REAL,
    "DOUBLE": TypeKind.DOUBLE,
    "DOUBLE PRECISION": TypeKind.DOUBLE_PRECISION,
    "FLOAT": TypeKind.FLOAT,
    "NUMERIC": TypeKind.NUMERIC,
    "BOOLEAN": TypeKind.BOOLEAN,
    "DATE": TypeKind.DATE,
    "DATETIME": TypeKind.DATETIME,
    "TIMESTAMP": TypeKind.TIMESTAMP,
}

_VARIABLE_NAMES: dict[str, TypeKind] = {
    "VARCHAR": TypeKind.VARCHAR,
    "CHARACTER": TypeKind.CHARACTER,
    "VARYING CHARACTER": TypeKind.VARYING_CHARACTER,
    "NCHAR": TypeKind.NCHAR,
    "NATIVE CHARACTER": TypeKind.NATIVE_CHARACTER,
    "NVARCHAR": TypeKind.NVARCHAR,
}

_COLUMN_SQL: dict[TypeKind, str] = {
    TypeKind.INT: "integer",
    TypeKind.INTEGER: "integer",
    TypeKind.MEDIUM_INT: "integer",
    TypeKind.INT2: "integer",
    TypeKind.INT8: "integer",
    TypeKind.TINY_INT: "tinyint",
    TypeKind.SMALL_INT: "smallint",
    TypeKind.BIG_INT: "bigint",
    TypeKind.UNSIGNED_BIG_INT: "bigint",
    TypeKind.CHARACTER: "text",
    TypeKind.VARCHAR: "text",
    TypeKind.VARYING_CHARACTER: "text",
    TypeKind.NCHAR: "text",
    TypeKind.NATIVE_CHARACTER: "text",
    TypeKind.NVARCHAR: "text",
    TypeKind.TEXT: "text",
    TypeKind.CLOB: "text",
    TypeKind.BLOB: "blob",
    TypeKind.REAL: "double",
    TypeKind.DOUBLE: "double",
    TypeKind.DOUBLE_PRECISION: "double",
    TypeKind.FLOAT: "double",
    TypeKind.NUMERIC: "double",
    TypeKind.BOOLEAN: "boolean",
    TypeKind.DATE: "date",
    TypeKind.DATETIME: "datetime",
    TypeKind.TIMESTAMP: "timestamp",
}


@dataclass(frozen=True)
class SqliteType:
    """A column type; `length` is set for character types, the digits for DECIMAL."""

    kind: TypeKind
    length: int | None = None
    integral: int | None = None
    fractional: int | None = None

    def column_sql(self) -> str:
        """The type as written in a CREATE TABLE column definition."""
        if self.kind is TypeKind.DECIMAL:
            return f"decimal({self.integral}, {self.fractional})"
        return _COLUMN_SQL[self.kind]


def _single_digit(text: str, position: int) -> int:
    try:
        char = text[position]
    except IndexError:
        raise ParseIntegerError() from None
    if char not in "0123456789":
        raise ParseIntegerError()
    return int(char)


def parse_type(data_type: str) -> SqliteType:
    """Read a declared column type as reported by ``PRAGMA table_info``."""
    parts = data_type.upper().split("(")
    name = parts[0]

    if name == "DECIMAL":
        if len(parts) < 2:
            raise ParseIntegerError()
        digits = parts[1]
        return SqliteType(
            TypeKind.DECIMAL,
            integral=_single_digit(digits, 0),
            fractional=_single_digit(digits, 2),
        )

    fixed = _FIXED_NAMES.get(name)
    if fixed is not None:
        return SqliteType(fixed)

    # Declared lengths are never read: character types always get 255.
    variable = _VARIABLE_NAMES.get(name)
    if variable is not None:
        return SqliteType(variable, length=_VARIABLE_LENGTH)
    return SqliteType(TypeKind.BLOB)


class DefaultKind(enum.Enum):
    """The kinds of column default value."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    NULL = "null"
    UNSPECIFIED = "unspecified"


@dataclass(frozen=True)
class DefaultValue:
    """A column default; `value` is set for integers, floats and strings."""

    kind: DefaultKind
    value: Any = None


_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _to_single_precision(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_default(raw: str | None) -> DefaultValue:
    """Read a ``dflt_value`` as reported by ``PRAGMA table_info``."""
    if raw == "NULL":
        return DefaultValue(DefaultKind.NULL)
    if not raw:
        return DefaultValue(DefaultKind.UNSPECIFIED)

    value = raw.replace("'", "")
    if _INT_PATTERN.fullmatch(value):
        number = int(value)
        if _I32_MIN <= number <= _I32_MAX:
            return DefaultValue(DefaultKind.INTEGER, number)
    if _FLOAT_PATTERN.fullmatch(value):
        return DefaultValue(DefaultKind.FLOAT, _to_single_precision(float(value)))
    return DefaultValue(DefaultKind.STRING, value)