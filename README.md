# sqliteschema

Reads the schema of an SQLite database and gives back plain Python objects for
its tables, columns, foreign keys and indexes. It can also render those objects
back out as `CREATE TABLE` and `CREATE INDEX` statements.

Only the types named in SQLite's own datatype documentation are recognised.
Any other type name is read as a `BLOB`.

## Installing

```
pip install sqliteschema
```

The package has no runtime dependencies outside the standard library.

## Discovering a schema

```python
from sqliteschema.executor import connect
from sqliteschema.discovery import SchemaDiscovery

discovery = SchemaDiscovery(connect("shop.db"))

schema = discovery.discover()
for table in schema.tables:
    print(table.name, "autoincrement" if table.auto_increment else "")
    for column in table.columns:
        print("   ", column.name, column.type, column.default_value)
    print(table.write())
```

`SchemaDiscovery` takes either an `sqlite3.Connection` or an `Executor`;
`connect(path)` opens a database file and returns an `Executor` for it.

`discover()` returns a `Schema`. Its `tables` field holds one `TableDef` for
each table, with the internal `sqlite_sequence` table left out. Each
`TableDef` has these fields:

- `columns`, a list of `ColumnInfo`, read from `PRAGMA table_info`;
- `foreign_keys`, a list of `ForeignKeysInfo`, read from `PRAGMA foreign_key_list`;
- `auto_increment`, which is true when the table's SQL contains `AUTOINCREMENT`.

`TableDef.write()` renders a table as a `CREATE TABLE` statement. A primary
key column of an autoincrementing table is written as
`PRIMARY KEY AUTOINCREMENT`; other primary key columns are gathered into a
table-level `PRIMARY KEY (...)` clause.

## Indexes

```python
for index in discovery.discover_indexes():
    print(index.index_name, index.table_name, index.columns, index.unique)
    print(index.write())
```

Indexes that SQLite creates for primary keys are left out. The indexed column
names are read from each index's SQL in `sqlite_master`. `IndexInfo.write()`
renders an index as a `CREATE [UNIQUE] INDEX` statement.

## Parsing on its own

The parsers in `sqliteschema.types` and `sqliteschema.column` can be used
without a database:

```python
from sqliteschema.types import parse_type, parse_default

parse_type("varchar(40)")   # SqliteType(kind=TypeKind.VARCHAR, length=255, ...)
parse_type("DECIMAL(5,2)")  # SqliteType(kind=TypeKind.DECIMAL, integral=5, fractional=2)
parse_type("JSON")          # SqliteType(kind=TypeKind.BLOB, ...)
parse_default("'4.99'")     # DefaultValue(kind=DefaultKind.FLOAT, value=4.99...)
parse_default("NULL")       # DefaultValue(kind=DefaultKind.NULL)
```

Type names are matched case-insensitively. Character types always get a
length of 255; a declared length is not read. For `DECIMAL`, the integral and
fractional digits are each read as a single digit.

Defaults have their single quotes removed, then are read as a 32-bit integer,
else as a single-precision float, else kept as a string. An empty default is
`DefaultKind.UNSPECIFIED`.

`parse_foreign_key_action` and `parse_match_action` map pragma text to
`ForeignKeyAction` and `MatchAction`; unknown text becomes `NO_ACTION` and
`NONE`.

## Probe queries

`sqliteschema.probe` builds ready-made SQL strings:

- `query_tables()` lists the user tables as a `table_name` column.
- `has_column(table, column)` returns one `has_column` row that is true when
  the table has the named column. The names are embedded as quoted literals.

## Errors

The errors live in `sqliteschema.errors` and derive from `SqliteDiscoveryError`:

- `ParseIntegerError` (also a `ValueError`) is raised by `parse_type` when a
  `DECIMAL` type's digits cannot be read;
- `DatabaseError` is raised by `Executor` and `connect` when SQLite reports an
  error, and by `Executor.fetch_one` when a query returns no rows; the
  underlying error is kept in its `error` attribute.

`ParseFloatError` and `NoIndexesFound` are defined for callers to use but are
not raised by the package itself. `indexed_columns_from_row` raises a plain
`ValueError` when an index has no SQL or its columns cannot be read.

## What it does not do

There is no command-line program. The package only reads a schema and renders
statements as text; it never runs the rendered statements or changes a
database.

## Running the tests

```
pip install -e ".[test]"
pytest
```