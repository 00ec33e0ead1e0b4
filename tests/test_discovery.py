import sqlite3

import pytest

from sqliteschema.discovery import SchemaDiscovery
from sqliteschema.executor import Executor

SCRIPT = """
CREATE TABLE artist (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT NOT NULL);
CREATE TABLE album (
    id INTEGER PRIMARY KEY,
    artist_id INTEGER REFERENCES artist (id) ON DELETE CASCADE,
    title TEXT DEFAULT 'untitled'
);
CREATE INDEX idx_album_title ON album (title);
CREATE UNIQUE INDEX idx_artist_name ON artist (name);
INSERT INTO artist (name) VALUES ('someone');
"""


@pytest.fixture
def connection():
    connection = sqlite3.connect(":memory:")
    connection.executescript(SCRIPT)
    yield connection
    connection.close()


def test_discover_lists_user_tables(connection):
    schema = SchemaDiscovery(connection).discover()
    names = [table.name for table in schema.tables]
    assert sorted(names) == ["album", "artist"]
    assert "sqlite_sequence" not in names


def test_discover_fills_tables(connection):
    tables = {table.name: table for table in SchemaDiscovery(connection).discover().tables}
    assert tables["artist"].auto_increment is True
    assert tables["album"].auto_increment is False
    assert [column.name for column in tables["album"].columns] == ["id", "artist_id", "title"]
    assert [key.table for key in tables["album"].foreign_keys] == ["artist"]


def test_discover_accepts_executor(connection):
    by_connection = SchemaDiscovery(connection).discover()
    by_executor = SchemaDiscovery(Executor(connection)).discover()
    assert by_executor == by_connection


def test_discover_empty_database():
    connection = sqlite3.connect(":memory:")
    try:
        assert SchemaDiscovery(connection).discover().tables == []
        assert SchemaDiscovery(connection).discover_indexes() == []
    finally:
        connection.close()


def test_discover_indexes(connection):
    indexes = SchemaDiscovery(connection).discover_indexes()
    found = {index.index_name: (index.table_name, index.columns, index.unique) for index in indexes}
    assert found == {
        "idx_album_title": ("album", ["title"], False),
        "idx_artist_name": ("artist", ["name"], True),
    }


def test_schema_and_indexes_round_trip(connection):
    discovery = SchemaDiscovery(connection)
    schema = discovery.discover()
    indexes = discovery.discover_indexes()

    copy = sqlite3.connect(":memory:")
    try:
        for table in schema.tables:
            copy.execute(table.write())
        for index in indexes:
            copy.execute(index.write())
        rebuilt = SchemaDiscovery(copy)
        rebuilt_schema = rebuilt.discover()
        rebuilt_indexes = rebuilt.discover_indexes()
    finally:
        copy.close()

    original_tables = {table.name: table for table in schema.tables}
    rebuilt_tables = {table.name: table for table in rebuilt_schema.tables}
    assert rebuilt_tables.keys() == original_tables.keys()
    for name, table in original_tables.items():
        assert rebuilt_tables[name].columns == table.columns
        assert rebuilt_tables[name].foreign_keys == table.foreign_keys
        assert rebuilt_tables[name].auto_increment == table.auto_increment

    def summary(found):
        return sorted((i.index_name, i.table_name, tuple(i.columns), i.unique) for i in found)

    assert summary(rebuilt_indexes) == summary(indexes)