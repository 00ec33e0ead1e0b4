import sqlite3

import pytest

from sqliteschema.errors import DatabaseError
from sqliteschema.executor import Executor, connect


@pytest.fixture
def executor():
    connection = sqlite3.connect(":memory:")
    connection.executescript(
        "CREATE TABLE t (a INTEGER, b TEXT);"
        "INSERT INTO t VALUES (2, 'two');"
        "INSERT INTO t VALUES (1, 'one');"
    )
    yield Executor(connection)
    connection.close()


def test_fetch_all_returns_tuples(executor):
    rows = executor.fetch_all("SELECT a, b FROM t ORDER BY a", ())
    assert rows == [(1, "one"), (2, "two")]


def test_fetch_all_binds_parameters(executor):
    rows = executor.fetch_all("SELECT b FROM t WHERE a = ?", (2,))
    assert rows == [("two",)]


def test_fetch_all_with_no_match_is_empty(executor):
    assert executor.fetch_all("SELECT a FROM t WHERE a > ?", (10,)) == []


def test_fetch_one_returns_first_row(executor):
    assert executor.fetch_one("SELECT a FROM t ORDER BY a DESC", ()) == (2,)


def test_fetch_one_without_rows_raises(executor):
    with pytest.raises(DatabaseError) as info:
        executor.fetch_one("SELECT a FROM t WHERE a = ?", (99,))
    assert isinstance(info.value.error, LookupError)


def test_bad_sql_raises_database_error(executor):
    with pytest.raises(DatabaseError) as info:
        executor.fetch_all("SELECT * FROM missing", ())
    assert isinstance(info.value.error, sqlite3.OperationalError)
    assert str(info.value).startswith("Database Error")


def test_fetch_all_raw_runs_pragma(executor):
    rows = executor.fetch_all_raw("PRAGMA table_info('t')")
    assert [row[1] for row in rows] == ["a", "b"]


def test_row_factory_rows_become_tuples(executor):
    executor.connection.row_factory = sqlite3.Row
    assert executor.fetch_all("SELECT a FROM t ORDER BY a", ()) == [(1,), (2,)]


def test_connect_opens_file(tmp_path):
    path = str(tmp_path / "data.db")
    writer = connect(path)
    writer.connection.execute("CREATE TABLE kept (x INTEGER)")
    writer.connection.execute("INSERT INTO kept VALUES (7)")
    writer.connection.commit()
    writer.connection.close()

    reader = connect(path)
    try:
        assert reader.fetch_all_raw("SELECT x FROM kept") == [(7,)]
    finally:
        reader.connection.close()