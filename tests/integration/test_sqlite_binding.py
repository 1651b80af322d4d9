"""Integration tests binding statements against an in-memory SQLite database."""

import sqlite3
from collections.abc import Generator

import pytest

from sqlbind import bind, create_query


@pytest.fixture
def sqlite_connection() -> Generator[sqlite3.Connection, None, None]:
    """Create a SQLite connection with a test table."""
    conn = sqlite3.connect(":memory:")
    conn.executescript("""
        CREATE TABLE users (
            id INTEGER PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT UNIQUE,
            age INTEGER
        );

        INSERT INTO users (name, email, age) VALUES
            ('John Doe', 'john@example.com', 30),
            ('Jane Smith', 'jane@example.com', 25),
            ('Bob Johnson', 'bob@example.com', 35),
            ('Alice Brown', 'alice@example.com', 28),
            ('Charlie Davis', 'charlie@example.com', 32);
    """)

    yield conn

    conn.close()


class TestSqliteBinding:
    """Bound statements execute unchanged on a DB-API driver."""

    def test_named_scalar(self, sqlite_connection: sqlite3.Connection) -> None:
        query = create_query("SELECT name FROM users WHERE age > :age ORDER BY age", age=30)
        rows = sqlite_connection.execute(*query.bind()).fetchall()
        assert rows == [("Charlie Davis",), ("Bob Johnson",)]

    def test_indexed_values(self, sqlite_connection: sqlite3.Connection) -> None:
        bound = bind("SELECT count(*) FROM users WHERE age BETWEEN ? AND ?", [25, 30])
        assert sqlite_connection.execute(*bound).fetchone() == (3,)

    def test_repeated_name(self, sqlite_connection: sqlite3.Connection) -> None:
        bound = bind("SELECT name FROM users WHERE age >= :age AND age <= :age", {"age": 28})
        assert sqlite_connection.execute(*bound).fetchall() == [("Alice Brown",)]

    def test_list_expansion(self, sqlite_connection: sqlite3.Connection) -> None:
        bound = bind("SELECT name FROM users WHERE id IN (:ids) ORDER BY id", {"ids": [1, 3]})
        assert bound.sql == "SELECT name FROM users WHERE id IN (?,?) ORDER BY id"
        rows = sqlite_connection.execute(*bound).fetchall()
        assert rows == [("John Doe",), ("Bob Johnson",)]

    @pytest.mark.parametrize("ids", [[1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 5], [5, 4, 3, 2, 1, 1, 1, 1]])
    def test_padded_list_expansion(self, sqlite_connection: sqlite3.Connection, ids: "list[int]") -> None:
        bound = bind("SELECT count(*) FROM users WHERE id IN (@ids)", {"ids": ids})
        assert bound.sql == "SELECT count(*) FROM users WHERE id IN (?,?,?,?,?,?,?,?)"
        assert sqlite_connection.execute(*bound).fetchone() == (5,)

    def test_markers_inside_literals(self, sqlite_connection: sqlite3.Connection) -> None:
        bound = bind(
            "SELECT name FROM users WHERE email = 'john@example.com' AND name <> 'a:b?' AND age = :age", {"age": 30}
        )
        assert bound.parameters == (30,)
        assert sqlite_connection.execute(*bound).fetchall() == [("John Doe",)]

    def test_null_value(self, sqlite_connection: sqlite3.Connection) -> None:
        insert = create_query(
            "INSERT INTO users (name, email, age) VALUES (:name, :email, :age)", name="Dana", email=None, age=None
        )
        sqlite_connection.execute(*insert.bind())

        rows = sqlite_connection.execute("SELECT name FROM users WHERE age IS NULL").fetchall()
        assert rows == [("Dana",)]
        assert str(insert) == "INSERT INTO users (name, email, age) VALUES ('Dana', NULL, NULL)"
