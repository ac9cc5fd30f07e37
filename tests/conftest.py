"""Shared test fixtures."""

from __future__ import annotations

import sqlite3
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest

from lite_query.core.connection import ConnectionConfig, ConnectionManager
from lite_query.core.session import Session
from lite_query.core.statement import ResultSet


@pytest.fixture
def sqlite_config() -> ConnectionConfig:
    """SQLite in-memory connection config."""
    return ConnectionConfig(driver="sqlite", database=":memory:")


# --- Counting fake driver ---


class FakeDriverError(Exception):
    """Stands in for a driver's own exception type."""


class FakeCursor:
    def __init__(self, driver: FakeDriver) -> None:
        self._driver = driver
        self._rows: list[tuple[Any, ...]] = []
        self.description: list[tuple[Any, ...]] | None = None
        self.rowcount = -1
        self.closed = False

    def execute(self, sql: str, parameters: Sequence[Any] = ()) -> None:
        self._driver.executed.append((sql, tuple(parameters)))
        self._driver.maybe_fail("execute")
        if self._driver.columns:
            self.description = [
                (name, None, None, None, None, None, None) for name in self._driver.columns
            ]
        self._rows = list(self._driver.rows)
        self.rowcount = self._driver.rowcount

    def fetchone(self) -> tuple[Any, ...] | None:
        self._driver.fetches += 1
        if self._driver.fail_on_fetch == self._driver.fetches:
            raise FakeDriverError("fetch failed")
        if not self._rows:
            return None
        return self._rows.pop(0)

    def close(self) -> None:
        self._driver.cursors_closed += 1
        self.closed = True
        self._driver.maybe_fail("close_cursor")


class FakeConnection:
    def __init__(self, driver: FakeDriver) -> None:
        self._driver = driver

    def cursor(self) -> FakeCursor:
        self._driver.maybe_fail("cursor")
        self._driver.cursors_opened += 1
        return FakeCursor(self._driver)

    def commit(self) -> None:
        self._driver.commits += 1
        self._driver.maybe_fail("commit")

    def close(self) -> None:
        self._driver.connections_closed += 1
        self._driver.maybe_fail("close_connection")


class FakeDriver:
    """DB-API test double that counts every open and close.

    ``fail_at`` names stages that raise FakeDriverError: connect, cursor,
    execute, commit, close_cursor, close_connection. ``fail_on_fetch`` makes
    the Nth fetchone() call fail.
    """

    def __init__(
        self,
        columns: Sequence[str] = (),
        rows: Sequence[tuple[Any, ...]] = (),
        rowcount: int = 0,
        fail_at: Sequence[str] = (),
        fail_on_fetch: int | None = None,
    ) -> None:
        self.columns = list(columns)
        self.rows = list(rows)
        self.rowcount = rowcount
        self.fail_at = set(fail_at)
        self.fail_on_fetch = fail_on_fetch
        self.executed: list[tuple[str, tuple[Any, ...]]] = []
        self.connections_opened = 0
        self.connections_closed = 0
        self.cursors_opened = 0
        self.cursors_closed = 0
        self.commits = 0
        self.fetches = 0

    def maybe_fail(self, stage: str) -> None:
        if stage in self.fail_at:
            raise FakeDriverError(f"{stage} failed")

    def assert_balanced(self) -> None:
        assert self.connections_opened == self.connections_closed
        assert self.cursors_opened == self.cursors_closed


class FakeAdapter:
    def __init__(self, driver: FakeDriver, paramstyle: str = "qmark") -> None:
        self._driver = driver
        self._paramstyle = paramstyle

    @property
    def paramstyle(self) -> str:
        return self._paramstyle

    def connect(self, config: ConnectionConfig) -> FakeConnection:
        self._driver.maybe_fail("connect")
        self._driver.connections_opened += 1
        return FakeConnection(self._driver)

    def adapt_parameters(self, parameters: tuple[Any, ...]) -> tuple[Any, ...]:
        return parameters


@pytest.fixture
def fake_session(sqlite_config: ConnectionConfig):
    """Build a Session over a FakeDriver.

    Usage:
        driver, session = fake_session(columns=["id"], rows=[(1,)])
        driver, session = fake_session(paramstyle="format")
    """

    def _make(paramstyle: str = "qmark", **kwargs: Any) -> tuple[FakeDriver, Session]:
        driver = FakeDriver(**kwargs)
        manager = ConnectionManager(sqlite_config, adapter=FakeAdapter(driver, paramstyle))
        return driver, Session(manager)

    return _make


@pytest.fixture
def row_of():
    """Helper returning a ResultSet positioned on a single row.

    Usage:
        result_set = row_of(["id", "full_name"], (7, "Ada"))
    """

    def _make(columns: Sequence[str], row: Any) -> ResultSet:
        cursor = FakeCursor(FakeDriver(columns=columns, rows=[row]))
        cursor.execute("SELECT")
        result_set = ResultSet(cursor)
        assert result_set.advance()
        return result_set

    return _make


# --- Real SQLite ---


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """SQLite file with a people table and two rows."""
    path = tmp_path / "people.db"
    conn = sqlite3.connect(path)
    conn.execute(
        "CREATE TABLE person (id INTEGER PRIMARY KEY, full_name TEXT, email TEXT, "
        "score REAL, born TEXT, wakes TEXT, joined TEXT)"
    )
    conn.execute(
        "INSERT INTO person VALUES (7, 'Ada', 'ada@example.com', 9.5, "
        "'1815-12-10', '06:30:00', '2024-01-02 03:04:05')"
    )
    conn.execute(
        "INSERT INTO person VALUES (8, 'Grace', NULL, NULL, NULL, NULL, NULL)"
    )
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def session(db_path: Path) -> Session:
    return Session.from_config(ConnectionConfig(driver="sqlite", database=str(db_path)))
