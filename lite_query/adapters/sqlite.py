"""SQLite adapter using the stdlib sqlite3 module."""

from __future__ import annotations

import datetime
import sqlite3
from decimal import Decimal
from typing import Any

from lite_query.core.connection import ConnectionConfig


def _adapt(value: Any) -> Any:
    # Temporal and Decimal values are stored as text.
    if isinstance(value, datetime.datetime):
        return value.isoformat(sep=" ")
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    return value


class SqliteAdapter:
    """SQLite adapter. ``config.database`` is the file path or ``:memory:``."""

    @property
    def paramstyle(self) -> str:
        return "qmark"

    def connect(self, config: ConnectionConfig) -> sqlite3.Connection:
        return sqlite3.connect(config.database, **config.extra)

    def adapt_parameters(self, parameters: tuple[Any, ...]) -> tuple[Any, ...]:
        return tuple(_adapt(value) for value in parameters)
