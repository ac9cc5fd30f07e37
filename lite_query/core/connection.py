"""Connection configuration and acquisition.

ConnectionConfig is a Pydantic model for type-safe connection config.
ConnectionManager opens a fresh driver connection per call through the
adapter for the configured driver. There is no pooling.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel, field_validator

from lite_query.core.exceptions import AdapterError
from lite_query.core.statement import close_quietly
from lite_query.core.translator import translate_driver_error

logger = logging.getLogger(__name__)

# Adapter module mapping: driver name → (module_path, class_name)
_ADAPTER_MAP: dict[str, tuple[str, str]] = {
    "sqlite": ("lite_query.adapters.sqlite", "SqliteAdapter"),
    "postgresql": ("lite_query.adapters.postgresql", "PostgresqlAdapter"),
    "mysql": ("lite_query.adapters.mysql", "MysqlAdapter"),
    "oracle": ("lite_query.adapters.oracle", "OracleAdapter"),
}


class ConnectionConfig(BaseModel):
    """Configuration for database connections.

    ``database`` is whatever the driver uses to locate the database: a file
    path for SQLite, a database name, DSN or URL for the server drivers.
    """

    driver: str
    database: str
    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None
    extra: dict[str, Any] = {}

    @field_validator("driver")
    @classmethod
    def _known_driver(cls, value: str) -> str:
        driver = value.lower()
        if driver not in _ADAPTER_MAP:
            supported = ", ".join(sorted(_ADAPTER_MAP))
            raise ValueError(f"Unsupported database driver: {value} (expected one of {supported})")
        return driver


def load_adapter(driver: str) -> Any:
    """Load an adapter by driver name."""
    driver_lower = driver.lower()
    if driver_lower not in _ADAPTER_MAP:
        raise AdapterError(f"Unsupported database driver: {driver}")

    module_path, cls_name = _ADAPTER_MAP[driver_lower]
    try:
        module = importlib.import_module(module_path)
        return getattr(module, cls_name)()
    except (ImportError, AttributeError) as e:
        raise AdapterError(f"Failed to load adapter for '{driver}': {e}") from e


class ConnectionManager:
    """Opens and closes driver connections for one ConnectionConfig.

    Holds no connections between calls, so a single manager can be shared
    between threads as long as the driver's connect call is thread-safe.
    """

    def __init__(self, config: ConnectionConfig, adapter: Any | None = None) -> None:
        self.config = config
        self._adapter = adapter if adapter is not None else load_adapter(config.driver)

    @property
    def adapter(self) -> Any:
        return self._adapter

    def open_connection(self, operation: str = "ConnectionManager.open_connection") -> Any:
        """Open a new connection. The caller owns it and must close it."""
        try:
            return self._adapter.connect(self.config)
        except Exception as e:
            raise translate_driver_error(operation, e) from e

    @contextmanager
    def connection(self, operation: str = "ConnectionManager.connection") -> Iterator[Any]:
        """Open a connection as a context manager, closing it on exit."""
        connection = self.open_connection(operation)
        try:
            yield connection
        finally:
            close_quietly(connection, "connection")
