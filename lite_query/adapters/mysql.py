"""MySQL adapter using mysql-connector-python."""

from __future__ import annotations

from typing import Any

from lite_query.core.connection import ConnectionConfig


class MysqlAdapter:
    """MySQL adapter using mysql-connector-python."""

    @property
    def paramstyle(self) -> str:
        return "format"

    def connect(self, config: ConnectionConfig) -> Any:
        import mysql.connector

        kwargs: dict[str, Any] = {"database": config.database}
        if config.host is not None:
            kwargs["host"] = config.host
        if config.port is not None:
            kwargs["port"] = config.port
        if config.user is not None:
            kwargs["user"] = config.user
        if config.password is not None:
            kwargs["password"] = config.password
        kwargs.update(config.extra)
        return mysql.connector.connect(**kwargs)

    def adapt_parameters(self, parameters: tuple[Any, ...]) -> tuple[Any, ...]:
        return parameters
