"""Oracle adapter using oracledb."""

from __future__ import annotations

from typing import Any

from lite_query.core.connection import ConnectionConfig


def _build_dsn(config: ConnectionConfig) -> str:
    """Build an Oracle DSN string from config fields (host:port/database)."""
    if config.host is None:
        return config.database
    port = config.port if config.port is not None else 1521
    return f"{config.host}:{port}/{config.database}"


class OracleAdapter:
    """Oracle adapter using oracledb in thin mode."""

    @property
    def paramstyle(self) -> str:
        return "numeric"

    def connect(self, config: ConnectionConfig) -> Any:
        import oracledb

        return oracledb.connect(
            user=config.user,
            password=config.password,
            dsn=_build_dsn(config),
            **config.extra,
        )

    def adapt_parameters(self, parameters: tuple[Any, ...]) -> tuple[Any, ...]:
        return parameters
