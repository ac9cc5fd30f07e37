"""PostgreSQL adapter using psycopg (v3+)."""

from __future__ import annotations

from typing import Any

from lite_query.core.connection import ConnectionConfig


def _build_conninfo(config: ConnectionConfig) -> str:
    """Build a libpq connection string from config fields.

    A ``database`` that is already a URL or a key=value conninfo is used as is.
    """
    if "://" in config.database or "=" in config.database:
        return config.database
    parts: list[str] = []
    if config.host is not None:
        parts.append(f"host={config.host}")
    if config.port is not None:
        parts.append(f"port={config.port}")
    if config.user is not None:
        parts.append(f"user={config.user}")
    if config.password is not None:
        parts.append(f"password={config.password}")
    parts.append(f"dbname={config.database}")
    return " ".join(parts)


class PostgresqlAdapter:
    """PostgreSQL adapter using psycopg (v3+)."""

    @property
    def paramstyle(self) -> str:
        return "format"

    def connect(self, config: ConnectionConfig) -> Any:
        import psycopg

        conninfo = _build_conninfo(config)
        if "://" in conninfo:
            return psycopg.connect(
                conninfo, user=config.user, password=config.password, **config.extra
            )
        return psycopg.connect(conninfo, **config.extra)

    def adapt_parameters(self, parameters: tuple[Any, ...]) -> tuple[Any, ...]:
        return parameters
