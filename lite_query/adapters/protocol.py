"""Database adapter protocol.

Every adapter module implements this protocol so the Session can talk to any
DB-API 2.0 driver the same way.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from lite_query.core.connection import ConnectionConfig


@runtime_checkable
class SyncAdapter(Protocol):
    """Synchronous database adapter protocol."""

    @property
    def paramstyle(self) -> str:
        """Positional placeholder style: 'qmark' (?), 'format' (%s) or 'numeric' (:1)."""
        ...

    def connect(self, config: ConnectionConfig) -> Any:
        """Open a new DB-API connection."""
        ...

    def adapt_parameters(self, parameters: tuple[Any, ...]) -> tuple[Any, ...]:
        """Convert bound values into types the driver accepts."""
        ...
