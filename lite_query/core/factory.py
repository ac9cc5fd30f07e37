"""Session factory."""

from __future__ import annotations

from lite_query.core.connection import ConnectionConfig, ConnectionManager, load_adapter
from lite_query.core.session import Session


class SessionFactory:
    """Creates Sessions from driver name and credentials."""

    def get_database_session(
        self,
        user: str | None,
        password: str | None,
        url: str,
        driver: str,
    ) -> Session:
        """Return a Session for *driver* connecting to *url*.

        *url* is passed to the driver as the database location: a file path
        for SQLite, a URL or conninfo string for PostgreSQL, a database name
        or DSN otherwise.

        Raises:
            AdapterError: the driver is unknown or its adapter cannot be loaded.
        """
        adapter = load_adapter(driver)
        config = ConnectionConfig(driver=driver, database=url, user=user, password=password)
        return Session(ConnectionManager(config, adapter=adapter))
