"""Session - the query/update façade.

Every operation opens its own connection and statement, binds the
parameters positionally, runs the SQL and releases everything before
returning, on success and on failure. Sessions hold no per-call state and
can be shared between threads.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Sequence
from typing import Any, TypeVar

from lite_query.core.connection import ConnectionConfig, ConnectionManager
from lite_query.core.params import SqlType, check_parameters
from lite_query.core.statement import Statement
from lite_query.core.translator import translate_driver_error
from lite_query.mapping.protocol import as_row_function
from lite_query.mapping.reflection import ReflectionRowProcessor
from lite_query.mapping.simple import SimpleRowProcessor

logger = logging.getLogger(__name__)

T = TypeVar("T")

Parameters = Sequence[Any] | None
SqlTypes = Sequence[SqlType] | None


def _bind_all(
    statement: Statement,
    parameters: Sequence[Any],
    sql_types: Sequence[SqlType],
) -> None:
    for index, (value, sql_type) in enumerate(zip(parameters, sql_types, strict=True), start=1):
        statement.bind(index, value, sql_type)


class Session:
    """Executes parameterized SQL and shapes the results.

    SQL templates use ``?`` placeholders. ``parameters`` and ``sql_types``
    are parallel sequences; when either is empty or None the SQL runs with
    no bound parameters.
    """

    def __init__(self, connection_manager: ConnectionManager) -> None:
        self._connection_manager = connection_manager

    @classmethod
    def from_config(cls, config: ConnectionConfig) -> Session:
        """Create a Session from a ConnectionConfig."""
        return cls(ConnectionManager(config))

    @property
    def connection_manager(self) -> ConnectionManager:
        return self._connection_manager

    def get_connection(self) -> Any:
        """Open a raw driver connection. The caller must close it."""
        return self._connection_manager.open_connection("Session.get_connection")

    # --- Generic operations ---

    def find_object(
        self,
        sql: str,
        parameters: Parameters,
        sql_types: SqlTypes,
        processor: Any,
    ) -> Any:
        """Return the first processed row, or None when there are no rows."""
        results = self.find_list(sql, parameters, sql_types, processor)
        if not results:
            return None
        return results[0]

    def find_list(
        self,
        sql: str,
        parameters: Parameters,
        sql_types: SqlTypes,
        processor: Any,
    ) -> list[Any]:
        """Run a query and process every row, in cursor order.

        Args:
            sql: SQL template with ``?`` placeholders.
            parameters: Values bound to placeholders 1..N.
            sql_types: Type tag for each parameter, same length as *parameters*.
            processor: A RowProcessor, or a callable taking the ResultSet.

        Returns:
            One processed value per row; an empty list when there are no rows.

        Raises:
            DataAccessError: the driver failed, or a parameter could not be bound.
            ReflectionMappingError: a row could not be mapped onto the target class.
        """
        operation = "Session.find_list"
        row_function = as_row_function(processor)
        bind = check_parameters(parameters, sql_types, operation)

        try:
            with self._connection_manager.connection(operation) as connection:
                with Statement(connection, sql, self._connection_manager.adapter) as statement:
                    if bind:
                        _bind_all(statement, parameters, sql_types)  # type: ignore[arg-type]
                    with statement.execute_query() as result_set:
                        results: list[Any] = []
                        while result_set.advance():
                            results.append(row_function(result_set))
                        logger.debug("%s returned %d rows", operation, len(results))
                        return results
        except Exception as e:
            raise translate_driver_error(operation, e) from e

    def find_object_using_reflection(
        self,
        sql: str,
        parameters: Parameters,
        sql_types: SqlTypes,
        target_class: type[T],
    ) -> T | None:
        """Map the first row onto a new *target_class* instance, or return None."""
        return self.find_object(  # type: ignore[no-any-return]
            sql, parameters, sql_types, ReflectionRowProcessor(target_class)
        )

    def find_list_using_reflection(
        self,
        sql: str,
        parameters: Parameters,
        sql_types: SqlTypes,
        target_class: type[T],
    ) -> list[T]:
        """Map every row onto a new *target_class* instance."""
        return self.find_list(sql, parameters, sql_types, ReflectionRowProcessor(target_class))

    def execute_update(
        self,
        sql: str,
        parameters: Parameters = None,
        sql_types: SqlTypes = None,
    ) -> int:
        """Run a mutating statement, commit, and return the affected row count."""
        operation = "Session.execute_update"
        bind = check_parameters(parameters, sql_types, operation)

        try:
            with self._connection_manager.connection(operation) as connection:
                with Statement(connection, sql, self._connection_manager.adapter) as statement:
                    if bind:
                        _bind_all(statement, parameters, sql_types)  # type: ignore[arg-type]
                    return statement.execute_update()
        except Exception as e:
            raise translate_driver_error(operation, e) from e

    # --- Scalar shortcuts (column 1 of each row) ---

    def find_string(
        self, sql: str, parameters: Parameters = None, sql_types: SqlTypes = None
    ) -> str | None:
        return self.find_object(sql, parameters, sql_types, SimpleRowProcessor(str))

    def find_string_list(
        self, sql: str, parameters: Parameters = None, sql_types: SqlTypes = None
    ) -> list[str | None]:
        return self.find_list(sql, parameters, sql_types, SimpleRowProcessor(str))

    def find_integer(
        self, sql: str, parameters: Parameters = None, sql_types: SqlTypes = None
    ) -> int | None:
        return self.find_object(sql, parameters, sql_types, SimpleRowProcessor(int))

    def find_integer_list(
        self, sql: str, parameters: Parameters = None, sql_types: SqlTypes = None
    ) -> list[int | None]:
        return self.find_list(sql, parameters, sql_types, SimpleRowProcessor(int))

    def find_float(
        self, sql: str, parameters: Parameters = None, sql_types: SqlTypes = None
    ) -> float | None:
        return self.find_object(sql, parameters, sql_types, SimpleRowProcessor(float))

    def find_float_list(
        self, sql: str, parameters: Parameters = None, sql_types: SqlTypes = None
    ) -> list[float | None]:
        return self.find_list(sql, parameters, sql_types, SimpleRowProcessor(float))

    # Python ints are unbounded; the long variants are kept for BIGINT call sites.
    def find_long(
        self, sql: str, parameters: Parameters = None, sql_types: SqlTypes = None
    ) -> int | None:
        return self.find_object(sql, parameters, sql_types, SimpleRowProcessor(int))

    def find_long_list(
        self, sql: str, parameters: Parameters = None, sql_types: SqlTypes = None
    ) -> list[int | None]:
        return self.find_list(sql, parameters, sql_types, SimpleRowProcessor(int))

    def find_date(
        self, sql: str, parameters: Parameters = None, sql_types: SqlTypes = None
    ) -> datetime.date | None:
        return self.find_object(sql, parameters, sql_types, SimpleRowProcessor(datetime.date))

    def find_date_list(
        self, sql: str, parameters: Parameters = None, sql_types: SqlTypes = None
    ) -> list[datetime.date | None]:
        return self.find_list(sql, parameters, sql_types, SimpleRowProcessor(datetime.date))

    def find_time(
        self, sql: str, parameters: Parameters = None, sql_types: SqlTypes = None
    ) -> datetime.time | None:
        return self.find_object(sql, parameters, sql_types, SimpleRowProcessor(datetime.time))

    def find_time_list(
        self, sql: str, parameters: Parameters = None, sql_types: SqlTypes = None
    ) -> list[datetime.time | None]:
        return self.find_list(sql, parameters, sql_types, SimpleRowProcessor(datetime.time))

    def find_timestamp(
        self, sql: str, parameters: Parameters = None, sql_types: SqlTypes = None
    ) -> datetime.datetime | None:
        return self.find_object(sql, parameters, sql_types, SimpleRowProcessor(datetime.datetime))

    def find_timestamp_list(
        self, sql: str, parameters: Parameters = None, sql_types: SqlTypes = None
    ) -> list[datetime.datetime | None]:
        return self.find_list(sql, parameters, sql_types, SimpleRowProcessor(datetime.datetime))
