"""Prepared statements and result cursors over DB-API connections."""

from __future__ import annotations

import logging
from typing import Any

from lite_query.core.exceptions import DataAccessError, ParameterBindingError
from lite_query.core.params import SqlType, coerce_parameter, normalize_placeholders

logger = logging.getLogger(__name__)


def close_quietly(resource: Any, kind: str) -> None:
    """Close *resource*, logging and swallowing any failure."""
    if resource is None:
        return
    try:
        resource.close()
    except Exception:
        logger.warning("Failed to close %s", kind, exc_info=True)


class ResultSet:
    """Forward-only cursor over the rows produced by a query.

    Handles both tuple-like rows and dict-like rows from different drivers.
    """

    def __init__(self, cursor: Any) -> None:
        self._cursor = cursor
        description = cursor.description
        self._columns: list[str] = [desc[0] for desc in description] if description else []
        self._index: dict[str, int] = {}
        self._folded: dict[str, int] = {}
        for position, label in enumerate(self._columns):
            self._index.setdefault(label, position)
            self._folded.setdefault(label.lower(), position)
        self._row: Any = None
        self._closed = False

    @property
    def columns(self) -> list[str]:
        return list(self._columns)

    def advance(self) -> bool:
        """Move to the next row. Returns False once the rows are exhausted."""
        if self._closed:
            raise DataAccessError("ResultSet.advance", detail="result set is closed")
        if not self._columns:
            self._row = None
            return False
        try:
            self._row = self._cursor.fetchone()
        except Exception as e:
            raise DataAccessError("ResultSet.advance", e) from e
        return self._row is not None

    def get_object(self, column: int | str) -> Any:
        """Return the current row's raw value for *column*.

        Args:
            column: 1-based column position, or a column label. Labels match
                exactly first, then case-insensitively.
        """
        if self._row is None:
            raise DataAccessError("ResultSet.get_object", detail="no current row")
        position = self._position(column)
        if isinstance(self._row, dict):
            return self._row[self._columns[position]]
        return self._row[position]

    def _position(self, column: int | str) -> int:
        if isinstance(column, bool) or not isinstance(column, (int, str)):
            raise DataAccessError(
                "ResultSet.get_object", detail=f"invalid column reference {column!r}"
            )
        if isinstance(column, int):
            if not 1 <= column <= len(self._columns):
                raise DataAccessError(
                    "ResultSet.get_object",
                    detail=f"column index {column} out of range 1..{len(self._columns)}",
                )
            return column - 1
        if column in self._index:
            return self._index[column]
        folded = column.lower()
        if folded in self._folded:
            return self._folded[folded]
        raise DataAccessError(
            "ResultSet.get_object",
            detail=f"no column named '{column}' (columns: {self._columns})",
        )

    def close(self) -> None:
        # The underlying cursor belongs to the Statement.
        self._closed = True
        self._row = None

    def __enter__(self) -> ResultSet:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


class Statement:
    """A SQL template with positionally bound parameters.

    Wraps one DB-API cursor opened on *connection*. Parameters are bound at
    1-based positions and passed to the driver in position order.
    """

    def __init__(self, connection: Any, sql: str, adapter: Any) -> None:
        self._connection = connection
        self._adapter = adapter
        self._raw_sql = sql
        self._sql = normalize_placeholders(sql, adapter.paramstyle)
        self._parameters: dict[int, Any] = {}
        self._cursor: Any = None
        self._closed = False
        try:
            self._cursor = connection.cursor()
        except Exception as e:
            raise DataAccessError("Statement.prepare", e) from e

    @property
    def sql(self) -> str:
        return self._sql

    def bind(self, index: int, value: Any, sql_type: SqlType) -> None:
        """Bind *value* at 1-based position *index* using its type tag."""
        if index < 1:
            raise ParameterBindingError(
                "Statement.bind", detail=f"parameter index {index} must be >= 1"
            )
        self._parameters[index] = coerce_parameter(value, sql_type, "Statement.bind")

    def _bound_parameters(self) -> tuple[Any, ...]:
        count = len(self._parameters)
        if count and max(self._parameters) != count:
            missing = sorted(set(range(1, max(self._parameters) + 1)) - set(self._parameters))
            raise ParameterBindingError(
                "Statement.execute", detail=f"no value bound for parameter(s) {missing}"
            )
        return self._adapter.adapt_parameters(
            tuple(self._parameters[i] for i in range(1, count + 1))
        )

    def _execute(self, operation: str) -> None:
        if self._closed:
            raise DataAccessError(operation, detail="statement is closed")
        parameters = self._bound_parameters()
        # Without parameters the driver sends the text as-is, so it stays literal.
        sql = self._sql if parameters else self._raw_sql
        logger.debug("Executing SQL: %s (%d parameters)", sql, len(parameters))
        try:
            if parameters:
                self._cursor.execute(sql, parameters)
            else:
                self._cursor.execute(sql)
        except Exception as e:
            raise DataAccessError(operation, e) from e

    def execute_query(self) -> ResultSet:
        """Execute the statement and return a cursor over its rows."""
        self._execute("Statement.execute_query")
        return ResultSet(self._cursor)

    def execute_update(self) -> int:
        """Execute a mutating statement, commit, and return the affected row count."""
        self._execute("Statement.execute_update")
        try:
            self._connection.commit()
        except Exception as e:
            raise DataAccessError("Statement.execute_update", e) from e
        return int(self._cursor.rowcount)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        close_quietly(self._cursor, "statement")

    def __enter__(self) -> Statement:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
