"""Positional parameter handling.

SQL templates use ``?`` placeholders, bound by 1-based position. This module
converts placeholders to the driver's paramstyle, defines the parameter type
tags and coerces values to the type a tag declares.
"""

from __future__ import annotations

import datetime
import re
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation
from enum import Enum
from functools import lru_cache
from typing import Any

from lite_query.core.exceptions import ParameterBindingError

# Matches single-quoted string literals (with escaped quotes handled)
_STRING_LITERAL_PATTERN = re.compile(r"'(?:[^'\\]|\\.)*'")


class SqlType(Enum):
    """Type tags for bound parameters."""

    CHAR = "char"
    VARCHAR = "varchar"
    SMALLINT = "smallint"
    INTEGER = "integer"
    BIGINT = "bigint"
    FLOAT = "float"
    REAL = "real"
    DOUBLE = "double"
    DECIMAL = "decimal"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    DATE = "date"
    TIME = "time"
    TIMESTAMP = "timestamp"
    BINARY = "binary"
    BLOB = "blob"
    NULL = "null"
    OTHER = "other"


def normalize_placeholders(sql: str, paramstyle: str) -> str:
    """Convert ``?`` placeholders to the target param style.

    Args:
        sql: SQL string with ``?`` placeholders.
        paramstyle: Target style - 'qmark' (no conversion), 'format' (%s)
            or 'numeric' (:1, :2, ...).

    Returns:
        SQL with placeholders converted to the target style.
    """
    if paramstyle == "qmark":
        return sql
    if paramstyle not in ("format", "numeric"):
        raise ValueError(f"Unsupported paramstyle: {paramstyle}")
    return _convert_placeholders(sql, paramstyle)


@lru_cache(maxsize=256)
def _convert_placeholders(sql: str, paramstyle: str) -> str:
    """Rewrite placeholders outside string literals."""
    parts: list[str] = []
    position = 0
    last_end = 0

    def convert(segment: str) -> str:
        nonlocal position
        out: list[str] = []
        for char in segment:
            if char == "?":
                position += 1
                out.append("%s" if paramstyle == "format" else f":{position}")
            elif char == "%" and paramstyle == "format":
                out.append("%%")
            else:
                out.append(char)
        return "".join(out)

    for match in _STRING_LITERAL_PATTERN.finditer(sql):
        start, end = match.span()
        if start > last_end:
            parts.append(convert(sql[last_end:start]))
        literal = match.group()
        # format-style drivers interpolate every %, literals included
        parts.append(literal.replace("%", "%%") if paramstyle == "format" else literal)
        last_end = end

    if last_end < len(sql):
        parts.append(convert(sql[last_end:]))

    return "".join(parts)


def check_parameters(
    parameters: Sequence[Any] | None,
    sql_types: Sequence[SqlType] | None,
    operation: str,
) -> bool:
    """Validate a parameter list against its type tags.

    Returns True when the parameters should be bound, False when either
    sequence is empty or absent and the SQL runs without parameters.

    Raises:
        ParameterBindingError: both sequences are non-empty and their
            lengths differ.
    """
    if not parameters or not sql_types:
        return False
    if len(parameters) != len(sql_types):
        raise ParameterBindingError(
            operation,
            detail=(
                f"{len(parameters)} parameters but {len(sql_types)} sql types; "
                "the two sequences must have the same length"
            ),
        )
    return True


def to_date(value: Any) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        return datetime.datetime.fromisoformat(value).date()
    raise TypeError(f"cannot convert {type(value).__name__} to date")


def to_time(value: Any) -> datetime.time:
    if isinstance(value, datetime.datetime):
        return value.time()
    if isinstance(value, datetime.time):
        return value
    if isinstance(value, datetime.timedelta):
        return (datetime.datetime.min + value).time()
    if isinstance(value, str):
        try:
            return datetime.time.fromisoformat(value)
        except ValueError:
            return datetime.datetime.fromisoformat(value).time()
    raise TypeError(f"cannot convert {type(value).__name__} to time")


def to_datetime(value: Any) -> datetime.datetime:
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time())
    if isinstance(value, str):
        return datetime.datetime.fromisoformat(value)
    raise TypeError(f"cannot convert {type(value).__name__} to datetime")


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def _to_bytes(value: Any) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


_PARAMETER_CONVERTERS: dict[SqlType, Any] = {
    SqlType.CHAR: str,
    SqlType.VARCHAR: str,
    SqlType.SMALLINT: int,
    SqlType.INTEGER: int,
    SqlType.BIGINT: int,
    SqlType.FLOAT: float,
    SqlType.REAL: float,
    SqlType.DOUBLE: float,
    SqlType.DECIMAL: _to_decimal,
    SqlType.NUMERIC: _to_decimal,
    SqlType.BOOLEAN: bool,
    SqlType.DATE: to_date,
    SqlType.TIME: to_time,
    SqlType.TIMESTAMP: to_datetime,
    SqlType.BINARY: _to_bytes,
    SqlType.BLOB: _to_bytes,
}


def coerce_parameter(value: Any, sql_type: SqlType, operation: str = "coerce_parameter") -> Any:
    """Convert *value* to the Python type declared by *sql_type*.

    ``None`` binds as NULL for every tag. ``NULL`` forces NULL and ``OTHER``
    passes the value through unchanged.
    """
    if not isinstance(sql_type, SqlType):
        raise ParameterBindingError(operation, detail=f"unknown sql type {sql_type!r}")
    if value is None or sql_type is SqlType.NULL:
        return None
    converter = _PARAMETER_CONVERTERS.get(sql_type)
    if converter is None:
        return value
    try:
        return converter(value)
    except (TypeError, ValueError, InvalidOperation) as e:
        raise ParameterBindingError(
            operation,
            e,
            detail=f"cannot bind {value!r} as {sql_type.name}: {e}",
        ) from e
