"""Scalar row processor: first column of the row, converted to a fixed type."""

from __future__ import annotations

import datetime
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from lite_query.core.exceptions import DataAccessError
from lite_query.core.params import to_date, to_datetime, to_time

if TYPE_CHECKING:
    from lite_query.core.statement import ResultSet

T = TypeVar("T")


def _to_str(value: Any) -> str:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8")
    return str(value)


_SCALAR_CONVERTERS: dict[type, Callable[[Any], Any]] = {
    str: _to_str,
    int: int,
    float: float,
    datetime.date: to_date,
    datetime.time: to_time,
    datetime.datetime: to_datetime,
}


class SimpleRowProcessor(Generic[T]):
    """Returns column 1 of each row converted to *target_type*.

    Other columns are ignored. A NULL value maps to None.
    """

    operation = "SimpleRowProcessor.process_row"

    def __init__(self, target_type: type[T]) -> None:
        if target_type not in _SCALAR_CONVERTERS:
            supported = ", ".join(t.__name__ for t in _SCALAR_CONVERTERS)
            raise TypeError(
                f"Unsupported scalar type {target_type!r} (expected one of {supported})"
            )
        self.target_type = target_type
        self._convert = _SCALAR_CONVERTERS[target_type]

    def process_row(self, result_set: ResultSet) -> T | None:
        value = result_set.get_object(1)
        if value is None:
            return None
        try:
            return self._convert(value)  # type: ignore[no-any-return]
        except (TypeError, ValueError, ArithmeticError) as e:
            raise DataAccessError(
                self.operation,
                e,
                detail=f"cannot convert {value!r} to {self.target_type.__name__}: {e}",
            ) from e
