"""Row processor protocol.

A row processor converts the current row of an open ResultSet into one
value. The Session calls it once per row, in cursor order. Any callable
taking the ResultSet works as well.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from lite_query.core.statement import ResultSet

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class RowProcessor(Protocol[T_co]):
    """Base row processor protocol."""

    def process_row(self, result_set: ResultSet) -> T_co:
        """Convert the current row into a value."""
        ...


def as_row_function(processor: Any) -> Callable[[ResultSet], Any]:
    """Return a plain callable for a RowProcessor object or a function."""
    if isinstance(processor, RowProcessor):
        return processor.process_row
    if callable(processor):
        return processor  # type: ignore[no-any-return]
    raise TypeError(
        f"row processor must define process_row() or be callable, got {type(processor).__name__}"
    )
