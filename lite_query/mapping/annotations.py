"""Column and transience markers for reflective mapping.

Markers go on fields through ``typing.Annotated``::

    @dataclass
    class Person:
        id: int = 0
        name: Annotated[str, Column("full_name")] = ""
        cache: Annotated[dict, Transient()] = field(default_factory=dict)

or on the getter/setter of a property, used as decorators::

    class Account:
        owner: str

        @property
        def owner(self) -> str: ...

        @owner.setter
        @Column("owner_name")
        def owner(self, value: str) -> None: ...

Dataclass fields may instead carry ``metadata={"column": ...}`` or
``metadata={"transient": True}``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

F = TypeVar("F")

COLUMN_ATTRIBUTE = "__lite_query_column__"
TRANSIENT_ATTRIBUTE = "__lite_query_transient__"


@dataclass(frozen=True)
class Column:
    """Name of the result column a field is read from."""

    name: str = ""

    def __call__(self, method: F) -> F:
        setattr(method, COLUMN_ATTRIBUTE, self)
        return method


@dataclass(frozen=True)
class Transient:
    """Excludes a field from mapping."""

    def __call__(self, method: F) -> F:
        setattr(method, TRANSIENT_ATTRIBUTE, True)
        return method


def column_name_of(source: Any) -> str | None:
    """Return the non-blank column name declared on *source*, if any.

    *source* is a marker list (field) or a getter/setter function.
    """
    if isinstance(source, (list, tuple)):
        markers = [m for m in source if isinstance(m, Column)]
        column = markers[0] if markers else None
    else:
        column = getattr(source, COLUMN_ATTRIBUTE, None)
    if column is not None and column.name.strip():
        return column.name
    return None


def is_transient(source: Any) -> bool:
    """True if *source* (marker list or function) is marked transient."""
    if isinstance(source, (list, tuple)):
        return any(isinstance(m, Transient) for m in source)
    return bool(getattr(source, TRANSIENT_ATTRIBUTE, False))
