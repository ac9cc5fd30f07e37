"""Reflective row-to-object mapping.

Builds a fresh instance of the target class for every row and copies one
column into each eligible field. Supports dataclasses, Pydantic models and
plain classes with type-annotated attributes; the target class must be
constructible without arguments.

Fields inherited from base classes are mapped too, base-class fields first,
so a subclass extends its parent's column set instead of replacing it.

Column names resolve in this order, first non-blank wins:

1. ``Column`` marker on the field
2. ``Column`` on the property setter
3. ``Column`` on the property getter
4. the field name itself
"""

from __future__ import annotations

import dataclasses
import inspect
from functools import lru_cache
from typing import (
    TYPE_CHECKING,
    Annotated,
    Any,
    ClassVar,
    Generic,
    TypeVar,
    get_origin,
    get_type_hints,
)

from lite_query.core.translator import translate_reflection_error
from lite_query.mapping.annotations import Column, Transient, column_name_of, is_transient

if TYPE_CHECKING:
    from lite_query.core.statement import ResultSet

T = TypeVar("T")

# Stands in for both accessor and mutator of a plain attribute.
_DIRECT = object()


@dataclasses.dataclass(frozen=True)
class FieldBinding:
    """One mapped field and the result column it is read from."""

    name: str
    column: str


def _is_pydantic_model(cls: type) -> bool:
    """Check if a class is a Pydantic BaseModel."""
    try:
        from pydantic import BaseModel

        return issubclass(cls, BaseModel)
    except ImportError:
        return False


def _annotated_markers(hint: Any) -> list[Any]:
    if get_origin(hint) is Annotated:
        return list(hint.__metadata__)
    return []


def _declared_fields(target_class: type) -> list[tuple[str, list[Any]]]:
    """Return ``(field name, markers)`` pairs in declaration order, bases first."""
    if _is_pydantic_model(target_class):
        return [
            (name, list(info.metadata))
            for name, info in target_class.model_fields.items()  # type: ignore[attr-defined]
        ]

    hints = get_type_hints(target_class, include_extras=True)

    if dataclasses.is_dataclass(target_class):
        fields: list[tuple[str, list[Any]]] = []
        for f in dataclasses.fields(target_class):
            markers = _annotated_markers(hints.get(f.name))
            if f.metadata.get("transient"):
                markers.append(Transient())
            if f.metadata.get("column"):
                markers.append(Column(f.metadata["column"]))
            fields.append((f.name, markers))
        return fields

    return [
        (name, _annotated_markers(hint))
        for name, hint in hints.items()
        if get_origin(hint) is not ClassVar
    ]


def _accessors(target_class: type, name: str) -> tuple[Any, Any]:
    """Return the (getter, setter) pair for field *name*."""
    attribute = inspect.getattr_static(target_class, name, None)
    if isinstance(attribute, property):
        return attribute.fget, attribute.fset
    return _DIRECT, _DIRECT


def _usable(method: Any) -> bool:
    return method is not None and (method is _DIRECT or not is_transient(method))


def _method_column(method: Any) -> str | None:
    if method is _DIRECT:
        return None
    return column_name_of(method)


@lru_cache(maxsize=128)
def compile_bindings(target_class: type) -> tuple[FieldBinding, ...]:
    """Compute the field-to-column bindings for *target_class*.

    Transient fields, fields whose getter or setter is transient, and
    properties missing a getter or setter are left out.
    """
    bindings: list[FieldBinding] = []
    for name, markers in _declared_fields(target_class):
        if is_transient(markers):
            continue
        getter, setter = _accessors(target_class, name)
        if not (_usable(getter) and _usable(setter)):
            continue
        column = (
            column_name_of(markers)
            or _method_column(setter)
            or _method_column(getter)
            or name
        )
        bindings.append(FieldBinding(name, column))
    return tuple(bindings)


class ReflectionRowProcessor(Generic[T]):
    """Maps each row onto a new instance of *target_class*.

    Values are assigned as read from the cursor; no type conversion is done
    beyond what the field's setter performs itself.
    """

    operation = "ReflectionRowProcessor.process_row"

    def __init__(self, target_class: type[T]) -> None:
        self.target_class = target_class

    def process_row(self, result_set: ResultSet) -> T:
        try:
            instance = self.target_class()
            bindings = compile_bindings(self.target_class)
        except Exception as e:
            raise translate_reflection_error(self.operation, self.target_class, e) from e

        for binding in bindings:
            value = result_set.get_object(binding.column)
            try:
                setattr(instance, binding.name, value)
            except Exception as e:
                raise translate_reflection_error(self.operation, self.target_class, e) from e
        return instance
