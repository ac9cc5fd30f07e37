"""Mapping layer - turn result rows into scalars or typed objects."""

from __future__ import annotations

from lite_query.mapping.annotations import Column, Transient
from lite_query.mapping.protocol import RowProcessor
from lite_query.mapping.reflection import FieldBinding, ReflectionRowProcessor, compile_bindings
from lite_query.mapping.simple import SimpleRowProcessor

__all__ = [
    "RowProcessor",
    "SimpleRowProcessor",
    "ReflectionRowProcessor",
    "FieldBinding",
    "compile_bindings",
    "Column",
    "Transient",
]
