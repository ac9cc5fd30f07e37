"""LiteQuery - a thin query/update layer over DB-API drivers."""

from __future__ import annotations

from lite_query.core.connection import ConnectionConfig, ConnectionManager
from lite_query.core.exceptions import (
    AdapterError,
    DataAccessError,
    LiteQueryError,
    ParameterBindingError,
    ReflectionMappingError,
)
from lite_query.core.factory import SessionFactory
from lite_query.core.params import SqlType
from lite_query.core.session import Session
from lite_query.core.statement import ResultSet, Statement
from lite_query.mapping.annotations import Column, Transient
from lite_query.mapping.protocol import RowProcessor
from lite_query.mapping.reflection import ReflectionRowProcessor
from lite_query.mapping.simple import SimpleRowProcessor

__all__ = [
    # Connection
    "ConnectionConfig",
    "ConnectionManager",
    # Session
    "Session",
    "SessionFactory",
    # Statement
    "Statement",
    "ResultSet",
    "SqlType",
    # Mapping
    "RowProcessor",
    "SimpleRowProcessor",
    "ReflectionRowProcessor",
    "Column",
    "Transient",
    # Exceptions
    "LiteQueryError",
    "DataAccessError",
    "ParameterBindingError",
    "ReflectionMappingError",
    "AdapterError",
]
