"""LiteQuery exception hierarchy.

All exceptions are LiteQuery-specific. Raw driver exceptions are never
exposed to callers; the original error is kept on ``cause`` and as
``__cause__``.
"""

from __future__ import annotations


class LiteQueryError(Exception):
    """Base exception for all LiteQuery errors."""


# --- Data access ---


class DataAccessError(LiteQueryError):
    """Raised when the database driver fails.

    Covers connection acquisition, statement preparation, parameter binding,
    execution and reading from the result cursor.
    """

    def __init__(
        self,
        operation: str,
        cause: BaseException | None = None,
        detail: str | None = None,
    ) -> None:
        self.operation = operation
        self.cause = cause
        reason = detail if detail is not None else (str(cause) or type(cause).__name__)
        super().__init__(f"{operation} failed: {reason}")


class ParameterBindingError(DataAccessError):
    """Raised when parameters cannot be bound to a statement."""


# --- Mapping ---


class ReflectionMappingError(LiteQueryError):
    """Raised when a row cannot be mapped onto an instance of the target class."""

    def __init__(
        self,
        operation: str,
        target_class: type,
        cause: BaseException | None = None,
    ) -> None:
        self.operation = operation
        self.target_class = target_class
        self.cause = cause
        name = getattr(target_class, "__qualname__", repr(target_class))
        super().__init__(f"{operation} failed to map row onto {name}: {cause}")


# --- Adapter ---


class AdapterError(LiteQueryError):
    """Raised when a database adapter cannot be loaded."""
