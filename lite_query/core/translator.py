"""Translate driver and introspection failures into LiteQuery errors."""

from __future__ import annotations

import logging

from lite_query.core.exceptions import (
    DataAccessError,
    LiteQueryError,
    ReflectionMappingError,
)

logger = logging.getLogger(__name__)


def translate_driver_error(operation: str, error: BaseException) -> LiteQueryError:
    """Wrap a driver failure as a DataAccessError tagged with *operation*.

    Errors that are already LiteQuery errors are returned as they are; when
    they come from an inner step, *operation* is added to them as a note.
    """
    if isinstance(error, LiteQueryError):
        if getattr(error, "operation", operation) != operation:
            error.add_note(f"during {operation}")
        return error
    logger.debug("%s raised %s: %s", operation, type(error).__name__, error)
    return DataAccessError(operation, error)


def translate_reflection_error(
    operation: str,
    target_class: type,
    error: BaseException,
) -> LiteQueryError:
    """Wrap an introspection or mutator failure as a ReflectionMappingError."""
    if isinstance(error, LiteQueryError):
        return error
    logger.debug(
        "%s could not map onto %s: %s",
        operation,
        getattr(target_class, "__qualname__", target_class),
        error,
    )
    return ReflectionMappingError(operation, target_class, error)
