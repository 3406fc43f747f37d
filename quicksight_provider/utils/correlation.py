# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""Correlation ID generation and context management for operation tracing.

Every lifecycle operation (create, read, update, delete, import) runs
under its own correlation ID so that the log lines of one operation,
including its nested read, can be grouped together.
"""

import contextvars
import logging
import uuid
from contextlib import contextmanager
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

# Context variable to store correlation ID per operation
_correlation_id_context: contextvars.ContextVar[str] = contextvars.ContextVar(
    "correlation_id", default=""
)


def generate_correlation_id() -> str:
    """
    Generate a unique correlation ID using UUID4.

    Returns:
        A unique correlation ID string in UUID4 format
    """
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str) -> contextvars.Token:
    """
    Set the correlation ID in the current context.

    Args:
        correlation_id: The correlation ID to set

    Returns:
        Token that restores the previous value when passed to reset
    """
    return _correlation_id_context.set(correlation_id)


def get_correlation_id() -> str:
    """
    Get the correlation ID from the current context.

    Returns:
        The correlation ID if set, or an empty string if not set
    """
    return _correlation_id_context.get()


@contextmanager
def operation_context(
    resource_type: str, operation: str, correlation_id: Optional[str] = None
) -> Iterator[str]:
    """
    Run a block under a correlation ID.

    An operation nested inside another one keeps the outer ID, so the
    read that follows a create is logged under the create's ID.

    Args:
        resource_type: Resource type name, for the start/finish log lines
        operation: Operation name (create, read, ...)
        correlation_id: Explicit ID to use instead of a generated one

    Yields:
        The correlation ID in effect
    """
    current = get_correlation_id()
    if current and correlation_id is None:
        yield current
        return

    token = set_correlation_id(correlation_id or generate_correlation_id())
    cid = get_correlation_id()
    logger.debug(
        f"{resource_type} {operation} started",
        extra={"correlation_id": cid},
    )
    try:
        yield cid
    finally:
        logger.debug(
            f"{resource_type} {operation} finished",
            extra={"correlation_id": cid},
        )
        _correlation_id_context.reset(token)


def get_correlation_id_for_logging() -> dict:
    """
    Get correlation ID as a dictionary for use in logging extra fields.

    Returns:
        Dictionary with correlation_id key, or empty dict if not set
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        return {"correlation_id": correlation_id}
    return {}


class CorrelationIdFilter(logging.Filter):
    """Logging filter that stamps every record with the current correlation ID."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = get_correlation_id() or "-"
        return True
