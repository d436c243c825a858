"""Invocation context binding for structured logging.

Binds invocation-scoped context (correlation ID, action name, target user
and group) to every log entry emitted while an action runs.

Usage:
    from infrastructure.logging import bind_request_context

    with bind_request_context(action="remove_user_from_group", user_name="jdoe"):
        logger.info("processing")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind invocation-scoped context to all logs within the context manager.

    Args:
        correlation_id: Unique invocation identifier. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.
            None values are skipped.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}
    context.update({k: v for k, v in extra_context.items() if v is not None})

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context.

    Returns:
        The correlation ID if set, None otherwise.
    """
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")
