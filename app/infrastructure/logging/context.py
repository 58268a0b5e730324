"""Request context binding for structured logging.

Binds request-scoped values (correlation id, path, language) to structlog
context variables so every log line emitted while serving a request carries
them. Context variables are per asyncio task, so overlapping requests never
see each other's values.

Usage:
    from infrastructure.logging import bind_request_context

    with bind_request_context(correlation_id="req-123", language="hi"):
        logger.info("processing_request")
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind request-scoped context to all logs within the block.

    Args:
        correlation_id: Request identifier. Generated when not provided.
        request_path: HTTP request path (e.g., "/api/v1/cities").
        request_method: HTTP method (e.g., "GET").
        **extra_context: Additional key-value pairs; ``None`` values are skipped.

    Yields:
        The correlation id in effect for the block.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}

    if request_path is not None:
        context["request_path"] = request_path
    if request_method is not None:
        context["request_method"] = request_method

    context.update({k: v for k, v in extra_context.items() if v is not None})

    # Resetting the tokens restores any values an enclosing block bound
    tokens = structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["correlation_id"]
    finally:
        structlog.contextvars.reset_contextvars(**tokens)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context."""
    return structlog.contextvars.get_contextvars().get("correlation_id")


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID in the current logging context."""
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_request_context() -> None:
    """Clear all request-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
