"""Submission-scoped context binding for structured logging.

Every log line emitted while a batch is being submitted (validation, each
retry attempt, the response merge) carries the same correlation id.

Usage:
    from infrastructure.logging import bind_submission_context

    with bind_submission_context(event_id="EV12345", record_count=3):
        logger.info("batch_submit_started")
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_submission_context(
    correlation_id: Optional[str] = None,
    event_id: Optional[str] = None,
    record_count: Optional[int] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind submission context to all logs within the context manager.

    Args:
        correlation_id: Submission identifier. Auto-generated if not provided.
        event_id: Event the batch is created for.
        record_count: Number of records in the submitted batch.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The correlation id bound for the block.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}

    if event_id is not None:
        context["event_id"] = event_id

    if record_count is not None:
        context["record_count"] = record_count

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["correlation_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context."""
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def clear_logging_context() -> None:
    """Clear all bound context from the logging context."""
    structlog.contextvars.clear_contextvars()
