"""Structured logging infrastructure.

Centralized logging configuration and utilities built on structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - bind_submission_context(): Context manager for submission-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - clear_logging_context(): Clear all bound context

Example:
    from infrastructure.logging import configure_logging, get_module_logger

    # At application startup
    configure_logging()

    # In a module
    logger = get_module_logger()
    logger.info("module_initialized")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_submission_context,
    get_correlation_id,
    clear_logging_context,
)

from infrastructure.logging.formatters import (
    mask_sensitive_data,
    add_environment_info,
    SENSITIVE_PATTERNS,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_submission_context",
    "get_correlation_id",
    "clear_logging_context",
    "mask_sensitive_data",
    "add_environment_info",
    "SENSITIVE_PATTERNS",
]
