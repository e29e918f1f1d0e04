"""Structlog configuration for the pass-creation service.

Every log entry goes through one processor chain:

    contextvars (correlation_id, event_id, record_count of the active
    submission) -> log level -> ISO timestamp -> call site -> environment
    name -> credential masking -> stack and exception rendering -> renderer

Credential masking runs after every field is bound, so a ParkHub API key or
bearer header passed as a log field is redacted whatever the renderer. The
renderer is a console renderer in development and JSON when ENVIRONMENT is
production.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("batch_submit_started", record_count=3)

Dependencies:
    - infrastructure.configuration.settings (ENVIRONMENT, LOG_LEVEL)
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.configuration import settings
from infrastructure.logging.formatters import add_environment_info, mask_sensitive_data


def _is_test_environment() -> bool:
    """Return True when running under pytest."""
    return "pytest" in sys.modules


def build_processors(environment: str, is_production: bool) -> List[Any]:
    """Build the processor chain for an environment.

    Args:
        environment: Environment name stamped on every entry
        is_production: JSON output when True, console output otherwise

    Returns:
        Ordered structlog processors, ending with the renderer
    """
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_environment_info(environment),
        mask_sensitive_data(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging for the service.

    Under pytest all output is suppressed and the overrides are ignored.

    Args:
        log_level: Level name overriding settings.LOG_LEVEL
        is_production: Overrides settings.is_production (JSON vs console)

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)

        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    prod_mode = is_production if is_production is not None else settings.is_production

    structlog.configure(
        processors=build_processors(settings.ENVIRONMENT, prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Example:
        # In modules/passes/store.py
        logger = get_module_logger()
        # context: {"component": "store", "module_path": "modules.passes.store"}
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    frame = current_frame.f_back
    if frame is None:
        return logger

    module = inspect.getmodule(frame)
    if module:
        module_name = module.__name__
        return logger.bind(component=module_name.split(".")[-1], module_path=module_name)

    return logger.bind(component="unknown")
