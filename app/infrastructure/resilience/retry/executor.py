"""Retry executor for asynchronous operations.

Wraps an awaitable operation: failures are classified, retryable ones are
retried after an exponential backoff, everything else fails on the spot.

State machine per invocation:
    Attempting -> Success | Classifying
    Classifying -> Retrying | Failed
    Retrying -> Attempting (after the backoff wait)

The executor holds no state between calls. The attempt count travels on the
RetryableError itself, replaced by a fresh copy on every failure.
"""

import asyncio
import functools
from typing import Any, Awaitable, Callable, Optional, TypeVar

import structlog

from infrastructure.operations.classifiers import classify
from infrastructure.operations.errors import RetryableError
from infrastructure.resilience.retry.backoff import calculate_backoff_delay
from infrastructure.resilience.retry.config import RetryConfig

logger = structlog.get_logger()

T = TypeVar("T")

OnRetry = Callable[[RetryableError, int, float], None]
Classifier = Callable[[BaseException], RetryableError]
Sleep = Callable[[float], Awaitable[Any]]


async def execute_with_retry(
    operation: Callable[[], Awaitable[T]],
    config: Optional[RetryConfig] = None,
    on_retry: Optional[OnRetry] = None,
    classifier: Classifier = classify,
    sleep: Optional[Sleep] = None,
    rng: Optional[Callable[[], float]] = None,
) -> T:
    """Run an async operation, retrying transient failures.

    Total attempts are bounded by config.max_retries + 1. A non-retryable
    classification fails immediately without consuming retry budget or
    calling on_retry. The terminal error is raised as classified, chained
    to the raw failure.

    Args:
        operation: Zero-argument coroutine function to invoke
        config: Retry limits and backoff delays (defaults to RetryConfig())
        on_retry: Called as on_retry(error, retry_ordinal, delay_ms) before
            each backoff wait; retry_ordinal is 1-based
        classifier: Maps raw failures to RetryableError
        sleep: Awaitable sleep taking seconds (defaults to asyncio.sleep)
        rng: Jitter source passed to the backoff calculator

    Returns:
        The operation's result

    Raises:
        RetryableError: The last classified failure
    """
    config = config or RetryConfig()
    sleep = sleep or asyncio.sleep
    log = logger.bind(component="retry_executor", max_retries=config.max_retries)
    attempt = 0

    while True:
        try:
            return await operation()
        except Exception as exc:
            error = classifier(exc).with_attempt(attempt + 1)

            if not error.retryable:
                log.warning(
                    "retry_aborted_non_retryable",
                    attempt=error.attempt,
                    category=error.category.value,
                    code=error.code.value,
                )
                raise error from exc

            if error.attempt > config.max_retries:
                log.warning(
                    "retry_budget_exhausted",
                    attempts=error.attempt,
                    category=error.category.value,
                    code=error.code.value,
                )
                raise error from exc

        attempt = error.attempt
        delay_ms = calculate_backoff_delay(
            attempt - 1, config.base_delay_ms, config.max_delay_ms, rng=rng
        )

        log.info(
            "retry_scheduled",
            retry=attempt,
            delay_ms=round(delay_ms, 1),
            category=error.category.value,
            code=error.code.value,
        )
        if on_retry is not None:
            on_retry(error, attempt, delay_ms)

        await sleep(delay_ms / 1000)


def retry_with_backoff(
    config: Optional[RetryConfig] = None,
    on_retry: Optional[OnRetry] = None,
    sleep: Optional[Sleep] = None,
):
    """Decorator form of execute_with_retry for coroutine functions.

    Public helper for callers whose retry settings are fixed at definition
    time. BatchSubmissionCoordinator calls execute_with_retry directly
    because its RetryConfig is chosen per instance.

    Example:
        @retry_with_backoff(RetryConfig(max_retries=2))
        async def fetch_passes(event_id):
            ...
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            return await execute_with_retry(
                lambda: func(*args, **kwargs),
                config=config,
                on_retry=on_retry,
                sleep=sleep,
            )

        return wrapper

    return decorator
