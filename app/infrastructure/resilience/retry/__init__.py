"""Retry system for transient failures.

Architecture:
- RetryConfig: Limits and backoff delays
- calculate_backoff_delay: Exponential backoff with jitter
- execute_with_retry: Async retry loop driven by the error classifier
- retry_with_backoff: Decorator form of execute_with_retry (public helper)
- backoff_floor: Non-jittered lower bound of calculate_backoff_delay

Usage:
    from infrastructure.resilience.retry import RetryConfig, execute_with_retry

    result = await execute_with_retry(
        lambda: client.create_passes(payloads),
        config=RetryConfig(max_retries=3),
        on_retry=lambda error, retry, delay_ms: print(retry, delay_ms),
    )
"""

from infrastructure.resilience.retry.backoff import (
    JITTER_FRACTION,
    backoff_floor,
    calculate_backoff_delay,
)
from infrastructure.resilience.retry.config import RetryConfig
from infrastructure.resilience.retry.executor import (
    OnRetry,
    Sleep,
    execute_with_retry,
    retry_with_backoff,
)

__all__ = [
    "RetryConfig",
    "JITTER_FRACTION",
    "backoff_floor",
    "calculate_backoff_delay",
    "OnRetry",
    "Sleep",
    "execute_with_retry",
    "retry_with_backoff",
]
