"""Resilience patterns.

This module contains the retry configuration, backoff calculation and the
async retry executor used for calls to the ParkHub API.
"""

from infrastructure.resilience.retry import (
    JITTER_FRACTION,
    RetryConfig,
    backoff_floor,
    calculate_backoff_delay,
    execute_with_retry,
    retry_with_backoff,
)

__all__ = [
    "RetryConfig",
    "JITTER_FRACTION",
    "backoff_floor",
    "calculate_backoff_delay",
    "execute_with_retry",
    "retry_with_backoff",
]
