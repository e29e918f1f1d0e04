"""Exponential backoff with jitter."""

import random
from typing import Callable, Optional

# Jitter adds up to 20% to the exponential term so that clients failing
# together do not retry together.
JITTER_FRACTION = 0.2


def backoff_floor(attempt: int, base_delay_ms: int, max_delay_ms: int) -> float:
    """Return the non-jittered delay for an attempt: min(max, base * 2^attempt).

    This is the lower bound of calculate_backoff_delay for the same attempt.
    """
    if attempt < 0:
        raise ValueError("attempt must be at least 0")
    exponential = base_delay_ms * (2**attempt)
    return float(min(exponential, max_delay_ms))


def calculate_backoff_delay(
    attempt: int,
    base_delay_ms: int = 300,
    max_delay_ms: int = 3000,
    rng: Optional[Callable[[], float]] = None,
) -> float:
    """Calculate the delay before the next attempt.

    Uses the formula: min(max_delay, base_delay * (2 ^ attempt) * (1 + jitter))
    where jitter is drawn from [0, JITTER_FRACTION) on every call.

    Args:
        attempt: Zero-based retry index (0 for the first retry)
        base_delay_ms: Base delay in milliseconds
        max_delay_ms: Maximum delay in milliseconds
        rng: Source of uniform floats in [0, 1), defaults to random.random

    Returns:
        Delay in milliseconds, never above max_delay_ms
    """
    floor = backoff_floor(attempt, base_delay_ms, max_delay_ms)
    if floor >= max_delay_ms:
        return floor

    jitter = (rng or random.random)() * JITTER_FRACTION
    return min(float(max_delay_ms), floor * (1 + jitter))
