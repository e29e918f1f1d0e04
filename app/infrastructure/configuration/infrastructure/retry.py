"""Retry settings for ParkHub API calls."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class RetrySettings(InfrastructureSettings):
    """Retry configuration for transient API failures.

    Environment Variables:
        RETRY_MAX_RETRIES: Retries after the first attempt (default: 3)
        RETRY_BASE_DELAY_MS: Base exponential backoff delay (default: 300ms)
        RETRY_MAX_DELAY_MS: Maximum backoff delay (default: 3000ms)

    Exponential Backoff:
        Delay calculation: min(max_delay, base_delay * (2 ^ attempt) * (1 + jitter))
        with jitter drawn from [0, 0.2) on every call.

        Example with defaults (base=300ms, max=3000ms), before jitter:
            Retry 1: 300ms
            Retry 2: 600ms
            Retry 3: 1200ms
    """

    max_retries: int = Field(
        default=3,
        alias="RETRY_MAX_RETRIES",
        description="Maximum retries after the original attempt",
    )
    base_delay_ms: int = Field(
        default=300,
        alias="RETRY_BASE_DELAY_MS",
        description="Base delay for exponential backoff (milliseconds)",
    )
    max_delay_ms: int = Field(
        default=3000,
        alias="RETRY_MAX_DELAY_MS",
        description="Maximum delay for exponential backoff (milliseconds)",
    )
