"""Retry executor configuration.

This module defines configuration for retrying transient API failures.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from infrastructure.configuration import RetrySettings


@dataclass
class RetryConfig:
    """Configuration for retry executor behavior.

    Attributes:
        max_retries: Retries allowed after the original attempt
            (total attempts = max_retries + 1)
        base_delay_ms: Base delay for exponential backoff (first retry)
        max_delay_ms: Maximum delay between attempts (cap for exponential backoff)

    Example:
        # Default configuration
        config = RetryConfig()

        # Custom configuration
        config = RetryConfig(max_retries=5, base_delay_ms=500)
    """

    max_retries: int = 3
    base_delay_ms: int = 300
    max_delay_ms: int = 3000

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.max_retries < 0:
            raise ValueError("max_retries must be at least 0")
        if self.base_delay_ms < 1:
            raise ValueError("base_delay_ms must be at least 1")
        if self.max_delay_ms < self.base_delay_ms:
            raise ValueError("max_delay_ms must be >= base_delay_ms")

    @classmethod
    def from_settings(cls, retry_settings: "RetrySettings") -> "RetryConfig":
        """Build a RetryConfig from environment-backed settings."""
        return cls(
            max_retries=retry_settings.max_retries,
            base_delay_ms=retry_settings.base_delay_ms,
            max_delay_ms=retry_settings.max_delay_ms,
        )
