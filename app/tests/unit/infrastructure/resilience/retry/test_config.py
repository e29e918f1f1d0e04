"""Unit tests for retry configuration."""

import pytest

from infrastructure.configuration import RetrySettings
from infrastructure.resilience.retry.config import RetryConfig


class TestRetryConfig:
    """Tests for RetryConfig dataclass."""

    def test_create_config_with_defaults(self):
        """Test creating RetryConfig with default values."""
        config = RetryConfig()

        assert config.max_retries == 3
        assert config.base_delay_ms == 300
        assert config.max_delay_ms == 3000

    def test_create_config_with_custom_values(self, retry_config_factory):
        """Test creating RetryConfig with custom values."""
        config = retry_config_factory(max_retries=5, base_delay_ms=100, max_delay_ms=1000)

        assert config.max_retries == 5
        assert config.base_delay_ms == 100
        assert config.max_delay_ms == 1000

    def test_zero_retries_is_allowed(self):
        """Test a single-attempt configuration."""
        assert RetryConfig(max_retries=0).max_retries == 0

    def test_config_validates_max_retries(self):
        """Test that max_retries cannot be negative."""
        with pytest.raises(ValueError, match="max_retries must be at least 0"):
            RetryConfig(max_retries=-1)

    def test_config_validates_base_delay(self):
        """Test that base_delay_ms must be positive."""
        with pytest.raises(ValueError, match="base_delay_ms must be at least 1"):
            RetryConfig(base_delay_ms=0)

    def test_config_validates_max_delay(self):
        """Test that max_delay_ms cannot be below base_delay_ms."""
        with pytest.raises(ValueError, match="max_delay_ms must be >= base_delay_ms"):
            RetryConfig(base_delay_ms=500, max_delay_ms=100)

    def test_from_settings(self, monkeypatch):
        """Test building a RetryConfig from environment settings."""
        monkeypatch.setenv("RETRY_MAX_RETRIES", "5")
        monkeypatch.setenv("RETRY_BASE_DELAY_MS", "200")
        monkeypatch.setenv("RETRY_MAX_DELAY_MS", "5000")

        config = RetryConfig.from_settings(RetrySettings())

        assert config == RetryConfig(max_retries=5, base_delay_ms=200, max_delay_ms=5000)
