"""Unit tests for infrastructure.logging.formatters module.

Tests cover:
- mask_sensitive_data processor
- add_environment_info processor
- SENSITIVE_PATTERNS constant
"""

import pytest

from infrastructure.logging.formatters import (
    SENSITIVE_PATTERNS,
    add_environment_info,
    mask_sensitive_data,
)


@pytest.mark.unit
class TestMaskSensitiveData:
    """Test suite for mask_sensitive_data processor factory."""

    def test_masks_api_key(self):
        """API keys never reach the log output."""
        processor = mask_sensitive_data()

        result = processor(None, "info", {"event": "request", "api_key": "ph_live_123"})

        assert result["api_key"] == "***REDACTED***"
        assert result["event"] == "request"

    def test_masks_case_insensitively(self):
        """Key matching ignores case."""
        processor = mask_sensitive_data()

        result = processor(None, "info", {"Authorization": "Bearer abc"})

        assert result["Authorization"] == "***REDACTED***"

    def test_keeps_none_values(self):
        """None values are left alone."""
        processor = mask_sensitive_data()

        result = processor(None, "info", {"api_key": None})

        assert result["api_key"] is None

    def test_additional_patterns(self):
        """Extra patterns extend the default set."""
        processor = mask_sensitive_data(additional_patterns=frozenset({"barcode"}))

        result = processor(None, "info", {"barcode": "BC100001", "event_id": "EV12345"})

        assert result["barcode"] == "***REDACTED***"
        assert result["event_id"] == "EV12345"

    def test_custom_mask_value(self):
        """The mask string is configurable."""
        processor = mask_sensitive_data(mask_value="[hidden]")

        result = processor(None, "info", {"password": "hunter2"})

        assert result["password"] == "[hidden]"

    def test_sensitive_patterns_cover_credentials(self):
        """Credential-like keys are in the default pattern set."""
        assert {"api_key", "authorization", "token"} <= SENSITIVE_PATTERNS


@pytest.mark.unit
class TestAddEnvironmentInfo:
    """Test suite for add_environment_info processor factory."""

    def test_adds_environment(self):
        """Processor adds the environment name."""
        processor = add_environment_info("production")

        result = processor(None, "info", {"event": "started"})

        assert result["environment"] == "production"
