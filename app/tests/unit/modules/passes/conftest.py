"""Fixtures for passes module tests."""

from unittest.mock import AsyncMock, Mock

import pytest

from infrastructure.resilience.retry import RetryConfig
from modules.passes import BatchSubmissionCoordinator
from tests.factories.passes import make_batch_create_data


@pytest.fixture
def transport():
    """Pass transport double with async create_passes/existing_barcodes."""
    transport = Mock()
    transport.create_passes = AsyncMock(return_value=make_batch_create_data())
    transport.existing_barcodes = AsyncMock(return_value=set())
    return transport


@pytest.fixture
def make_coordinator(transport, recorded_sleep):
    """Factory for a coordinator over a store, with waits recorded."""

    def _factory(store, on_retry=None, max_retries=3):
        return BatchSubmissionCoordinator(
            store,
            transport,
            retry_config=RetryConfig(max_retries=max_retries),
            on_retry=on_retry,
            sleep=recorded_sleep,
        )

    return _factory
