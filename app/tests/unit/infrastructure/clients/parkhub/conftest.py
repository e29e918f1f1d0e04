"""Fixtures for ParkHub client tests."""

import httpx
import pytest

from infrastructure.clients.parkhub import ParkHubClient
from infrastructure.configuration import ParkHubSettings, RetrySettings, Settings

BASE_URL = "https://api.parkhub.test"
LANDMARK_ID = "landmark-1"


@pytest.fixture
def parkhub_settings():
    """Settings pointing at a fake ParkHub deployment."""
    return Settings(
        parkhub=ParkHubSettings(
            PARKHUB_API_BASE_URL=BASE_URL,
            PARKHUB_LANDMARK_ID=LANDMARK_ID,
            PARKHUB_API_KEY="ph_test_key",
        ),
        retry=RetrySettings(),
    )


@pytest.fixture
def make_client(parkhub_settings):
    """Factory building a ParkHubClient backed by an httpx.MockTransport.

    Every request seen by the handler is appended to `client.requests`.
    """

    def _factory(handler, api_key="ph_test_key"):
        requests = []

        def _recording_handler(request):
            requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(_recording_handler))
        client = ParkHubClient(parkhub_settings, api_key=api_key, http_client=http_client)
        client.requests = requests
        return client

    return _factory
