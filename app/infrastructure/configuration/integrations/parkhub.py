"""ParkHub API integration settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class ParkHubSettings(IntegrationSettings):
    """ParkHub API configuration.

    Environment Variables:
        PARKHUB_API_BASE_URL: Base URL of the ParkHub API
        PARKHUB_LANDMARK_ID: Landmark the passes are created under
        PARKHUB_API_KEY: API key sent as a bearer token (optional, may be set at runtime)
        PARKHUB_TIMEOUT_SECONDS: Per-request timeout enforced by the transport

    Example:
        ```python
        from infrastructure.configuration import settings

        base_url = settings.parkhub.api_base_url
        landmark_id = settings.parkhub.landmark_id
        ```
    """

    api_base_url: str = Field(
        default="https://api.parkhub.com",
        alias="PARKHUB_API_BASE_URL",
        description="Base URL of the ParkHub API",
    )
    landmark_id: str = Field(
        default="7fc72127-c601-46f3-849b-0fdea9f370ae",
        alias="PARKHUB_LANDMARK_ID",
        description="Landmark identifier used in pass endpoints",
    )
    api_key: Optional[str] = Field(
        default=None,
        alias="PARKHUB_API_KEY",
        description="API key for bearer authentication",
    )
    timeout_seconds: float = Field(
        default=10.0,
        alias="PARKHUB_TIMEOUT_SECONDS",
        description="Request timeout in seconds (a timeout is a network failure)",
    )
