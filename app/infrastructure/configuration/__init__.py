"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    ParkHubSettings: ParkHub API settings class
    RetrySettings: Retry settings class

Example:
    ```python
    from infrastructure.configuration import settings

    api_key = settings.parkhub.api_key
    max_retries = settings.retry.max_retries
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.integrations.parkhub import ParkHubSettings
from infrastructure.configuration.infrastructure.retry import RetrySettings

__all__ = ["settings", "Settings", "ParkHubSettings", "RetrySettings"]
