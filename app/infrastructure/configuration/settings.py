"""Application configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from infrastructure.configuration.integrations import ParkHubSettings
from infrastructure.configuration.infrastructure import RetrySettings


class Settings(BaseSettings):
    """Application configuration settings - main aggregator.

    Aggregates the domain-specific settings into a single configuration object:

    - **Integrations**: ParkHub API connection
    - **Infrastructure**: Retry behavior

    Environment Variables:
        ENVIRONMENT: Deployment environment name ("production" enables JSON logs)
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from infrastructure.configuration import settings

        base_url = settings.parkhub.api_base_url
        max_retries = settings.retry.max_retries

        if settings.is_production:
            ...
        ```
    """

    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    parkhub: ParkHubSettings
    retry: RetrySettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "parkhub": ParkHubSettings,
            "retry": RetrySettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
