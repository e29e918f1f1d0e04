"""Infrastructure modules for the ParkHub batch pass tool.

Centralized infrastructure components:
- configuration: Settings management (settings, ParkHubSettings, RetrySettings)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Error taxonomy, classification and user-facing messages
- resilience: Exponential backoff and the async retry executor
- clients: ParkHub API client
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import configure_logging, get_module_logger

__all__ = [
    "settings",
    "configure_logging",
    "get_module_logger",
]
