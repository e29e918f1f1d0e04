"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.parkhub import ParkHubSettings

__all__ = [
    "ParkHubSettings",
]
