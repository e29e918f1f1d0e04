"""ParkHub API client for infrastructure layer.

Public API (Package Level):
- ParkHubClient: Async client for pass creation and lookup
- PassPayload: Wire model of one pass to create
- BatchCreateData: Per-item result of a batch-create call
- ParkHubPass: A pass already stored by ParkHub

Usage:
    from infrastructure.clients.parkhub import ParkHubClient

    async with ParkHubClient(api_key="...") as client:
        result = await client.create_passes(payloads)
        for item in result.failed:
            print(item.barcode, item.error.message)
"""

from infrastructure.clients.parkhub.client import ParkHubClient
from infrastructure.clients.parkhub.models import (
    ApiErrorDetail,
    BatchCreateData,
    CreatedPass,
    FailedPass,
    ParkHubPass,
    PassPayload,
)

__all__ = [
    "ParkHubClient",
    "ApiErrorDetail",
    "BatchCreateData",
    "CreatedPass",
    "FailedPass",
    "ParkHubPass",
    "PassPayload",
]
