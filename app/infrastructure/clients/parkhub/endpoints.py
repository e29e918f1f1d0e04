"""ParkHub API endpoint paths and URL builders."""

from typing import Dict, Tuple

PASSES_PATH = "/{landmark_id}/passes"


def _require(value: str, name: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{name} is required")
    return value.strip()


def build_create_passes_url(base_url: str, landmark_id: str) -> str:
    """URL of the batch pass-creation endpoint."""
    landmark_id = _require(landmark_id, "landmark_id")
    return base_url.rstrip("/") + PASSES_PATH.format(landmark_id=landmark_id)


def build_passes_url(
    base_url: str, landmark_id: str, event_id: str
) -> Tuple[str, Dict[str, str]]:
    """URL and query parameters for listing the passes of one event."""
    landmark_id = _require(landmark_id, "landmark_id")
    event_id = _require(event_id, "event_id")
    url = base_url.rstrip("/") + PASSES_PATH.format(landmark_id=landmark_id)
    return url, {"landMarkId": landmark_id, "eventId": event_id}
