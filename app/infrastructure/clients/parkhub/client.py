"""Async client for the ParkHub passes API.

Every failure leaves this client as a classified RetryableError so callers
(and the retry executor) never handle httpx exceptions directly. The client
itself does not retry.
"""

from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Set

import httpx
import structlog
from pydantic import ValidationError

from infrastructure.clients.parkhub.endpoints import (
    build_create_passes_url,
    build_passes_url,
)
from infrastructure.clients.parkhub.models import (
    BatchCreateData,
    ParkHubPass,
    PassPayload,
)
from infrastructure.operations import (
    ErrorCategory,
    ErrorCode,
    RetryableError,
    classify,
    classify_api_error,
    get_error_message,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = structlog.get_logger()


class ParkHubClient:
    """Client for ParkHub pass operations.

    Args:
        settings: Settings instance with the parkhub section (defaults to the
            application settings)
        api_key: Credential overriding settings.parkhub.api_key
        http_client: Preconfigured httpx.AsyncClient; the client only closes
            connections it created itself
    """

    def __init__(
        self,
        settings: Optional["Settings"] = None,
        api_key: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        if settings is None:
            from infrastructure.configuration import settings as app_settings

            settings = app_settings

        parkhub = settings.parkhub
        self._base_url = parkhub.api_base_url
        self._landmark_id = parkhub.landmark_id
        self._api_key = api_key if api_key is not None else parkhub.api_key
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=parkhub.timeout_seconds)
        self._logger = logger.bind(component="parkhub_client", landmark_id=self._landmark_id)

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    @property
    def has_api_key(self) -> bool:
        return bool(self._api_key and self._api_key.strip())

    def set_api_key(self, api_key: str) -> None:
        """Replace the credential sent with every request."""
        if not api_key or not api_key.strip():
            raise ValueError("API key cannot be empty")
        self._api_key = api_key.strip()
        self._logger.info("api_key_updated")

    def clear_api_key(self) -> None:
        self._api_key = None
        self._logger.info("api_key_cleared")

    def _auth_headers(self) -> dict:
        if not self.has_api_key:
            raise RetryableError(
                get_error_message(ErrorCategory.AUTH, ErrorCode.MISSING_API_KEY),
                category=ErrorCategory.AUTH,
                code=ErrorCode.MISSING_API_KEY,
                retryable=False,
            )
        return {
            "Authorization": f"Bearer {self._api_key.strip()}",
            "Content-Type": "application/json",
        }

    async def _request(
        self,
        method: str,
        url: str,
        json: Any = None,
        params: Optional[dict] = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Raises:
            RetryableError: For transport failures, error statuses and API
                bodies reporting success=false
        """
        headers = self._auth_headers()
        log = self._logger.bind(method=method, url=url)
        log.debug("parkhub_request_started")

        try:
            response = await self._http.request(
                method, url, json=json, params=params, headers=headers
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            error = classify(exc)
            if error.category == ErrorCategory.AUTH:
                # A rejected credential must be re-entered, never reused
                self.clear_api_key()
            log.warning(
                "parkhub_request_failed",
                category=error.category.value,
                code=error.code.value,
                status_code=error.status_code,
                retryable=error.retryable,
            )
            raise error from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise RetryableError(
                get_error_message(ErrorCategory.SERVER, ErrorCode.UNKNOWN_ERROR),
                category=ErrorCategory.UNKNOWN,
                code=ErrorCode.UNKNOWN_ERROR,
                status_code=response.status_code,
                cause=exc,
            ) from exc

        if isinstance(body, dict) and body.get("success") is False:
            error = classify_api_error(response.status_code, body)
            log.warning(
                "parkhub_request_rejected",
                category=error.category.value,
                code=error.code.value,
            )
            raise error

        log.debug("parkhub_request_completed", status_code=response.status_code)
        return body

    @staticmethod
    def _unwrap(body: Any) -> Any:
        if isinstance(body, dict) and "success" in body:
            return body.get("data")
        return body

    async def create_passes(self, payloads: Sequence[PassPayload]) -> BatchCreateData:
        """Create a batch of passes in one call.

        Args:
            payloads: Passes to create, all for the same event

        Returns:
            BatchCreateData with per-item successes and failures
        """
        url = build_create_passes_url(self._base_url, self._landmark_id)
        self._logger.info("create_passes_started", count=len(payloads))

        body = await self._request("POST", url, json=[p.to_api() for p in payloads])

        try:
            result = BatchCreateData.model_validate(self._unwrap(body) or {})
        except ValidationError as exc:
            raise RetryableError(
                "Unexpected response from the ParkHub service.",
                category=ErrorCategory.UNKNOWN,
                code=ErrorCode.UNKNOWN_ERROR,
                cause=exc,
            ) from exc

        self._logger.info(
            "create_passes_completed",
            successful=len(result.successful),
            failed=len(result.failed),
        )
        return result

    async def get_passes_for_event(self, event_id: str) -> List[ParkHubPass]:
        """List the passes already created for an event."""
        url, params = build_passes_url(self._base_url, self._landmark_id, event_id)
        body = await self._request("GET", url, params=params)
        data = self._unwrap(body) or []

        try:
            return [ParkHubPass.model_validate(item) for item in data]
        except (ValidationError, TypeError) as exc:
            raise RetryableError(
                "Unexpected response from the ParkHub service.",
                category=ErrorCategory.UNKNOWN,
                code=ErrorCode.UNKNOWN_ERROR,
                cause=exc,
            ) from exc

    async def existing_barcodes(self, event_id: str) -> Set[str]:
        """Barcodes already committed for an event."""
        passes = await self.get_passes_for_event(event_id)
        return {p.barcode for p in passes}

    async def close(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> "ParkHubClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
