"""Wire models for the ParkHub passes API.

Field names follow the API's camelCase JSON; Python attributes are
snake_case and both are accepted on input.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ParkHubModel(BaseModel):
    """Base model for ParkHub payloads."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )


class PassPayload(ParkHubModel):
    """One pass to create, as sent to the batch-create endpoint."""

    event_id: str = Field(alias="eventId")
    account_id: str = Field(alias="accountId")
    barcode: str
    customer_name: str = Field(alias="customerName")
    spot_type: str = Field(alias="spotType")
    lot_id: str = Field(alias="lotId")

    def to_api(self) -> dict:
        return self.model_dump(by_alias=True)


class ApiErrorDetail(ParkHubModel):
    code: str = "unknown_error"
    message: str = "Unknown error occurred during pass creation"
    field: Optional[str] = None


class CreatedPass(ParkHubModel):
    barcode: str
    pass_id: str = Field(alias="passId")
    customer_name: Optional[str] = Field(default=None, alias="customerName")


class FailedPass(ParkHubModel):
    barcode: str
    customer_name: Optional[str] = Field(default=None, alias="customerName")
    error: ApiErrorDetail = Field(default_factory=ApiErrorDetail)


class BatchCreateData(ParkHubModel):
    """Per-item outcome of one batch-create call."""

    successful: List[CreatedPass] = Field(default_factory=list)
    failed: List[FailedPass] = Field(default_factory=list)
    total_success: int = Field(default=0, alias="totalSuccess")
    total_failed: int = Field(default=0, alias="totalFailed")


class ParkHubPass(ParkHubModel):
    """A pass already stored by ParkHub."""

    id: str
    event_id: str = Field(alias="eventId")
    account_id: Optional[str] = Field(default=None, alias="accountId")
    barcode: str
    customer_name: Optional[str] = Field(default=None, alias="customerName")
    spot_type: Optional[str] = Field(default=None, alias="spotType")
    lot_id: Optional[str] = Field(default=None, alias="lotId")
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    status: Optional[str] = None
