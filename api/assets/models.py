# api/assets/models.py
"""
Pydantic models for asset responses.

AssetRead is also the snapshot type the dashboard aggregator and the bulk
rows work on, whether the record came from the ORM or from JSON.
"""
from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, field_validator


class AssetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    code: str
    name: str
    specification: str | None = None

    category_id: int | None = None
    location_id: int | None = None
    location: str | None = None

    quantity: int = 1
    unit: str | None = None

    acquisition_price: float = 0
    residual_value: float = 0
    accumulated_depreciation: float = 0

    # Kept as received; see core.status.normalize_status
    status: str = "baik"

    acquisition_date: date | None = None
    economic_life_years: int | None = None
    acquisition_source: str | None = None

    is_bulk_parent: bool = False
    bulk_id: str | None = None
    bulk_total_count: int | None = None
    bulk_sequence: int | None = None

    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("acquisition_price", "residual_value", "accumulated_depreciation", mode="before")
    @classmethod
    def _none_is_zero(cls, value):
        return 0 if value is None else value

    @field_validator("status", mode="before")
    @classmethod
    def _empty_status(cls, value):
        return value or "baik"


class AssetPage(BaseModel):
    data: list[AssetRead]
    total: int
    page: int
    page_size: int


class BulkAssetsResponse(BaseModel):
    """Children of one bulk group, ordered by sequence."""
    bulk_id: str
    data: list[AssetRead]
