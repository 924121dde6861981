# api/dashboard/models.py
"""
Pydantic models for dashboard responses.
"""
from datetime import date, datetime
from pydantic import BaseModel


class StatusSegment(BaseModel):
    """One slice of the condition donut chart."""
    status: str
    label: str
    count: int
    percentage: int


class AgeDistribution(BaseModel):
    """Assets with a price and acquisition date, bucketed by age."""
    less_than_1_year: int = 0
    between_1_and_2_years: int = 0
    between_2_and_3_years: int = 0
    more_than_3_years: int = 0


class CategoryRollup(BaseModel):
    id: int
    code: str
    name: str
    count: int
    value: float


class LocationRollup(BaseModel):
    id: int
    code: str
    name: str
    building: str = ""
    room: str | None = None
    count: int
    value: float


class AcquisitionSourceRollup(BaseModel):
    source: str
    count: int
    value: float
    percentage: int


class MonthBucket(BaseModel):
    """Acquisitions within one calendar month of the trailing window."""
    month: str
    year: int
    month_index: int
    start_date: date
    end_date: date
    count: int = 0
    growth_percentage: int = 0


class DashboardStats(BaseModel):
    """Everything the dashboard shows, derived from one snapshot of the three lists."""
    generated_at: datetime

    total_assets: int
    total_value: float
    estimated_current_value: float
    depreciation_amount: float
    # Remaining value as a share of acquisition value, 0-100
    depreciation_percentage: int

    category_count: int
    location_count: int

    status_counts: dict[str, int]
    status_segments: list[StatusSegment]
    good_assets_percent: int
    damaged_assets_percent: int

    assets_by_category: list[CategoryRollup]
    assets_by_location: list[LocationRollup]
    top_categories_by_value: list[CategoryRollup]

    monthly_growth: list[MonthBucket]
    asset_age_distribution: AgeDistribution
    acquisition_sources: list[AcquisitionSourceRollup]

    assets_with_calculation: int
    assets_without_date: int
