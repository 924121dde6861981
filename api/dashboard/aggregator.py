# api/dashboard/aggregator.py
"""
Dashboard statistics computed from snapshots of assets, categories and locations.

Everything here is a pure function of its arguments: the same three lists and
reference time always give the same DashboardStats, and inputs are never
modified. Both the /dashboard/stats endpoint and client.dashboard_loader use it.

Current values are presentation estimates (straight-line decay with a 10%
floor), not accounting figures.
"""
from collections import defaultdict
from collections.abc import Sequence
from datetime import date, datetime, time, timedelta

from api.assets.models import AssetRead
from api.categories.models import CategoryRead
from api.locations.models import LocationRead
from core.formatting import percentage, round_half_up
from core.status import KNOWN_STATUSES, AssetStatus, normalize_status, status_label
from .models import (
    AcquisitionSourceRollup,
    AgeDistribution,
    CategoryRollup,
    DashboardStats,
    LocationRollup,
    MonthBucket,
    StatusSegment,
)

DAYS_PER_MONTH = 30.44
DEFAULT_ECONOMIC_LIFE_YEARS = 5
MIN_ECONOMIC_LIFE_MONTHS = 12
RESIDUAL_FLOOR_RATIO = 0.10
UNDATED_VALUE_RATIO = 0.75

WINDOW_MONTHS = 6
TOP_ROLLUPS = 5
TOP_BY_VALUE = 3
SOURCE_CHART_LIMIT = 6

UNKNOWN_SOURCE = "Tidak Diketahui"
OTHER_SOURCES = "Lainnya"

MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des")


# ---------- Per-asset valuation ----------

def age_in_months(acquired: date, reference: datetime) -> float:
    """Months elapsed since midnight of the acquisition date, never negative."""
    acquired_at = datetime.combine(acquired, time.min, tzinfo=reference.tzinfo)
    days = (reference - acquired_at) / timedelta(days=1)
    return max(0.0, days / DAYS_PER_MONTH)


def estimate_current_value(
    price: float,
    age_months: float | None,
    economic_life_years: int | None = None,
) -> float:
    """
    Estimated current value of an asset bought for `price`.

    With an age: straight-line decay over the economic life (at least 12
    months, 5 years when unset) down to a floor of 10% of the price.
    Without an age: a flat 75% of the price. Non-positive prices give 0.
    """
    if price <= 0:
        return 0.0
    if age_months is None:
        return price * UNDATED_VALUE_RATIO

    life_months = max(
        MIN_ECONOMIC_LIFE_MONTHS,
        (economic_life_years or DEFAULT_ECONOMIC_LIFE_YEARS) * 12,
    )
    rate = min(1.0, age_months / life_months)
    residual = max(price * RESIDUAL_FLOOR_RATIO, 0)
    return max(residual, price - (price - residual) * rate)


# ---------- Monthly window ----------

def _shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _last_day(year: int, month: int) -> date:
    next_year, next_month = _shift_month(year, month, 1)
    return date(next_year, next_month, 1) - timedelta(days=1)


def build_month_window(reference: date, months: int = WINDOW_MONTHS) -> list[MonthBucket]:
    """Empty buckets for the `months` calendar months ending at the reference month."""
    buckets = []
    for offset in range(months - 1, -1, -1):
        year, month = _shift_month(reference.year, reference.month, -offset)
        buckets.append(
            MonthBucket(
                month=MONTH_NAMES[month - 1],
                year=year,
                month_index=month,
                start_date=date(year, month, 1),
                end_date=_last_day(year, month),
            )
        )
    return buckets


def growth_percentages(counts: Sequence[int]) -> list[int]:
    """
    Month-over-month growth for each entry of `counts`.

    A month following an empty month counts as +100% when it has anything.
    The first month has no predecessor inside the window and is always 0.
    """
    growth = [0] * len(counts)
    for i in range(1, len(counts)):
        prev, curr = counts[i - 1], counts[i]
        if prev == 0:
            growth[i] = 100 if curr > 0 else 0
        else:
            growth[i] = round_half_up((curr - prev) / prev * 100)
    if growth:
        growth[0] = 0
    return growth


def monthly_growth(assets: Sequence[AssetRead], reference: date) -> list[MonthBucket]:
    window = build_month_window(reference)
    counts = [0] * len(window)
    for asset in assets:
        acquired = asset.acquisition_date
        if acquired is None:
            continue
        for i, bucket in enumerate(window):
            if bucket.start_date <= acquired <= bucket.end_date:
                counts[i] += 1
                break

    growth = growth_percentages(counts)
    return [
        bucket.model_copy(update={"count": counts[i], "growth_percentage": growth[i]})
        for i, bucket in enumerate(window)
    ]


# ---------- Rollups ----------

def _price(asset: AssetRead) -> float:
    return float(asset.acquisition_price or 0)


def rollup_categories(
    assets: Sequence[AssetRead],
    categories: Sequence[CategoryRead],
) -> list[CategoryRollup]:
    """Count and value per category, most populated first. Empty categories stay in."""
    counts: dict[int, int] = defaultdict(int)
    values: dict[int, float] = defaultdict(float)
    for asset in assets:
        if asset.category_id is not None:
            counts[asset.category_id] += 1
            values[asset.category_id] += _price(asset)

    rollups = [
        CategoryRollup(
            id=category.id,
            code=category.code or "",
            name=category.name,
            count=counts[category.id],
            value=values[category.id],
        )
        for category in categories
    ]
    return sorted(rollups, key=lambda r: r.count, reverse=True)


def rollup_locations(
    assets: Sequence[AssetRead],
    locations: Sequence[LocationRead],
) -> list[LocationRollup]:
    """Count and value per linked location; locations without assets are left out."""
    counts: dict[int, int] = defaultdict(int)
    values: dict[int, float] = defaultdict(float)
    for asset in assets:
        if asset.location_id is not None:
            counts[asset.location_id] += 1
            values[asset.location_id] += _price(asset)

    rollups = [
        LocationRollup(
            id=location.id,
            code=location.code,
            name=location.name,
            building=location.building or "",
            room=location.room,
            count=counts[location.id],
            value=values[location.id],
        )
        for location in locations
        if counts[location.id] > 0
    ]
    return sorted(rollups, key=lambda r: r.count, reverse=True)


def rollup_acquisition_sources(assets: Sequence[AssetRead]) -> list[AcquisitionSourceRollup]:
    counts: dict[str, int] = {}
    values: dict[str, float] = {}
    for asset in assets:
        source = asset.acquisition_source or UNKNOWN_SOURCE
        counts[source] = counts.get(source, 0) + 1
        values[source] = values.get(source, 0.0) + _price(asset)

    total = len(assets)
    rollups = [
        AcquisitionSourceRollup(
            source=source,
            count=count,
            value=values[source],
            percentage=percentage(count, total),
        )
        for source, count in counts.items()
    ]
    return sorted(rollups, key=lambda r: r.count, reverse=True)


def collapse_sources(
    sources: Sequence[AcquisitionSourceRollup],
    total_assets: int,
    limit: int = SOURCE_CHART_LIMIT,
) -> list[AcquisitionSourceRollup]:
    """Keep at most `limit` chart rows, folding the tail into a "Lainnya" row."""
    if len(sources) <= limit:
        return list(sources)

    head = list(sources[: limit - 1])
    tail = sources[limit - 1:]
    other_count = sum(s.count for s in tail)
    head.append(
        AcquisitionSourceRollup(
            source=OTHER_SOURCES,
            count=other_count,
            value=sum(s.value for s in tail),
            percentage=percentage(other_count, total_assets or 1),
        )
    )
    return head


def status_segments(status_counts: dict[str, int]) -> list[StatusSegment]:
    total = sum(status_counts.values())
    segments = [
        StatusSegment(
            status=status,
            label=status_label(status),
            count=count,
            percentage=percentage(count, total),
        )
        for status, count in status_counts.items()
    ]
    return sorted(segments, key=lambda s: s.count, reverse=True)


# ---------- Entry point ----------

def compute_dashboard_stats(
    assets: Sequence[AssetRead],
    categories: Sequence[CategoryRead],
    locations: Sequence[LocationRead],
    reference: datetime | None = None,
) -> DashboardStats:
    """Derive every dashboard figure from one snapshot of the three lists."""
    reference = reference or datetime.now()

    total_assets = len(assets)
    total_value = sum(_price(a) for a in assets)

    status_counts = {status: 0 for status in KNOWN_STATUSES}
    ages = AgeDistribution()
    estimated_current_value = 0.0
    with_calculation = 0
    without_date = 0

    for asset in assets:
        price = _price(asset)
        status_counts[normalize_status(asset.status)] += 1

        if asset.acquisition_date is not None and price > 0:
            age = age_in_months(asset.acquisition_date, reference)
            if age < 12:
                ages.less_than_1_year += 1
            elif age < 24:
                ages.between_1_and_2_years += 1
            elif age < 36:
                ages.between_2_and_3_years += 1
            else:
                ages.more_than_3_years += 1

            estimated_current_value += estimate_current_value(price, age, asset.economic_life_years)
            with_calculation += 1
        elif price > 0:
            estimated_current_value += estimate_current_value(price, None)
            without_date += 1

    if total_value > 0:
        remaining = round_half_up(estimated_current_value / total_value * 100)
        depreciation_percentage = min(100, max(0, remaining))
    else:
        depreciation_percentage = 0

    by_category = rollup_categories(assets, categories)
    by_location = rollup_locations(assets, locations)
    top_by_value = sorted(by_category, key=lambda r: r.value, reverse=True)[:TOP_BY_VALUE]

    return DashboardStats(
        generated_at=reference,
        total_assets=total_assets,
        total_value=total_value,
        estimated_current_value=estimated_current_value,
        depreciation_amount=total_value - estimated_current_value,
        depreciation_percentage=depreciation_percentage,
        category_count=len(categories),
        location_count=len(locations),
        status_counts=status_counts,
        status_segments=status_segments(status_counts),
        good_assets_percent=percentage(status_counts[AssetStatus.GOOD.value], total_assets),
        damaged_assets_percent=percentage(status_counts[AssetStatus.DAMAGED.value], total_assets),
        assets_by_category=by_category[:TOP_ROLLUPS],
        assets_by_location=by_location[:TOP_ROLLUPS],
        top_categories_by_value=top_by_value,
        monthly_growth=monthly_growth(assets, reference.date()),
        asset_age_distribution=ages,
        acquisition_sources=rollup_acquisition_sources(assets),
        assets_with_calculation=with_calculation,
        assets_without_date=without_date,
    )
