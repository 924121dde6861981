import asyncio
from datetime import datetime

import anyio
import httpx
import pytest

from api.assets.models import AssetRead
from client.api_client import InventoryAPIError, InventoryClient
from client.bulk_cache import BulkChildrenCache
from client.bulk_row import BulkRow, RowState
from client.dashboard_loader import (
    DashboardLoadError,
    DashboardState,
    fetch_snapshots,
    load_dashboard,
)


def page(items: list[dict]) -> dict:
    return {"data": items, "total": len(items), "page": 1, "page_size": 100}


ASSETS = [
    {"id": 1, "code": "A-1", "name": "Laptop", "acquisition_price": 5_000_000, "status": "baik",
     "category_id": 1, "acquisition_source": "Pembelian"},
    {"id": 2, "code": "A-2", "name": "Meja", "acquisition_price": 1_000_000, "status": "unknown_value"},
]
CATEGORIES = [{"id": 1, "code": "10", "name": "Elektronik"}]
LOCATIONS = [{"id": 1, "code": "L1", "name": "Ruang 1", "building": "Gedung A"}]


def mock_client(handler) -> InventoryClient:
    http = httpx.AsyncClient(
        transport=httpx.MockTransport(handler),
        base_url="http://inventory.test/api/v1",
    )
    return InventoryClient(http_client=http)


async def serve_all(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    if path.endswith("/assets"):
        return httpx.Response(200, json=page(ASSETS))
    if path.endswith("/categories"):
        return httpx.Response(200, json=page(CATEGORIES))
    if path.endswith("/locations"):
        return httpx.Response(200, json=page(LOCATIONS))
    return httpx.Response(404, json={"detail": "Not Found"})


@pytest.mark.anyio
async def test_load_dashboard_from_api(inventory_client, seeded):
    stats = await load_dashboard(inventory_client)

    assert stats.total_assets == 7
    assert stats.category_count == 3
    assert stats.location_count == 2
    assert sum(stats.status_counts.values()) == 7


@pytest.mark.anyio
async def test_bulk_row_against_api(inventory_client, seeded):
    parent = next(a for a in (await inventory_client.list_assets(1, 100)).data if a.is_bulk_parent)
    cache = BulkChildrenCache(inventory_client.get_bulk_assets, ttl_seconds=300)
    row = BulkRow(parent, cache)

    await row.expand()

    assert row.state is RowState.LOADED
    assert [c.sequence for c in row.children] == [1, 2, 3]
    assert [c.status_label for c in row.children] == ["Baik", "Tidak Memadai", "Baik"]


@pytest.mark.anyio
async def test_requests_pass_page_and_size():
    seen: list[httpx.URL] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url)
        return await serve_all(request)

    client = mock_client(handler)
    await fetch_snapshots(client, page_size=50)

    assert sorted(url.path for url in seen) == [
        "/api/v1/assets", "/api/v1/categories", "/api/v1/locations",
    ]
    assert all(url.params["page"] == "1" and url.params["page_size"] == "50" for url in seen)


@pytest.mark.anyio
async def test_fetches_run_concurrently():
    started = 0
    all_started = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        nonlocal started
        started += 1
        if started == 3:
            all_started.set()
        # Sequential fetching would never get past this point
        await all_started.wait()
        return await serve_all(request)

    with anyio.fail_after(5):
        stats = await load_dashboard(mock_client(handler), reference=datetime(2026, 10, 18))

    assert stats.total_assets == 2
    assert stats.status_counts["baik"] == 2


@pytest.mark.anyio
async def test_any_failed_source_fails_the_whole_load():
    async def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/categories"):
            return httpx.Response(500, json={"detail": "database unavailable"})
        return await serve_all(request)

    with pytest.raises(DashboardLoadError) as excinfo:
        await load_dashboard(mock_client(handler))

    assert excinfo.value.source == "categories"
    assert isinstance(excinfo.value.cause, InventoryAPIError)
    assert excinfo.value.cause.status_code == 500
    assert excinfo.value.cause.detail == "database unavailable"


@pytest.mark.anyio
async def test_transport_errors_become_api_errors():
    async def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(InventoryAPIError):
        await mock_client(handler).list_assets()


@pytest.mark.anyio
async def test_dashboard_state_recomputes_on_new_lists_only():
    state = DashboardState(clock=lambda: datetime(2026, 10, 18))
    assert state.stats is None

    stats = await state.refresh(mock_client(serve_all))
    assert stats.total_assets == 2
    # Same list objects: cached result
    assert state.stats is stats

    state.update(assets=list(state.assets))
    recomputed = state.stats
    assert recomputed is not stats
    assert recomputed.total_assets == 2


@pytest.mark.anyio
async def test_dashboard_state_hides_stats_after_failure_and_retries():
    fail = True

    async def handler(request: httpx.Request) -> httpx.Response:
        if fail and request.url.path.endswith("/locations"):
            return httpx.Response(503, text="unavailable")
        return await serve_all(request)

    client = mock_client(handler)
    state = DashboardState()

    with pytest.raises(DashboardLoadError):
        await state.refresh(client)
    assert state.error is not None
    assert state.stats is None

    fail = False
    stats = await state.refresh(client)
    assert state.error is None
    assert stats is not None
    assert stats.location_count == 1


def test_state_waits_for_all_three_lists():
    state = DashboardState()
    state.update(assets=[], categories=[])
    assert state.stats is None

    state.update(locations=[])
    assert state.stats is not None
    assert state.stats.total_assets == 0


@pytest.mark.anyio
async def test_error_body_that_is_not_an_object_becomes_api_error():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, json=["bad gateway"])

    with pytest.raises(InventoryAPIError) as excinfo:
        await mock_client(handler).get_bulk_assets("g")
    assert excinfo.value.status_code == 502
    assert "bad gateway" in excinfo.value.detail


@pytest.mark.anyio
async def test_html_success_body_becomes_api_error():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>proxy</html>")

    with pytest.raises(InventoryAPIError) as excinfo:
        await mock_client(handler).list_assets()
    assert excinfo.value.detail == "<html>proxy</html>"


@pytest.mark.anyio
async def test_wrong_shape_becomes_api_error():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"items": []})

    with pytest.raises(InventoryAPIError):
        await mock_client(handler).list_categories()


@pytest.mark.anyio
async def test_bulk_row_reports_malformed_children_response():
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>proxy</html>")

    client = mock_client(handler)
    row = BulkRow(
        AssetRead(id=1, code="B", name="Kursi", is_bulk_parent=True, bulk_id="g", bulk_total_count=2),
        BulkChildrenCache(client.get_bulk_assets),
    )

    await row.expand()

    assert row.state is RowState.ERROR
    assert isinstance(row.error, InventoryAPIError)
