import asyncio

import pytest

from api.assets.models import AssetRead
from client.api_client import InventoryAPIError
from client.bulk_cache import BulkChildrenCache, EntryStatus


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class RecordingFetcher:
    """Fetcher that counts calls and can be held open until released."""

    def __init__(self, fail: bool = False):
        self.calls: list[str] = []
        self.release = asyncio.Event()
        self.release.set()
        self.fail = fail

    async def __call__(self, bulk_id: str) -> list[AssetRead]:
        self.calls.append(bulk_id)
        await self.release.wait()
        if self.fail:
            raise InventoryAPIError("boom", status_code=500)
        return [
            AssetRead(id=i, code=f"{bulk_id}-{i}", name="Kursi", bulk_id=bulk_id, bulk_sequence=i)
            for i in (1, 2)
        ]


@pytest.mark.anyio
async def test_cached_result_is_reused():
    fetcher = RecordingFetcher()
    cache = BulkChildrenCache(fetcher, ttl_seconds=60)

    first = await cache.get("bulk-1")
    second = await cache.get("bulk-1")

    assert fetcher.calls == ["bulk-1"]
    assert second is first
    assert cache.status("bulk-1") is EntryStatus.LOADED
    assert cache.peek("bulk-1") is first


@pytest.mark.anyio
async def test_keys_are_cached_independently():
    fetcher = RecordingFetcher()
    cache = BulkChildrenCache(fetcher, ttl_seconds=60)

    await cache.get("bulk-1")
    await cache.get("bulk-2")

    assert fetcher.calls == ["bulk-1", "bulk-2"]


@pytest.mark.anyio
async def test_single_flight_for_concurrent_requests():
    fetcher = RecordingFetcher()
    fetcher.release.clear()
    cache = BulkChildrenCache(fetcher, ttl_seconds=60)

    waiters = [asyncio.ensure_future(cache.get("bulk-1")) for _ in range(3)]
    await asyncio.sleep(0)
    assert cache.status("bulk-1") is EntryStatus.LOADING
    assert cache.peek("bulk-1") is None

    fetcher.release.set()
    results = await asyncio.gather(*waiters)

    assert fetcher.calls == ["bulk-1"]
    assert all(r == results[0] for r in results)


@pytest.mark.anyio
async def test_expired_entry_is_refetched():
    clock = FakeClock()
    fetcher = RecordingFetcher()
    cache = BulkChildrenCache(fetcher, ttl_seconds=30, clock=clock)

    await cache.get("bulk-1")
    clock.now += 29
    await cache.get("bulk-1")
    assert len(fetcher.calls) == 1

    clock.now += 1
    assert cache.peek("bulk-1") is None
    await cache.get("bulk-1")
    assert len(fetcher.calls) == 2


@pytest.mark.anyio
async def test_failures_are_not_cached():
    fetcher = RecordingFetcher(fail=True)
    cache = BulkChildrenCache(fetcher, ttl_seconds=60)

    with pytest.raises(InventoryAPIError):
        await cache.get("bulk-1")
    assert cache.status("bulk-1") is None

    fetcher.fail = False
    children = await cache.get("bulk-1")
    assert len(children) == 2
    assert len(fetcher.calls) == 2


@pytest.mark.anyio
async def test_cancelled_waiter_does_not_cancel_fetch():
    fetcher = RecordingFetcher()
    fetcher.release.clear()
    cache = BulkChildrenCache(fetcher, ttl_seconds=60)

    waiter = asyncio.ensure_future(cache.get("bulk-1"))
    await asyncio.sleep(0)
    waiter.cancel()
    with pytest.raises(asyncio.CancelledError):
        await waiter

    fetcher.release.set()
    children = await cache.get("bulk-1")
    assert len(children) == 2
    assert fetcher.calls == ["bulk-1"]


@pytest.mark.anyio
async def test_invalidate():
    fetcher = RecordingFetcher()
    cache = BulkChildrenCache(fetcher, ttl_seconds=60)

    await cache.get("bulk-1")
    await cache.get("bulk-2")
    cache.invalidate("bulk-1")
    assert cache.peek("bulk-1") is None
    assert cache.peek("bulk-2") is not None

    cache.invalidate()
    assert cache.peek("bulk-2") is None


@pytest.mark.anyio
async def test_invalidate_during_fetch_discards_result():
    fetcher = RecordingFetcher()
    fetcher.release.clear()
    cache = BulkChildrenCache(fetcher, ttl_seconds=60)

    waiter = asyncio.ensure_future(cache.get("bulk-1"))
    await asyncio.sleep(0)
    cache.invalidate("bulk-1")
    fetcher.release.set()

    # The caller still gets its data, but nothing is stored
    assert len(await waiter) == 2
    assert cache.status("bulk-1") is None
