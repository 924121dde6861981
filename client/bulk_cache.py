# client/bulk_cache.py
"""
Cache of bulk-group children keyed by bulk_id.

At most one fetch per key is in flight at a time; callers asking for a key
that is already loading wait on the same fetch. Loaded entries are served
until they are older than the TTL. Failed fetches are not cached.
"""
import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum

from config import settings
from api.assets.models import AssetRead

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Awaitable[list[AssetRead]]]


class EntryStatus(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"


@dataclass
class CacheEntry:
    status: EntryStatus
    data: list[AssetRead] | None = None
    fetched_at: float | None = None
    task: asyncio.Task | None = None


class BulkChildrenCache:
    def __init__(
        self,
        fetcher: Fetcher,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._fetcher = fetcher
        self._ttl = settings.BULK_CACHE_TTL_SECONDS if ttl_seconds is None else ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def _is_fresh(self, entry: CacheEntry) -> bool:
        return (
            entry.status is EntryStatus.LOADED
            and entry.fetched_at is not None
            and self._clock() - entry.fetched_at < self._ttl
        )

    def status(self, bulk_id: str) -> EntryStatus | None:
        entry = self._entries.get(bulk_id)
        return entry.status if entry is not None else None

    def peek(self, bulk_id: str) -> list[AssetRead] | None:
        """Cached children if present and still fresh, without fetching."""
        entry = self._entries.get(bulk_id)
        if entry is not None and self._is_fresh(entry):
            return entry.data
        return None

    async def get(self, bulk_id: str) -> list[AssetRead]:
        """Return the children of `bulk_id`, fetching only when needed."""
        entry = self._entries.get(bulk_id)
        if entry is not None:
            if self._is_fresh(entry):
                return entry.data
            if entry.status is EntryStatus.LOADING:
                # Shielded so a cancelled waiter does not cancel the shared fetch
                return await asyncio.shield(entry.task)

        entry = CacheEntry(status=EntryStatus.LOADING)
        entry.task = asyncio.ensure_future(self._fetch(bulk_id, entry))
        self._entries[bulk_id] = entry
        return await asyncio.shield(entry.task)

    async def _fetch(self, bulk_id: str, entry: CacheEntry) -> list[AssetRead]:
        logger.debug("Fetching bulk children for %s", bulk_id)
        try:
            data = list(await self._fetcher(bulk_id))
        except Exception:
            if self._entries.get(bulk_id) is entry:
                del self._entries[bulk_id]
            raise

        # An invalidate() during the fetch wins over this result
        if self._entries.get(bulk_id) is entry:
            entry.status = EntryStatus.LOADED
            entry.data = data
            entry.fetched_at = self._clock()
            entry.task = None
        logger.debug("Fetched %d bulk children for %s", len(data), bulk_id)
        return data

    def invalidate(self, bulk_id: str | None = None) -> None:
        """Drop one key, or every key when `bulk_id` is None."""
        if bulk_id is None:
            self._entries.clear()
        else:
            self._entries.pop(bulk_id, None)
