"""
app/services/listings_cache_service.py

Purpose: Time-bounded cache for the default listings query

- Serves the stored result while it is younger than the freshness window
- Otherwise refreshes from upstream and overwrites the slot
- Upstream failures return [] and leave the slot untouched
"""

import time
from typing import Any, Callable, List, Optional

from app.core.exceptions import UpstreamError
from app.core.logging import get_logger
from app.db.memory import MemoryStore
from app.models.listings_cache import ListingsCacheSlot
from app.services.listings_service import RealtorClient

logger = get_logger(__name__)


class ListingsCache:
    """Single-slot cache in front of RealtorClient.latest()."""

    def __init__(
        self,
        store: MemoryStore,
        client: RealtorClient,
        ttl_seconds: float = 600,
        clock: Callable[[], float] = time.time
    ):
        self.store = store
        self.client = client
        self.ttl_seconds = ttl_seconds
        self.clock = clock

    async def get_or_refresh(self, limit: Optional[int] = None) -> List[Any]:
        now = self.clock()
        slot = self.store.listings_cache

        if slot.is_fresh(now, self.ttl_seconds):
            logger.debug("Listings cache hit", extra={"age_seconds": now - slot.timestamp})
            return slot.data

        logger.info("Listings cache miss, refreshing from upstream")

        try:
            results = await self.client.latest(limit)
        except UpstreamError as e:
            logger.error(f"Latest listings fetch failed, serving empty result: {e.message}")
            return []

        # Empty successful responses are cached too.
        self.store.set_listings_cache(ListingsCacheSlot(timestamp=now, data=results))
        logger.info(f"Listings cache refreshed with {len(results)} records")

        return results
