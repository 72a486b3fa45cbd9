"""
app/models/listings_cache.py

Purpose: The single listings cache slot

- Holds the last successful default ("latest") listings response
- Overwritten wholesale on refresh, never partially updated
"""

from dataclasses import dataclass
from typing import Any, List, Optional


@dataclass(frozen=True)
class ListingsCacheSlot:
    timestamp: float = 0.0
    data: Optional[List[Any]] = None

    def is_fresh(self, now: float, ttl_seconds: float) -> bool:
        return self.data is not None and (now - self.timestamp) < ttl_seconds
