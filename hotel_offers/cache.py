from __future__ import annotations

import time
from collections.abc import Callable

from pydantic import BaseModel

from hotel_offers.schemas.offers import OffersResponse

DEFAULT_TTL_SECONDS = 10 * 60


class CacheEntry(BaseModel):
    key: str
    result: OffersResponse
    expires_at: float


class OfferCache:
    """In-memory offer store with lazy expiry.

    Not linearizable: two concurrent misses on the same key both run the
    upstream cascade and the later ``put`` wins.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._ttl = ttl_seconds
        self._clock = clock

    def get(self, key: str) -> OffersResponse | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() >= entry.expires_at:
            self._entries.pop(key, None)
            return None
        return entry.result

    def put(self, key: str, result: OffersResponse, ttl_seconds: float | None = None) -> None:
        ttl = self._ttl if ttl_seconds is None else ttl_seconds
        self._entries[key] = CacheEntry(key=key, result=result, expires_at=self._clock() + ttl)
