"""In-process TTL implementation of ListingCache.

Entries are deep-copied on the way in and out, so callers mutating a
record they got from the listing can never alter what is cached.  Expired
entries are dropped when read, and every write sweeps out the rest.
"""

from __future__ import annotations

import copy
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from recordshop.application.listing_cache import ListingCache
from recordshop.domain.model.record import Record


@dataclass(frozen=True)
class CacheEntry:
    records: list[Record]
    expires_at: float


class InMemoryListingCache(ListingCache):

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> list[Record] | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expires_at <= self._clock():
                del self._entries[key]
                return None
            return copy.deepcopy(entry.records)

    def set(self, key: str, records: list[Record], ttl_ms: int) -> None:
        if ttl_ms <= 0:
            return
        records = copy.deepcopy(records)
        with self._lock:
            now = self._clock()
            self._purge_expired(now)
            self._entries[key] = CacheEntry(records=records, expires_at=now + ttl_ms / 1000)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _purge_expired(self, now: float) -> None:
        expired = [k for k, e in self._entries.items() if e.expires_at <= now]
        for key in expired:
            del self._entries[key]
