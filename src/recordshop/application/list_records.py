"""Application service: List Records use case (cache-aside query).

1. Derive the cache key from every field of the query.
2. Serve a cached page if there is one.
3. Otherwise count and page through the store, then cache the page.

The cache is best-effort: a failing read is treated as a miss and a
failing write is ignored, both with a warning.  Cached pages are not
invalidated on update, so they may lag the store by up to the TTL.
"""

from __future__ import annotations

import logging

from recordshop.application.dto import ListQuery, Pagination, RecordPage
from recordshop.application.listing_cache import ListingCache
from recordshop.domain.model.record import Record
from recordshop.domain.repository.record_repository import RecordRepository

logger = logging.getLogger(__name__)

DEFAULT_TTL_MS = 60 * 1000


class ListRecordsHandler:

    def __init__(
        self,
        record_repo: RecordRepository,
        cache: ListingCache,
        ttl_ms: int = DEFAULT_TTL_MS,
    ) -> None:
        self._record_repo = record_repo
        self._cache = cache
        self._ttl_ms = ttl_ms

    def handle(self, query: ListQuery) -> RecordPage:
        key = query.cache_key()

        cached = self._read_cache(key)
        if cached is not None:
            logger.debug("Listing cache hit for %s", key)
            # A cached entry holds only the page itself, so the totals
            # describe that page rather than the whole result set.
            return RecordPage(
                records=cached,
                pagination=Pagination.of(query.page, query.limit, len(cached)),
                from_cache=True,
            )

        record_filter = query.to_filter()
        total = self._record_repo.count(record_filter)
        records = self._record_repo.find(record_filter, skip=query.skip, limit=query.limit)

        self._write_cache(key, records)

        return RecordPage(
            records=records,
            pagination=Pagination.of(query.page, query.limit, total),
        )

    # --- Cache helpers --------------------------------------------------------

    def _read_cache(self, key: str) -> list[Record] | None:
        try:
            return self._cache.get(key)
        except Exception as exc:
            logger.warning("Cache retrieval failed for %s: %s", key, exc)
            return None

    def _write_cache(self, key: str, records: list[Record]) -> None:
        try:
            self._cache.set(key, records, self._ttl_ms)
        except Exception as exc:
            logger.warning("Cache write failed for %s: %s", key, exc)
