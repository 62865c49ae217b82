"""Abstract cache used read-aside by the record listing.

Implementations may fail transiently on any call; callers treat a failed
read as a miss and a failed write as a no-op.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from recordshop.domain.model.record import Record


class ListingCache(ABC):

    @abstractmethod
    def get(self, key: str) -> list[Record] | None:
        """Return the cached page for ``key``, or None on a miss or expiry."""

    @abstractmethod
    def set(self, key: str, records: list[Record], ttl_ms: int) -> None:
        """Store ``records`` under ``key`` for ``ttl_ms`` milliseconds."""
