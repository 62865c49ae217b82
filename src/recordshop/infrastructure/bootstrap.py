"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  One cache, one store
and one provider are built per call to ``build_services`` and shared by
reference between the services it returns.
"""

from __future__ import annotations

from dataclasses import dataclass

from recordshop.application.catalog_service import CatalogService
from recordshop.application.order_service import OrderService
from recordshop.infrastructure.cache.memory_cache import InMemoryListingCache
from recordshop.infrastructure.config import Settings
from recordshop.infrastructure.external.musicbrainz_client import MusicBrainzClient
from recordshop.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from recordshop.infrastructure.persistence.json_record_repository import (
    JsonRecordRepository,
)


@dataclass(frozen=True)
class Services:
    catalog: CatalogService
    orders: OrderService


def record_repository(settings: Settings) -> JsonRecordRepository:
    return JsonRecordRepository(settings.data_dir / "records.json")


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.data_dir / "orders.json")


def tracklist_provider(settings: Settings) -> MusicBrainzClient:
    return MusicBrainzClient(
        base_url=settings.musicbrainz_base_url,
        user_agent=settings.musicbrainz_user_agent,
        timeout=settings.musicbrainz_timeout_seconds,
    )


def build_services(settings: Settings | None = None) -> Services:
    settings = settings or Settings.from_env()
    records = record_repository(settings)
    catalog = CatalogService(
        record_repo=records,
        cache=InMemoryListingCache(),
        tracklists=tracklist_provider(settings),
        cache_ttl_ms=settings.cache_ttl_ms,
    )
    orders = OrderService(record_repo=records, order_repo=order_repository(settings))
    return Services(catalog=catalog, orders=orders)
