"""Catalog Service — the entry point for every record operation.

Wires the use-case handlers to the store, the listing cache and the
tracklist provider, wraps results in the ``ApiResponse`` envelope and
turns unclassified failures into ``InternalError``.  The collaborators are
passed in by the composition root; the service holds no global state.
"""

from __future__ import annotations

from recordshop.application.adjust_stock import AdjustStockHandler
from recordshop.application.create_record import CreateRecordHandler
from recordshop.application.dto import ApiResponse, ListQuery, RecordSpec
from recordshop.application.errors import internal_failure
from recordshop.application.list_records import DEFAULT_TTL_MS, ListRecordsHandler
from recordshop.application.listing_cache import ListingCache
from recordshop.application.show_record import ShowRecordHandler
from recordshop.application.update_record import UpdateRecordHandler
from recordshop.domain.model.record import RecordChanges
from recordshop.domain.repository.record_repository import RecordRepository
from recordshop.domain.service.enrichment import TracklistProvider


class CatalogService:

    def __init__(
        self,
        record_repo: RecordRepository,
        cache: ListingCache,
        tracklists: TracklistProvider,
        cache_ttl_ms: int = DEFAULT_TTL_MS,
    ) -> None:
        self._create = CreateRecordHandler(record_repo, tracklists)
        self._update = UpdateRecordHandler(record_repo, tracklists)
        self._list = ListRecordsHandler(record_repo, cache, ttl_ms=cache_ttl_ms)
        self._adjust = AdjustStockHandler(record_repo)
        self._show = ShowRecordHandler(record_repo)

    def create_record(self, spec: RecordSpec) -> ApiResponse:
        with internal_failure("create_record", "Failed to create record"):
            record = self._create.handle(spec)
        return ApiResponse.ok("Record created successfully", record)

    def update_record(self, record_id: str, changes: RecordChanges) -> ApiResponse:
        with internal_failure("update_record", "Failed to update record"):
            record = self._update.handle(record_id, changes)
        return ApiResponse.ok("Record updated successfully", record)

    def list_records(self, query: ListQuery | None = None) -> ApiResponse:
        with internal_failure("list_records", "Failed to fetch records"):
            page = self._list.handle(query or ListQuery())
        if page.from_cache:
            return ApiResponse.ok("Records fetched successfully (cached)", page)
        return ApiResponse.ok("Records fetched successfully", page)

    def adjust_stock(self, record_id: str, delta: int) -> ApiResponse:
        with internal_failure("adjust_stock", "Failed to update stock"):
            record = self._adjust.handle(record_id, delta)
        return ApiResponse.ok("Stock updated successfully", record)

    def get_record(self, record_id: str) -> ApiResponse:
        with internal_failure("get_record", "Failed to fetch record"):
            record = self._show.handle(record_id)
        return ApiResponse.ok("Record fetched successfully", record)
