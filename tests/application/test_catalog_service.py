"""Tests for the CatalogService façade: envelopes and error translation."""

import logging

import pytest

from recordshop.application.catalog_service import CatalogService
from recordshop.application.dto import ListQuery, RecordSpec
from recordshop.domain.exceptions import EntityNotFoundError, InternalError, ValidationError
from recordshop.domain.model.record import RecordChanges
from tests.fakes import FakeListingCache, FakeRecordRepository, FakeTracklistProvider


def _setup():
    record_repo = FakeRecordRepository()
    cache = FakeListingCache()
    tracklists = FakeTracklistProvider({"mbid-1": ["One", "Two"]})
    service = CatalogService(record_repo, cache, tracklists, cache_ttl_ms=1000)
    return service, record_repo, cache, tracklists


def _spec(**overrides):
    fields = dict(
        artist="The Beatles",
        album="Abbey Road",
        price="25",
        quantity=10,
        format="Vinyl",
        category="Rock",
    )
    fields.update(overrides)
    return RecordSpec(**fields)


class TestEnvelopes:

    def test_create(self):
        service, _, _, _ = _setup()
        response = service.create_record(_spec(mbid="mbid-1"))
        assert response.status is True
        assert response.message == "Record created successfully"
        assert response.data.tracklist == ["One", "Two"]

    def test_update(self):
        service, _, _, _ = _setup()
        rid = service.create_record(_spec()).data.id
        response = service.update_record(rid, RecordChanges(album="Let It Be"))
        assert response.message == "Record updated successfully"
        assert response.data.album == "Let It Be"
        assert response.data.artist == "The Beatles"

    def test_list_then_cached_list(self):
        service, _, _, _ = _setup()
        service.create_record(_spec())

        first = service.list_records(ListQuery(artist="beatles"))
        second = service.list_records(ListQuery(artist="beatles"))

        assert first.message == "Records fetched successfully"
        assert second.message == "Records fetched successfully (cached)"
        assert first.data.pagination.total_records == 1

    def test_list_with_no_query_uses_defaults(self):
        service, _, cache, _ = _setup()
        response = service.list_records()
        assert response.data.pagination.limit == 20
        assert cache.set_calls == [(ListQuery().cache_key(), 1000)]

    def test_adjust_stock(self):
        service, _, _, _ = _setup()
        rid = service.create_record(_spec(quantity=10)).data.id
        response = service.adjust_stock(rid, -5)
        assert response.message == "Stock updated successfully"
        assert response.data.quantity == 5

    def test_get_record_bypasses_cache(self):
        service, _, cache, _ = _setup()
        rid = service.create_record(_spec()).data.id

        response = service.get_record(rid)

        assert response.message == "Record fetched successfully"
        assert response.data.id == rid
        assert cache.get_calls == []
        assert cache.set_calls == []


class TestErrorTranslation:

    def test_not_found_propagates_verbatim(self):
        service, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            service.update_record("404", RecordChanges(album="x"))
        with pytest.raises(EntityNotFoundError):
            service.adjust_stock("404", 1)
        with pytest.raises(EntityNotFoundError):
            service.get_record("404")

    def test_bad_request_propagates_verbatim(self):
        service, record_repo, _, _ = _setup()
        rid = service.create_record(_spec(quantity=10)).data.id

        with pytest.raises(ValidationError, match="Insufficient stock"):
            service.adjust_stock(rid, -20)

        assert record_repo.get_by_id(rid).quantity == 10

    def test_enrichment_failure_becomes_internal(self, caplog):
        service, record_repo, _, tracklists = _setup()
        tracklists.error = ConnectionError("musicbrainz.org unreachable")

        with caplog.at_level(logging.ERROR):
            with pytest.raises(InternalError) as excinfo:
                service.create_record(_spec(mbid="mbid-1"))

        assert str(excinfo.value) == "Failed to create record"
        assert "unreachable" not in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, ConnectionError)
        assert "create_record failed: musicbrainz.org unreachable" in caplog.text
        assert record_repo.all() == []

    def test_store_failure_on_update_becomes_internal(self):
        service, record_repo, _, _ = _setup()
        rid = service.create_record(_spec()).data.id
        record_repo.error = OSError("disk full")

        with pytest.raises(InternalError, match="Failed to update record"):
            service.update_record(rid, RecordChanges(album="x"))

    def test_store_failure_on_list_becomes_internal(self):
        service, record_repo, _, _ = _setup()
        record_repo.error = OSError("disk full")
        with pytest.raises(InternalError, match="Failed to fetch records"):
            service.list_records(ListQuery())

    def test_cache_failures_never_fail_listing(self):
        service, _, cache, _ = _setup()
        service.create_record(_spec())
        cache.get_error = RuntimeError("cache down")
        cache.set_error = RuntimeError("cache down")

        response = service.list_records(ListQuery())

        assert response.status is True
        assert response.data.pagination.total_records == 1

    def test_store_failure_on_adjust_becomes_internal(self):
        service, record_repo, _, _ = _setup()
        record_repo.error = OSError("disk full")
        with pytest.raises(InternalError, match="Failed to update stock"):
            service.adjust_stock("1", 1)

    def test_store_failure_on_get_becomes_internal(self):
        service, record_repo, _, _ = _setup()
        record_repo.error = OSError("disk full")
        with pytest.raises(InternalError, match="Failed to fetch record"):
            service.get_record("1")
