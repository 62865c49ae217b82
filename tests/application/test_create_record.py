"""Integration tests for the CreateRecord use case."""

from decimal import Decimal

import pytest

from recordshop.application.create_record import CreateRecordHandler
from recordshop.application.dto import RecordSpec
from recordshop.domain.exceptions import ValidationError
from recordshop.domain.model.record import RecordCategory, RecordFormat
from tests.fakes import FakeRecordRepository, FakeTracklistProvider

ABBEY_ROAD_MBID = "63823c15-6abc-473e-9fad-d0d0fa983b34"


def _setup():
    record_repo = FakeRecordRepository()
    tracklists = FakeTracklistProvider(
        {ABBEY_ROAD_MBID: ["Come Together", "Something", "Maxwell's Silver Hammer"]}
    )
    return record_repo, tracklists, CreateRecordHandler(record_repo, tracklists)


def _spec(**overrides):
    fields = dict(
        artist="The Beatles",
        album="Abbey Road",
        price="25",
        quantity=10,
        format="VINYL",
        category="ROCK",
    )
    fields.update(overrides)
    return RecordSpec(**fields)


class TestCreateRecordHappyPath:

    def test_create_without_mbid_has_empty_tracklist(self):
        record_repo, tracklists, handler = _setup()

        record = handler.handle(_spec())

        assert record.id is not None
        assert record.tracklist == []
        assert tracklists.calls == []
        assert record_repo.get_by_id(record.id).tracklist == []

    def test_create_persists_exact_enum_values(self):
        record_repo, _, handler = _setup()

        record = handler.handle(_spec())

        stored = record_repo.get_by_id(record.id)
        assert stored.format is RecordFormat.VINYL
        assert stored.category is RecordCategory.ROCK
        assert stored.price.amount == Decimal("25")
        assert stored.quantity == 10

    def test_create_with_mbid_stores_provider_tracklist(self):
        record_repo, tracklists, handler = _setup()

        record = handler.handle(_spec(mbid=ABBEY_ROAD_MBID))

        assert tracklists.calls == [ABBEY_ROAD_MBID]
        stored = record_repo.get_by_id(record.id)
        assert stored.mbid == ABBEY_ROAD_MBID
        assert stored.tracklist == ["Come Together", "Something", "Maxwell's Silver Hammer"]

    def test_accepts_enum_members(self):
        _, _, handler = _setup()
        record = handler.handle(_spec(format=RecordFormat.CD, category=RecordCategory.JAZZ))
        assert record.format is RecordFormat.CD


class TestCreateRecordFailures:

    def test_provider_failure_persists_nothing(self):
        record_repo, tracklists, handler = _setup()
        tracklists.error = ConnectionError("musicbrainz down")

        with pytest.raises(ConnectionError):
            handler.handle(_spec(mbid=ABBEY_ROAD_MBID))

        assert record_repo.all() == []

    def test_unknown_format_rejected(self):
        _, tracklists, handler = _setup()
        with pytest.raises(ValidationError, match="Unknown record format"):
            handler.handle(_spec(format="8-TRACK", mbid=ABBEY_ROAD_MBID))
        assert tracklists.calls == []

    def test_negative_price_rejected(self):
        _, _, handler = _setup()
        with pytest.raises(ValidationError, match="cannot be negative"):
            handler.handle(_spec(price="-1"))
