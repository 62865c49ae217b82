"""Application service: Create Record use case.

When the new record carries an external id, its tracklist is fetched
before anything is persisted, so a failed lookup leaves no record behind.
"""

from __future__ import annotations

from recordshop.application.dto import RecordSpec
from recordshop.domain.exceptions import ValidationError
from recordshop.domain.model.record import Record, RecordCategory, RecordFormat
from recordshop.domain.model.value_objects import Money
from recordshop.domain.repository.record_repository import RecordRepository
from recordshop.domain.service.enrichment import TracklistProvider


class CreateRecordHandler:

    def __init__(
        self,
        record_repo: RecordRepository,
        tracklists: TracklistProvider,
    ) -> None:
        self._record_repo = record_repo
        self._tracklists = tracklists

    def handle(self, spec: RecordSpec) -> Record:
        record = Record.create(
            artist=spec.artist,
            album=spec.album,
            price=Money.of(spec.price),
            quantity=spec.quantity,
            format=self._member(RecordFormat, spec.format, "format"),
            category=self._member(RecordCategory, spec.category, "category"),
            mbid=spec.mbid,
        )

        if record.mbid is not None:
            record.replace_tracklist(self._tracklists.fetch_tracklist(record.mbid))

        return self._record_repo.create(record)

    @staticmethod
    def _member(enum_cls, raw, label: str):
        member = enum_cls.parse(raw)
        if member is None:
            raise ValidationError(f"Unknown record {label}: {raw!r}")
        return member
