"""Application service: Update Record use case.

Partial update: only the fields present in ``RecordChanges`` are written.
A changed external id refreshes the tracklist before the other fields are
applied; an absent or unchanged one never reaches the provider.

The provider call happens before the store's update step, so a slow
lookup never holds up stock adjustments, and the fields are applied to
the record as stored at write time.  Stock is only written when
``changes.quantity`` is set.
"""

from __future__ import annotations

from recordshop.domain.exceptions import EntityNotFoundError
from recordshop.domain.model.record import Record, RecordChanges, normalize_mbid
from recordshop.domain.repository.record_repository import RecordRepository
from recordshop.domain.service.enrichment import TracklistProvider, needs_reenrichment


class UpdateRecordHandler:

    def __init__(
        self,
        record_repo: RecordRepository,
        tracklists: TracklistProvider,
    ) -> None:
        self._record_repo = record_repo
        self._tracklists = tracklists

    def handle(self, record_id: str, changes: RecordChanges) -> Record:
        current = self._record_repo.get_by_id(record_id)
        if current is None:
            raise EntityNotFoundError(f"Record with ID '{record_id}' not found")

        tracks: list[str] | None = None
        if needs_reenrichment(current, changes):
            tracks = self._tracklists.fetch_tracklist(normalize_mbid(changes.mbid))  # type: ignore[arg-type]

        def apply(record: Record) -> None:
            if tracks is not None:
                record.replace_tracklist(tracks)
            record.apply_changes(changes)

        return self._record_repo.update(record_id, apply)
