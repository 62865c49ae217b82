"""Application service: Show Record use case (query).

Reads the store directly; lookups by ID never touch the listing cache.
"""

from __future__ import annotations

from recordshop.domain.exceptions import EntityNotFoundError
from recordshop.domain.model.record import Record
from recordshop.domain.repository.record_repository import RecordRepository


class ShowRecordHandler:

    def __init__(self, record_repo: RecordRepository) -> None:
        self._record_repo = record_repo

    def handle(self, record_id: str) -> Record:
        record = self._record_repo.get_by_id(record_id)
        if record is None:
            raise EntityNotFoundError(f"Record with ID '{record_id}' not found")
        return record
