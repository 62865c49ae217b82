"""Application service: Adjust Stock use case.

A positive delta is a restock, a negative one a sale.  The whole
read-check-write runs inside the repository's ``adjust_quantity`` so two
concurrent sales can never both succeed against the same stale quantity.
"""

from __future__ import annotations

from recordshop.domain.model.record import Record
from recordshop.domain.repository.record_repository import RecordRepository


class AdjustStockHandler:

    def __init__(self, record_repo: RecordRepository) -> None:
        self._record_repo = record_repo

    def handle(self, record_id: str, delta: int) -> Record:
        return self._record_repo.adjust_quantity(record_id, delta)
