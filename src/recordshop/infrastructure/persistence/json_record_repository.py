"""JSON-file-backed implementation of RecordRepository.

Every read-modify-write of the file happens under one re-entrant lock, so
``update`` and ``adjust_quantity`` are atomic for all threads sharing this
repository.
"""

from __future__ import annotations

import json
import threading
import uuid
from decimal import Decimal
from pathlib import Path
from typing import Callable

from recordshop.domain.exceptions import EntityNotFoundError
from recordshop.domain.model.record import Record, RecordCategory, RecordFormat
from recordshop.domain.model.record_filter import RecordFilter
from recordshop.domain.model.value_objects import Money
from recordshop.domain.repository.record_repository import RecordRepository


class JsonRecordRepository(RecordRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        self._ensure_file()

    # --- RecordRepository interface -------------------------------------------

    def create(self, record: Record) -> Record:
        with self._lock:
            records = self._load_raw()
            record.id = uuid.uuid4().hex
            records.append(self._to_raw(record))
            self._persist_raw(records)
        return record

    def get_by_id(self, record_id: str) -> Record | None:
        with self._lock:
            for raw in self._load_raw():
                if raw["id"] == record_id:
                    return self._to_domain(raw)
        return None

    def find(self, record_filter: RecordFilter, skip: int, limit: int) -> list[Record]:
        return self._matching(record_filter)[skip:skip + limit]

    def count(self, record_filter: RecordFilter) -> int:
        return len(self._matching(record_filter))

    def save(self, record: Record) -> None:
        with self._lock:
            records = self._load_raw()
            index = self._index_of(records, record.id)  # type: ignore[arg-type]
            records[index] = self._to_raw(record)
            self._persist_raw(records)

    def update(self, record_id: str, mutate: Callable[[Record], None]) -> Record:
        with self._lock:
            records = self._load_raw()
            index = self._index_of(records, record_id)
            record = self._to_domain(records[index])
            mutate(record)
            records[index] = self._to_raw(record)
            self._persist_raw(records)
        return record

    def adjust_quantity(self, record_id: str, delta: int) -> Record:
        return self.update(record_id, lambda record: record.adjust_stock(delta))

    # --- Query helpers --------------------------------------------------------

    def _matching(self, record_filter: RecordFilter) -> list[Record]:
        with self._lock:
            raw_records = self._load_raw()
        records = (self._to_domain(raw) for raw in raw_records)
        return [r for r in records if record_filter.matches(r)]

    @staticmethod
    def _index_of(records: list[dict], record_id: str) -> int:
        for i, raw in enumerate(records):
            if raw["id"] == record_id:
                return i
        raise EntityNotFoundError(f"Record with ID '{record_id}' not found")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: Record) -> dict:
        return {
            "id": record.id,
            "artist": record.artist,
            "album": record.album,
            "price": str(record.price.amount),
            "currency": record.price.currency,
            "quantity": record.quantity,
            "format": record.format.value,
            "category": record.category.value,
            "mbid": record.mbid,
            "tracklist": list(record.tracklist),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Record:
        return Record(
            id=raw["id"],
            artist=raw["artist"],
            album=raw["album"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            quantity=raw["quantity"],
            format=RecordFormat(raw["format"]),
            category=RecordCategory(raw["category"]),
            mbid=raw.get("mbid"),
            tracklist=list(raw.get("tracklist", [])),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
