"""Abstract repository for the Record aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from recordshop.domain.model.record import Record
from recordshop.domain.model.record_filter import RecordFilter


class RecordRepository(ABC):

    @abstractmethod
    def create(self, record: Record) -> Record:
        """Persist a new record, assigning its ``id``, and return it."""

    @abstractmethod
    def get_by_id(self, record_id: str) -> Record | None:
        """Return a record by its ID, or None if not found."""

    @abstractmethod
    def find(self, record_filter: RecordFilter, skip: int, limit: int) -> list[Record]:
        """Return at most ``limit`` matching records after skipping ``skip``."""

    @abstractmethod
    def count(self, record_filter: RecordFilter) -> int:
        """Return how many records match, ignoring pagination."""

    @abstractmethod
    def save(self, record: Record) -> None:
        """Persist a whole record, overwriting the stored copy.

        Last writer wins: a caller that read the record earlier overwrites
        any stock change made since.  Read-modify-write callers use
        ``update`` instead.
        """

    @abstractmethod
    def update(self, record_id: str, mutate: Callable[[Record], None]) -> Record:
        """Load the stored record, apply ``mutate`` to it and persist it.

        Runs as one step under the same guard as ``adjust_quantity``, so
        ``mutate`` always sees the current stock.  Returns the updated
        record.  Raises EntityNotFoundError for an unknown ID; if
        ``mutate`` raises, nothing is written.
        """

    @abstractmethod
    def adjust_quantity(self, record_id: str, delta: int) -> Record:
        """Atomically apply ``delta`` via ``Record.adjust_stock()``.

        The read, the non-negative check and the write happen as one step
        with respect to every other call on the same repository.  Returns
        the updated record.  Raises EntityNotFoundError for an unknown ID,
        and ValidationError (with nothing written) if the quantity would
        go negative.
        """
