"""Order aggregate — a sale of copies of a single record.

The order captures the record's price at the moment of sale, so later
price changes in the catalog never alter existing orders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from recordshop.domain.model.record import Record
from recordshop.domain.model.value_objects import Money, Quantity


@dataclass
class Order:
    """Aggregate root for sales.

    Use ``Order.for_record()`` for new orders.  The ``__init__`` is kept
    simple so the repository can reconstitute persisted orders.
    """

    id: int | None
    record_id: str
    artist: str
    album: str
    quantity: Quantity
    unit_price: Money  # locked at order time
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def for_record(record: Record, quantity: Quantity) -> Order:
        return Order(
            id=None,
            record_id=record.id,  # type: ignore[arg-type]
            artist=record.artist,
            album=record.album,
            quantity=quantity,
            unit_price=record.price,
        )

    @property
    def total(self) -> Money:
        return self.unit_price * self.quantity.value
