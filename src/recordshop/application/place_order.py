"""Application service: Place Order use case.

Sells copies of one record: the stock is decremented through the
repository's atomic ``adjust_quantity`` and the order is saved with the
record's current price locked in.  There is no transaction spanning the
two stores, so a failed order save puts the copies back.
"""

from __future__ import annotations

import logging

from recordshop.domain.model.order import Order
from recordshop.domain.model.value_objects import Quantity
from recordshop.domain.repository.order_repository import OrderRepository
from recordshop.domain.repository.record_repository import RecordRepository

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        record_repo: RecordRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._record_repo = record_repo
        self._order_repo = order_repo

    def handle(self, record_id: str, quantity: int) -> Order:
        qty = Quantity(quantity)
        record = self._record_repo.adjust_quantity(record_id, -qty.value)

        order = Order.for_record(record, qty)
        try:
            self._order_repo.save(order)
        except Exception:
            logger.warning(
                "Order save failed; returning %d copies to record %s", qty.value, record_id
            )
            self._record_repo.adjust_quantity(record_id, qty.value)
            raise
        return order
