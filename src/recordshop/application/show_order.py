"""Application service: Show Order and List Orders use cases (queries)."""

from __future__ import annotations

from recordshop.domain.exceptions import EntityNotFoundError
from recordshop.domain.model.order import Order
from recordshop.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> Order:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return order


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[Order]:
        return self._order_repo.list_all()
