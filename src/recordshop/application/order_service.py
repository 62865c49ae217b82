"""Order Service — places and reads back record orders."""

from __future__ import annotations

from recordshop.application.dto import ApiResponse
from recordshop.application.errors import internal_failure
from recordshop.application.place_order import PlaceOrderHandler
from recordshop.application.show_order import ListOrdersHandler, ShowOrderHandler
from recordshop.domain.repository.order_repository import OrderRepository
from recordshop.domain.repository.record_repository import RecordRepository


class OrderService:

    def __init__(
        self,
        record_repo: RecordRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._place = PlaceOrderHandler(record_repo, order_repo)
        self._show = ShowOrderHandler(order_repo)
        self._list = ListOrdersHandler(order_repo)

    def place_order(self, record_id: str, quantity: int) -> ApiResponse:
        with internal_failure("place_order", "Failed to place order"):
            order = self._place.handle(record_id, quantity)
        return ApiResponse.ok("Order placed successfully", order)

    def get_order(self, order_id: int) -> ApiResponse:
        with internal_failure("get_order", "Failed to fetch order"):
            order = self._show.handle(order_id)
        return ApiResponse.ok("Order fetched successfully", order)

    def list_orders(self) -> ApiResponse:
        with internal_failure("list_orders", "Failed to fetch orders"):
            orders = self._list.handle()
        return ApiResponse.ok("Orders fetched successfully", orders)
