"""JSON-backed implementation of OrderRepository.

Lines are stored inline with their order, so loading an order always
loads its lines.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from orderdesk.domain.model.order import Order, OrderLine, OrderStatus
from orderdesk.domain.model.value_objects import Money, Quantity
from orderdesk.domain.repository.order_repository import OrderRepository
from orderdesk.infrastructure.persistence.json_table import JsonTable


class JsonOrderRepository(OrderRepository):

    def __init__(self, table: JsonTable) -> None:
        self._table = table

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        raw = self._table.find("id", order_id)
        return self._to_domain(raw) if raw is not None else None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._table.all()]

    def list_by_user(self, user_id: str) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._table.where(lambda r: r["user_id"] == user_id)
        ]

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._table.next_id()
        self._table.upsert("id", self._to_raw(order))

    def remove(self, order_id: int) -> None:
        self._table.delete_where(lambda r: r["id"] == order_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "total": str(order.total.amount),
            "lines": [
                {
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "quantity": line.quantity.value,
                    "unit_price": str(line.unit_price.amount),
                    "currency": line.unit_price.currency,
                    "subtotal": str(line.subtotal.amount),
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        lines = [
            OrderLine(
                product_id=line["product_id"],
                product_name=line["product_name"],
                quantity=Quantity(line["quantity"]),
                unit_price=Money(Decimal(line["unit_price"]), line.get("currency", "USD")),
            )
            for line in raw["lines"]
        ]
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            lines=lines,
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
