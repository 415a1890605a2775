"""JSON-backed implementation of CartRepository."""

from __future__ import annotations

from collections.abc import Iterable

from orderdesk.domain.model.cart import CartItem
from orderdesk.domain.model.value_objects import Quantity
from orderdesk.domain.repository.cart_repository import CartRepository
from orderdesk.infrastructure.persistence.json_table import JsonTable


class JsonCartRepository(CartRepository):

    def __init__(self, table: JsonTable) -> None:
        self._table = table

    # --- CartRepository interface ---------------------------------------------

    def get_by_id(self, cart_item_id: int) -> CartItem | None:
        raw = self._table.find("id", cart_item_id)
        return self._to_domain(raw) if raw is not None else None

    def find_for_user(self, user_id: str, cart_item_ids: Iterable[int]) -> list[CartItem]:
        wanted = set(cart_item_ids)
        return [
            self._to_domain(raw)
            for raw in self._table.where(
                lambda r: r["id"] in wanted and r["user_id"] == user_id
            )
        ]

    def list_by_user(self, user_id: str) -> list[CartItem]:
        return [
            self._to_domain(raw)
            for raw in self._table.where(lambda r: r["user_id"] == user_id)
        ]

    def save(self, item: CartItem) -> None:
        if item.id is None:
            item.id = self._table.next_id()
        self._table.upsert("id", self._to_raw(item))

    def remove_many(self, cart_item_ids: Iterable[int]) -> None:
        doomed = set(cart_item_ids)
        self._table.delete_where(lambda r: r["id"] in doomed)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: CartItem) -> dict:
        return {
            "id": item.id,
            "user_id": item.user_id,
            "product_id": item.product_id,
            "quantity": item.quantity.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> CartItem:
        return CartItem(
            id=raw["id"],
            user_id=raw["user_id"],
            product_id=raw["product_id"],
            quantity=Quantity(raw["quantity"]),
        )
