"""Application service: Create Order use case (Order Assembler).

Checks out a user's cart in one transaction:
verify user → resolve cart → debit stock → write order → delete cart
items. Only after the commit is the "new order" event broadcast, and
a failed broadcast never undoes the order.
"""

from __future__ import annotations

import logging

from orderdesk.application.dto import OrderDTO, order_to_dto
from orderdesk.application.notifications import publish
from orderdesk.domain.exceptions import UserNotFoundError
from orderdesk.domain.model.order import Order, OrderLine
from orderdesk.domain.repository.unit_of_work import UnitOfWork
from orderdesk.domain.service.cart_resolver import CartResolver
from orderdesk.domain.service.inventory_ledger import InventoryLedger
from orderdesk.domain.service.notifier import ORDER_CREATED, Notifier

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(self, uow: UnitOfWork, notifier: Notifier) -> None:
        self._uow = uow
        self._notifier = notifier

    def handle(self, user_id: str, cart_item_ids: list[int]) -> OrderDTO:
        """Turn the given cart items into a Pending order.

        Raises UserNotFoundError, CartMismatchError or
        InsufficientStockError before anything is persisted.
        """
        with self._uow as uow:
            user = uow.users.get_by_id(user_id)
            if user is None:
                raise UserNotFoundError(user_id)

            cart_items = CartResolver(uow.carts).resolve(user_id, cart_item_ids)
            products = InventoryLedger(uow.products).debit_for_cart(cart_items)

            lines = [
                OrderLine(
                    product_id=item.product_id,
                    product_name=products[item.product_id].name,
                    quantity=item.quantity,
                    unit_price=products[item.product_id].price,  # <-- price snapshot
                )
                for item in cart_items
            ]
            order = Order.create(user_id=user.id, lines=lines)

            uow.orders.save(order)
            uow.carts.remove_many(item.id for item in cart_items)
            uow.on_commit(lambda: self._announce(order))
            uow.commit()

        logger.info(
            "Order #%s created for user %s (%d line(s), total %s)",
            order.id,
            user.id,
            len(order.lines),
            order.total,
        )
        return order_to_dto(order, phone_number=user.phone_number)

    def _announce(self, order: Order) -> None:
        publish(
            self._notifier,
            ORDER_CREATED,
            {
                "order_id": order.id,
                "total": str(order.total.amount),
                "created_at": order.created_at.isoformat(),
            },
        )
