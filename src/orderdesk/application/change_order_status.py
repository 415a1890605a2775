"""Application service: Change Order Status use case.

Drives the order status state machine. Canceling a Pending order puts
its quantities back into stock in the same transaction as the status
write. Completing or delivering it is broadcast after commit on a
best-effort basis.
"""

from __future__ import annotations

import logging

from orderdesk.application.dto import OrderDTO, order_to_dto
from orderdesk.application.notifications import publish
from orderdesk.domain.exceptions import OrderNotFoundError
from orderdesk.domain.model.order import Order, OrderStatus
from orderdesk.domain.repository.unit_of_work import UnitOfWork
from orderdesk.domain.service.inventory_ledger import InventoryLedger
from orderdesk.domain.service.notifier import ORDER_STATUS_UPDATED, Notifier

logger = logging.getLogger(__name__)


class ChangeOrderStatusHandler:

    def __init__(self, uow: UnitOfWork, notifier: Notifier) -> None:
        self._uow = uow
        self._notifier = notifier

    def handle(self, order_id: int, new_status: str) -> OrderDTO:
        status = OrderStatus.parse(new_status)

        with self._uow as uow:
            order = uow.orders.get_by_id(order_id)
            if order is None:
                raise OrderNotFoundError(order_id)

            if not order.change_status(status):
                logger.debug("Order #%s already %s, nothing to do", order_id, status.value)
                return order_to_dto(order)

            if status == OrderStatus.CANCELED:
                InventoryLedger(uow.products).credit_for_order(order)

            uow.orders.save(order)
            if status.notifies:
                uow.on_commit(lambda: self._announce(order))
            uow.commit()

        logger.info("Order #%s moved to %s", order_id, status.value)
        return order_to_dto(order)

    def _announce(self, order: Order) -> None:
        publish(
            self._notifier,
            ORDER_STATUS_UPDATED,
            {"order_id": order.id, "status": order.status.value},
        )
