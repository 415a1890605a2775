"""Application service: Delete Order use case (administrative).

Removes the order outright. Stock is not adjusted; cancel the order
first if its quantities should go back on the shelf.
"""

from __future__ import annotations

import logging

from orderdesk.domain.exceptions import OrderNotFoundError
from orderdesk.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> None:
        with self._uow as uow:
            if uow.orders.get_by_id(order_id) is None:
                raise OrderNotFoundError(order_id)
            uow.orders.remove(order_id)
            uow.commit()
        logger.info("Order #%s deleted", order_id)
