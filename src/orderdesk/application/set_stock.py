"""Application service: Set Stock use case (restock or stock correction)."""

from __future__ import annotations

import logging

from orderdesk.domain.exceptions import ProductNotFoundError
from orderdesk.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SetStockHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: str, quantity: int) -> None:
        """Set the absolute stock level for a product."""
        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)
            previous = product.stock
            product.set_stock(quantity)
            uow.products.save(product)
            uow.commit()
        logger.info("Stock for '%s' set from %d to %d", product.name, previous, quantity)
