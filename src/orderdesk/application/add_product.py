"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from orderdesk.domain.exceptions import ValidationError
from orderdesk.domain.model.product import Product
from orderdesk.domain.model.value_objects import Money
from orderdesk.domain.repository.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, price: str, stock: int = 0) -> Product:
        """Add a new product to the catalog with an initial stock level."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        with self._uow as uow:
            if uow.products.get_by_name(name.strip()) is not None:
                raise ValidationError(f"Product '{name.strip()}' already exists")

            # Auto-assign ID based on existing products
            ids = [int(p.id) for p in uow.products.list_all() if p.id.isdigit()]
            next_id = str(max(ids) + 1) if ids else "1"

            product = Product(
                id=next_id, name=name.strip(), price=Money.of(price), stock=stock
            )
            uow.products.save(product)
            uow.commit()

        logger.info("Product #%s '%s' added with stock %d", product.id, product.name, stock)
        return product
