"""Application service: Update Product use case."""

from __future__ import annotations

from orderdesk.domain.exceptions import ProductNotFoundError
from orderdesk.domain.model.value_objects import Money
from orderdesk.domain.repository.unit_of_work import UnitOfWork


class UpdateProductHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, product_id: str, new_price: str) -> None:
        """Update a product's price.

        Existing orders keep the price they were placed at.
        """
        with self._uow as uow:
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)
            product.update_price(Money.of(new_price))
            uow.products.save(product)
            uow.commit()
