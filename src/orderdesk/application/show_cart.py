"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from orderdesk.application.dto import CartItemDTO
from orderdesk.domain.repository.unit_of_work import UnitOfWork


class ShowCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str) -> list[CartItemDTO]:
        result: list[CartItemDTO] = []
        with self._uow as uow:
            for item in uow.carts.list_by_user(user_id):
                product = uow.products.get_by_id(item.product_id)
                result.append(
                    CartItemDTO(
                        id=item.id,  # type: ignore[arg-type]
                        product_id=item.product_id,
                        product_name=product.name if product else "Unknown product",
                        quantity=item.quantity.value,
                    )
                )
        return result
