"""Application service: Add To Cart use case.

Stock is not checked or held here; it is debited only when the cart
is checked out.
"""

from __future__ import annotations

from orderdesk.application.dto import CartItemDTO
from orderdesk.domain.exceptions import ProductNotFoundError, UserNotFoundError
from orderdesk.domain.model.cart import CartItem
from orderdesk.domain.model.value_objects import Quantity
from orderdesk.domain.repository.unit_of_work import UnitOfWork


class AddToCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, user_id: str, product_id: str, quantity: int) -> CartItemDTO:
        qty = Quantity(quantity)
        with self._uow as uow:
            if uow.users.get_by_id(user_id) is None:
                raise UserNotFoundError(user_id)
            product = uow.products.get_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)

            item = CartItem(id=None, user_id=user_id, product_id=product.id, quantity=qty)
            uow.carts.save(item)
            uow.commit()

        return CartItemDTO(
            id=item.id,  # type: ignore[arg-type]
            product_id=product.id,
            product_name=product.name,
            quantity=qty.value,
        )
