"""Domain service: Cart Resolver.

Turns the cart item IDs a user submits at checkout into the cart items
themselves, refusing the whole request if any ID is unknown or owned by
someone else.
"""

from __future__ import annotations

from orderdesk.domain.exceptions import CartMismatchError, ValidationError
from orderdesk.domain.model.cart import CartItem
from orderdesk.domain.repository.cart_repository import CartRepository


class CartResolver:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def resolve(self, user_id: str, cart_item_ids: list[int]) -> list[CartItem]:
        requested = list(cart_item_ids)
        if not requested:
            raise ValidationError("At least one cart item is required")

        items = self._cart_repo.find_for_user(user_id, set(requested))

        # A duplicated ID counts twice in the request but resolves once,
        # so it is rejected along with unknown and foreign IDs.
        if len(items) != len(requested):
            raise CartMismatchError(requested, [item.id for item in items])
        return items
