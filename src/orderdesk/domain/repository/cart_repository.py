"""Abstract repository for CartItem records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from orderdesk.domain.model.cart import CartItem


class CartRepository(ABC):

    @abstractmethod
    def get_by_id(self, cart_item_id: int) -> CartItem | None:
        """Return a cart item by its ID, or None if not found."""

    @abstractmethod
    def find_for_user(self, user_id: str, cart_item_ids: Iterable[int]) -> list[CartItem]:
        """Return the items whose ID is in *cart_item_ids* and owned by *user_id*."""

    @abstractmethod
    def list_by_user(self, user_id: str) -> list[CartItem]:
        """Return every cart item owned by *user_id*."""

    @abstractmethod
    def save(self, item: CartItem) -> None:
        """Persist a new or updated cart item, assigning an ID if needed."""

    @abstractmethod
    def remove_many(self, cart_item_ids: Iterable[int]) -> None:
        """Delete the given cart items. Unknown IDs are ignored."""
