"""CartItem — a pending request for a quantity of one product.

Cart items are ephemeral: they exist until an order consumes them,
at which point they are deleted in the same transaction.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderdesk.domain.model.value_objects import Quantity


@dataclass
class CartItem:

    id: int | None  # assigned by the repository
    user_id: str
    product_id: str
    quantity: Quantity
