"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its lines. After creation it
is mutated only through ``change_status``, which enforces the status
state machine:

    Pending ──> Canceled | Completed | Delivered

All three targets are terminal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from orderdesk.domain.exceptions import (
    InvalidStatusError,
    InvalidTransitionError,
    ValidationError,
)
from orderdesk.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "Pending"
    CANCELED = "Canceled"
    COMPLETED = "Completed"
    DELIVERED = "Delivered"

    @classmethod
    def parse(cls, raw: str | None) -> OrderStatus:
        """Map user input to a status, ignoring case and surrounding blanks."""
        wanted = (raw or "").strip().lower()
        for status in cls:
            if status.value.lower() == wanted:
                return status
        raise InvalidStatusError(raw or "", [s.value for s in cls])

    @property
    def is_terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS.get(self)

    @property
    def notifies(self) -> bool:
        """Whether reaching this status is broadcast to listeners."""
        return self in (OrderStatus.COMPLETED, OrderStatus.DELIVERED)


ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset(
        {OrderStatus.CANCELED, OrderStatus.COMPLETED, OrderStatus.DELIVERED}
    ),
}


@dataclass(frozen=True)
class OrderLine:
    """One product on an order, with price and quantity frozen at creation."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at order-creation time

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders. The ``__init__``
    stays plain so the repository can reconstitute persisted orders
    without re-validating.
    """

    id: int | None
    user_id: str
    lines: list[OrderLine]
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(user_id: str, lines: list[OrderLine]) -> Order:
        if not user_id:
            raise ValidationError("Order must belong to a user")
        if not lines:
            raise ValidationError("Order must contain at least one line")
        return Order(id=None, user_id=user_id, lines=list(lines))

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus) -> bool:
        """Move the order to *new_status*.

        Returns False when the order already has that status, so callers
        can skip side effects such as restoring stock twice.
        """
        if new_status == self.status:
            return False
        if new_status not in ALLOWED_TRANSITIONS.get(self.status, frozenset()):
            raise InvalidTransitionError(self.status.value, new_status.value)
        self.status = new_status
        return True

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.subtotal
        return result
