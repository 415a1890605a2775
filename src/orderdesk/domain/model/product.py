"""Product aggregate.

A product carries its own stock level: the inventory ledger debits it
when an order is placed and credits it back when an order is canceled.
Prices change independently of orders, which snapshot the price they
were placed at.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderdesk.domain.exceptions import InsufficientStockError, ValidationError
from orderdesk.domain.model.value_objects import Money


@dataclass
class Product:
    """A sellable product and its on-hand stock.

    Invariants:
    - ``stock`` is never negative
    - a rejected debit leaves ``stock`` untouched
    """

    id: str
    name: str
    price: Money
    stock: int = 0

    def __post_init__(self) -> None:
        if self.stock < 0:
            raise ValidationError(
                f"Stock for {self.name} cannot be negative, got {self.stock}"
            )

    def can_supply(self, quantity: int) -> bool:
        return 0 < quantity <= self.stock

    def debit(self, quantity: int) -> None:
        """Take *quantity* units out of stock.

        Raises InsufficientStockError if fewer units are on hand.
        """
        if quantity <= 0:
            raise ValidationError("Debit quantity must be positive")
        if quantity > self.stock:
            raise InsufficientStockError(
                product_id=self.id,
                product_name=self.name,
                requested=quantity,
                available=self.stock,
            )
        self.stock -= quantity

    def credit(self, quantity: int) -> None:
        """Put *quantity* units back into stock (no upper bound)."""
        if quantity <= 0:
            raise ValidationError("Credit quantity must be positive")
        self.stock += quantity

    def set_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError("Stock level cannot be negative")
        self.stock = quantity

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because orders
        capture a price snapshot at creation time.
        """
        self.price = new_price
