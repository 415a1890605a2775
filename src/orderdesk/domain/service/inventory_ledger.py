"""Domain service: Inventory Ledger.

Debits and credits product stock. It works against the product
repository of the *current* unit of work, so every product it reads is
fresh inside the transaction and every change it makes commits or rolls
back together with the order write.

Batch debits use a two-phase approach (validate-then-mutate) so a
failing product never leaves earlier products in the batch debited.
"""

from __future__ import annotations

import logging

from orderdesk.domain.exceptions import InsufficientStockError, ProductNotFoundError
from orderdesk.domain.model.cart import CartItem
from orderdesk.domain.model.order import Order
from orderdesk.domain.model.product import Product
from orderdesk.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class InventoryLedger:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def check_and_debit(self, product_id: str, quantity: int) -> Product:
        """Debit a single product, or raise InsufficientStockError."""
        product = self._load(product_id)
        product.debit(quantity)
        self._product_repo.save(product)
        return product

    def credit(self, product_id: str, quantity: int) -> Product:
        product = self._load(product_id)
        product.credit(quantity)
        self._product_repo.save(product)
        return product

    def debit_for_cart(self, cart_items: list[CartItem]) -> dict[str, Product]:
        """Debit stock for every cart item, all or nothing.

        Phase 1 — load every product and check the *combined* quantity
                  requested for it, failing on the first shortfall.
        Phase 2 — apply the debits and save.

        Returns the debited products keyed by ID so the caller can read
        the prices it should snapshot.
        """
        products: dict[str, Product] = {}
        requested: dict[str, int] = {}

        for item in cart_items:
            if item.product_id not in products:
                products[item.product_id] = self._load(item.product_id)
            requested[item.product_id] = (
                requested.get(item.product_id, 0) + item.quantity.value
            )

        for product_id, qty in requested.items():
            product = products[product_id]
            if not product.can_supply(qty):
                raise InsufficientStockError(
                    product_id=product.id,
                    product_name=product.name,
                    requested=qty,
                    available=product.stock,
                )

        for product_id, qty in requested.items():
            product = products[product_id]
            product.debit(qty)
            self._product_repo.save(product)
            logger.debug("Debited %d x %s (stock now %d)", qty, product.name, product.stock)

        return products

    def credit_for_order(self, order: Order) -> None:
        """Return every line's quantity to stock.

        Products removed from the catalog since the order was placed are
        skipped.
        """
        for line in order.lines:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                logger.warning(
                    "Order #%s: product '%s' no longer exists, %d unit(s) not restocked",
                    order.id,
                    line.product_name,
                    line.quantity.value,
                )
                continue
            product.credit(line.quantity.value)
            self._product_repo.save(product)
            logger.debug(
                "Credited %d x %s (stock now %d)",
                line.quantity.value,
                product.name,
                product.stock,
            )

    def _load(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
