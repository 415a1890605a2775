"""Integration tests for the CreateOrder use case.

Uses the in-memory fake unit of work — no file I/O.
"""

import pytest

from orderdesk.application.create_order import CreateOrderHandler
from orderdesk.domain.exceptions import (
    CartMismatchError,
    InsufficientStockError,
    UserNotFoundError,
)
from orderdesk.domain.model.cart import CartItem
from orderdesk.domain.model.order import OrderStatus
from orderdesk.domain.model.product import Product
from orderdesk.domain.model.user import User
from orderdesk.domain.model.value_objects import Money, Quantity
from orderdesk.domain.service.notifier import ORDER_CREATED
from tests.fakes import FailingNotifier, FakeUnitOfWork, RecordingNotifier


def _setup(cart: list[tuple[str, str, int]] | None = None, notifier=None):
    """Build handler with a fake unit of work.

    *cart* holds (owner, product_id, qty) tuples; IDs are assigned 1, 2, ...
    """
    if cart is None:
        cart = [("u1", "1", 3)]
    uow = FakeUnitOfWork(
        users=[
            User(id="u1", name="Alice", phone_number="555-0101"),
            User(id="u2", name="Bob"),
        ],
        products=[
            Product(id="1", name="Widget", price=Money.of("5.00"), stock=10),
            Product(id="2", name="Gadget", price=Money.of("12.50"), stock=2),
        ],
        cart_items=[
            CartItem(id=None, user_id=owner, product_id=pid, quantity=Quantity(qty))
            for owner, pid, qty in cart
        ],
    )
    notifier = notifier or RecordingNotifier()
    return CreateOrderHandler(uow, notifier), uow, notifier


class TestCreateOrderHappyPath:

    def test_checkout_single_item(self):
        handler, uow, _ = _setup()

        dto = handler.handle("u1", [1])

        assert dto.status == "Pending"
        assert dto.total == "$15.00"
        assert dto.user_id == "u1"
        assert dto.phone_number == "555-0101"
        assert len(dto.lines) == 1
        assert dto.lines[0].quantity == 3
        assert dto.lines[0].subtotal == "$15.00"

        assert uow.products.get_by_id("1").stock == 7
        assert uow.carts.get_by_id(1) is None
        assert uow.commits == 1

    def test_persists_order(self):
        handler, uow, _ = _setup()
        dto = handler.handle("u1", [1])

        saved = uow.orders.get_by_id(dto.id)
        assert saved is not None
        assert saved.status == OrderStatus.PENDING
        assert saved.total == Money.of("15.00")

    def test_multiple_items(self):
        handler, uow, _ = _setup([("u1", "1", 3), ("u1", "2", 2)])

        dto = handler.handle("u1", [1, 2])

        assert dto.total == "$40.00"
        assert [line.product_name for line in dto.lines] == ["Widget", "Gadget"]
        assert uow.products.get_by_id("1").stock == 7
        assert uow.products.get_by_id("2").stock == 0
        assert uow.carts.list_by_user("u1") == []

    def test_only_requested_items_are_consumed(self):
        handler, uow, _ = _setup([("u1", "1", 3), ("u1", "1", 1)])
        handler.handle("u1", [1])
        assert [item.id for item in uow.carts.list_by_user("u1")] == [2]

    def test_sequential_ids(self):
        handler, _, _ = _setup([("u1", "1", 1), ("u1", "1", 1)])
        first = handler.handle("u1", [1])
        second = handler.handle("u1", [2])
        assert second.id == first.id + 1


class TestCreateOrderPriceLock:

    def test_price_snapshot_at_creation(self):
        handler, uow, _ = _setup()
        dto = handler.handle("u1", [1])

        widget = uow.products.get_by_id("1")
        widget.update_price(Money.of("99.99"))
        uow.products.save(widget)

        saved = uow.orders.get_by_id(dto.id)
        assert saved.lines[0].subtotal == Money.of("15.00")
        assert str(saved.total) == "$15.00"


class TestCreateOrderFailures:

    def test_unknown_user_rejected(self):
        handler, uow, notifier = _setup()
        with pytest.raises(UserNotFoundError, match="ghost"):
            handler.handle("ghost", [1])
        assert uow.products.get_by_id("1").stock == 10
        assert notifier.events == []

    def test_foreign_cart_item_rejected(self):
        handler, uow, _ = _setup([("u2", "1", 3)])
        with pytest.raises(CartMismatchError):
            handler.handle("u1", [1])
        assert uow.carts.get_by_id(1) is not None
        assert uow.products.get_by_id("1").stock == 10

    def test_missing_cart_item_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(CartMismatchError):
            handler.handle("u1", [1, 42])

    def test_insufficient_stock_rejected(self):
        handler, uow, notifier = _setup([("u1", "2", 5)])

        with pytest.raises(InsufficientStockError) as exc_info:
            handler.handle("u1", [1])

        assert exc_info.value.product_name == "Gadget"
        assert uow.products.get_by_id("2").stock == 2
        assert uow.carts.get_by_id(1) is not None
        assert uow.orders.list_all() == []
        assert uow.commits == 0
        assert notifier.events == []

    def test_all_or_nothing_across_lines(self):
        handler, uow, _ = _setup([("u1", "1", 3), ("u1", "2", 5)])

        with pytest.raises(InsufficientStockError):
            handler.handle("u1", [1, 2])

        assert uow.products.get_by_id("1").stock == 10
        assert uow.products.get_by_id("2").stock == 2
        assert len(uow.carts.list_by_user("u1")) == 2
        assert uow.orders.list_all() == []


class TestCreateOrderNotification:

    def test_broadcasts_new_order(self):
        handler, _, notifier = _setup()
        dto = handler.handle("u1", [1])

        assert len(notifier.events) == 1
        name, payload = notifier.events[0]
        assert name == ORDER_CREATED
        assert payload["order_id"] == dto.id
        assert payload["total"] == "15.00"

    def test_notification_failure_does_not_fail_order(self, caplog):
        notifier = FailingNotifier()
        handler, uow, _ = _setup(notifier=notifier)

        dto = handler.handle("u1", [1])

        assert notifier.attempts == 1
        assert uow.orders.get_by_id(dto.id) is not None
        assert uow.products.get_by_id("1").stock == 7
        assert "not delivered" in caplog.text

    def test_unexpected_notifier_error_is_swallowed(self):
        handler, uow, _ = _setup(notifier=FailingNotifier(RuntimeError("boom")))
        dto = handler.handle("u1", [1])
        assert uow.orders.get_by_id(dto.id) is not None
