"""Unit tests for the Product aggregate's stock rules."""

import pytest

from orderdesk.domain.exceptions import InsufficientStockError, ValidationError
from orderdesk.domain.model.product import Product
from orderdesk.domain.model.value_objects import Money


def _product(stock: int = 10) -> Product:
    return Product(id="1", name="Widget", price=Money.of("5.00"), stock=stock)


class TestDebit:

    def test_debit_reduces_stock(self):
        p = _product(10)
        p.debit(3)
        assert p.stock == 7

    def test_debit_entire_stock(self):
        p = _product(4)
        p.debit(4)
        assert p.stock == 0

    def test_insufficient_stock_leaves_stock_untouched(self):
        p = _product(2)
        with pytest.raises(InsufficientStockError) as exc_info:
            p.debit(5)
        assert p.stock == 2
        assert exc_info.value.product_id == "1"
        assert exc_info.value.product_name == "Widget"
        assert exc_info.value.requested == 5
        assert exc_info.value.available == 2

    def test_non_positive_debit_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _product().debit(0)


class TestCredit:

    def test_credit_adds_stock(self):
        p = _product(7)
        p.credit(3)
        assert p.stock == 10

    def test_credit_has_no_ceiling(self):
        p = _product(10)
        p.credit(100)
        assert p.stock == 110

    def test_non_positive_credit_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            _product().credit(-1)


class TestStockLevel:

    def test_negative_initial_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _product(-1)

    def test_set_stock(self):
        p = _product(1)
        p.set_stock(50)
        assert p.stock == 50

    def test_set_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _product().set_stock(-5)

    def test_can_supply(self):
        p = _product(3)
        assert p.can_supply(3)
        assert not p.can_supply(4)
        assert not p.can_supply(0)
