"""Shared fixtures for the order pricing test suite."""
from decimal import Decimal

import pytest

from order_pricing.engine import Customer, ItemInfo, Order, OrderItem, PricingEngine


@pytest.fixture
def make_item():
    """Factory for order items; prices go through str so floats stay exact."""
    def _make_item(price, quantity: int = 1, item_type: str = "widget") -> OrderItem:
        return OrderItem(price=Decimal(str(price)), quantity=quantity, item=ItemInfo(type=item_type))
    return _make_item


@pytest.fixture
def make_order():
    """Factory for orders from items and a premium flag."""
    def _make_order(items, premium: bool = False) -> Order:
        return Order(items=items, customer=Customer(is_premium=premium))
    return _make_order


@pytest.fixture(scope="module")
def engine():
    """A single engine instance on the standard settings."""
    return PricingEngine()


@pytest.fixture
def mixed_items(make_item):
    """Two books at 10 and one pen at 5."""
    return [make_item(10, 2, "book"), make_item(5, 1, "pen")]
