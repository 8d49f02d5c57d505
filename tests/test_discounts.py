"""Unit tests for the individual discount steps and their settings."""
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from order_pricing.config import DiscountTable, Settings, get_settings
from order_pricing.engine import Customer
from order_pricing.engine.discounts import (
    apply_book_discount,
    apply_bulk_discount,
    apply_customer_discount,
    calculate_item_price,
    calculate_subtotal,
    is_book_item,
    qualifies_for_bulk,
)
from order_pricing.errors import ConfigError


def test_standard_discount_table():
    table = get_settings().discounts.as_dict()
    assert dict(table) == {
        'BOOK': Decimal('0.9'),
        'PREMIUM_CUSTOMER': Decimal('0.95'),
        'BULK_PURCHASE': Decimal('0.98'),
    }
    assert get_settings().bulk_threshold == Decimal('100')


def test_settings_created_once():
    assert get_settings() is get_settings()


def test_discount_table_is_read_only():
    settings = get_settings()
    with pytest.raises(FrozenInstanceError):
        settings.discounts.book = Decimal('0.5')
    with pytest.raises(TypeError):
        settings.discounts.as_dict()['BOOK'] = Decimal('0.5')
    with pytest.raises(FrozenInstanceError):
        settings.bulk_threshold = Decimal('0')


@pytest.mark.parametrize("factor", [Decimal('0'), Decimal('-0.1'), Decimal('1.01'), Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity")])
def test_discount_factor_out_of_range(factor):
    with pytest.raises(ConfigError):
        DiscountTable(book=factor)


def test_discount_factor_must_be_decimal():
    with pytest.raises(ConfigError):
        DiscountTable(bulk_purchase=0.98)


def test_negative_threshold_rejected():
    with pytest.raises(ConfigError):
        Settings(bulk_threshold=Decimal('-1'))


@pytest.mark.parametrize("threshold", ["100", 100.0, Decimal("NaN"), Decimal("Infinity")])
def test_threshold_must_be_finite_decimal(threshold):
    with pytest.raises(ConfigError):
        Settings(bulk_threshold=threshold)


def test_factor_of_one_allowed():
    assert DiscountTable(premium_customer=Decimal('1')).premium_customer == Decimal('1')


@pytest.mark.parametrize("item_type,expected", [
    ("book", True),
    ("Book", False),
    ("BOOK", False),
    ("books", False),
    ("", False),
    ("pen", False),
])
def test_is_book_item(item_type, expected):
    assert is_book_item(item_type) is expected


def test_item_price(make_item):
    assert calculate_item_price(make_item(10, 1, "book")) == Decimal("9.0")
    assert calculate_item_price(make_item(10, 1, "pen")) == Decimal("10")
    assert apply_book_discount(Decimal("20")) == Decimal("18.0")


def test_subtotal(make_item):
    items = [make_item(10, 2, "book"), make_item(5, 1, "pen")]
    assert calculate_subtotal(items) == Decimal("23")
    assert calculate_subtotal([]) == Decimal("0")
    assert calculate_subtotal(iter(items)) == Decimal("23")


def test_customer_discount():
    assert apply_customer_discount(Decimal("100"), Customer(is_premium=True)) == Decimal("95")
    assert apply_customer_discount(Decimal("100"), Customer(is_premium=False)) == Decimal("100")


@pytest.mark.parametrize("total,expected", [
    (Decimal("99.99"), Decimal("99.99")),
    (Decimal("100"), Decimal("100")),
    (Decimal("100.00"), Decimal("100.00")),
    (Decimal("200"), Decimal("196")),
])
def test_bulk_discount_threshold(total, expected):
    assert apply_bulk_discount(total) == expected
    assert qualifies_for_bulk(total) is (total > 100)


def test_custom_settings_are_honoured(make_item):
    settings = Settings(
        discounts=DiscountTable(book=Decimal('0.5'), premium_customer=Decimal('1'), bulk_purchase=Decimal('0.5')),
        bulk_threshold=Decimal('10'),
        book_item_type='ebook',
    )
    assert calculate_item_price(make_item(10, 1, "ebook"), settings) == Decimal("5.0")
    assert calculate_item_price(make_item(10, 1, "book"), settings) == Decimal("10")
    assert apply_bulk_discount(Decimal("11"), settings) == Decimal("5.5")
    assert apply_customer_discount(Decimal("8"), Customer(is_premium=True), settings) == Decimal("8")
