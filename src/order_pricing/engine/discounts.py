"""
Discount steps - the pure functions composed by the pricing engine.

Each step takes its inputs plus the settings holding the discount policy
and returns a new Decimal; nothing is mutated.
"""
from decimal import Decimal
from typing import Iterable, Optional

from ..config.settings import Settings, get_settings
from .models import Customer, OrderItem


def is_book_item(item_type: str, settings: Optional[Settings] = None) -> bool:
    """True iff the category tag is exactly the book type (case-sensitive)."""
    settings = settings or get_settings()
    return item_type == settings.book_item_type


def apply_book_discount(price: Decimal, settings: Optional[Settings] = None) -> Decimal:
    settings = settings or get_settings()
    return price * settings.discounts.book


def calculate_item_price(item: OrderItem, settings: Optional[Settings] = None) -> Decimal:
    """Effective unit price of an order item after the book discount."""
    settings = settings or get_settings()
    if is_book_item(item.item.type, settings):
        return apply_book_discount(item.price, settings)
    return item.price


def calculate_subtotal(items: Iterable[OrderItem], settings: Optional[Settings] = None) -> Decimal:
    """Sum of effective price times quantity. Empty input gives 0."""
    settings = settings or get_settings()
    return sum(
        (calculate_item_price(item, settings) * item.quantity for item in items),
        Decimal('0'),
    )


def apply_customer_discount(subtotal: Decimal, customer: Customer, settings: Optional[Settings] = None) -> Decimal:
    """Apply the premium factor for premium customers."""
    settings = settings or get_settings()
    if customer.is_premium:
        return subtotal * settings.discounts.premium_customer
    return subtotal


def qualifies_for_bulk(total: Decimal, settings: Optional[Settings] = None) -> bool:
    """Bulk applies strictly above the threshold."""
    settings = settings or get_settings()
    return total > settings.bulk_threshold


def apply_bulk_discount(total: Decimal, settings: Optional[Settings] = None) -> Decimal:
    """Apply the bulk factor when the total exceeds the threshold."""
    settings = settings or get_settings()
    if qualifies_for_bulk(total, settings):
        return total * settings.discounts.bulk_purchase
    return total
