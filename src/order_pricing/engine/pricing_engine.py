"""
Pricing Engine - Order pricing with a traced discount pipeline.

Resolution order:
1. Item pricing: book items take the book discount
2. Subtotal: effective price x quantity, summed over items
3. Customer discount: premium customers take the premium factor
4. Bulk discount: totals above the threshold take the bulk factor

No rounding is applied; currency rounding belongs to the caller.
"""
import logging
from decimal import Decimal
from typing import Iterable, Mapping, Optional, Union

import pandas as pd
import pydantic

from ..config.settings import Settings, get_settings
from ..errors import ValidationError
from .discounts import (
    apply_bulk_discount,
    apply_customer_discount,
    calculate_item_price,
    is_book_item,
    qualifies_for_bulk,
)
from .models import LineItem, Order, Result

logger = logging.getLogger(__name__)

OrderLike = Union[Order, Mapping]


def validate_order(order: OrderLike) -> Order:
    """
    Validate raw order data into an Order.

    Raises:
        ValidationError: if fields are missing, mistyped or out of range
    """
    if isinstance(order, Order):
        return order
    try:
        return Order.model_validate(order)
    except pydantic.ValidationError as e:
        errors = e.errors(include_url=False)
        logger.warning("Rejected order with %d validation error(s)", len(errors))
        raise ValidationError(f"Invalid order: {e.error_count()} validation error(s)", errors=errors) from e


class PricingEngine:
    """
    Prices orders by composing the discount steps left to right.

    The engine holds only frozen settings, so one instance can be shared
    between callers.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def process_order(self, order: OrderLike) -> Decimal:
        """Final charge for an order."""
        return self.calculate(order).total

    def calculate(self, order: OrderLike) -> Result:
        """
        Price an order with full traceability.

        Args:
            order: Order model or a mapping of the same shape

        Returns:
            Result with line breakdown, applied discounts and trace
        """
        order = validate_order(order)
        settings = self.settings
        discounts = settings.discounts

        lines = [self._calculate_line(item) for item in order.items]
        subtotal = sum((line.extended_price for line in lines), Decimal('0'))

        result = Result(
            subtotal=subtotal,
            customer_total=subtotal,
            total=subtotal,
            is_premium=order.customer.is_premium,
            lines=lines,
        )
        result.add_trace("Subtotal", f"{len(lines)} line(s)", str(subtotal))
        for line in lines:
            if 'BOOK' in line.discounts_applied and 'BOOK' not in result.discounts_applied:
                result.discounts_applied.append('BOOK')

        result.customer_total = apply_customer_discount(subtotal, order.customer, settings)
        if order.customer.is_premium:
            result.discounts_applied.append('PREMIUM_CUSTOMER')
            result.add_trace("Customer Discount", f"Premium customer x {discounts.premium_customer}", str(result.customer_total))
        else:
            result.add_trace("Customer Discount", "Not a premium customer")

        result.total = apply_bulk_discount(result.customer_total, settings)
        if qualifies_for_bulk(result.customer_total, settings):
            result.discounts_applied.append('BULK_PURCHASE')
            result.add_trace("Bulk Discount", f"Total above {settings.bulk_threshold} x {discounts.bulk_purchase}", str(result.total))
        else:
            result.add_trace("Bulk Discount", f"Total not above {settings.bulk_threshold}")

        logger.debug(
            "Priced order: subtotal=%s customer_total=%s total=%s discounts=%s",
            result.subtotal, result.customer_total, result.total, result.discounts_applied,
        )
        return result

    def calculate_many(self, orders: Iterable[OrderLike]) -> pd.DataFrame:
        """Price a batch of orders, one summary row per order."""
        rows = []
        for order in orders:
            result = self.calculate(order)
            rows.append({
                "subtotal": result.subtotal,
                "customer_total": result.customer_total,
                "total": result.total,
                "premium": result.is_premium,
                "bulk_applied": result.bulk_applied,
                "item_count": sum(line.quantity for line in result.lines),
            })
        columns = ["subtotal", "customer_total", "total", "premium", "bulk_applied", "item_count"]
        return pd.DataFrame(rows, columns=columns)

    def _calculate_line(self, item) -> LineItem:
        """Price a single order item with trace."""
        effective = calculate_item_price(item, self.settings)
        line = LineItem(
            item_type=item.item.type,
            unit_price=item.price,
            effective_price=effective,
            quantity=item.quantity,
            extended_price=effective * item.quantity,
        )
        line.add_trace("Unit Price", f"Listed price for {item.item.type}", str(item.price))
        if is_book_item(item.item.type, self.settings):
            line.discounts_applied.append('BOOK')
            line.add_trace("Book Discount", f"x {self.settings.discounts.book}", str(effective))
        line.add_trace("Extension", f"Quantity {item.quantity} × {effective}", str(line.extended_price))
        return line


_default_engine: Optional[PricingEngine] = None


def process_order(order: OrderLike) -> Decimal:
    """Final charge for an order using the process-wide settings."""
    global _default_engine
    if _default_engine is None:
        _default_engine = PricingEngine()
    return _default_engine.process_order(order)
