"""
Data models for the pricing engine.

Order inputs are frozen pydantic models so they are validated once at the
boundary and cannot be mutated by the pipeline. Results use dataclasses,
carrying a step-by-step trace of how the total was reached.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, StrictBool


class ItemInfo(BaseModel):
    """Catalog information for an ordered item."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    type: str


class OrderItem(BaseModel):
    """A single priced line of an order."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    price: Decimal = Field(ge=0)
    quantity: int = Field(ge=1)
    item: ItemInfo


class Customer(BaseModel):
    """The customer placing the order."""
    model_config = ConfigDict(frozen=True, extra='forbid', populate_by_name=True)

    is_premium: StrictBool = Field(alias='isPremium')


class Order(BaseModel):
    """An order: ordered items plus the customer."""
    model_config = ConfigDict(frozen=True, extra='forbid')

    items: tuple[OrderItem, ...]
    customer: Customer


@dataclass
class TraceStep:
    """A single step in the pricing trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass
class LineItem:
    """A single line of a pricing result."""
    item_type: str
    unit_price: Decimal
    effective_price: Decimal
    quantity: int
    extended_price: Decimal
    discounts_applied: list[str] = field(default_factory=list)
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the trace for this line item."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"→ {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"→ {t.step}: {t.description}")
        return "\n".join(lines)


@dataclass
class Result:
    """Complete result of pricing an order."""
    subtotal: Decimal
    customer_total: Decimal
    total: Decimal
    is_premium: bool = False
    lines: list[LineItem] = field(default_factory=list)
    discounts_applied: list[str] = field(default_factory=list)
    trace: list[TraceStep] = field(default_factory=list)

    @property
    def bulk_applied(self) -> bool:
        return 'BULK_PURCHASE' in self.discounts_applied

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the result-level trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable result trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Flat summary of the order totals."""
        return {
            "Subtotal": self.subtotal,
            "Customer Total": self.customer_total,
            "Total": self.total,
            "Premium": self.is_premium,
            "Discounts": list(self.discounts_applied),
            "Lines": [
                {
                    "Type": line.item_type,
                    "Quantity": line.quantity,
                    "Unit Price": line.unit_price,
                    "Effective Price": line.effective_price,
                    "Total": line.extended_price,
                }
                for line in self.lines
            ]
        }

    def to_frame(self) -> pd.DataFrame:
        """Line breakdown as a DataFrame, one row per order item."""
        columns = ['Type', 'Quantity', 'Unit Price', 'Effective Price', 'Total']
        return pd.DataFrame(self.to_dict()["Lines"], columns=columns)
