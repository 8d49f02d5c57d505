"""
Centralized discount settings for the pricing pipeline.

The discount factors and bulk threshold are fixed policy: they are built
once per process and exposed through frozen objects only.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional

from ..errors import ConfigError


BULK_PURCHASE_THRESHOLD = Decimal('100')
BOOK_ITEM_TYPE = 'book'


@dataclass(frozen=True)
class DiscountTable:
    """Named multiplicative discount factors."""
    book: Decimal = Decimal('0.9')
    premium_customer: Decimal = Decimal('0.95')
    bulk_purchase: Decimal = Decimal('0.98')

    def __post_init__(self):
        for name, factor in self.as_dict().items():
            if not isinstance(factor, Decimal):
                raise ConfigError(f"Discount {name} must be a Decimal, got {type(factor).__name__}")
            if not factor.is_finite():
                raise ConfigError(f"Discount {name} must be finite, got {factor}")
            if not (Decimal('0') < factor <= Decimal('1')):
                raise ConfigError(f"Discount {name} must lie in (0, 1], got {factor}")

    def as_dict(self) -> Mapping[str, Decimal]:
        """Read-only view keyed by the upper-case discount names."""
        return MappingProxyType({
            'BOOK': self.book,
            'PREMIUM_CUSTOMER': self.premium_customer,
            'BULK_PURCHASE': self.bulk_purchase,
        })


@dataclass(frozen=True)
class Settings:
    """Pricing settings with the standard discount policy as defaults."""

    discounts: DiscountTable = field(default_factory=DiscountTable)

    # Bulk discount applies strictly above this total
    bulk_threshold: Decimal = BULK_PURCHASE_THRESHOLD

    # Item category that receives the book discount (exact match)
    book_item_type: str = BOOK_ITEM_TYPE

    def __post_init__(self):
        if not isinstance(self.bulk_threshold, Decimal) or not self.bulk_threshold.is_finite():
            raise ConfigError(f"Bulk threshold must be a finite Decimal, got {self.bulk_threshold!r}")
        if self.bulk_threshold < 0:
            raise ConfigError(f"Bulk threshold must be non-negative, got {self.bulk_threshold}")

    @classmethod
    def load(cls) -> 'Settings':
        """Build the standard settings."""
        return cls()


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
