"""Engine subpackage - order pricing pipeline."""
from .pricing_engine import PricingEngine, process_order, validate_order
from .models import Order, OrderItem, ItemInfo, Customer, LineItem, Result

__all__ = [
    'PricingEngine', 'process_order', 'validate_order',
    'Order', 'OrderItem', 'ItemInfo', 'Customer', 'LineItem', 'Result',
]
