"""Config subpackage - process-wide discount settings."""
from .settings import DiscountTable, Settings, get_settings

__all__ = ['DiscountTable', 'Settings', 'get_settings']
