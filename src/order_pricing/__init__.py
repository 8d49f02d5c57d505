"""
Order Pricing Package

Stateless order pricing through a chain of discount rules (book, premium
customer, bulk purchase), plus a small arithmetic operation dispatcher.
"""
from .engine import PricingEngine, process_order
from .calculator import apply

__version__ = "1.0.0"

__all__ = ['PricingEngine', 'process_order', 'apply']
