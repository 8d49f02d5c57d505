"""Calculator subpackage - arithmetic dispatch over a fixed operation table."""
from .operations import OPERATIONS, Operation, apply

__all__ = ['OPERATIONS', 'Operation', 'apply']
