"""
Operation dispatch over a fixed strategy table.

OPERATIONS is a read-only mapping proxy keyed by the Operation enum, so no
caller can rebind or remove what a named operation does:

    >>> OPERATIONS[Operation.ADD] = None
    Traceback (most recent call last):
    ...
    TypeError: 'mappingproxy' object does not support item assignment
"""
import logging
import operator
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Union

from ..errors import DivisionByZeroError, UnknownOperationError

logger = logging.getLogger(__name__)

Number = Union[int, float]


class Operation(str, Enum):
    ADD = 'ADD'
    SUBTRACT = 'SUBTRACT'
    MULTIPLY = 'MULTIPLY'
    DIVIDE = 'DIVIDE'


def _divide(a: Number, b: Number) -> Number:
    if b == 0:
        logger.warning("Division by zero requested: %r / %r", a, b)
        raise DivisionByZeroError()
    return a / b


OPERATIONS: Mapping[Operation, Callable[[Number, Number], Number]] = MappingProxyType({
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: _divide,
})


def resolve(operation_name: Union[str, Operation]) -> Callable[[Number, Number], Number]:
    """Look up the function for an operation name (exact, case-sensitive)."""
    try:
        operation = Operation(operation_name)
    except ValueError:
        logger.warning("Unknown operation requested: %r", operation_name)
        raise UnknownOperationError(operation_name) from None
    return OPERATIONS[operation]


def apply(a: Number, b: Number, operation_name: Union[str, Operation]) -> Number:
    """
    Apply a named binary operation.

    Raises:
        UnknownOperationError: no operation has that name
        DivisionByZeroError: DIVIDE with a zero divisor
    """
    return resolve(operation_name)(a, b)
