"""Bounded decimal arithmetic with overflow protection."""

from collections.abc import Callable
from decimal import Decimal, Overflow

from strictcalc.config import DEFAULT_LIMITS, Limits
from strictcalc.exceptions import DivisionByZeroError, InternalError, OverflowError
from strictcalc.logger import logger
from strictcalc.models import Operator


def _checked(
    operation: str, fn: Callable[[Decimal, Decimal], Decimal], a: Decimal, b: Decimal
) -> Decimal:
    try:
        return fn(a, b)
    except Overflow as e:
        raise OverflowError(operation, a, b) from e


def add(a: Decimal, b: Decimal, limits: Limits = DEFAULT_LIMITS) -> Decimal:
    """
    Add two operands with overflow protection.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        OverflowError: If the sum exceeds the decimal headroom
    """
    return _checked("addition", limits.context().add, a, b)


def subtract(a: Decimal, b: Decimal, limits: Limits = DEFAULT_LIMITS) -> Decimal:
    """
    Subtract b from a with overflow protection.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Self-inverse: subtract(a, a) == 0

    Raises:
        OverflowError: If the difference exceeds the decimal headroom
    """
    return _checked("subtraction", limits.context().subtract, a, b)


def multiply(a: Decimal, b: Decimal, limits: Limits = DEFAULT_LIMITS) -> Decimal:
    """
    Multiply two operands with overflow protection.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0

    Raises:
        OverflowError: If the product exceeds the decimal headroom
    """
    return _checked("multiplication", limits.context().multiply, a, b)


def divide(a: Decimal, b: Decimal, limits: Limits = DEFAULT_LIMITS) -> Decimal:
    """
    Divide a by b.

    The quotient is computed to the full working precision; its magnitude is
    left for validate_result to check.

    Raises:
        DivisionByZeroError: If b is zero
        OverflowError: If the quotient exceeds the decimal headroom
    """
    if b == 0:
        raise DivisionByZeroError(a)

    return _checked("division", limits.context().divide, a, b)


OPERATIONS: dict[Operator, Callable[[Decimal, Decimal, Limits], Decimal]] = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.DIVIDE: divide,
}


def apply(
    operator: Operator, a: Decimal, b: Decimal, limits: Limits = DEFAULT_LIMITS
) -> Decimal:
    """
    Apply one of the four operators.

    Raises:
        DivisionByZeroError: For division by zero
        OverflowError: If the value exceeds the decimal headroom
        InternalError: If operator is not an Operator member
    """
    if not isinstance(operator, Operator) or operator not in OPERATIONS:
        raise InternalError(f"unsupported operator {operator!r}", operator)

    operation = OPERATIONS[operator]
    result = operation(a, b, limits)
    logger.debug("%s %s %s = %s", a, operator.symbol, b, result)
    return result


def round_result(value: Decimal, limits: Limits = DEFAULT_LIMITS) -> Decimal:
    """Round half-to-even to limits.max_fraction_digits fractional digits."""
    exponent = Decimal(1).scaleb(-limits.max_fraction_digits)
    return limits.context().quantize(value, exponent)
