"""Operand parsing and range validation."""

import re
from decimal import Decimal, InvalidOperation

from strictcalc.config import DEFAULT_LIMITS, INVARIANT, Limits, NumberFormat
from strictcalc.exceptions import (
    InvalidOperandError,
    OperandOutOfRangeError,
    ResultOutOfRangeError,
)
from strictcalc.parser import numeral_pattern

NO_FRACTION_DIGITS = "no digits after decimal point"
UNPARSABLE = "could not parse number"


def parse_operand(
    text: str,
    side: str = "left",
    limits: Limits = DEFAULT_LIMITS,
    number_format: NumberFormat = INVARIANT,
) -> Decimal:
    """
    Convert one numeral into an exact Decimal.

    Checks run in a fixed order: fractional digit count, group separator,
    then a strict parse that rejects whitespace, underscores, exponents,
    non-ASCII digits and special values.

    Args:
        text: The numeral as written by the user
        side: "left" or "right", used in the error message
        limits: Supplies the allowed number of fractional digits
        number_format: Supplies the decimal and group separators

    Returns:
        The operand, keeping the scale it was written with

    Raises:
        InvalidOperandError: If the numeral is not acceptable
    """
    point = text.find(number_format.decimal_separator)
    if point >= 0:
        fraction_digits = len(text) - point - 1
        if fraction_digits == 0:
            raise InvalidOperandError(side, text, NO_FRACTION_DIGITS)
        if fraction_digits > limits.max_fraction_digits:
            raise InvalidOperandError(
                side,
                text,
                f"at most {limits.max_fraction_digits} digits after decimal point",
            )

    if number_format.group_separator in text:
        raise InvalidOperandError(
            side,
            text,
            f"use `{number_format.decimal_separator}` as the fractional separator",
        )

    if re.fullmatch(numeral_pattern(number_format.decimal_separator), text) is None:
        raise InvalidOperandError(side, text, UNPARSABLE)

    try:
        return Decimal(text.replace(number_format.decimal_separator, "."))
    except InvalidOperation as e:
        raise InvalidOperandError(side, text, UNPARSABLE) from e


def validate_operands(
    left: Decimal, right: Decimal, limits: Limits = DEFAULT_LIMITS
) -> tuple[Decimal, Decimal]:
    """
    Check both operands against limits.max_operand_abs (inclusive).

    Raises:
        OperandOutOfRangeError: If either operand is too large in magnitude
    """
    bound = Decimal(limits.max_operand_abs)
    if left.copy_abs() > bound or right.copy_abs() > bound:
        raise OperandOutOfRangeError((left, right), limits.max_operand_abs)
    return left, right


def validate_result(value: Decimal, limits: Limits = DEFAULT_LIMITS) -> Decimal:
    """
    Check an unrounded result against limits.max_result_abs (inclusive).

    Raises:
        ResultOutOfRangeError: If the result is too large in magnitude
    """
    if value.copy_abs() > Decimal(limits.max_result_abs):
        raise ResultOutOfRangeError(value, limits.max_result_abs)
    return value
