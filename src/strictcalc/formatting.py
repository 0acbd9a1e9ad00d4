"""Render results in fixed, locale-independent decimal notation."""

from decimal import Decimal

from strictcalc.config import INVARIANT, NumberFormat


def format_decimal(value: Decimal, number_format: NumberFormat = INVARIANT) -> str:
    """
    Format a result without exponent, grouping or a leading plus sign.

    Trailing fractional zeros are dropped, and the separator with them when
    the value is integral. Zero is always "0", whatever its sign.

    Examples:
        >>> format_decimal(Decimal("3.0000"))
        '3'
        >>> format_decimal(Decimal("-0.0001"))
        '-0.0001'
    """
    if value.is_zero():
        return "0"

    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text.replace(".", number_format.decimal_separator)
