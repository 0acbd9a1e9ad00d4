"""Recognize `<number> <operator> <number>` and split it into its parts."""

from __future__ import annotations

import re
from functools import lru_cache

from strictcalc.config import DEFAULT_LIMITS, INVARIANT, Limits, NumberFormat
from strictcalc.exceptions import InputTooLongError, MalformedExpressionError
from strictcalc.logger import logger
from strictcalc.models import Operator, ParsedExpression


@lru_cache(maxsize=None)
def numeral_pattern(decimal_separator: str) -> str:
    """Regex source for `sign? digit+ (separator digit+)?` with ASCII digits."""
    return rf"[+-]?[0-9]+(?:{re.escape(decimal_separator)}[0-9]+)?"


@lru_cache(maxsize=None)
def expression_regex(decimal_separator: str, group_separator: str) -> re.Pattern[str]:
    # Group separators are let through here so parse_operand can name them.
    digits = rf"[0-9{re.escape(group_separator)}]"
    number = rf"[+-]?[0-9]{digits}*(?:{re.escape(decimal_separator)}{digits}+)?"
    return re.compile(rf"\s*({number})\s*([+\-*/])\s*({number})\s*")


def parse_expression(
    text: str,
    limits: Limits = DEFAULT_LIMITS,
    number_format: NumberFormat = INVARIANT,
) -> ParsedExpression:
    """
    Split raw text into left numeral, operator and right numeral.

    The numerals are returned verbatim; nothing is converted to a number here.

    Raises:
        InputTooLongError: If text is longer than limits.max_input_length
        MalformedExpressionError: If text is not exactly one binary expression
    """
    if len(text) > limits.max_input_length:
        raise InputTooLongError(len(text), limits.max_input_length)

    match = expression_regex(
        number_format.decimal_separator, number_format.group_separator
    ).fullmatch(text)
    if match is None:
        raise MalformedExpressionError(text, number_format.decimal_separator)

    left, symbol, right = match.groups()
    parsed = ParsedExpression(left, Operator.from_symbol(symbol), right)
    logger.debug("parsed %r as %s", text, parsed)
    return parsed
