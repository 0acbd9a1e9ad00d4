"""Custom exceptions for the calculator pipeline."""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Failure categories, in the order the pipeline can raise them."""

    EMPTY_INPUT = "empty_input"
    INPUT_TOO_LONG = "input_too_long"
    MALFORMED_EXPRESSION = "malformed_expression"
    INVALID_OPERAND = "invalid_operand"
    OPERAND_OUT_OF_RANGE = "operand_out_of_range"
    DIVISION_BY_ZERO = "division_by_zero"
    ARITHMETIC_OVERFLOW = "arithmetic_overflow"
    RESULT_OUT_OF_RANGE = "result_out_of_range"
    INTERNAL_ERROR = "internal_error"


def _bounds(limit: int) -> str:
    return f"[-{limit:,}, {limit:,}]"


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class EmptyInputError(CalculatorError):
    """Raised when there is no expression at all."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(self) -> None:
        super().__init__("empty input.")


class InputTooLongError(CalculatorError):
    """Raised when the raw expression exceeds the configured length."""

    kind = ErrorKind.INPUT_TOO_LONG

    def __init__(self, length: int, max_length: int) -> None:
        super().__init__(
            f"expression too long (more than {max_length} characters).", length
        )
        self.length = length
        self.max_length = max_length


class MalformedExpressionError(CalculatorError):
    """Raised when the text is not of the form <number> <operator> <number>."""

    kind = ErrorKind.MALFORMED_EXPRESSION

    def __init__(self, text: str, decimal_separator: str = ".") -> None:
        super().__init__(
            "expected expression of form <number> <operator> <number> "
            f"with `{decimal_separator}` as fractional separator.",
            text,
        )
        self.text = text


class InvalidOperandError(CalculatorError):
    """Raised when one side of the expression is not an acceptable numeral."""

    kind = ErrorKind.INVALID_OPERAND

    def __init__(self, side: str, text: str, reason: str) -> None:
        super().__init__(f"invalid {side} operand: {reason}.", text)
        self.side = side
        self.text = text
        self.reason = reason


class OperandOutOfRangeError(CalculatorError):
    """Raised when either operand lies outside the allowed magnitude."""

    kind = ErrorKind.OPERAND_OUT_OF_RANGE

    def __init__(self, operands: tuple[Any, ...], limit: int) -> None:
        super().__init__(f"operands must be in the range {_bounds(limit)}.", operands)
        self.operands = operands
        self.limit = limit


class DivisionByZeroError(CalculatorError):
    """Raised when attempting to divide by zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, numerator: Any) -> None:
        super().__init__("division by zero is not allowed.", numerator)
        self.numerator = numerator


class OverflowError(CalculatorError):
    """Raised when a calculation exceeds the decimal headroom."""

    kind = ErrorKind.ARITHMETIC_OVERFLOW

    def __init__(self, operation: str, *operands: Any) -> None:
        super().__init__("overflow during computation; refine the values.", operands)
        self.operation = operation
        self.operands = operands


class ResultOutOfRangeError(CalculatorError):
    """Raised when a computed value is larger than the allowed result range."""

    kind = ErrorKind.RESULT_OUT_OF_RANGE

    def __init__(self, value: Any, limit: int) -> None:
        super().__init__(
            f"result exceeds the allowed range of {_bounds(limit)}.", value
        )
        self.limit = limit


class InternalError(CalculatorError):
    """Raised for states the expression grammar should already exclude."""

    kind = ErrorKind.INTERNAL_ERROR

    def __init__(self, detail: str, value: Any = None) -> None:
        super().__init__(f"could not evaluate expression: {detail}.", value)
        self.detail = detail
