"""
Bounded two-operand decimal calculator.

Evaluates exactly one `<number> <operator> <number>` expression with:
- Strict `.`-separated numerals, at most 4 fractional digits
- Operands within [-1,000,000, 1,000,000]
- Results within [-1,000,000,000, 1,000,000,000], rounded half-to-even
- Every failure reported as a value rather than an exception
"""

from strictcalc.config import DEFAULT_LIMITS, INVARIANT, Limits, NumberFormat
from strictcalc.core import Calculator, evaluate
from strictcalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    EmptyInputError,
    ErrorKind,
    InputTooLongError,
    InternalError,
    InvalidOperandError,
    MalformedExpressionError,
    OperandOutOfRangeError,
    OverflowError,
    ResultOutOfRangeError,
)
from strictcalc.formatting import format_decimal
from strictcalc.models import EvalOutcome, Failure, Operator, ParsedExpression, Success
from strictcalc.operations import add, apply, divide, multiply, round_result, subtract
from strictcalc.parser import parse_expression
from strictcalc.validators import parse_operand, validate_operands, validate_result

__all__ = [
    "DEFAULT_LIMITS",
    "INVARIANT",
    "Calculator",
    "CalculatorError",
    "DivisionByZeroError",
    "EmptyInputError",
    "ErrorKind",
    "EvalOutcome",
    "Failure",
    "InputTooLongError",
    "InternalError",
    "InvalidOperandError",
    "Limits",
    "MalformedExpressionError",
    "NumberFormat",
    "OperandOutOfRangeError",
    "Operator",
    "OverflowError",
    "ParsedExpression",
    "ResultOutOfRangeError",
    "Success",
    "add",
    "apply",
    "divide",
    "evaluate",
    "format_decimal",
    "multiply",
    "parse_expression",
    "parse_operand",
    "round_result",
    "subtract",
    "validate_operands",
    "validate_result",
]

__version__ = "0.1.0"
