"""Calculator class running the full evaluation pipeline."""

from __future__ import annotations

from decimal import Decimal, DecimalException

from strictcalc.config import DEFAULT_LIMITS, INVARIANT, Limits, NumberFormat
from strictcalc.exceptions import CalculatorError, EmptyInputError, InternalError
from strictcalc.formatting import format_decimal
from strictcalc.logger import logger
from strictcalc.models import EvalOutcome, Failure, Success
from strictcalc.operations import apply, round_result
from strictcalc.parser import parse_expression
from strictcalc.validators import parse_operand, validate_operands, validate_result


class Calculator:
    """
    Evaluates one `<number> <operator> <number>` expression at a time.

    A Calculator only holds its immutable limits and number format, so a
    single instance can be shared between threads.

    Example:
        >>> calc = Calculator()
        >>> calc.render(calc.evaluate("12.5 * 3"))
        '37.5'
        >>> calc.render(calc.evaluate("5 / 0"))
        'Error: division by zero is not allowed.'
    """

    def __init__(
        self,
        limits: Limits = DEFAULT_LIMITS,
        number_format: NumberFormat = INVARIANT,
    ) -> None:
        self._limits = limits
        self._number_format = number_format

    @property
    def limits(self) -> Limits:
        return self._limits

    @property
    def number_format(self) -> NumberFormat:
        return self._number_format

    def compute(self, text: str | None) -> Decimal:
        """
        Run every stage and return the rounded result.

        Raises:
            CalculatorError: The first stage that fails, as a subclass
        """
        if text is None:
            raise EmptyInputError()

        expression = parse_expression(text, self._limits, self._number_format)
        left = parse_operand(expression.left, "left", self._limits, self._number_format)
        right = parse_operand(
            expression.right, "right", self._limits, self._number_format
        )
        validate_operands(left, right, self._limits)

        result = apply(expression.operator, left, right, self._limits)
        validate_result(result, self._limits)
        return round_result(result, self._limits)

    def evaluate(self, text: str | None) -> EvalOutcome:
        """
        Evaluate text and report the outcome as a value; never raises for bad input.

        Returns:
            Success with the rounded result, or Failure with the error message
        """
        try:
            value = self.compute(text)
        except CalculatorError as e:
            logger.info("rejected %r: %s (%s)", text, e, e.kind.value)
            return Failure(str(e), e.kind)
        except DecimalException as e:
            logger.exception("unexpected decimal signal evaluating %r", text)
            error = InternalError(type(e).__name__, text)
            return Failure(str(error), error.kind)

        logger.debug("evaluated %r to %s", text, value)
        return Success(value)

    def format(self, value: Decimal) -> str:
        return format_decimal(value, self._number_format)

    def render(self, outcome: EvalOutcome) -> str:
        """Text shown to the user for one outcome."""
        if isinstance(outcome, Success):
            return self.format(outcome.value)
        return f"Error: {outcome.message}"

    def __repr__(self) -> str:
        return f"Calculator(limits={self._limits!r}, number_format={self._number_format!r})"


_default = Calculator()


def evaluate(text: str | None) -> EvalOutcome:
    """Evaluate one expression with the default limits and invariant formatting."""
    return _default.evaluate(text)
