"""Value types passed between the pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

from strictcalc.exceptions import ErrorKind, InternalError


class Operator(str, Enum):
    """The four supported binary operators."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def from_symbol(cls, symbol: str) -> Operator:
        try:
            return cls(symbol)
        except ValueError:
            raise InternalError(f"unsupported operator {symbol!r}", symbol) from None

    @property
    def symbol(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParsedExpression:
    """An expression split into its verbatim numerals and operator."""

    left: str
    operator: Operator
    right: str

    def __str__(self) -> str:
        return f"{self.left} {self.operator.symbol} {self.right}"


@dataclass(frozen=True)
class Success:
    """A rounded result."""

    value: Decimal

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """A terminal error for one evaluation."""

    message: str
    kind: ErrorKind

    @property
    def ok(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.message


EvalOutcome = Union[Success, Failure]
