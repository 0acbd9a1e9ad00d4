"""Configuration models for the calculator pipeline."""

from __future__ import annotations

from decimal import (
    ROUND_HALF_EVEN,
    Context,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Limits(BaseModel):
    """Bounds on input size, operand and result magnitude, and decimal scale."""

    model_config = ConfigDict(frozen=True)

    max_input_length: int = Field(default=100, ge=1)
    max_operand_abs: int = Field(default=1_000_000, ge=1)
    max_result_abs: int = Field(default=1_000_000_000, ge=1)
    max_fraction_digits: int = Field(default=4, ge=1, le=28)
    # Working context: 28 significant digits, overflow past 10**29.
    precision: int = Field(default=28, ge=1)
    max_exponent: int = Field(default=28, ge=1)

    @model_validator(mode="after")
    def precision_holds_results(self) -> Limits:
        """A rounded result must fit the working precision without losing digits."""
        needed = len(str(self.max_result_abs)) + self.max_fraction_digits
        if self.precision < needed:
            raise ValueError(
                f"precision {self.precision} cannot hold results up to "
                f"{self.max_result_abs} with {self.max_fraction_digits} "
                f"fractional digits (needs {needed})"
            )
        return self

    def context(self) -> Context:
        """Decimal context used for every arithmetic and rounding step."""
        return Context(
            prec=self.precision,
            rounding=ROUND_HALF_EVEN,
            Emax=self.max_exponent,
            traps=[Overflow, DivisionByZero, InvalidOperation],
        )


class NumberFormat(BaseModel):
    """Separators used when reading operands and rendering results."""

    model_config = ConfigDict(frozen=True)

    decimal_separator: str = Field(default=".", min_length=1, max_length=1)
    group_separator: str = Field(default=",", min_length=1, max_length=1)

    @field_validator("decimal_separator", "group_separator")
    @classmethod
    def not_a_digit_or_sign(cls, v: str) -> str:
        if v.isdigit() or v in "+-*/" or v.isspace():
            raise ValueError(f"{v!r} cannot be used as a number separator")
        return v

    @model_validator(mode="after")
    def separators_differ(self) -> NumberFormat:
        if self.decimal_separator == self.group_separator:
            raise ValueError("decimal and group separators must differ")
        return self


DEFAULT_LIMITS = Limits()
INVARIANT = NumberFormat()
