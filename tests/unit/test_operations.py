"""Unit tests for bounded decimal arithmetic."""

from decimal import Decimal

import pytest

from strictcalc import (
    DivisionByZeroError,
    InternalError,
    Limits,
    Operator,
    OverflowError,
    add,
    apply,
    divide,
    multiply,
    round_result,
    subtract,
)

D = Decimal


class TestAdd:
    """Tests for the add function."""

    def test_add_positive_numbers(self):
        assert add(D(2), D(3)) == 5

    def test_add_negative_numbers(self):
        assert add(D(-2), D(-3)) == -5

    def test_add_decimals_exactly(self):
        assert add(D("0.1"), D("0.2")) == D("0.3")

    def test_add_overflow_protection(self, narrow_limits):
        with pytest.raises(OverflowError) as exc_info:
            add(D("99999999999"), D("1"), narrow_limits)
        assert exc_info.value.operation == "addition"


class TestSubtract:
    """Tests for the subtract function."""

    def test_subtract_resulting_negative(self):
        assert subtract(D(3), D(5)) == -2

    def test_subtract_same_number(self):
        assert subtract(D("7.77"), D("7.77")) == 0

    def test_subtract_decimals_exactly(self):
        assert subtract(D(10), D("6.9")) == D("3.1")


class TestMultiply:
    """Tests for the multiply function."""

    def test_multiply_with_negative(self):
        assert multiply(D(-3), D(4)) == -12

    def test_multiply_by_zero(self):
        assert multiply(D(1000), D(0)) == 0

    def test_product_of_largest_operands_is_exact(self):
        result = multiply(D("999999.9999"), D("999999.9999"))
        assert result == D("999999999800.00000001")

    def test_multiply_overflow_protection(self, narrow_limits):
        with pytest.raises(OverflowError) as exc_info:
            multiply(D(1000000), D(1000000), narrow_limits)
        assert exc_info.value.operands == (D(1000000), D(1000000))
        assert str(exc_info.value) == "overflow during computation; refine the values."


class TestDivide:
    """Tests for the divide function."""

    def test_divide_evenly(self):
        assert divide(D(10), D(2)) == 5

    def test_divide_with_remainder(self):
        assert divide(D(7), D(2)) == D("3.5")

    def test_non_terminating_quotient_keeps_full_precision(self):
        assert divide(D(1), D(3)) == D("0." + "3" * 28)

    def test_divide_by_zero_raises(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            divide(D(10), D(0))
        assert exc_info.value.numerator == 10
        assert str(exc_info.value) == "division by zero is not allowed."

    def test_divide_zero_by_zero_is_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            divide(D(0), D("0.0"))

    def test_divide_overflow_protection(self):
        limits = Limits(precision=14, max_exponent=9)
        with pytest.raises(OverflowError):
            divide(D(1000000), D("0.0001"), limits)


class TestApply:
    """Tests for operator dispatch."""

    @pytest.mark.parametrize(
        "operator,expected",
        [
            (Operator.ADD, D(8)),
            (Operator.SUBTRACT, D(4)),
            (Operator.MULTIPLY, D(12)),
            (Operator.DIVIDE, D(3)),
        ],
    )
    def test_dispatch(self, operator, expected):
        assert apply(operator, D(6), D(2)) == expected

    @pytest.mark.parametrize("operator", ["+", "%", None])
    def test_non_operator_is_internal_error(self, operator):
        with pytest.raises(InternalError):
            apply(operator, D(1), D(2))


class TestRoundResult:
    """Tests for half-to-even rounding."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("0.00005", "0.0000"),
            ("0.00015", "0.0002"),
            ("0.00025", "0.0002"),
            ("0.00035", "0.0004"),
            ("-0.00015", "-0.0002"),
            ("0.000050001", "0.0001"),
            ("1.23454999", "1.2345"),
            ("3", "3.0000"),
        ],
    )
    def test_half_even(self, value, expected):
        result = round_result(D(value))
        assert result == D(expected)
        assert result.as_tuple().exponent == -4

    def test_rounding_at_result_bound(self):
        assert round_result(D("999999999.99995")) == D("1000000000.0000")

    def test_scale_follows_limits(self):
        limits = Limits(max_fraction_digits=2)
        assert round_result(D("2.345"), limits) == D("2.34")
