"""Tests for the Currency fixed-point type."""

from decimal import Decimal

import pytest

from badmoney.constants import UINT64_MAX
from badmoney.math.fixed_point import (
    Currency,
    CurrencyError,
    DivideByZero,
    Overflow,
    ParseError,
    _div_trunc,
)


def C(text: str) -> Currency:
    return Currency.parse(text)


class TestDivTrunc:
    """Truncating integer division."""

    def test_positive(self):
        assert _div_trunc(7, 3) == 2

    def test_negative_dividend_truncates_toward_zero(self):
        """-7 / 3 = -2, not -3 as // gives."""
        assert _div_trunc(-7, 3) == -2

    def test_negative_divisor_truncates_toward_zero(self):
        assert _div_trunc(7, -3) == -2

    def test_both_negative(self):
        assert _div_trunc(-7, -3) == 2

    def test_exact(self):
        assert _div_trunc(-9, 3) == -3

    def test_zero_divisor_raises(self):
        with pytest.raises(DivideByZero):
            _div_trunc(1, 0)


class TestCurrencyConstruction:
    """Tests for Currency constructors."""

    def test_from_raw_scaled_int(self):
        assert Currency(1_500_000).value == 1_500_000

    def test_from_int(self):
        assert Currency.from_int(3).value == 3_000_000

    def test_zero(self):
        assert Currency.zero().value == 0
        assert not Currency.zero()

    def test_from_decimal(self):
        assert Currency.from_decimal(Decimal("23.23")).value == 23_230_000

    def test_rejects_float(self):
        with pytest.raises(TypeError):
            Currency(1.5)  # type: ignore

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            Currency(True)  # type: ignore

    def test_from_decimal_rejects_nan(self):
        with pytest.raises(ParseError):
            Currency.from_decimal(Decimal("NaN"))

    def test_from_decimal_rejects_infinity(self):
        with pytest.raises(ParseError):
            Currency.from_decimal(Decimal("-Infinity"))


class TestCurrencyParse:
    """Tests for Currency.parse."""

    @pytest.mark.parametrize(
        ("text", "scaled"),
        [
            ("1000.00", 1_000_000_000),
            ("23.23", 23_230_000),
            ("45.20", 45_200_000),
            ("0", 0),
            ("0.00", 0),
            ("-0.00", 0),
            ("-0.5", -500_000),
            ("+3", 3_000_000),
            ("1.", 1_000_000),
            (".5", 500_000),
            ("0.000001", 1),
            ("  12.5\n", 12_500_000),
            ("123456789.123456", 123_456_789_123_456),
        ],
    )
    def test_valid_literals(self, text, scaled):
        assert C(text).value == scaled

    def test_truncates_extra_digits_toward_zero(self):
        """Digits past the sixth decimal are dropped, not rounded."""
        assert C("0.0000019").value == 1
        assert C("2.9999999").value == 2_999_999

    def test_truncates_negative_toward_zero(self):
        assert C("-0.0000019").value == -1

    @pytest.mark.parametrize(
        "text",
        [
            "", " ", "abc", "1e5", "1E-2", "1,000.00", "1.2.3",
            "--1", "+-1", ".", "nan", "Infinity", "0x10",
        ],
    )
    def test_malformed_raises_parse_error(self, text):
        with pytest.raises(ParseError, match="Invalid decimal literal"):
            C(text)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            C("twelve")

    def test_non_string_raises_type_error(self):
        with pytest.raises(TypeError):
            Currency.parse(12.5)  # type: ignore

    def test_largest_supported_value(self):
        assert C("18446744073709.551615").value == UINT64_MAX

    def test_largest_supported_negative_value(self):
        assert C("-18446744073709.551615").value == -UINT64_MAX

    def test_just_above_bound_overflows(self):
        with pytest.raises(Overflow):
            C("18446744073709.551616")

    def test_negative_above_bound_overflows(self):
        with pytest.raises(Overflow):
            C("-18446744073709.551616")

    def test_overflow_is_parse_error(self):
        with pytest.raises(ParseError):
            C("99999999999999999999999999999999")

    def test_long_literal_is_not_rounded_before_scaling(self):
        """More digits than the default 28-digit Decimal context still parse exactly."""
        assert C("18446744073709.5516149999999999999999").value == UINT64_MAX - 1


class TestCurrencyArithmetic:
    """Tests for add, subtract, multiply and divide."""

    def test_add(self):
        assert C("1.5") + C("2.25") == C("3.75")
        assert C("1.5").add(C("2.25")) == C("3.75")

    def test_subtract(self):
        assert C("1.5") - C("2.25") == C("-0.75")
        assert C("1.5").subtract(C("2.25")) == C("-0.75")

    def test_add_beyond_parse_bound(self):
        """The parse bound does not limit arithmetic results."""
        big = C("18446744073709.551615")
        assert (big + big).value == 2 * UINT64_MAX

    def test_multiply(self):
        assert C("23.23") * C("23.23") == C("539.6329")
        assert C("23.23").multiply(C("23.23")) == C("539.6329")

    def test_multiply_truncates(self):
        """0.000001 * 0.5 = 0.0000005, below one unit: truncated to 0."""
        assert (C("0.000001") * C("0.5")).value == 0

    def test_multiply_negative_truncates_toward_zero(self):
        assert (C("-0.000001") * C("0.5")).value == 0
        assert C("-1.000001") * C("0.5") == C("-0.5")

    def test_multiply_signs(self):
        assert C("-2") * C("3") == C("-6")
        assert C("-2") * C("-3") == C("6")

    def test_divide(self):
        assert C("10") / C("4") == C("2.5")
        assert C("10").divide(C("4")) == C("2.5")

    def test_divide_keeps_fractional_quotient(self):
        """Quotient digits below one whole unit are kept, not discarded."""
        assert C("1") / C("3") == C("0.333333")
        assert C("1.5") / C("2") == C("0.75")

    def test_divide_negative_truncates_toward_zero(self):
        assert C("-1") / C("3") == C("-0.333333")
        assert C("2") / C("-3") == C("-0.666666")

    def test_divide_by_zero(self):
        with pytest.raises(DivideByZero):
            C("1") / C("0")

    def test_divide_by_zero_error_hierarchy(self):
        with pytest.raises(ZeroDivisionError):
            C("5").divide(C("0.00"))
        with pytest.raises(CurrencyError):
            C("5").divide(Currency.zero())

    def test_zero_divided_by_zero(self):
        with pytest.raises(DivideByZero):
            Currency.zero() / Currency.zero()

    def test_negation_and_abs(self):
        assert -C("1.25") == C("-1.25")
        assert abs(C("-1.25")) == C("1.25")
        assert +C("1.25") == C("1.25")

    def test_operations_return_new_instances(self):
        a = C("1.5")
        b = C("2")
        result = a + b
        assert result is not a
        assert a == C("1.5")
        assert b == C("2")

    @pytest.mark.parametrize("other", [1, 1.5, Decimal("1.5"), "1.5"])
    def test_mixed_types_raise_type_error(self, other):
        with pytest.raises(TypeError):
            C("1") + other
        with pytest.raises(TypeError):
            C("1") * other


class TestCurrencyImmutability:
    """Currency instances cannot be modified."""

    def test_cannot_set_value(self):
        c = C("1")
        with pytest.raises(AttributeError):
            c.value = 5  # type: ignore[misc]

    def test_cannot_set_private_value(self):
        c = C("1")
        with pytest.raises(AttributeError):
            c._value = 5  # type: ignore[misc]
        assert c.value == 1_000_000

    def test_cannot_add_attributes(self):
        with pytest.raises(AttributeError):
            C("1").extra = 1  # type: ignore[attr-defined]

    def test_cannot_delete_value(self):
        with pytest.raises(AttributeError):
            del C("1")._value


class TestCurrencyComparison:
    """Tests for equality, ordering and hashing."""

    def test_equality_ignores_trailing_zeros(self):
        assert C("1.50") == C("1.5")

    def test_not_equal_to_other_types(self):
        assert C("1") != 1
        assert C("1") != Decimal("1")

    def test_ordering(self):
        assert C("1") < C("2")
        assert C("2") <= C("2")
        assert C("-1") > C("-2")
        assert C("3") >= C("2.999999")

    def test_hash_consistent_with_equality(self):
        assert len({C("1.50"), C("1.5"), C("2")}) == 2

    def test_sorting(self):
        values = [C("3"), C("-1"), C("0.5")]
        assert sorted(values) == [C("-1"), C("0.5"), C("3")]


class TestCurrencyOutput:
    """Tests for stringification."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1000.00", "1000"),
            ("1584.8329", "1584.8329"),
            ("-0.5", "-0.5"),
            ("0", "0"),
            ("0.000001", "0.000001"),
            ("6848.3290", "6848.329"),
        ],
    )
    def test_to_decimal_string(self, text, expected):
        assert C(text).to_decimal_string() == expected
        assert str(C(text)) == expected

    def test_repr_shows_scaled_value(self):
        assert repr(C("1.5")) == "Currency(1500000)"

    def test_to_decimal(self):
        assert C("23.23").to_decimal() == Decimal("23.23")

    def test_large_value_is_not_rounded(self):
        """Values wider than the 28-digit Decimal context keep every digit."""
        c = Currency(10**40 + 1)
        assert c.to_decimal_string() == "1" + "0" * 34 + ".000001"
