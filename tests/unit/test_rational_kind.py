"""
Тесты для RationalKind

Проверяет:
1. Классификацию (всегда конечное, целое только при знаменателе 1)
2. Усечение к нулю при сужении
3. Точную представимость двоичных дробей
4. Конверсии в Decimal/ExtendedFloat по ConversionConfig
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from src.core.domain import ExtendedFloat, RationalValue
from src.core.errors import NumberOutOfRangeError
from src.core.math import ConversionConfig
from src.kinds import RationalKind


@pytest.fixture
def kind() -> RationalKind:
    return RationalKind()


def q(numerator: int, denominator: int = 1) -> RationalValue:
    return RationalValue(value=Fraction(numerator, denominator))


class TestClassification:
    """Тесты классификации"""

    def test_flags(self, kind: RationalKind) -> None:
        value = q(1, 3)
        assert not kind.is_nan(value)
        assert not kind.is_infinity(value)
        assert not kind.is_positive_infinity(value)
        assert not kind.is_negative_infinity(value)
        assert not kind.is_integral(value)
        assert kind.is_integral(q(6, 3))

    def test_sign(self, kind: RationalKind) -> None:
        assert kind.sign(q(-1, 3)) == -1
        assert kind.sign(q(0)) == 0
        assert kind.is_zero(q(0, 5))
        assert kind.sign(q(1, 3)) == 1


class TestIntegerNarrowing:
    """Тесты сужений"""

    def test_truncation(self, kind: RationalKind) -> None:
        assert kind.as_int64(q(-7, 2)) == -3
        assert kind.as_int32(q(7, 2)) == 3

    def test_out_of_range(self, kind: RationalKind) -> None:
        with pytest.raises(NumberOutOfRangeError):
            kind.as_int64(q(3 * 2**63, 2))

        with pytest.raises(NumberOutOfRangeError):
            kind.as_int32(q(-21, 2), -10, 10)

    def test_can_fit(self, kind: RationalKind) -> None:
        assert kind.can_fit_in_int32(q(-(2**31)))
        assert not kind.can_fit_in_int32(q(1, 2))
        assert kind.can_truncated_int_fit_in_int32(q(1, 2))
        assert kind.can_fit_in_int64(q(2**63 - 1))
        assert not kind.can_truncated_int_fit_in_int64(q(2**63 + 1, 1))


class TestBinaryFloat:
    """Тесты binary32/binary64"""

    def test_exact_fit(self, kind: RationalKind) -> None:
        assert kind.can_fit_in_double(q(3, 8))
        assert kind.can_fit_in_single(q(-5, 1024))
        assert not kind.can_fit_in_double(q(1, 3))
        assert not kind.can_fit_in_single(q(2**24 + 1))

    def test_casts(self, kind: RationalKind) -> None:
        assert kind.as_double(q(1, 4)) == 0.25
        assert kind.as_double(q(1, 3)) == 1 / 3
        assert kind.as_single(q(1, 2)) == 0.5


class TestNegateAbs:
    """Тесты negate/abs"""

    def test_negate_and_abs(self, kind: RationalKind) -> None:
        assert kind.negate(q(1, 3)) == q(-1, 3)
        assert kind.abs(q(-1, 3)) == q(1, 3)
        assert kind.abs(q(1, 3)) == q(1, 3)


class TestExternalConversions:
    """Тесты внешних представлений"""

    def test_extended_decimal(self, kind: RationalKind) -> None:
        assert kind.as_extended_decimal(q(-1, 8)) == Decimal("-0.125")
        rounded = kind.as_extended_decimal(q(1, 3))
        assert len(rounded.as_tuple().digits) == 34

    def test_extended_decimal_precision_from_config(self) -> None:
        kind = RationalKind(ConversionConfig(decimal_precision=5))
        assert kind.as_extended_decimal(q(2, 3)) == Decimal("0.66667")

    def test_extended_float(self, kind: RationalKind) -> None:
        assert kind.as_extended_float(q(3, 4)) == ExtendedFloat(mantissa=3, exponent=-2)
        assert kind.as_extended_float(q(1, 3)).to_fraction() == Fraction(1 / 3)

    def test_identity_and_truncation(self, kind: RationalKind) -> None:
        value = q(-22, 7)
        assert kind.as_extended_rational(value) == Fraction(-22, 7)
        assert kind.as_big_integer(value) == -3
