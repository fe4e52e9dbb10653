"""
Тесты для модулей Exact Fit и Rounding

Проверяет:
1. Границы int32/int64 и валидацию границ as_int32
2. Алгоритм точной представимости int64 (деление пополам)
3. Представимость произвольных целых с учётом предела экспоненты
4. Представимость дробей, включая субнормальные значения
5. Best-effort приведения к binary32/binary64
6. Округление Fraction → Decimal и Fraction → (mantissa, exponent)
7. ConversionConfig
"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from src.core.math import (
    DEFAULT_CONVERSION_CONFIG,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    SINGLE_MAX,
    ConversionConfig,
    double_to_single,
    fraction_fits_double,
    fraction_fits_single,
    fraction_to_decimal,
    fraction_to_double,
    has_terminating_decimal,
    in_int32_range,
    in_int64_range,
    int64_fits_binary_float,
    int64_fits_double,
    int64_fits_single,
    integer_fits_double,
    integer_fits_single,
    integer_to_double,
    integer_to_single,
    is_power_of_two,
    round_fraction_to_binary,
    truncate_fraction,
    validate_int32_bounds,
)

# =============================================================================
# ГРАНИЦЫ
# =============================================================================


class TestBounds:
    """Тесты границ целых форматов"""

    def test_constants(self) -> None:
        assert INT32_MIN == -2147483648
        assert INT32_MAX == 2147483647
        assert INT64_MIN == -9223372036854775808
        assert INT64_MAX == 9223372036854775807

    def test_range_checks(self) -> None:
        assert in_int32_range(INT32_MIN)
        assert not in_int32_range(INT32_MAX + 1)
        assert in_int64_range(INT64_MAX)
        assert not in_int64_range(INT64_MIN - 1)

    def test_validate_int32_bounds(self) -> None:
        """Границы вне int32 или перевёрнутые — ошибка"""
        validate_int32_bounds(INT32_MIN, INT32_MAX)
        validate_int32_bounds(5, 5)

        with pytest.raises(ValueError, match="min_value must fit in int32"):
            validate_int32_bounds(INT32_MIN - 1, 0)

        with pytest.raises(ValueError, match="max_value must fit in int32"):
            validate_int32_bounds(0, INT32_MAX + 1)

        with pytest.raises(ValueError, match="must be <= max_value"):
            validate_int32_bounds(1, 0)


# =============================================================================
# INT64 EXACT FIT
# =============================================================================


class TestInt64Fit:
    """Тесты алгоритма представимости int64"""

    def test_min_value_special_case(self) -> None:
        """INT64_MIN помещается в любой формат"""
        assert int64_fits_binary_float(INT64_MIN, 2**24)
        assert int64_fits_binary_float(INT64_MIN, 2**53)
        assert int64_fits_binary_float(INT64_MIN, 2)

    def test_below_capacity_fits(self) -> None:
        """Значения меньше ёмкости мантиссы помещаются без сокращения"""
        assert int64_fits_single(2**24 - 1)
        assert int64_fits_double(2**53 - 1)

    def test_odd_excess_rejected(self) -> None:
        """Нечётные значения >= ёмкости не помещаются"""
        assert not int64_fits_single(2**24 + 1)
        assert not int64_fits_double(2**53 + 1)
        assert not int64_fits_double(INT64_MAX)

    def test_matches_general_integer_check(self) -> None:
        """Для int64 алгоритм совпадает с проверкой нечётной части"""
        samples = [0, 1, -1, 2**24, 2**24 + 1, 2**24 + 2, 3 * 2**50, 2**53 + 1, 2**62, INT64_MAX]
        for value in samples:
            assert int64_fits_single(value) == integer_fits_single(value)
            assert int64_fits_double(value) == integer_fits_double(value)


# =============================================================================
# ПРОИЗВОЛЬНЫЕ ЦЕЛЫЕ И ДРОБИ
# =============================================================================


class TestIntegerAndFractionFit:
    """Тесты представимости вне int64"""

    def test_exponent_limit(self) -> None:
        """2**127 помещается в single, 2**128 уже переполнение"""
        assert integer_fits_single(2**127)
        assert not integer_fits_single(2**128)
        assert integer_fits_double(2**1023)
        assert not integer_fits_double(2**1024)

    def test_max_finite_single(self) -> None:
        """Наибольшее конечное binary32 представимо точно"""
        assert integer_fits_single((2**24 - 1) * 2**104)
        assert float((2**24 - 1) * 2**104) == SINGLE_MAX

    def test_dyadic_fractions(self) -> None:
        """Дроби со знаменателем 2**k представимы, 1/3 нет"""
        assert fraction_fits_double(Fraction(3, 8))
        assert fraction_fits_single(Fraction(-5, 1024))
        assert not fraction_fits_double(Fraction(1, 3))
        assert not fraction_fits_single(Fraction(1, 10))

    def test_subnormals(self) -> None:
        """Наименьшее субнормальное double представимо, половина от него нет"""
        assert fraction_fits_double(Fraction(1, 2**1074))
        assert not fraction_fits_double(Fraction(1, 2**1075))
        assert fraction_fits_single(Fraction(1, 2**149))
        assert not fraction_fits_single(Fraction(1, 2**150))

    def test_overflowing_fraction(self) -> None:
        assert not fraction_fits_double(Fraction(2**1100, 3))
        assert not fraction_fits_single(Fraction(2**200))

    def test_precision_loss_in_single_only(self) -> None:
        """2**24 + 1 точен в double, но не в single"""
        value = Fraction(2**24 + 1)
        assert fraction_fits_double(value)
        assert not fraction_fits_single(value)


# =============================================================================
# BEST-EFFORT ПРИВЕДЕНИЯ
# =============================================================================


class TestBestEffortCasts:
    """Тесты приведений без исключений"""

    def test_double_to_single(self) -> None:
        assert double_to_single(0.1) != 0.1
        assert double_to_single(0.5) == 0.5
        assert double_to_single(1e300) == math.inf
        assert double_to_single(-1e300) == -math.inf
        assert math.isnan(double_to_single(math.nan))

    def test_integer_to_double_overflow(self) -> None:
        assert integer_to_double(2**1024) == math.inf
        assert integer_to_double(-(2**1024)) == -math.inf
        assert integer_to_double(2**53 + 1) == float(2**53)

    def test_integer_to_single(self) -> None:
        """Округление half even и переполнение"""
        assert integer_to_single(0) == 0.0
        assert integer_to_single(2**24 + 1) == 16777216.0
        assert integer_to_single(2**24 + 3) == 16777220.0
        assert integer_to_single(2**128) == math.inf
        assert integer_to_single(-(2**128)) == -math.inf

    def test_integer_to_single_avoids_double_rounding(self) -> None:
        """Целое округляется в binary32 один раз, минуя binary64"""
        # 2**53 + 2**29 + 1: через double → 2**53 + 2**29 (tie), затем
        # в single → 2**53 (tie to even); напрямую → 2**53 + 2**30
        value = 2**53 + 2**29 + 1
        assert integer_to_single(value) == float(2**53 + 2**30)
        assert double_to_single(float(value)) == float(2**53)

    def test_fraction_to_double(self) -> None:
        assert fraction_to_double(Fraction(1, 4)) == 0.25
        assert fraction_to_double(Fraction(2**1100)) == math.inf
        assert fraction_to_double(Fraction(-(2**1100))) == -math.inf

    def test_truncate_fraction(self) -> None:
        """Усечение к нулю"""
        assert truncate_fraction(Fraction(7, 2)) == 3
        assert truncate_fraction(Fraction(-7, 2)) == -3
        assert truncate_fraction(Fraction(-1, 3)) == 0


# =============================================================================
# ROUNDING
# =============================================================================


class TestRounding:
    """Тесты контролируемого округления"""

    def test_is_power_of_two(self) -> None:
        assert is_power_of_two(1)
        assert is_power_of_two(1024)
        assert not is_power_of_two(0)
        assert not is_power_of_two(6)

    def test_terminating_decimal(self) -> None:
        assert has_terminating_decimal(Fraction(1, 40))
        assert not has_terminating_decimal(Fraction(1, 3))

    def test_fraction_to_decimal_exact(self) -> None:
        """Конечная десятичная запись — без округления, любой длины"""
        assert fraction_to_decimal(Fraction(3, 8)) == Decimal("0.375")
        assert fraction_to_decimal(Fraction(-1, 40)) == Decimal("-0.025")
        assert fraction_to_decimal(Fraction(7)) == Decimal(7)
        exact = fraction_to_decimal(Fraction(1, 2**60), precision=5)
        assert Fraction(exact) == Fraction(1, 2**60)

    def test_fraction_to_decimal_rounded(self) -> None:
        """Бесконечная запись округляется до precision цифр"""
        assert fraction_to_decimal(Fraction(1, 3), precision=5) == Decimal("0.33333")
        assert fraction_to_decimal(Fraction(2, 3), precision=5) == Decimal("0.66667")
        result = fraction_to_decimal(Fraction(1, 3))
        assert len(result.as_tuple().digits) == 34

    def test_round_fraction_to_binary_exact(self) -> None:
        """Значения с короткой мантиссой не меняются"""
        mantissa, exponent = round_fraction_to_binary(Fraction(3, 4), 53)
        assert Fraction(mantissa) * Fraction(2) ** exponent == Fraction(3, 4)

    def test_round_fraction_to_binary_matches_float(self) -> None:
        """53 бита дают тот же результат, что и корректно округлённый float"""
        for value in (Fraction(1, 10), Fraction(-2, 3), Fraction(10**30, 7)):
            mantissa, exponent = round_fraction_to_binary(value, 53)
            assert Fraction(mantissa) * Fraction(2) ** exponent == Fraction(float(value))

    def test_round_fraction_to_binary_carry(self) -> None:
        """Перенос при округлении вверх увеличивает экспоненту"""
        # 2**4 - 1 = 15 в 3 битах: 15 → 16
        mantissa, exponent = round_fraction_to_binary(Fraction(15), 3)
        assert Fraction(mantissa) * Fraction(2) ** exponent == 16
        assert abs(mantissa) < 2**3

    def test_round_fraction_to_binary_invalid_precision(self) -> None:
        with pytest.raises(ValueError, match="precision must be positive"):
            round_fraction_to_binary(Fraction(1, 3), 0)

    def test_zero(self) -> None:
        assert round_fraction_to_binary(Fraction(0), 53) == (0, 0)


class TestConversionConfig:
    """Тесты ConversionConfig"""

    def test_defaults(self) -> None:
        assert DEFAULT_CONVERSION_CONFIG.decimal_precision == 34
        assert DEFAULT_CONVERSION_CONFIG.binary_precision == 53

    def test_invalid_values(self) -> None:
        with pytest.raises(ValueError, match="decimal_precision must be positive"):
            ConversionConfig(decimal_precision=0)

        with pytest.raises(ValueError, match="binary_precision must be positive"):
            ConversionConfig(binary_precision=-1)

    def test_immutable(self) -> None:
        config = ConversionConfig()
        with pytest.raises(AttributeError):
            config.decimal_precision = 10  # type: ignore
