"""DecimalKind — десятичное число произвольной точности (decimal.Decimal).

Поддерживает NaN (quiet и signaling) и ±Infinity. Отрицательный ноль —
ноль со знаком 0. Точные предикаты работают через Fraction; перед
построением Fraction значения с заведомо слишком большой или малой
десятичной экспонентой отсекаются по adjusted().
"""

import math
from decimal import Decimal
from fractions import Fraction
from typing import Final

from src.core.domain.extended_float import ExtendedFloat
from src.core.domain.number_value import DecimalValue, NumberKindTag, NumberValue
from src.core.errors import NotANumberError
from src.core.math.exact_fit import (
    INT32_MAX,
    INT32_MIN,
    double_to_single,
    fraction_fits_double,
    fraction_fits_single,
    in_int32_range,
    in_int64_range,
)
from src.core.math.rounding import DEFAULT_CONVERSION_CONFIG, ConversionConfig
from src.kinds.base import NumberKind, narrow_to_int32, narrow_to_int64, out_of_range

# |d| >= 10**19 > 2**63: не помещается в int64 ни при каком усечении
_INT64_ADJUSTED_LIMIT: Final[int] = 19

# Границы adjusted(), вне которых ненулевое значение не представимо в формате
_DOUBLE_ADJUSTED_RANGE: Final[tuple[int, int]] = (-330, 308)
_SINGLE_ADJUSTED_RANGE: Final[tuple[int, int]] = (-50, 38)


def _truncate(value: Decimal) -> int | None:
    """Усечение к нулю; None если результат заведомо вне int64."""
    if value.is_zero():
        return 0
    if value.adjusted() >= _INT64_ADJUSTED_LIMIT:
        return None
    return int(value)


def _within_adjusted(value: Decimal, adjusted_range: tuple[int, int]) -> bool:
    low, high = adjusted_range
    return low <= value.adjusted() <= high


class DecimalKind(NumberKind):
    """Операции над DecimalValue."""

    tag = NumberKindTag.DECIMAL

    def __init__(self, config: ConversionConfig = DEFAULT_CONVERSION_CONFIG):
        self.config = config

    def is_zero(self, value: DecimalValue) -> bool:
        return value.value.is_zero()

    def sign(self, value: DecimalValue) -> int:
        if value.value.is_nan():
            raise NotANumberError()
        if value.value.is_zero():
            return 0
        return -1 if value.value.is_signed() else 1

    def is_integral(self, value: DecimalValue) -> bool:
        d = value.value
        if not d.is_finite():
            return False
        if d.is_zero() or d.as_tuple().exponent >= 0:
            return True
        return d == d.to_integral_value()

    def is_nan(self, value: DecimalValue) -> bool:
        return value.value.is_nan()

    def is_infinity(self, value: DecimalValue) -> bool:
        return value.value.is_infinite()

    def is_positive_infinity(self, value: DecimalValue) -> bool:
        return value.value.is_infinite() and not value.value.is_signed()

    def is_negative_infinity(self, value: DecimalValue) -> bool:
        return value.value.is_infinite() and value.value.is_signed()

    def as_int64(self, value: DecimalValue) -> int:
        if not value.value.is_finite():
            raise out_of_range("as_int64", "non-finite value")

        truncated = _truncate(value.value)
        if truncated is None:
            raise out_of_range("as_int64", "magnitude exceeds int64")
        return narrow_to_int64(truncated)

    def as_int32(
        self,
        value: DecimalValue,
        min_value: int = INT32_MIN,
        max_value: int = INT32_MAX,
    ) -> int:
        if not value.value.is_finite():
            raise out_of_range("as_int32", "non-finite value")

        truncated = _truncate(value.value)
        if truncated is None:
            raise out_of_range("as_int32", "magnitude exceeds int64")
        return narrow_to_int32(truncated, min_value, max_value)

    def can_fit_in_int32(self, value: DecimalValue) -> bool:
        return self.is_integral(value) and self.can_truncated_int_fit_in_int32(value)

    def can_fit_in_int64(self, value: DecimalValue) -> bool:
        return self.is_integral(value) and self.can_truncated_int_fit_in_int64(value)

    def can_truncated_int_fit_in_int32(self, value: DecimalValue) -> bool:
        if not value.value.is_finite():
            return False
        truncated = _truncate(value.value)
        return truncated is not None and in_int32_range(truncated)

    def can_truncated_int_fit_in_int64(self, value: DecimalValue) -> bool:
        if not value.value.is_finite():
            return False
        truncated = _truncate(value.value)
        return truncated is not None and in_int64_range(truncated)

    def as_double(self, value: DecimalValue) -> float:
        if value.value.is_nan():
            return math.nan
        return float(value.value)

    def as_single(self, value: DecimalValue) -> float:
        return double_to_single(self.as_double(value))

    def can_fit_in_double(self, value: DecimalValue) -> bool:
        d = value.value
        if not d.is_finite():
            return False
        if d.is_zero():
            return True
        return _within_adjusted(d, _DOUBLE_ADJUSTED_RANGE) and fraction_fits_double(Fraction(d))

    def can_fit_in_single(self, value: DecimalValue) -> bool:
        d = value.value
        if not d.is_finite():
            return False
        if d.is_zero():
            return True
        return _within_adjusted(d, _SINGLE_ADJUSTED_RANGE) and fraction_fits_single(Fraction(d))

    def negate(self, value: DecimalValue) -> NumberValue:
        return DecimalValue(value=value.value.copy_negate())

    def abs(self, value: DecimalValue) -> NumberValue:
        return DecimalValue(value=value.value.copy_abs())

    def as_extended_decimal(self, value: DecimalValue) -> Decimal:
        return value.value

    def as_extended_float(self, value: DecimalValue) -> ExtendedFloat:
        d = value.value
        if d.is_nan():
            return ExtendedFloat.nan()
        if d.is_infinite():
            return ExtendedFloat.infinity(negative=d.is_signed())
        return ExtendedFloat.from_fraction(Fraction(d), precision=self.config.binary_precision)

    def as_extended_rational(self, value: DecimalValue) -> Fraction:
        if not value.value.is_finite():
            raise out_of_range("as_extended_rational", "non-finite value")
        return Fraction(value.value)

    def as_big_integer(self, value: DecimalValue) -> int:
        if not value.value.is_finite():
            raise out_of_range("as_big_integer", "non-finite value")
        return int(value.value)
