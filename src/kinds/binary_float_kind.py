"""BinaryFloatKind — двоичное число произвольной точности (ExtendedFloat).

ExtendedFloat хранится в канонической форме (нечётная мантисса), поэтому
целостность и точная представимость определяются по мантиссе и экспоненте
без построения огромных целых.
"""

import math
from decimal import Decimal
from fractions import Fraction
from typing import Final

from src.core.domain.extended_float import ExtendedFloat, FloatSpecial
from src.core.domain.number_value import BinaryFloatValue, NumberKindTag, NumberValue
from src.core.errors import NotANumberError
from src.core.math.exact_fit import (
    DOUBLE_PRECISION_BITS,
    INT32_MAX,
    INT32_MIN,
    SINGLE_PRECISION_BITS,
    double_to_single,
    fraction_fits_double,
    fraction_fits_single,
    fraction_to_double,
    in_int32_range,
    in_int64_range,
)
from src.core.math.rounding import fraction_to_decimal
from src.kinds.base import NumberKind, narrow_to_int32, narrow_to_int64, out_of_range

# Значения с двоичным порядком выше этого заведомо вне int64
_INT64_MAGNITUDE_BITS: Final[int] = 64

# Диапазоны двоичной экспоненты канонической формы, вне которых значение
# не представимо (с запасом на субнормальные значения)
_DOUBLE_EXPONENT_RANGE: Final[tuple[int, int]] = (-1074, 1024)
_SINGLE_EXPONENT_RANGE: Final[tuple[int, int]] = (-149, 128)


def _magnitude_bits(value: ExtendedFloat) -> int:
    """Двоичный порядок модуля: |value| < 2**bits."""
    return abs(value.mantissa).bit_length() + value.exponent


def _truncate(value: ExtendedFloat) -> int | None:
    """Усечение к нулю; None если результат заведомо вне int64."""
    if value.mantissa == 0:
        return 0
    if _magnitude_bits(value) > _INT64_MAGNITUDE_BITS:
        return None
    if value.exponent >= 0:
        return value.mantissa << value.exponent
    magnitude = abs(value.mantissa) >> -value.exponent
    return -magnitude if value.mantissa < 0 else magnitude


def _fits_format(value: ExtendedFloat, precision: int, exponent_range: tuple[int, int]) -> bool:
    if abs(value.mantissa).bit_length() > precision:
        return False
    low, high = exponent_range
    return low <= value.exponent <= high


class BinaryFloatKind(NumberKind):
    """Операции над BinaryFloatValue."""

    tag = NumberKindTag.BINARY_FLOAT

    def is_zero(self, value: BinaryFloatValue) -> bool:
        return value.value.is_finite and value.value.mantissa == 0

    def sign(self, value: BinaryFloatValue) -> int:
        ef = value.value
        if ef.is_nan:
            raise NotANumberError()
        if ef.special == FloatSpecial.POSITIVE_INFINITY:
            return 1
        if ef.special == FloatSpecial.NEGATIVE_INFINITY:
            return -1
        if ef.mantissa == 0:
            return 0
        return -1 if ef.mantissa < 0 else 1

    def is_integral(self, value: BinaryFloatValue) -> bool:
        ef = value.value
        return ef.is_finite and (ef.mantissa == 0 or ef.exponent >= 0)

    def is_nan(self, value: BinaryFloatValue) -> bool:
        return value.value.is_nan

    def is_infinity(self, value: BinaryFloatValue) -> bool:
        return value.value.is_infinity

    def is_positive_infinity(self, value: BinaryFloatValue) -> bool:
        return value.value.special == FloatSpecial.POSITIVE_INFINITY

    def is_negative_infinity(self, value: BinaryFloatValue) -> bool:
        return value.value.special == FloatSpecial.NEGATIVE_INFINITY

    def as_int64(self, value: BinaryFloatValue) -> int:
        if not value.value.is_finite:
            raise out_of_range("as_int64", "non-finite value")

        truncated = _truncate(value.value)
        if truncated is None:
            raise out_of_range("as_int64", "magnitude exceeds int64")
        return narrow_to_int64(truncated)

    def as_int32(
        self,
        value: BinaryFloatValue,
        min_value: int = INT32_MIN,
        max_value: int = INT32_MAX,
    ) -> int:
        if not value.value.is_finite:
            raise out_of_range("as_int32", "non-finite value")

        truncated = _truncate(value.value)
        if truncated is None:
            raise out_of_range("as_int32", "magnitude exceeds int64")
        return narrow_to_int32(truncated, min_value, max_value)

    def can_fit_in_int32(self, value: BinaryFloatValue) -> bool:
        return self.is_integral(value) and self.can_truncated_int_fit_in_int32(value)

    def can_fit_in_int64(self, value: BinaryFloatValue) -> bool:
        return self.is_integral(value) and self.can_truncated_int_fit_in_int64(value)

    def can_truncated_int_fit_in_int32(self, value: BinaryFloatValue) -> bool:
        if not value.value.is_finite:
            return False
        truncated = _truncate(value.value)
        return truncated is not None and in_int32_range(truncated)

    def can_truncated_int_fit_in_int64(self, value: BinaryFloatValue) -> bool:
        if not value.value.is_finite:
            return False
        truncated = _truncate(value.value)
        return truncated is not None and in_int64_range(truncated)

    def as_double(self, value: BinaryFloatValue) -> float:
        ef = value.value
        if ef.is_nan:
            return math.nan
        if ef.special == FloatSpecial.POSITIVE_INFINITY:
            return math.inf
        if ef.special == FloatSpecial.NEGATIVE_INFINITY:
            return -math.inf
        return fraction_to_double(ef.to_fraction())

    def as_single(self, value: BinaryFloatValue) -> float:
        return double_to_single(self.as_double(value))

    def can_fit_in_double(self, value: BinaryFloatValue) -> bool:
        ef = value.value
        if not ef.is_finite:
            return False
        if ef.mantissa == 0:
            return True
        return _fits_format(ef, DOUBLE_PRECISION_BITS, _DOUBLE_EXPONENT_RANGE) and (
            fraction_fits_double(ef.to_fraction())
        )

    def can_fit_in_single(self, value: BinaryFloatValue) -> bool:
        ef = value.value
        if not ef.is_finite:
            return False
        if ef.mantissa == 0:
            return True
        return _fits_format(ef, SINGLE_PRECISION_BITS, _SINGLE_EXPONENT_RANGE) and (
            fraction_fits_single(ef.to_fraction())
        )

    def negate(self, value: BinaryFloatValue) -> NumberValue:
        ef = value.value
        if ef.special == FloatSpecial.POSITIVE_INFINITY:
            return BinaryFloatValue(value=ExtendedFloat.infinity(negative=True))
        if ef.special == FloatSpecial.NEGATIVE_INFINITY:
            return BinaryFloatValue(value=ExtendedFloat.infinity())
        if ef.is_nan:
            return value
        return BinaryFloatValue(value=ExtendedFloat(mantissa=-ef.mantissa, exponent=ef.exponent))

    def abs(self, value: BinaryFloatValue) -> NumberValue:
        ef = value.value
        if ef.special == FloatSpecial.NEGATIVE_INFINITY:
            return BinaryFloatValue(value=ExtendedFloat.infinity())
        if ef.is_finite and ef.mantissa < 0:
            return BinaryFloatValue(value=ExtendedFloat(mantissa=-ef.mantissa, exponent=ef.exponent))
        return value

    def as_extended_decimal(self, value: BinaryFloatValue) -> Decimal:
        ef = value.value
        if ef.is_nan:
            return Decimal("NaN")
        if ef.special == FloatSpecial.POSITIVE_INFINITY:
            return Decimal("Infinity")
        if ef.special == FloatSpecial.NEGATIVE_INFINITY:
            return Decimal("-Infinity")
        # Знаменатель степень двойки, десятичная запись конечна
        return fraction_to_decimal(ef.to_fraction())

    def as_extended_float(self, value: BinaryFloatValue) -> ExtendedFloat:
        return value.value

    def as_extended_rational(self, value: BinaryFloatValue) -> Fraction:
        if not value.value.is_finite:
            raise out_of_range("as_extended_rational", "non-finite value")
        return value.value.to_fraction()

    def as_big_integer(self, value: BinaryFloatValue) -> int:
        ef = value.value
        if not ef.is_finite:
            raise out_of_range("as_big_integer", "non-finite value")
        if ef.exponent >= 0:
            return ef.mantissa << ef.exponent
        return math.trunc(ef.to_fraction())
