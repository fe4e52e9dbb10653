"""BigIntegerKind — целое произвольной длины.

Всегда целое и конечное. Сужения до int32/int64 проверяют диапазон,
точная представимость в binary32/binary64 учитывает и ёмкость мантиссы,
и предел экспоненты формата.
"""

from decimal import Decimal
from fractions import Fraction

from src.core.domain.extended_float import ExtendedFloat
from src.core.domain.number_value import (
    BigIntegerValue,
    NumberKindTag,
    NumberValue,
    integer_value,
)
from src.core.math.exact_fit import (
    INT32_MAX,
    INT32_MIN,
    in_int32_range,
    in_int64_range,
    integer_fits_double,
    integer_fits_single,
    integer_to_double,
    integer_to_single,
)
from src.kinds.base import NumberKind, narrow_to_int32, narrow_to_int64


class BigIntegerKind(NumberKind):
    """Операции над BigIntegerValue."""

    tag = NumberKindTag.BIG_INTEGER

    def is_zero(self, value: BigIntegerValue) -> bool:
        return value.value == 0

    def sign(self, value: BigIntegerValue) -> int:
        if value.value == 0:
            return 0
        return -1 if value.value < 0 else 1

    def is_integral(self, value: BigIntegerValue) -> bool:
        return True

    def is_nan(self, value: BigIntegerValue) -> bool:
        return False

    def is_infinity(self, value: BigIntegerValue) -> bool:
        return False

    def is_positive_infinity(self, value: BigIntegerValue) -> bool:
        return False

    def is_negative_infinity(self, value: BigIntegerValue) -> bool:
        return False

    def as_int64(self, value: BigIntegerValue) -> int:
        return narrow_to_int64(value.value)

    def as_int32(
        self,
        value: BigIntegerValue,
        min_value: int = INT32_MIN,
        max_value: int = INT32_MAX,
    ) -> int:
        return narrow_to_int32(value.value, min_value, max_value)

    def can_fit_in_int32(self, value: BigIntegerValue) -> bool:
        return in_int32_range(value.value)

    def can_fit_in_int64(self, value: BigIntegerValue) -> bool:
        return in_int64_range(value.value)

    def can_truncated_int_fit_in_int32(self, value: BigIntegerValue) -> bool:
        return in_int32_range(value.value)

    def can_truncated_int_fit_in_int64(self, value: BigIntegerValue) -> bool:
        return in_int64_range(value.value)

    def as_double(self, value: BigIntegerValue) -> float:
        return integer_to_double(value.value)

    def as_single(self, value: BigIntegerValue) -> float:
        return integer_to_single(value.value)

    def can_fit_in_double(self, value: BigIntegerValue) -> bool:
        return integer_fits_double(value.value)

    def can_fit_in_single(self, value: BigIntegerValue) -> bool:
        return integer_fits_single(value.value)

    def negate(self, value: BigIntegerValue) -> NumberValue:
        # -(2**63) возвращается в int64
        return integer_value(-value.value)

    def abs(self, value: BigIntegerValue) -> NumberValue:
        if value.value < 0:
            return integer_value(-value.value)
        return value

    def as_extended_decimal(self, value: BigIntegerValue) -> Decimal:
        return Decimal(value.value)

    def as_extended_float(self, value: BigIntegerValue) -> ExtendedFloat:
        return ExtendedFloat.from_int64(value.value)

    def as_extended_rational(self, value: BigIntegerValue) -> Fraction:
        return Fraction(value.value)

    def as_big_integer(self, value: BigIntegerValue) -> int:
        return value.value
