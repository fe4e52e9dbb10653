"""Int64Kind — представление 64-битным целым со знаком.

Payload всегда в [-2**63, 2**63 - 1], поэтому:
- классификация NaN/Infinity всегда False, is_integral всегда True
- as_int64 и can_fit_in_int64 тотальны
- все конверсии во внешние представления точные и тотальные

Единственный особый случай — INT64_MIN: у него нет положительной пары
той же ширины, поэтому negate/abs возвращают BigIntegerValue(2**63)
вместо переполнения.
"""

import logging
from decimal import Decimal
from fractions import Fraction

from src.core.domain.extended_float import ExtendedFloat
from src.core.domain.number_value import (
    BigIntegerValue,
    Int64Value,
    NumberKindTag,
    NumberValue,
)
from src.core.math.exact_fit import (
    INT32_MAX,
    INT32_MIN,
    INT64_MIN,
    in_int32_range,
    int64_fits_double,
    int64_fits_single,
    integer_to_single,
)
from src.kinds.base import NumberKind, narrow_to_int32

logger = logging.getLogger(__name__)


class Int64Kind(NumberKind):
    """Операции над Int64Value."""

    tag = NumberKindTag.INT64

    def is_zero(self, value: Int64Value) -> bool:
        return value.value == 0

    def sign(self, value: Int64Value) -> int:
        if value.value == 0:
            return 0
        return -1 if value.value < 0 else 1

    def is_integral(self, value: Int64Value) -> bool:
        return True

    def is_nan(self, value: Int64Value) -> bool:
        return False

    def is_infinity(self, value: Int64Value) -> bool:
        return False

    def is_positive_infinity(self, value: Int64Value) -> bool:
        return False

    def is_negative_infinity(self, value: Int64Value) -> bool:
        return False

    def as_int64(self, value: Int64Value) -> int:
        return value.value

    def as_int32(
        self,
        value: Int64Value,
        min_value: int = INT32_MIN,
        max_value: int = INT32_MAX,
    ) -> int:
        return narrow_to_int32(value.value, min_value, max_value)

    def can_fit_in_int32(self, value: Int64Value) -> bool:
        return in_int32_range(value.value)

    def can_fit_in_int64(self, value: Int64Value) -> bool:
        return True

    def can_truncated_int_fit_in_int32(self, value: Int64Value) -> bool:
        # Целое уже усечено
        return in_int32_range(value.value)

    def can_truncated_int_fit_in_int64(self, value: Int64Value) -> bool:
        return True

    def as_double(self, value: Int64Value) -> float:
        return float(value.value)

    def as_single(self, value: Int64Value) -> float:
        return integer_to_single(value.value)

    def can_fit_in_double(self, value: Int64Value) -> bool:
        return int64_fits_double(value.value)

    def can_fit_in_single(self, value: Int64Value) -> bool:
        return int64_fits_single(value.value)

    def negate(self, value: Int64Value) -> NumberValue:
        if value.value == INT64_MIN:
            logger.debug("negate: INT64_MIN widened to big_integer")
            return BigIntegerValue(value=1 << 63)
        return Int64Value(value=-value.value)

    def abs(self, value: Int64Value) -> NumberValue:
        if value.value == INT64_MIN:
            logger.debug("abs: INT64_MIN widened to big_integer")
            return BigIntegerValue(value=1 << 63)
        if value.value < 0:
            return Int64Value(value=-value.value)
        return value

    def as_extended_decimal(self, value: Int64Value) -> Decimal:
        return Decimal(value.value)

    def as_extended_float(self, value: Int64Value) -> ExtendedFloat:
        return ExtendedFloat.from_int64(value.value)

    def as_extended_rational(self, value: Int64Value) -> Fraction:
        return Fraction(value.value)

    def as_big_integer(self, value: Int64Value) -> int:
        return value.value
