"""RationalKind — рациональное число (fractions.Fraction).

Fraction всегда конечна и несократима, поэтому NaN/Infinity не бывает,
а целостность — это знаменатель 1. Конверсии в Decimal и ExtendedFloat
точные, когда это возможно, иначе округляются по ConversionConfig.
"""

from decimal import Decimal
from fractions import Fraction

from src.core.domain.extended_float import ExtendedFloat
from src.core.domain.number_value import NumberKindTag, NumberValue, RationalValue
from src.core.math.exact_fit import (
    INT32_MAX,
    INT32_MIN,
    double_to_single,
    fraction_fits_double,
    fraction_fits_single,
    fraction_to_double,
    in_int32_range,
    in_int64_range,
    truncate_fraction,
)
from src.core.math.rounding import (
    DEFAULT_CONVERSION_CONFIG,
    ConversionConfig,
    fraction_to_decimal,
)
from src.kinds.base import NumberKind, narrow_to_int32, narrow_to_int64


class RationalKind(NumberKind):
    """Операции над RationalValue."""

    tag = NumberKindTag.RATIONAL

    def __init__(self, config: ConversionConfig = DEFAULT_CONVERSION_CONFIG):
        self.config = config

    def is_zero(self, value: RationalValue) -> bool:
        return value.value == 0

    def sign(self, value: RationalValue) -> int:
        if value.value == 0:
            return 0
        return -1 if value.value < 0 else 1

    def is_integral(self, value: RationalValue) -> bool:
        return value.value.denominator == 1

    def is_nan(self, value: RationalValue) -> bool:
        return False

    def is_infinity(self, value: RationalValue) -> bool:
        return False

    def is_positive_infinity(self, value: RationalValue) -> bool:
        return False

    def is_negative_infinity(self, value: RationalValue) -> bool:
        return False

    def as_int64(self, value: RationalValue) -> int:
        return narrow_to_int64(truncate_fraction(value.value))

    def as_int32(
        self,
        value: RationalValue,
        min_value: int = INT32_MIN,
        max_value: int = INT32_MAX,
    ) -> int:
        return narrow_to_int32(truncate_fraction(value.value), min_value, max_value)

    def can_fit_in_int32(self, value: RationalValue) -> bool:
        return self.is_integral(value) and in_int32_range(value.value.numerator)

    def can_fit_in_int64(self, value: RationalValue) -> bool:
        return self.is_integral(value) and in_int64_range(value.value.numerator)

    def can_truncated_int_fit_in_int32(self, value: RationalValue) -> bool:
        return in_int32_range(truncate_fraction(value.value))

    def can_truncated_int_fit_in_int64(self, value: RationalValue) -> bool:
        return in_int64_range(truncate_fraction(value.value))

    def as_double(self, value: RationalValue) -> float:
        return fraction_to_double(value.value)

    def as_single(self, value: RationalValue) -> float:
        return double_to_single(self.as_double(value))

    def can_fit_in_double(self, value: RationalValue) -> bool:
        return fraction_fits_double(value.value)

    def can_fit_in_single(self, value: RationalValue) -> bool:
        return fraction_fits_single(value.value)

    def negate(self, value: RationalValue) -> NumberValue:
        return RationalValue(value=-value.value)

    def abs(self, value: RationalValue) -> NumberValue:
        return RationalValue(value=abs(value.value))

    def as_extended_decimal(self, value: RationalValue) -> Decimal:
        return fraction_to_decimal(value.value, precision=self.config.decimal_precision)

    def as_extended_float(self, value: RationalValue) -> ExtendedFloat:
        return ExtendedFloat.from_fraction(value.value, precision=self.config.binary_precision)

    def as_extended_rational(self, value: RationalValue) -> Fraction:
        return value.value

    def as_big_integer(self, value: RationalValue) -> int:
        return truncate_fraction(value.value)
