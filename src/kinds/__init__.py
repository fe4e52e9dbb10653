"""Kinds — реализации контракта NumberKind и диспетчер.

- Int64Kind: 64-битное целое со знаком
- BigIntegerKind: целое произвольной длины
- DecimalKind: decimal.Decimal
- BinaryFloatKind: ExtendedFloat
- RationalKind: fractions.Fraction
"""

from .base import NumberKind
from .big_integer_kind import BigIntegerKind
from .binary_float_kind import BinaryFloatKind
from .decimal_kind import DecimalKind
from .dispatcher import (
    abs_value,
    as_big_integer,
    as_double,
    as_extended_decimal,
    as_extended_float,
    as_extended_rational,
    as_int32,
    as_int64,
    as_single,
    build_kind_table,
    can_fit_in_double,
    can_fit_in_int32,
    can_fit_in_int64,
    can_fit_in_single,
    can_truncated_int_fit_in_int32,
    can_truncated_int_fit_in_int64,
    is_infinity,
    is_integral,
    is_nan,
    is_negative_infinity,
    is_positive_infinity,
    is_zero,
    kind_for,
    negate,
    number_value_from,
    sign,
)
from .int64_kind import Int64Kind
from .rational_kind import RationalKind

__all__ = [
    # Contract
    "NumberKind",
    # Kinds
    "Int64Kind",
    "BigIntegerKind",
    "DecimalKind",
    "BinaryFloatKind",
    "RationalKind",
    # Dispatch
    "build_kind_table",
    "kind_for",
    "number_value_from",
    # Operations
    "is_zero",
    "sign",
    "is_integral",
    "is_nan",
    "is_infinity",
    "is_positive_infinity",
    "is_negative_infinity",
    "as_int64",
    "as_int32",
    "can_fit_in_int32",
    "can_fit_in_int64",
    "can_truncated_int_fit_in_int32",
    "can_truncated_int_fit_in_int64",
    "as_double",
    "as_single",
    "can_fit_in_double",
    "can_fit_in_single",
    "negate",
    "abs_value",
    "as_extended_decimal",
    "as_extended_float",
    "as_extended_rational",
    "as_big_integer",
]
