"""
Domain models and value objects.

Contains the tagged NumberValue union and the ExtendedFloat value type.
"""

from src.core.domain.extended_float import ExtendedFloat, FloatSpecial
from src.core.domain.number_value import (
    NUMBER_VALUE_MODELS,
    BigIntegerValue,
    BinaryFloatValue,
    DecimalValue,
    Int64Value,
    NumberKindTag,
    NumberValue,
    RationalValue,
    integer_value,
)

__all__ = [
    # ExtendedFloat
    "ExtendedFloat",
    "FloatSpecial",
    # NumberValue
    "NumberKindTag",
    "NumberValue",
    "Int64Value",
    "BigIntegerValue",
    "DecimalValue",
    "BinaryFloatValue",
    "RationalValue",
    "NUMBER_VALUE_MODELS",
    "integer_value",
]
