"""
NumberValue — tagged union числовых представлений CBOR кодека

Immutable Pydantic модели, по одной на каждое представление. Поле kind —
дискриминатор: конкретная модель несёт payload своего типа напрямую, без
упаковки в object и без приведений типов во время выполнения.

Любая операция, меняющая представление, создаёт новый экземпляр.
"""

from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from src.core.domain.extended_float import ExtendedFloat
from src.core.math.exact_fit import INT64_MAX, INT64_MIN


# =============================================================================
# ENUMS
# =============================================================================


class NumberKindTag(str, Enum):
    """Тег числового представления"""

    INT64 = "int64"
    BIG_INTEGER = "big_integer"
    DECIMAL = "decimal"
    BINARY_FLOAT = "binary_float"
    RATIONAL = "rational"


# =============================================================================
# VARIANTS
# =============================================================================


class Int64Value(BaseModel):
    """64-битное целое со знаком: [-2**63, 2**63 - 1]."""

    kind: Literal[NumberKindTag.INT64] = NumberKindTag.INT64
    value: int = Field(..., strict=True, ge=INT64_MIN, le=INT64_MAX, description="int64 payload")

    model_config = {"frozen": True}


class BigIntegerValue(BaseModel):
    """Целое произвольной длины."""

    kind: Literal[NumberKindTag.BIG_INTEGER] = NumberKindTag.BIG_INTEGER
    value: int = Field(..., strict=True, description="Arbitrary-precision integer payload")

    model_config = {"frozen": True}


class DecimalValue(BaseModel):
    """
    Десятичное число произвольной точности (включая NaN и ±Infinity).

    Равенство моделей численное, кроме NaN: два NaN равны, если совпадают
    побитово (знак, quiet/signaling, diagnostic payload), что проверяется
    через compare_total. Прямое сравнение signaling NaN в Decimal
    поднимает InvalidOperation, поэтому модели его не используют.
    """

    kind: Literal[NumberKindTag.DECIMAL] = NumberKindTag.DECIMAL
    value: Decimal = Field(..., strict=True, allow_inf_nan=True, description="Decimal payload")

    model_config = {"frozen": True}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        if self.value.is_nan() or other.value.is_nan():
            return self.value.compare_total(other.value) == 0
        return self.value == other.value

    def __hash__(self) -> int:
        if self.value.is_nan():
            return hash((self.kind, str(self.value)))
        return hash((self.kind, self.value))


class BinaryFloatValue(BaseModel):
    """Двоичное число произвольной точности."""

    kind: Literal[NumberKindTag.BINARY_FLOAT] = NumberKindTag.BINARY_FLOAT
    value: ExtendedFloat = Field(..., description="ExtendedFloat payload")

    model_config = {"frozen": True}


class RationalValue(BaseModel):
    """Рациональное число (всегда конечное)."""

    kind: Literal[NumberKindTag.RATIONAL] = NumberKindTag.RATIONAL
    value: Fraction = Field(..., description="Rational payload")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}


NumberValue = Annotated[
    Union[Int64Value, BigIntegerValue, DecimalValue, BinaryFloatValue, RationalValue],
    Field(discriminator="kind"),
]
"""Tagged union: ровно одно представление на экземпляр."""

NUMBER_VALUE_MODELS: dict[NumberKindTag, type[BaseModel]] = {
    NumberKindTag.INT64: Int64Value,
    NumberKindTag.BIG_INTEGER: BigIntegerValue,
    NumberKindTag.DECIMAL: DecimalValue,
    NumberKindTag.BINARY_FLOAT: BinaryFloatValue,
    NumberKindTag.RATIONAL: RationalValue,
}


def integer_value(value: int) -> Int64Value | BigIntegerValue:
    """
    Каноническое представление целого.

    Int64Value, если значение помещается в int64, иначе BigIntegerValue.
    """
    if INT64_MIN <= value <= INT64_MAX:
        return Int64Value(value=value)
    return BigIntegerValue(value=value)
