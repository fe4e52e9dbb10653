"""Dispatcher — выбор NumberKind по тегу NumberValue.

Таблица kinds строится при импорте и обязана покрывать каждый
NumberKindTag ровно одним kind; непокрытый тег — ошибка импорта.
Свободные функции с именами операций пересылают вызов выбранному kind.
"""

from decimal import Decimal
from fractions import Fraction
from typing import Any, Mapping

from src.core.domain.extended_float import ExtendedFloat
from src.core.domain.number_value import (
    BinaryFloatValue,
    DecimalValue,
    NumberKindTag,
    NumberValue,
    RationalValue,
    integer_value,
)
from src.core.math.exact_fit import INT32_MAX, INT32_MIN
from src.core.math.rounding import DEFAULT_CONVERSION_CONFIG, ConversionConfig
from src.kinds.base import NumberKind
from src.kinds.big_integer_kind import BigIntegerKind
from src.kinds.binary_float_kind import BinaryFloatKind
from src.kinds.decimal_kind import DecimalKind
from src.kinds.int64_kind import Int64Kind
from src.kinds.rational_kind import RationalKind


# =============================================================================
# ТАБЛИЦА KINDS
# =============================================================================


def build_kind_table(config: ConversionConfig = DEFAULT_CONVERSION_CONFIG) -> dict[NumberKindTag, NumberKind]:
    """
    Построение таблицы тег → kind.

    Args:
        config: Конфигурация неточных конверсий для Decimal/Rational kinds

    Returns:
        Таблица, покрывающая все NumberKindTag

    Raises:
        RuntimeError: Если какой-либо тег не покрыт
    """
    kinds: list[NumberKind] = [
        Int64Kind(),
        BigIntegerKind(),
        DecimalKind(config),
        BinaryFloatKind(),
        RationalKind(config),
    ]
    table = {kind.tag: kind for kind in kinds}

    missing = set(NumberKindTag) - set(table)
    if missing or len(table) != len(kinds):
        raise RuntimeError(f"Number kind table is not exhaustive: missing {sorted(missing)}")

    return table


_DEFAULT_KINDS: Mapping[NumberKindTag, NumberKind] = build_kind_table()


def kind_for(
    value: NumberValue,
    kinds: Mapping[NumberKindTag, NumberKind] | None = None,
) -> NumberKind:
    """NumberKind для тега значения (по умолчанию — таблица с дефолтным config)."""
    table = _DEFAULT_KINDS if kinds is None else kinds
    return table[value.kind]


# =============================================================================
# ПОСТРОЕНИЕ NUMBERVALUE
# =============================================================================


def number_value_from(number: Any) -> NumberValue:
    """
    Каноническое NumberValue для Python-числа.

    int в пределах int64 → Int64Value, прочие int → BigIntegerValue,
    Decimal → DecimalValue, Fraction → RationalValue,
    ExtendedFloat и float → BinaryFloatValue (float конвертируется точно).

    Raises:
        TypeError: Для bool и нечисловых типов
    """
    if isinstance(number, bool):
        raise TypeError("bool is not a CBOR number")

    if isinstance(number, int):
        return integer_value(number)

    if isinstance(number, Decimal):
        return DecimalValue(value=number)

    if isinstance(number, Fraction):
        return RationalValue(value=number)

    if isinstance(number, ExtendedFloat):
        return BinaryFloatValue(value=number)

    if isinstance(number, float):
        return BinaryFloatValue(value=ExtendedFloat.from_float(number))

    raise TypeError(f"Unsupported number type: {type(number).__name__}")


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def is_zero(value: NumberValue) -> bool:
    return kind_for(value).is_zero(value)


def sign(value: NumberValue) -> int:
    return kind_for(value).sign(value)


def is_integral(value: NumberValue) -> bool:
    return kind_for(value).is_integral(value)


def is_nan(value: NumberValue) -> bool:
    return kind_for(value).is_nan(value)


def is_infinity(value: NumberValue) -> bool:
    return kind_for(value).is_infinity(value)


def is_positive_infinity(value: NumberValue) -> bool:
    return kind_for(value).is_positive_infinity(value)


def is_negative_infinity(value: NumberValue) -> bool:
    return kind_for(value).is_negative_infinity(value)


def as_int64(value: NumberValue) -> int:
    return kind_for(value).as_int64(value)


def as_int32(value: NumberValue, min_value: int = INT32_MIN, max_value: int = INT32_MAX) -> int:
    return kind_for(value).as_int32(value, min_value, max_value)


def can_fit_in_int32(value: NumberValue) -> bool:
    return kind_for(value).can_fit_in_int32(value)


def can_fit_in_int64(value: NumberValue) -> bool:
    return kind_for(value).can_fit_in_int64(value)


def can_truncated_int_fit_in_int32(value: NumberValue) -> bool:
    return kind_for(value).can_truncated_int_fit_in_int32(value)


def can_truncated_int_fit_in_int64(value: NumberValue) -> bool:
    return kind_for(value).can_truncated_int_fit_in_int64(value)


def as_double(value: NumberValue) -> float:
    return kind_for(value).as_double(value)


def as_single(value: NumberValue) -> float:
    return kind_for(value).as_single(value)


def can_fit_in_double(value: NumberValue) -> bool:
    return kind_for(value).can_fit_in_double(value)


def can_fit_in_single(value: NumberValue) -> bool:
    return kind_for(value).can_fit_in_single(value)


def negate(value: NumberValue) -> NumberValue:
    return kind_for(value).negate(value)


def abs_value(value: NumberValue) -> NumberValue:
    return kind_for(value).abs(value)


def as_extended_decimal(value: NumberValue) -> Decimal:
    return kind_for(value).as_extended_decimal(value)


def as_extended_float(value: NumberValue) -> ExtendedFloat:
    return kind_for(value).as_extended_float(value)


def as_extended_rational(value: NumberValue) -> Fraction:
    return kind_for(value).as_extended_rational(value)


def as_big_integer(value: NumberValue) -> int:
    return kind_for(value).as_big_integer(value)
