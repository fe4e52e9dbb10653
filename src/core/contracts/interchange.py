"""
NumberValue ⇄ JSON interchange

Конверсия NumberValue в JSON форму контракта number_value и обратно.
Значение всегда передаётся строкой, поэтому конверсия точная для всех kinds.

Форматы value:
- int64, big_integer: десятичная запись целого
- decimal: str(Decimal), включая Infinity / -Infinity и NaN со знаком,
  признаком signaling и diagnostic payload (NaN123, -sNaN5)
- rational: "numerator/denominator"
- binary_float: "<mantissa>p<exponent>" или NaN / Infinity / -Infinity
"""

from decimal import Decimal
from fractions import Fraction
from typing import Any, Dict, Final

from src.core.contracts.validators import validate_number_value
from src.core.domain.extended_float import ExtendedFloat
from src.core.domain.number_value import (
    BigIntegerValue,
    BinaryFloatValue,
    DecimalValue,
    Int64Value,
    NumberKindTag,
    NumberValue,
    RationalValue,
)

NUMBER_VALUE_SCHEMA_VERSION: Final[str] = "1"


def _format_value(value: NumberValue) -> str:
    if value.kind == NumberKindTag.RATIONAL:
        return f"{value.value.numerator}/{value.value.denominator}"
    return str(value.value)


def _parse_binary_float(text: str) -> ExtendedFloat:
    if text == "NaN":
        return ExtendedFloat.nan()
    if text == "Infinity":
        return ExtendedFloat.infinity()
    if text == "-Infinity":
        return ExtendedFloat.infinity(negative=True)

    mantissa, exponent = text.split("p")
    return ExtendedFloat(mantissa=int(mantissa), exponent=int(exponent))


def number_value_to_contract(value: NumberValue) -> Dict[str, Any]:
    """
    NumberValue → JSON форма контракта number_value.

    Examples:
        >>> number_value_to_contract(Int64Value(value=-5))
        {'schema_version': '1', 'kind': 'int64', 'value': '-5'}
    """
    return {
        "schema_version": NUMBER_VALUE_SCHEMA_VERSION,
        "kind": NumberKindTag(value.kind).value,
        "value": _format_value(value),
    }


def number_value_from_contract(data: Dict[str, Any]) -> NumberValue:
    """
    JSON форма контракта number_value → NumberValue.

    Args:
        data: Данные контракта

    Returns:
        NumberValue соответствующего kind

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
        pydantic.ValidationError: Если значение нарушает ограничения модели
            (например, int64 вне диапазона)
    """
    validate_number_value(data)

    kind = NumberKindTag(data["kind"])
    text = data["value"]

    if kind == NumberKindTag.INT64:
        return Int64Value(value=int(text))

    if kind == NumberKindTag.BIG_INTEGER:
        return BigIntegerValue(value=int(text))

    if kind == NumberKindTag.DECIMAL:
        return DecimalValue(value=Decimal(text))

    if kind == NumberKindTag.RATIONAL:
        return RationalValue(value=Fraction(text))

    return BinaryFloatValue(value=_parse_binary_float(text))
