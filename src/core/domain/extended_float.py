"""
ExtendedFloat — двоичное число с плавающей точкой произвольной точности

Immutable Pydantic модель: конечное значение равно mantissa * 2**exponent.
Специальные значения (NaN, ±Infinity) задаются полем special.

Представление каноническое: у конечного значения мантисса нечётна
(либо равна 0 при exponent == 0), у специальных mantissa == exponent == 0.
Поэтому равенство моделей совпадает с численным равенством.
"""

import math
from enum import Enum
from fractions import Fraction
from typing import Any

from pydantic import BaseModel, Field, model_validator

from src.core.math.rounding import is_power_of_two, round_fraction_to_binary


class FloatSpecial(str, Enum):
    """Класс значения ExtendedFloat"""

    FINITE = "finite"
    NAN = "nan"
    POSITIVE_INFINITY = "positive_infinity"
    NEGATIVE_INFINITY = "negative_infinity"


class ExtendedFloat(BaseModel):
    """
    Двоичное число произвольной точности.

    Все конструкторы from_* точные, кроме from_fraction с precision
    для знаменателей, не являющихся степенью двойки.
    """

    mantissa: int = Field(0, strict=True, description="Мантисса со знаком")
    exponent: int = Field(0, strict=True, description="Двоичная экспонента")
    special: FloatSpecial = Field(FloatSpecial.FINITE, description="Класс значения")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def canonicalize(cls, data: Any) -> Any:
        """Приведение к канонической форме до валидации полей"""
        if not isinstance(data, dict):
            return data

        special = data.get("special", FloatSpecial.FINITE)
        if special != FloatSpecial.FINITE:
            return {**data, "mantissa": 0, "exponent": 0}

        mantissa = data.get("mantissa", 0)
        exponent = data.get("exponent", 0)
        if type(mantissa) is not int or type(exponent) is not int:
            return data

        if mantissa == 0:
            return {**data, "mantissa": 0, "exponent": 0}

        trailing_zeros = (mantissa & -mantissa).bit_length() - 1
        return {
            **data,
            "mantissa": mantissa >> trailing_zeros,
            "exponent": exponent + trailing_zeros,
        }

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_int64(cls, value: int) -> "ExtendedFloat":
        """Точная конверсия целого (всегда успешна)."""
        return cls(mantissa=value, exponent=0)

    @classmethod
    def from_fraction(cls, value: Fraction, precision: int | None = None) -> "ExtendedFloat":
        """
        Конверсия Fraction → ExtendedFloat.

        Args:
            value: Рациональное значение
            precision: Значащие биты для неточного случая (None — только точно)

        Returns:
            ExtendedFloat

        Raises:
            ValueError: Если знаменатель не степень двойки и precision не задан
        """
        if is_power_of_two(value.denominator):
            shift = value.denominator.bit_length() - 1
            return cls(mantissa=value.numerator, exponent=-shift)

        if precision is None:
            raise ValueError(f"{value} has no exact binary representation")

        mantissa, exponent = round_fraction_to_binary(value, precision)
        return cls(mantissa=mantissa, exponent=exponent)

    @classmethod
    def from_float(cls, value: float) -> "ExtendedFloat":
        """Точная конверсия Python float (включая NaN и ±inf)."""
        if math.isnan(value):
            return cls.nan()
        if math.isinf(value):
            return cls.infinity(negative=value < 0)
        return cls.from_fraction(Fraction(value))

    @classmethod
    def nan(cls) -> "ExtendedFloat":
        return cls(special=FloatSpecial.NAN)

    @classmethod
    def infinity(cls, negative: bool = False) -> "ExtendedFloat":
        special = FloatSpecial.NEGATIVE_INFINITY if negative else FloatSpecial.POSITIVE_INFINITY
        return cls(special=special)

    # -------------------------------------------------------------------------
    # Классификация
    # -------------------------------------------------------------------------

    @property
    def is_finite(self) -> bool:
        return self.special == FloatSpecial.FINITE

    @property
    def is_nan(self) -> bool:
        return self.special == FloatSpecial.NAN

    @property
    def is_infinity(self) -> bool:
        return self.special in (FloatSpecial.POSITIVE_INFINITY, FloatSpecial.NEGATIVE_INFINITY)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_fraction(self) -> Fraction:
        """
        Точное значение как Fraction.

        Raises:
            ValueError: Для NaN и бесконечностей
        """
        if not self.is_finite:
            raise ValueError(f"Non-finite ExtendedFloat ({self.special.value}) has no Fraction value")

        if self.exponent >= 0:
            return Fraction(self.mantissa << self.exponent)
        return Fraction(self.mantissa, 1 << -self.exponent)

    def __str__(self) -> str:
        if self.special == FloatSpecial.NAN:
            return "NaN"
        if self.special == FloatSpecial.POSITIVE_INFINITY:
            return "Infinity"
        if self.special == FloatSpecial.NEGATIVE_INFINITY:
            return "-Infinity"
        return f"{self.mantissa}p{self.exponent}"
