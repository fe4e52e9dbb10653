"""NumberKind — контракт операций, общий для всех числовых представлений.

Каждый kind — stateless набор чистых функций над одним NumberValue.
Все операции абстрактные: kind, не реализовавший хотя бы одну, нельзя
инстанцировать, а диспетчер инстанцирует все kinds при импорте.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from fractions import Fraction
from typing import ClassVar

from src.core.domain.extended_float import ExtendedFloat
from src.core.domain.number_value import NumberKindTag, NumberValue
from src.core.errors import NumberOutOfRangeError
from src.core.math.exact_fit import (
    INT32_MAX,
    INT32_MIN,
    in_int64_range,
    validate_int32_bounds,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ОБЩИЕ ПРОВЕРКИ СУЖЕНИЯ
# =============================================================================


def narrow_to_int32(truncated: int, min_value: int, max_value: int) -> int:
    """
    Сужение уже усечённого целого до int32 в границах вызывающего.

    Raises:
        ValueError: Если границы некорректны
        NumberOutOfRangeError: Если truncated вне [min_value, max_value]
    """
    validate_int32_bounds(min_value, max_value)

    if min_value <= truncated <= max_value:
        return truncated

    logger.debug("as_int32: %d outside [%d, %d]", truncated, min_value, max_value)
    raise NumberOutOfRangeError()


def narrow_to_int64(truncated: int) -> int:
    """
    Сужение уже усечённого целого до int64.

    Raises:
        NumberOutOfRangeError: Если truncated вне int64
    """
    if in_int64_range(truncated):
        return truncated

    logger.debug("as_int64: %d outside int64", truncated)
    raise NumberOutOfRangeError()


def out_of_range(operation: str, reason: str) -> NumberOutOfRangeError:
    """Ошибка для значения, не представимого в результате операции."""
    logger.debug("%s: %s", operation, reason)
    return NumberOutOfRangeError()


# =============================================================================
# CONTRACT
# =============================================================================


class NumberKind(ABC):
    """Контракт числового представления."""

    tag: ClassVar[NumberKindTag]

    # -------------------------------------------------------------------------
    # Классификация
    # -------------------------------------------------------------------------

    @abstractmethod
    def is_zero(self, value: NumberValue) -> bool: ...

    @abstractmethod
    def sign(self, value: NumberValue) -> int:
        """-1, 0 или +1; 0 только для точного нуля."""

    @abstractmethod
    def is_integral(self, value: NumberValue) -> bool: ...

    @abstractmethod
    def is_nan(self, value: NumberValue) -> bool: ...

    @abstractmethod
    def is_infinity(self, value: NumberValue) -> bool: ...

    @abstractmethod
    def is_positive_infinity(self, value: NumberValue) -> bool: ...

    @abstractmethod
    def is_negative_infinity(self, value: NumberValue) -> bool: ...

    # -------------------------------------------------------------------------
    # Целочисленные сужения
    # -------------------------------------------------------------------------

    @abstractmethod
    def as_int64(self, value: NumberValue) -> int: ...

    @abstractmethod
    def as_int32(
        self,
        value: NumberValue,
        min_value: int = INT32_MIN,
        max_value: int = INT32_MAX,
    ) -> int:
        """Значение как int32, если оно в [min_value, max_value], иначе NumberOutOfRangeError."""

    @abstractmethod
    def can_fit_in_int32(self, value: NumberValue) -> bool: ...

    @abstractmethod
    def can_fit_in_int64(self, value: NumberValue) -> bool: ...

    @abstractmethod
    def can_truncated_int_fit_in_int32(self, value: NumberValue) -> bool: ...

    @abstractmethod
    def can_truncated_int_fit_in_int64(self, value: NumberValue) -> bool: ...

    # -------------------------------------------------------------------------
    # Двоичная плавающая точка
    # -------------------------------------------------------------------------

    @abstractmethod
    def as_double(self, value: NumberValue) -> float: ...

    @abstractmethod
    def as_single(self, value: NumberValue) -> float: ...

    @abstractmethod
    def can_fit_in_double(self, value: NumberValue) -> bool: ...

    @abstractmethod
    def can_fit_in_single(self, value: NumberValue) -> bool: ...

    # -------------------------------------------------------------------------
    # Знак
    # -------------------------------------------------------------------------

    @abstractmethod
    def negate(self, value: NumberValue) -> NumberValue: ...

    @abstractmethod
    def abs(self, value: NumberValue) -> NumberValue: ...

    # -------------------------------------------------------------------------
    # Внешние представления
    # -------------------------------------------------------------------------

    @abstractmethod
    def as_extended_decimal(self, value: NumberValue) -> Decimal: ...

    @abstractmethod
    def as_extended_float(self, value: NumberValue) -> ExtendedFloat: ...

    @abstractmethod
    def as_extended_rational(self, value: NumberValue) -> Fraction: ...

    @abstractmethod
    def as_big_integer(self, value: NumberValue) -> int: ...
