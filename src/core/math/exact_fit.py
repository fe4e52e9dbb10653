"""
Exact Fit — точные предикаты представимости и границы числовых форматов

Модуль отвечает на вопросы вида "можно ли представить значение в формате X
без потери точности" и выполняет best-effort приведение к binary32/binary64:
- Границы int32 / int64
- Точная представимость целых и рациональных значений в binary32/binary64
- Округление целого в binary32 (round half even) без двойного округления

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Предикаты представимости точные: нет ложных срабатываний и пропусков
2. Для int64 алгоритм "делить пополам пока чётно и >= ёмкости мантиссы"
   сохраняется без изменений, INT64_MIN обрабатывается отдельно
3. Best-effort приведения никогда не поднимают исключений (переполнение → ±inf)
"""

import math
import struct
from fractions import Fraction
from typing import Final

# =============================================================================
# ГРАНИЦЫ ЦЕЛЫХ ФОРМАТОВ
# =============================================================================

INT32_MIN: Final[int] = -(1 << 31)
INT32_MAX: Final[int] = (1 << 31) - 1

INT64_MIN: Final[int] = -(1 << 63)
INT64_MAX: Final[int] = (1 << 63) - 1

# =============================================================================
# ПАРАМЕТРЫ ДВОИЧНЫХ ФОРМАТОВ С ПЛАВАЮЩЕЙ ТОЧКОЙ
# =============================================================================

# Число значащих бит мантиссы (со скрытым битом)
SINGLE_PRECISION_BITS: Final[int] = 24
DOUBLE_PRECISION_BITS: Final[int] = 53

# Ёмкость мантиссы: целые по модулю меньше этого значения представимы точно
SINGLE_MANTISSA_CAPACITY: Final[int] = 1 << SINGLE_PRECISION_BITS
DOUBLE_MANTISSA_CAPACITY: Final[int] = 1 << DOUBLE_PRECISION_BITS

# Первое целое, не помещающееся в формат по экспоненте (переполнение в inf)
SINGLE_EXPONENT_LIMIT: Final[int] = 1 << 128
DOUBLE_EXPONENT_LIMIT: Final[int] = 1 << 1024

# Наибольшее конечное значение binary32
SINGLE_MAX: Final[float] = float((SINGLE_MANTISSA_CAPACITY - 1) << 104)


# =============================================================================
# ПРОВЕРКИ ДИАПАЗОНОВ
# =============================================================================


def in_int32_range(value: int) -> bool:
    """True если value в [INT32_MIN, INT32_MAX]."""
    return INT32_MIN <= value <= INT32_MAX


def in_int64_range(value: int) -> bool:
    """True если value в [INT64_MIN, INT64_MAX]."""
    return INT64_MIN <= value <= INT64_MAX


def validate_int32_bounds(min_value: int, max_value: int) -> None:
    """
    Валидация границ, переданных в as_int32.

    Args:
        min_value: Нижняя граница (включительно)
        max_value: Верхняя граница (включительно)

    Raises:
        ValueError: Если граница вне int32 или min_value > max_value
    """
    if not in_int32_range(min_value):
        raise ValueError(f"min_value must fit in int32, got {min_value}")

    if not in_int32_range(max_value):
        raise ValueError(f"max_value must fit in int32, got {max_value}")

    if min_value > max_value:
        raise ValueError(f"min_value {min_value} must be <= max_value {max_value}")


# =============================================================================
# ТОЧНАЯ ПРЕДСТАВИМОСТЬ INT64
# =============================================================================


def int64_fits_binary_float(value: int, capacity: int) -> bool:
    """
    Точная представимость int64 в двоичном формате с заданной ёмкостью мантиссы.

    Алгоритм:
        1. INT64_MIN (= -2**63) — степень двойки, представим всегда
        2. Берём модуль и делим пополам, пока он чётный и >= capacity:
           множители 2 поглощаются экспонентой
        3. Значение помещается, если остаток < capacity

    Args:
        value: Значение int64
        capacity: Ёмкость мантиссы (2**24 для single, 2**53 для double)

    Returns:
        True если значение представимо без потери точности

    Examples:
        >>> int64_fits_binary_float(2**60, 2**24)
        True
        >>> int64_fits_binary_float(2**24 + 1, 2**24)
        False
    """
    if value == INT64_MIN:
        return True

    magnitude = abs(value)
    while magnitude >= capacity and (magnitude & 1) == 0:
        magnitude >>= 1

    return magnitude < capacity


def int64_fits_single(value: int) -> bool:
    """Точная представимость int64 в binary32."""
    return int64_fits_binary_float(value, SINGLE_MANTISSA_CAPACITY)


def int64_fits_double(value: int) -> bool:
    """Точная представимость int64 в binary64."""
    return int64_fits_binary_float(value, DOUBLE_MANTISSA_CAPACITY)


# =============================================================================
# ТОЧНАЯ ПРЕДСТАВИМОСТЬ ПРОИЗВОЛЬНЫХ ЦЕЛЫХ И ДРОБЕЙ
# =============================================================================


def integer_fits_binary_float(value: int, capacity: int, limit: int) -> bool:
    """
    Точная представимость целого произвольной длины.

    Нечётная часть модуля должна быть < capacity, а сам модуль < limit
    (иначе значение уходит за максимальную экспоненту формата).

    Args:
        value: Целое произвольной длины
        capacity: Ёмкость мантиссы
        limit: Первая степень двойки, вызывающая переполнение формата

    Returns:
        True если значение представимо без потери точности
    """
    magnitude = abs(value)
    if magnitude == 0:
        return True

    if magnitude >= limit:
        return False

    trailing_zeros = (magnitude & -magnitude).bit_length() - 1
    return (magnitude >> trailing_zeros) < capacity


def integer_fits_single(value: int) -> bool:
    return integer_fits_binary_float(value, SINGLE_MANTISSA_CAPACITY, SINGLE_EXPONENT_LIMIT)


def integer_fits_double(value: int) -> bool:
    return integer_fits_binary_float(value, DOUBLE_MANTISSA_CAPACITY, DOUBLE_EXPONENT_LIMIT)


def fraction_fits_double(value: Fraction) -> bool:
    """
    Точная представимость рационального значения в binary64.

    float(Fraction) округляет корректно, поэтому значение представимо
    тогда и только тогда, когда обратное преобразование возвращает исходное.
    Субнормальные значения учитываются автоматически.
    """
    try:
        approx = float(value)
    except OverflowError:
        return False

    return math.isfinite(approx) and Fraction(approx) == value


def fraction_fits_single(value: Fraction) -> bool:
    """
    Точная представимость рационального значения в binary32.

    binary32 ⊂ binary64: всё, что точно помещается в single, сначала
    точно помещается в double.
    """
    if not fraction_fits_double(value):
        return False

    approx = float(value)
    return abs(approx) <= SINGLE_MAX and double_to_single(approx) == approx


# =============================================================================
# BEST-EFFORT ПРИВЕДЕНИЯ
# =============================================================================


def double_to_single(value: float) -> float:
    """
    Приведение binary64 → binary32 (результат хранится в Python float).

    Переполнение даёт ±inf, NaN сохраняется.
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def integer_to_double(value: int) -> float:
    """Целое → binary64 с округлением half even; переполнение даёт ±inf."""
    try:
        return float(value)
    except OverflowError:
        return -math.inf if value < 0 else math.inf


def integer_to_single(value: int) -> float:
    """
    Целое → binary32 с одним округлением (round half even).

    Округление до 24 значащих бит выполняется в целочисленной арифметике,
    поэтому двойного округления через binary64 не возникает.

    Examples:
        >>> integer_to_single(2**24 + 1)
        16777216.0
        >>> integer_to_single(2**24 + 3)
        16777220.0
    """
    magnitude = abs(value)
    excess = magnitude.bit_length() - SINGLE_PRECISION_BITS

    if excess > 0:
        quotient = magnitude >> excess
        remainder = magnitude & ((1 << excess) - 1)
        half = 1 << (excess - 1)
        if remainder > half or (remainder == half and quotient & 1):
            quotient += 1
        magnitude = quotient << excess

    if magnitude >= SINGLE_EXPONENT_LIMIT:
        result = math.inf
    else:
        result = float(magnitude)

    return -result if value < 0 else result


def truncate_fraction(value: Fraction) -> int:
    """Усечение к нулю."""
    return math.trunc(value)


def fraction_to_double(value: Fraction) -> float:
    """Fraction → binary64 с корректным округлением; переполнение даёт ±inf."""
    try:
        return float(value)
    except OverflowError:
        return -math.inf if value < 0 else math.inf
