"""
Rounding — преобразования рациональных значений с контролируемым округлением

Используется kinds, которые не всегда могут сконвертировать значение точно
(Fraction → Decimal, Decimal → ExtendedFloat). Правило одно: если точное
представление существует, возвращается оно; иначе выполняется одно
округление round half even до заданной точности.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal
from fractions import Fraction
from typing import Final

from src.core.math.exact_fit import DOUBLE_PRECISION_BITS

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ ПО УМОЛЧАНИЮ
# =============================================================================

# Decimal128: 34 значащих десятичных цифры
DECIMAL128_PRECISION_DIGITS: Final[int] = 34

# binary64: 53 значащих бита
BINARY64_PRECISION_BITS: Final[int] = DOUBLE_PRECISION_BITS


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConversionConfig:
    """
    Конфигурация неточных преобразований между kinds.

    decimal_precision — значащие цифры при Fraction → Decimal,
    если десятичная запись дроби бесконечна.
    binary_precision — значащие биты при Decimal/Fraction → ExtendedFloat,
    если знаменатель не степень двойки.
    """

    decimal_precision: int = DECIMAL128_PRECISION_DIGITS
    binary_precision: int = BINARY64_PRECISION_BITS

    def __post_init__(self) -> None:
        if self.decimal_precision <= 0:
            raise ValueError(f"decimal_precision must be positive, got {self.decimal_precision}")
        if self.binary_precision <= 0:
            raise ValueError(f"binary_precision must be positive, got {self.binary_precision}")


DEFAULT_CONVERSION_CONFIG: Final[ConversionConfig] = ConversionConfig()


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ПРЕДИКАТЫ
# =============================================================================


def is_power_of_two(value: int) -> bool:
    return value > 0 and (value & (value - 1)) == 0


def _strip_factor(value: int, factor: int) -> tuple[int, int]:
    count = 0
    while value % factor == 0:
        value //= factor
        count += 1
    return value, count


def has_terminating_decimal(value: Fraction) -> bool:
    """True если знаменатель содержит только простые множители 2 и 5."""
    rest, _ = _strip_factor(value.denominator, 2)
    rest, _ = _strip_factor(rest, 5)
    return rest == 1


# =============================================================================
# FRACTION → DECIMAL
# =============================================================================


def fraction_to_decimal(value: Fraction, precision: int = DECIMAL128_PRECISION_DIGITS) -> Decimal:
    """
    Конверсия Fraction → Decimal.

    Для знаменателей вида 2**a * 5**b результат точный при любой длине.
    Иначе частное округляется до precision значащих цифр (round half even).

    Args:
        value: Рациональное значение
        precision: Значащие цифры для неточного случая

    Returns:
        Decimal

    Examples:
        >>> fraction_to_decimal(Fraction(3, 8))
        Decimal('0.375')
        >>> fraction_to_decimal(Fraction(1, 3), precision=5)
        Decimal('0.33333')
    """
    if not has_terminating_decimal(value):
        context = Context(prec=precision, rounding=ROUND_HALF_EVEN)
        return context.divide(Decimal(value.numerator), Decimal(value.denominator))

    _, twos = _strip_factor(value.denominator, 2)
    _, fives = _strip_factor(value.denominator, 5)
    scale = max(twos, fives)
    scaled = value.numerator * (10**scale) // value.denominator

    sign = 1 if scaled < 0 else 0
    digits = tuple(int(ch) for ch in str(abs(scaled)))
    return Decimal((sign, digits, -scale))


# =============================================================================
# FRACTION → (MANTISSA, EXPONENT)
# =============================================================================


def round_fraction_to_binary(value: Fraction, precision: int) -> tuple[int, int]:
    """
    Округление дроби до precision значащих бит: value ≈ mantissa * 2**exponent.

    Одно округление round half even. Экспонента не ограничена.

    Args:
        value: Рациональное значение
        precision: Значащие биты мантиссы (> 0)

    Returns:
        (mantissa, exponent), mantissa несёт знак

    Raises:
        ValueError: Если precision <= 0
    """
    if precision <= 0:
        raise ValueError(f"precision must be positive, got {precision}")

    if value == 0:
        return 0, 0

    numerator = abs(value.numerator)
    denominator = value.denominator

    # n/d ∈ [2**(p-1), 2**(p+1)) после масштабирования на 2**-exponent
    exponent = numerator.bit_length() - denominator.bit_length() - precision
    while True:
        if exponent >= 0:
            quotient, remainder = divmod(numerator, denominator << exponent)
            divisor = denominator << exponent
        else:
            quotient, remainder = divmod(numerator << -exponent, denominator)
            divisor = denominator
        if quotient < (1 << precision):
            break
        exponent += 1

    twice = remainder * 2
    if twice > divisor or (twice == divisor and quotient & 1):
        quotient += 1
        if quotient == (1 << precision):
            quotient >>= 1
            exponent += 1

    return (-quotient if value < 0 else quotient), exponent
