"""
Errors — иерархия исключений числового ядра CBOR кодека

Все ошибки, которые числовые kinds могут поднять наружу, наследуются от
CBORError. Значения-сентинелы не используются: неточное сужение всегда
заканчивается исключением.
"""


class CBORError(Exception):
    """Базовая ошибка, связанная с CBOR данными."""

    pass


class NumberOutOfRangeError(CBORError, ArithmeticError):
    """
    Значение не представимо в запрошенном формате.

    Поднимается при:
    1. as_int32 вне границ [min_value, max_value], заданных вызывающим
    2. as_int64 / as_big_integer / as_extended_rational для значений вне
       диапазона, NaN или бесконечности
    """

    DEFAULT_MESSAGE = "This object's value is out of range"

    def __init__(self, message: str = DEFAULT_MESSAGE):
        super().__init__(message)


class NotANumberError(CBORError, ValueError):
    """Операция не определена для NaN (например, sign)."""

    def __init__(self, message: str = "This object is not a number"):
        super().__init__(message)
