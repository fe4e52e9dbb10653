"""
Core math modules для CBOR числового ядра

Точные предикаты представимости, границы форматов и контролируемое округление.
"""

# Exact Fit
from src.core.math.exact_fit import (
    # Integer bounds
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    # Binary float parameters
    DOUBLE_EXPONENT_LIMIT,
    DOUBLE_MANTISSA_CAPACITY,
    DOUBLE_PRECISION_BITS,
    SINGLE_EXPONENT_LIMIT,
    SINGLE_MANTISSA_CAPACITY,
    SINGLE_MAX,
    SINGLE_PRECISION_BITS,
    # Range checks
    in_int32_range,
    in_int64_range,
    validate_int32_bounds,
    # Exact representability
    fraction_fits_double,
    fraction_fits_single,
    int64_fits_binary_float,
    int64_fits_double,
    int64_fits_single,
    integer_fits_binary_float,
    integer_fits_double,
    integer_fits_single,
    # Best-effort casts
    double_to_single,
    fraction_to_double,
    integer_to_double,
    integer_to_single,
    truncate_fraction,
)

# Rounding
from src.core.math.rounding import (
    BINARY64_PRECISION_BITS,
    DECIMAL128_PRECISION_DIGITS,
    DEFAULT_CONVERSION_CONFIG,
    ConversionConfig,
    fraction_to_decimal,
    has_terminating_decimal,
    is_power_of_two,
    round_fraction_to_binary,
)

__all__ = [
    # Exact Fit — Integer bounds
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    # Exact Fit — Binary float parameters
    "DOUBLE_EXPONENT_LIMIT",
    "DOUBLE_MANTISSA_CAPACITY",
    "DOUBLE_PRECISION_BITS",
    "SINGLE_EXPONENT_LIMIT",
    "SINGLE_MANTISSA_CAPACITY",
    "SINGLE_MAX",
    "SINGLE_PRECISION_BITS",
    # Exact Fit — Range checks
    "in_int32_range",
    "in_int64_range",
    "validate_int32_bounds",
    # Exact Fit — Exact representability
    "fraction_fits_double",
    "fraction_fits_single",
    "int64_fits_binary_float",
    "int64_fits_double",
    "int64_fits_single",
    "integer_fits_binary_float",
    "integer_fits_double",
    "integer_fits_single",
    # Exact Fit — Best-effort casts
    "double_to_single",
    "fraction_to_double",
    "integer_to_double",
    "integer_to_single",
    "truncate_fraction",
    # Rounding — Constants
    "BINARY64_PRECISION_BITS",
    "DECIMAL128_PRECISION_DIGITS",
    "DEFAULT_CONVERSION_CONFIG",
    # Rounding — Config
    "ConversionConfig",
    # Rounding — Functions
    "fraction_to_decimal",
    "has_terminating_decimal",
    "is_power_of_two",
    "round_fraction_to_binary",
]
