"""
Contract Validation Module

Модуль для валидации и конверсии JSON представления NumberValue.
"""

from .interchange import (
    NUMBER_VALUE_SCHEMA_VERSION,
    number_value_from_contract,
    number_value_to_contract,
)
from .validators import (
    NUMBER_VALUE_SCHEMA_NAME,
    NUMBER_VALUE_VALIDATOR,
    SCHEMA_DIR,
    NumberValueValidator,
    load_schema,
    validate_number_value,
)

__all__ = [
    # Schema
    "SCHEMA_DIR",
    "NUMBER_VALUE_SCHEMA_NAME",
    "load_schema",
    # Validation
    "NumberValueValidator",
    "NUMBER_VALUE_VALIDATOR",
    "validate_number_value",
    # Interchange
    "NUMBER_VALUE_SCHEMA_VERSION",
    "number_value_to_contract",
    "number_value_from_contract",
]
