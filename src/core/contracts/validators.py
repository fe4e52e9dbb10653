"""
number_value Contract Validator

Проверка JSON формы NumberValue против contracts/schema/number_value.json.

Схема читается и проходит meta-validation один раз при импорте модуля;
после этого валидатор только читается, поэтому его можно вызывать
из нескольких потоков без блокировок.

Что проверяет схема:
- обязательные поля schema_version / kind / value, без лишних полей
- kind из NumberKindTag
- запись value соответствует kind (целое, n/d, mantissa p exponent, Decimal)

Диапазон int64 схема не проверяет: это делает модель Int64Value.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

# contracts/schema/ в корне проекта (src/core/contracts → 3 уровня вверх)
SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parents[3] / "contracts" / "schema"

NUMBER_VALUE_SCHEMA_NAME: Final[str] = "number_value"


def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Чтение схемы из SCHEMA_DIR с meta-validation по Draft 2020-12.

    Args:
        schema_name: Имя файла схемы без .json

    Returns:
        Схема как dict

    Raises:
        FileNotFoundError: Если файла схемы нет
        ValueError: Если файл не является корректной JSON Schema
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

    return schema


class NumberValueValidator:
    """
    Валидатор JSON формы NumberValue.

    Оборачивает Draft202012Validator, построенный по схеме number_value.
    """

    def __init__(self, schema: Dict[str, Any] | None = None):
        self.schema = load_schema(NUMBER_VALUE_SCHEMA_NAME) if schema is None else schema
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Наиболее релевантное нарушение схемы
                (например, value "1.5" для kind int64)
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)


NUMBER_VALUE_VALIDATOR: Final[NumberValueValidator] = NumberValueValidator()


def validate_number_value(data: Dict[str, Any]) -> None:
    """
    Проверка JSON формы NumberValue общим валидатором.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют контракту
    """
    NUMBER_VALUE_VALIDATOR.validate(data)
