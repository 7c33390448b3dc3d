"""
Canonical String Contracts

JSON Schema (Draft 2020-12) контракты JSON-представлений Integer и Decimal.
Схемы строятся из канонических паттернов literals, поэтому to_json(),
pydantic JSON Schema и эти контракты используют один источник.
"""

from typing import Any, Final

from jsonschema import Draft202012Validator

from levin_numbers.core.math.literals import (
    CANONICAL_DECIMAL_PATTERN,
    CANONICAL_INTEGER_PATTERN,
)

JSON_SCHEMA_DIALECT: Final[str] = "https://json-schema.org/draft/2020-12/schema"


def canonical_string_validator(pattern: str, title: str) -> Draft202012Validator:
    """
    Валидатор JSON-строки, полностью совпадающей с pattern.

    Схема проходит meta-validation до создания валидатора.

    Args:
        pattern: Регулярное выражение канонической формы (с якорями ^...$)
        title: Заголовок схемы

    Raises:
        jsonschema.SchemaError: Если собранная схема невалидна
    """
    schema = {
        "$schema": JSON_SCHEMA_DIALECT,
        "title": title,
        "type": "string",
        "pattern": pattern,
    }
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


DECIMAL_STRING_VALIDATOR: Final = canonical_string_validator(
    CANONICAL_DECIMAL_PATTERN, "Decimal canonical string"
)
INTEGER_STRING_VALIDATOR: Final = canonical_string_validator(
    CANONICAL_INTEGER_PATTERN, "Integer canonical string"
)


def validate_decimal_string(data: Any) -> None:
    """
    Валидация JSON-значения как канонической строки Decimal.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    DECIMAL_STRING_VALIDATOR.validate(data)


def validate_integer_string(data: Any) -> None:
    """
    Валидация JSON-значения как канонической строки Integer.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    INTEGER_STRING_VALIDATOR.validate(data)
