"""
Contract Validation Module

Модуль для валидации JSON-представлений Integer и Decimal.
"""

from .validators import (
    DECIMAL_STRING_VALIDATOR,
    INTEGER_STRING_VALIDATOR,
    canonical_string_validator,
    validate_decimal_string,
    validate_integer_string,
)

__all__ = [
    # Validators
    "DECIMAL_STRING_VALIDATOR",
    "INTEGER_STRING_VALIDATOR",
    # Functions
    "canonical_string_validator",
    "validate_decimal_string",
    "validate_integer_string",
]
