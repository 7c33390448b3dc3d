"""
Core math modules для levin-numbers

Арифметическое ядро произвольной точности: Integer и Decimal.
"""

# Errors
from levin_numbers.core.math.errors import (
    DivisionByZero,
    InvalidExponent,
    MalformedLiteral,
    NumericError,
)

# Literals
from levin_numbers.core.math.literals import (
    CANONICAL_DECIMAL_PATTERN,
    CANONICAL_INTEGER_PATTERN,
    DIGIT_CHUNK_SIZE,
    coerce_decimal_parts,
    coerce_int,
    digits_to_int,
    float_to_literal,
    int_to_digits,
    parse_integer_literal,
    split_decimal_literal,
)

# Integer
from levin_numbers.core.math.big_integer import (
    DEFAULT_RADIX,
    MAX_RADIX,
    MIN_RADIX,
    Int,
    Integer,
    IntegerLike,
    pow10,
    trunc_divmod,
)

# Decimal
from levin_numbers.core.math.scaled_decimal import (
    DEFAULT_DIVISION_PRECISION,
    DEFAULT_ROUND_PLACES,
    Decimal,
    DecimalLike,
)

__all__ = [
    # Errors
    "NumericError",
    "DivisionByZero",
    "InvalidExponent",
    "MalformedLiteral",
    # Literals — Constants
    "CANONICAL_DECIMAL_PATTERN",
    "CANONICAL_INTEGER_PATTERN",
    "DIGIT_CHUNK_SIZE",
    # Literals — Functions
    "coerce_decimal_parts",
    "coerce_int",
    "digits_to_int",
    "float_to_literal",
    "int_to_digits",
    "parse_integer_literal",
    "split_decimal_literal",
    # Integer — Constants
    "DEFAULT_RADIX",
    "MAX_RADIX",
    "MIN_RADIX",
    # Integer — Types
    "Int",
    "Integer",
    "IntegerLike",
    # Integer — Primitives
    "pow10",
    "trunc_divmod",
    # Decimal — Constants
    "DEFAULT_DIVISION_PRECISION",
    "DEFAULT_ROUND_PLACES",
    # Decimal — Types
    "Decimal",
    "DecimalLike",
]
