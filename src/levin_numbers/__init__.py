"""
levin-numbers — Integer и Decimal с примитивоподобным API

Arbitrary precision для целых (без ограничения разрядности) и точная
десятичная арифметика без ошибок float:

    >>> from levin_numbers import Decimal, Int
    >>> Decimal("0.1").add("0.2").to_string()
    '0.3'
    >>> Int("99999999999999999999").add(1).to_string()
    '100000000000000000000'
"""

from levin_numbers.core.math import (
    Decimal,
    DivisionByZero,
    Int,
    Integer,
    InvalidExponent,
    MalformedLiteral,
    NumericError,
)

__version__ = "1.0.0"

__all__ = [
    "Decimal",
    "Int",
    "Integer",
    "NumericError",
    "DivisionByZero",
    "InvalidExponent",
    "MalformedLiteral",
]
