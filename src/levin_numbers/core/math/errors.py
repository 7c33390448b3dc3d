"""
Numeric Errors — таксономия ошибок арифметического ядра

Все ошибки поднимаются синхронно в той операции, которая их вызвала,
и пропагируют к вызывающему коду без повторов и подавления.

ИЕРАРХИЯ:
    NumericError
    ├── DivisionByZero   (также ZeroDivisionError)
    ├── InvalidExponent  (также ValueError)
    └── MalformedLiteral (также ValueError)
"""


class NumericError(Exception):
    """Базовая ошибка для всех отказов Integer/Decimal."""

    pass


class DivisionByZero(NumericError, ZeroDivisionError):
    """
    Делитель равен нулю.

    Поднимается Integer.divide / Integer.mod и Decimal.divide, когда
    underlying значение делителя в точности равно 0.
    """

    pass


class InvalidExponent(NumericError, ValueError):
    """Отрицательный показатель степени в Integer.pow."""

    def __init__(self, exponent: int):
        self.exponent = exponent
        super().__init__(f"Exponent must be non-negative, got {exponent}")


class MalformedLiteral(NumericError, ValueError):
    """
    Литерал не может быть разобран как число произвольной точности.

    Attributes:
        literal: Исходный литерал (строка или float), вызвавший ошибку
    """

    def __init__(self, literal: object, reason: str = "not a valid numeric literal"):
        self.literal = literal
        self.reason = reason
        super().__init__(f"Malformed literal {literal!r}: {reason}")
