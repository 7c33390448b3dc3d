"""
Integer — целое число произвольной точности

Immutable value type поверх встроенного int с примитивоподобным API:
add/subtract/multiply/divide/mod/pow, сравнения, предикаты и конверсии.

Также содержит целочисленные примитивы, на которых строится Decimal:
- trunc_divmod: деление с усечением к нулю (а не к -inf, как у //)
- pow10: степени десяти для выравнивания scale

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление усекается к нулю: -10 / 3 = -3, -10 % 3 = -1 (знак остатка = знак делимого)
2. a == b * (a / b) + (a % b) для всех b != 0
3. Делитель 0 → DivisionByZero; отрицательная степень → InvalidExponent
4. Каждая операция возвращает новый экземпляр; экземпляры не изменяются
"""

import logging
import math
from functools import lru_cache
from typing import Final

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic_core import core_schema

from levin_numbers.core.math.errors import DivisionByZero, InvalidExponent
from levin_numbers.core.math.literals import (
    CANONICAL_INTEGER_PATTERN,
    coerce_int,
    int_to_digits,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

DEFAULT_RADIX: Final[int] = 10
MIN_RADIX: Final[int] = 2
MAX_RADIX: Final[int] = 36

_DIGIT_ALPHABET: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ПРИМИТИВЫ
# =============================================================================


def trunc_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """
    Деление с усечением частного к нулю.

    Встроенные // и % округляют к -inf; здесь частное усекается к нулю,
    а остаток наследует знак делимого.

    Args:
        dividend: Делимое
        divisor: Делитель (!= 0)

    Returns:
        (quotient, remainder), где dividend == divisor * quotient + remainder

    Raises:
        DivisionByZero: Если divisor == 0

    Examples:
        >>> trunc_divmod(-10, 3)
        (-3, -1)
        >>> trunc_divmod(10, -3)
        (-3, 1)
    """
    if divisor == 0:
        logger.debug("Division by zero: dividend_bits=%d", dividend.bit_length())
        raise DivisionByZero("Division by zero")

    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient

    return quotient, dividend - divisor * quotient


@lru_cache(maxsize=256)
def pow10(exponent: int) -> int:
    """10 ** exponent для exponent >= 0."""
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    return 10**exponent


# =============================================================================
# INTEGER
# =============================================================================


class Integer:
    """
    Целое число произвольной точности.

    Принимает int, float (усечение к нулю), str или другой Integer.
    Immutable: присваивание атрибутов запрещено, все операции
    возвращают новый экземпляр.

    Examples:
        >>> Integer(42).add(8).multiply(2).to_string()
        '100'
        >>> Integer("18446744073709551615").add(1).to_string()
        '18446744073709551616'
    """

    __slots__ = ("_value",)

    def __init__(self, value: "IntegerLike"):
        object.__setattr__(self, "_value", coerce_int(value))

    @classmethod
    def _from_int(cls, value: int) -> "Integer":
        # Внутренний конструктор: значение уже канонично
        instance = object.__new__(cls)
        object.__setattr__(instance, "_value", value)
        return instance

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (self.__class__._from_int, (self._value,))

    def __copy__(self) -> "Integer":
        return self

    def __deepcopy__(self, memo: dict) -> "Integer":
        return self

    @property
    def value(self) -> int:
        """Знаковое значение."""
        return self._value

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "IntegerLike") -> "Integer":
        """Сложение."""
        return Integer._from_int(self._value + coerce_int(other))

    def subtract(self, other: "IntegerLike") -> "Integer":
        """Вычитание."""
        return Integer._from_int(self._value - coerce_int(other))

    def multiply(self, other: "IntegerLike") -> "Integer":
        """Умножение."""
        return Integer._from_int(self._value * coerce_int(other))

    def divide(self, other: "IntegerLike") -> "Integer":
        """
        Целочисленное деление с усечением к нулю.

        Raises:
            DivisionByZero: Если делитель равен 0

        Examples:
            >>> Integer(-10).divide(3).to_string()
            '-3'
        """
        quotient, _ = trunc_divmod(self._value, coerce_int(other))
        return Integer._from_int(quotient)

    def mod(self, other: "IntegerLike") -> "Integer":
        """
        Остаток, согласованный с divide (знак следует за делимым).

        Raises:
            DivisionByZero: Если делитель равен 0
        """
        _, remainder = trunc_divmod(self._value, coerce_int(other))
        return Integer._from_int(remainder)

    def pow(self, exponent: "IntegerLike") -> "Integer":
        """
        Возведение в неотрицательную целую степень.

        x ** 0 == 1 для любого x, включая 0.

        Raises:
            InvalidExponent: Если exponent < 0
        """
        exp = coerce_int(exponent)
        if exp < 0:
            logger.debug(
                "Negative exponent rejected: base_bits=%d exponent=%d",
                self._value.bit_length(),
                exp,
            )
            raise InvalidExponent(exp)
        return Integer._from_int(self._value**exp)

    def abs(self) -> "Integer":
        return Integer._from_int(abs(self._value))

    def negate(self) -> "Integer":
        return Integer._from_int(-self._value)

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def equals(self, other: "IntegerLike") -> bool:
        return self._value == coerce_int(other)

    def lt(self, other: "IntegerLike") -> bool:
        return self._value < coerce_int(other)

    def lte(self, other: "IntegerLike") -> bool:
        return self._value <= coerce_int(other)

    def gt(self, other: "IntegerLike") -> bool:
        return self._value > coerce_int(other)

    def gte(self, other: "IntegerLike") -> bool:
        return self._value >= coerce_int(other)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self._value == 0

    def is_positive(self) -> bool:
        return self._value > 0

    def is_negative(self) -> bool:
        return self._value < 0

    def is_even(self) -> bool:
        return self._value % 2 == 0

    def is_odd(self) -> bool:
        return self._value % 2 != 0

    def sign(self) -> int:
        """Знак: -1, 0 или 1."""
        if self._value > 0:
            return 1
        if self._value < 0:
            return -1
        return 0

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_string(self, radix: int = DEFAULT_RADIX) -> str:
        """
        Каноническое строковое представление в заданной системе счисления.

        Без ведущих нулей, '-' только для отрицательных, ноль → "0".
        Цифры старше 9 — строчные латинские буквы.

        Args:
            radix: Основание системы счисления (2..36, default: 10)

        Raises:
            ValueError: Если radix вне диапазона 2..36

        Examples:
            >>> Integer(255).to_string(16)
            'ff'
            >>> Integer(-8).to_string(2)
            '-1000'
        """
        if not MIN_RADIX <= radix <= MAX_RADIX:
            raise ValueError(f"radix must be between {MIN_RADIX} and {MAX_RADIX}, got {radix}")

        if radix == 10:
            return int_to_digits(self._value)

        magnitude = abs(self._value)
        if magnitude == 0:
            return "0"

        digits = []
        while magnitude:
            magnitude, digit = divmod(magnitude, radix)
            digits.append(_DIGIT_ALPHABET[digit])

        if self._value < 0:
            digits.append("-")
        return "".join(reversed(digits))

    def to_number(self) -> float:
        """
        Конверсия в float (возможна потеря точности для больших значений).

        Значения за пределами диапазона float дают ±inf, как и Decimal.to_number.

        Examples:
            >>> Integer("1" + "0" * 400).to_number()
            inf
        """
        try:
            return float(self._value)
        except OverflowError:
            return math.inf if self._value > 0 else -math.inf

    def to_int(self) -> int:
        """Точное значение как встроенный int."""
        return self._value

    def to_json(self) -> str:
        """JSON-представление: каноническая строка."""
        return self.to_string()

    # -------------------------------------------------------------------------
    # Python data model
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Integer({self.to_string()})"

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __float__(self) -> float:
        return self.to_number()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (int, Integer)):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (int, Integer)):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (int, Integer)):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, (int, Integer)):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (int, Integer)):
            return NotImplemented
        return self.gte(other)

    def __add__(self, other: object) -> "Integer":
        if not isinstance(other, (int, Integer)):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Integer":
        if not isinstance(other, (int, Integer)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: object) -> "Integer":
        if not isinstance(other, int):
            return NotImplemented
        return Integer._from_int(other).subtract(self)

    def __mul__(self, other: object) -> "Integer":
        if not isinstance(other, (int, Integer)):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    # /, // и % следуют усекающей семантике divide/mod, а не семантике int
    def __truediv__(self, other: object) -> "Integer":
        if not isinstance(other, (int, Integer)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: object) -> "Integer":
        if not isinstance(other, int):
            return NotImplemented
        return Integer._from_int(other).divide(self)

    def __floordiv__(self, other: object) -> "Integer":
        if not isinstance(other, (int, Integer)):
            return NotImplemented
        return self.divide(other)

    def __rfloordiv__(self, other: object) -> "Integer":
        if not isinstance(other, int):
            return NotImplemented
        return Integer._from_int(other).divide(self)

    def __mod__(self, other: object) -> "Integer":
        if not isinstance(other, (int, Integer)):
            return NotImplemented
        return self.mod(other)

    def __rmod__(self, other: object) -> "Integer":
        if not isinstance(other, int):
            return NotImplemented
        return Integer._from_int(other).mod(self)

    def __divmod__(self, other: object) -> tuple["Integer", "Integer"]:
        if not isinstance(other, (int, Integer)):
            return NotImplemented
        quotient, remainder = trunc_divmod(self._value, coerce_int(other))
        return Integer._from_int(quotient), Integer._from_int(remainder)

    def __pow__(self, exponent: object) -> "Integer":
        if not isinstance(exponent, (int, Integer)):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> "Integer":
        return self.negate()

    def __pos__(self) -> "Integer":
        return self

    def __abs__(self) -> "Integer":
        return self.abs()

    # -------------------------------------------------------------------------
    # pydantic integration
    # -------------------------------------------------------------------------

    @classmethod
    def _validate(cls, value: object) -> "Integer":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: object, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> dict:
        return {"type": "string", "pattern": CANONICAL_INTEGER_PATTERN}


# Краткий алиас, как у примитивного типа
Int = Integer

IntegerLike = int | float | str | Integer


@coerce_int.register(Integer)
def _coerce_int_from_integer(value: Integer) -> int:
    return value.to_int()
