"""
Decimal — десятичное число с фиксированной точкой и явным scale

Значение представлено парой (mantissa, scale):
    value = mantissa × 10^(-scale),  scale >= 0

Модуль отвечает только за учёт scale поверх целочисленных примитивов
big_integer (trunc_divmod, pow10) и никогда не реализует арифметику
больших целых заново.

ОПЕРАЦИИ И SCALE:
    add / subtract:  выравнивание к max(a.scale, b.scale), затем нормализация
    multiply:        scale = a.scale + b.scale (точное тождество), нормализация
    divide:          усечение до precision дробных цифр, нормализация
    round:           scale = decimal_places, БЕЗ нормализации
    floor / ceil:    scale = 0
    abs / negate:    scale без изменений

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. scale >= 0 всегда
2. Нормализация (удаление хвостовых нулей мантиссы) не даёт scale расти
   в длинных цепочках операций
3. Равенство не зависит от scale: Decimal("5") == Decimal("5.00")
4. round — half up по МОДУЛЮ остатка: половина округляется от нуля (-3.5 → -4)
5. Нулевое значение никогда не печатается со знаком
"""

import logging
from typing import Final

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic_core import core_schema

from levin_numbers.core.math.big_integer import Integer, pow10, trunc_divmod
from levin_numbers.core.math.errors import DivisionByZero
from levin_numbers.core.math.literals import (
    CANONICAL_DECIMAL_PATTERN,
    coerce_decimal_parts,
    int_to_digits,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Количество дробных цифр результата divide по умолчанию
DEFAULT_DIVISION_PRECISION: Final[int] = 20

# Количество дробных цифр для round по умолчанию
DEFAULT_ROUND_PLACES: Final[int] = 0

# Типы операндов, допустимые для арифметических операторов (+, -, *, /, ==, <)
_OPERATOR_TYPES: Final = (int, Integer)


# =============================================================================
# DECIMAL
# =============================================================================


class Decimal:
    """
    Десятичное число произвольной точности.

    Принимает int, float, str, Integer или другой Decimal. Для строк
    и float scale выводится из количества дробных цифр литерала, если
    не задан явно.

    Immutable: присваивание атрибутов запрещено, все операции
    возвращают новый экземпляр.

    Examples:
        >>> Decimal("0.1").add("0.2").to_string()
        '0.3'
        >>> Decimal("19.99").multiply(Decimal("0.08").add("1")).round(2).to_string()
        '21.59'
    """

    __slots__ = ("_mantissa", "_scale")

    def __init__(self, value: "DecimalLike", scale: int | None = None):
        mantissa, resolved_scale = coerce_decimal_parts(value, scale)
        object.__setattr__(self, "_mantissa", mantissa)
        object.__setattr__(self, "_scale", resolved_scale)

    @classmethod
    def _from_parts(cls, mantissa: int, scale: int) -> "Decimal":
        # Внутренний конструктор: пара (mantissa, scale) уже окончательная
        instance = object.__new__(cls)
        object.__setattr__(instance, "_mantissa", mantissa)
        object.__setattr__(instance, "_scale", scale)
        return instance

    @classmethod
    def _coerce(cls, value: "DecimalLike") -> "Decimal":
        return cls._from_parts(*coerce_decimal_parts(value))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (self.__class__._from_parts, (self._mantissa, self._scale))

    def __copy__(self) -> "Decimal":
        return self

    def __deepcopy__(self, memo: dict) -> "Decimal":
        return self

    @property
    def mantissa(self) -> int:
        """Знаковая мантисса."""
        return self._mantissa

    @property
    def scale(self) -> int:
        """Количество дробных цифр (>= 0)."""
        return self._scale

    # -------------------------------------------------------------------------
    # Внутренние помощники
    # -------------------------------------------------------------------------

    def _normalize(self) -> "Decimal":
        """
        Удаление хвостовых нулей мантиссы с уменьшением scale (до 0).

        Examples:
            12.300 (12300, 3) → 12.3 (123, 1)
            0.000  (0, 3)     → 0    (0, 0)
        """
        if self._scale == 0:
            return self

        if self._mantissa == 0:
            return Decimal._from_parts(0, 0)

        mantissa, scale = self._mantissa, self._scale
        while scale > 0:
            quotient, remainder = divmod(mantissa, 10)
            if remainder != 0:
                break
            mantissa, scale = quotient, scale - 1

        if scale == self._scale:
            return self
        return Decimal._from_parts(mantissa, scale)

    @staticmethod
    def _align(a: "Decimal", b: "Decimal") -> tuple[int, int, int]:
        """
        Выравнивание scale двух операндов.

        Мантисса операнда с меньшим scale умножается на 10^(разница scale).

        Returns:
            (mantissa_a, mantissa_b, common_scale)
        """
        if a._scale == b._scale:
            return a._mantissa, b._mantissa, a._scale

        if a._scale > b._scale:
            return a._mantissa, b._mantissa * pow10(a._scale - b._scale), a._scale

        return a._mantissa * pow10(b._scale - a._scale), b._mantissa, b._scale

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "DecimalLike") -> "Decimal":
        """Сложение с выравниванием scale; результат нормализован."""
        a, b, scale = Decimal._align(self, Decimal._coerce(other))
        return Decimal._from_parts(a + b, scale)._normalize()

    def subtract(self, other: "DecimalLike") -> "Decimal":
        """Вычитание с выравниванием scale; результат нормализован."""
        a, b, scale = Decimal._align(self, Decimal._coerce(other))
        return Decimal._from_parts(a - b, scale)._normalize()

    def multiply(self, other: "DecimalLike") -> "Decimal":
        """
        Умножение: мантиссы перемножаются, scale складываются.

        Выравнивание не требуется; результат точный и нормализованный.
        """
        operand = Decimal._coerce(other)
        return Decimal._from_parts(
            self._mantissa * operand._mantissa, self._scale + operand._scale
        )._normalize()

    def divide(
        self, other: "DecimalLike", precision: int = DEFAULT_DIVISION_PRECISION
    ) -> "Decimal":
        """
        Деление с заданной точностью.

        Результат усекается (к нулю) до ровно precision дробных цифр, затем
        нормализуется (scale может оказаться меньше precision).

        Алгоритм:
            a / b = (ma / mb) × 10^(sb - sa)
            mantissa = trunc(ma × 10^(precision - sa + sb) / mb),  scale = precision
        При отрицательном показателе степень десяти переносится в делитель.

        Args:
            other: Делитель
            precision: Количество дробных цифр результата (default: 20)

        Raises:
            DivisionByZero: Если мантисса делителя равна 0
            ValueError: Если precision отрицательный

        Examples:
            >>> Decimal("1").divide("3", 10).to_string()
            '0.3333333333'
            >>> Decimal("10").divide("0.5").to_string()
            '20'
        """
        if precision < 0:
            raise ValueError(f"precision must be non-negative, got {precision}")

        divisor = Decimal._coerce(other)
        if divisor._mantissa == 0:
            logger.debug("Decimal division by zero: dividend=%s", self)
            raise DivisionByZero("Division by zero")

        numerator, denominator = self._mantissa, divisor._mantissa
        shift = precision - self._scale + divisor._scale
        if shift >= 0:
            numerator *= pow10(shift)
        else:
            denominator *= pow10(-shift)

        quotient, _ = trunc_divmod(numerator, denominator)
        return Decimal._from_parts(quotient, precision)._normalize()

    def round(self, decimal_places: int = DEFAULT_ROUND_PLACES) -> "Decimal":
        """
        Округление до decimal_places дробных цифр (round half up по модулю).

        Если decimal_places >= scale, возвращается self без дополнения нулями.
        Иначе остаток сравнивается по модулю с половиной делителя: при
        |remainder| >= divisor / 2 частное сдвигается ОТ нуля. Для
        отрицательных значений это даёт "half away from zero": -3.5 → -4.

        Результат НЕ нормализуется: scale == decimal_places.

        Raises:
            ValueError: Если decimal_places отрицательный

        Examples:
            >>> Decimal("3.14559").round(2).to_string()
            '3.15'
            >>> Decimal("-3.5").round().to_string()
            '-4'
        """
        if decimal_places < 0:
            raise ValueError(f"decimal_places must be non-negative, got {decimal_places}")

        if decimal_places >= self._scale:
            return self

        divisor = pow10(self._scale - decimal_places)
        quotient, remainder = trunc_divmod(self._mantissa, divisor)

        half_divisor = divisor // 2
        if abs(remainder) >= half_divisor:
            quotient += 1 if self._mantissa > 0 else -1

        return Decimal._from_parts(quotient, decimal_places)

    def floor(self) -> "Decimal":
        """
        Округление к -inf; результат со scale 0.

        Examples:
            >>> Decimal("-3.7").floor().to_string()
            '-4'
        """
        quotient, remainder = trunc_divmod(self._mantissa, pow10(self._scale))
        if remainder != 0 and self._mantissa < 0:
            quotient -= 1
        return Decimal._from_parts(quotient, 0)

    def ceil(self) -> "Decimal":
        """
        Округление к +inf; результат со scale 0.

        Examples:
            >>> Decimal("-3.2").ceil().to_string()
            '-3'
        """
        quotient, remainder = trunc_divmod(self._mantissa, pow10(self._scale))
        if remainder != 0 and self._mantissa > 0:
            quotient += 1
        return Decimal._from_parts(quotient, 0)

    def abs(self) -> "Decimal":
        """Модуль; для неотрицательного значения возвращает self."""
        if self._mantissa < 0:
            return Decimal._from_parts(-self._mantissa, self._scale)
        return self

    def negate(self) -> "Decimal":
        return Decimal._from_parts(-self._mantissa, self._scale)

    # -------------------------------------------------------------------------
    # Сравнения (scale-независимые)
    # -------------------------------------------------------------------------

    def compare(self, other: "DecimalLike") -> int:
        """
        Трёхзначное сравнение после выравнивания scale.

        Returns:
            -1 если self < other, 0 если равны, 1 если self > other
        """
        a, b, _ = Decimal._align(self, Decimal._coerce(other))
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def equals(self, other: "DecimalLike") -> bool:
        return self.compare(other) == 0

    def lt(self, other: "DecimalLike") -> bool:
        return self.compare(other) < 0

    def lte(self, other: "DecimalLike") -> bool:
        return self.compare(other) <= 0

    def gt(self, other: "DecimalLike") -> bool:
        return self.compare(other) > 0

    def gte(self, other: "DecimalLike") -> bool:
        return self.compare(other) >= 0

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self._mantissa == 0

    def is_positive(self) -> bool:
        return self._mantissa > 0

    def is_negative(self) -> bool:
        return self._mantissa < 0

    def sign(self) -> int:
        """Знак: -1, 0 или 1 (scale не влияет)."""
        if self._mantissa > 0:
            return 1
        if self._mantissa < 0:
            return -1
        return 0

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """
        Каноническая строка.

        Точка вставляется за scale цифр от правого края модуля мантиссы,
        при нехватке цифр слева добавляются нули; хвостовые нули дробной
        части (и сама точка при пустой дробной части) удаляются.

        Examples:
            >>> Decimal._from_parts(-5, 3).to_string()
            '-0.005'
            >>> Decimal("3.140").to_string()
            '3.14'
        """
        digits = int_to_digits(abs(self._mantissa))

        if self._scale == 0:
            text = digits
        else:
            padded = digits.rjust(self._scale + 1, "0")
            integer_part = padded[: -self._scale]
            fractional_part = padded[-self._scale :].rstrip("0")
            text = f"{integer_part}.{fractional_part}" if fractional_part else integer_part

        return "-" + text if self._mantissa < 0 else text

    def to_number(self) -> float:
        """Конверсия в float через каноническую строку (возможна потеря точности)."""
        return float(self.to_string())

    def to_json(self) -> str:
        """JSON-представление: каноническая строка."""
        return self.to_string()

    # -------------------------------------------------------------------------
    # Python data model
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Decimal('{self.to_string()}')"

    def __hash__(self) -> int:
        # Согласован со scale-независимым равенством и с hash(int)
        normalized = self._normalize()
        if normalized._scale == 0:
            return hash(normalized._mantissa)
        return hash((normalized._mantissa, normalized._scale))

    def __bool__(self) -> bool:
        return self._mantissa != 0

    def __int__(self) -> int:
        # Усечение к нулю
        quotient, _ = trunc_divmod(self._mantissa, pow10(self._scale))
        return quotient

    def __float__(self) -> float:
        return self.to_number()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Decimal, *_OPERATOR_TYPES)):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (Decimal, *_OPERATOR_TYPES)):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, (Decimal, *_OPERATOR_TYPES)):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, (Decimal, *_OPERATOR_TYPES)):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, (Decimal, *_OPERATOR_TYPES)):
            return NotImplemented
        return self.gte(other)

    def __add__(self, other: object) -> "Decimal":
        if not isinstance(other, (Decimal, *_OPERATOR_TYPES)):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Decimal":
        if not isinstance(other, (Decimal, *_OPERATOR_TYPES)):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: object) -> "Decimal":
        if not isinstance(other, _OPERATOR_TYPES):
            return NotImplemented
        return Decimal._coerce(other).subtract(self)

    def __mul__(self, other: object) -> "Decimal":
        if not isinstance(other, (Decimal, *_OPERATOR_TYPES)):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Decimal":
        if not isinstance(other, (Decimal, *_OPERATOR_TYPES)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: object) -> "Decimal":
        if not isinstance(other, _OPERATOR_TYPES):
            return NotImplemented
        return Decimal._coerce(other).divide(self)

    def __neg__(self) -> "Decimal":
        return self.negate()

    def __pos__(self) -> "Decimal":
        return self

    def __abs__(self) -> "Decimal":
        return self.abs()

    def __round__(self, ndigits: int | None = None) -> "int | Decimal":
        # round(x) без ndigits возвращает int, round(x, n) - Decimal
        if ndigits is None:
            return int(self.round(DEFAULT_ROUND_PLACES))
        return self.round(ndigits)

    # -------------------------------------------------------------------------
    # pydantic integration
    # -------------------------------------------------------------------------

    @classmethod
    def _validate(cls, value: object) -> "Decimal":
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
        return {"type": "string", "pattern": CANONICAL_DECIMAL_PATTERN}


DecimalLike = int | float | str | Integer | Decimal


@coerce_decimal_parts.register(Decimal)
def _decimal_parts_from_decimal(value: Decimal, scale: int | None = None) -> tuple[int, int]:
    # Копия сохраняет (mantissa, scale); явный scale игнорируется
    return value.mantissa, value.scale


@coerce_decimal_parts.register(Integer)
def _decimal_parts_from_integer(value: Integer, scale: int | None = None) -> tuple[int, int]:
    return coerce_decimal_parts(value.to_int(), scale)
