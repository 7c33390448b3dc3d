"""
Literals — единая точка коэрции входных значений

Каждая публичная операция Integer/Decimal принимает операнд одной из форм:
int, float, str или значение того же типа. Этот модуль выполняет
нормализацию "любая допустимая форма → каноническое внутреннее представление"
ровно один раз на входе операции:

- coerce_int: форма → int (для Integer)
- coerce_decimal_parts: форма → (mantissa, scale) (для Decimal)

Диспетчеризация по типу операнда выполняется через functools.singledispatch:
Integer и Decimal регистрируют собственные ветки в своих модулях.

ГРАММАТИКА ЛИТЕРАЛА:
    [пробелы] [+|-] digits [. digits] [пробелы]
    (хотя бы одна цифра; ".5" и "5." допустимы)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Дробная часть при явном scale дополняется нулями или обрезается (без округления)
2. Любой невалидный литерал → MalformedLiteral (без молчаливой подстановки)
3. Преобразование строка ↔ int не зависит от лимита int_max_str_digits
"""

import logging
import math
import re
from functools import singledispatch
from typing import Final

from levin_numbers.core.math.errors import MalformedLiteral

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Размер блока цифр при конверсии очень длинных чисел.
# Должен быть меньше sys.int_max_str_digits (4300 по умолчанию)
DIGIT_CHUNK_SIZE: Final[int] = 1000
_DIGIT_CHUNK_BASE: Final[int] = 10**DIGIT_CHUNK_SIZE

# Канонические строковые формы (используются JSON Schema и pydantic)
CANONICAL_INTEGER_PATTERN: Final[str] = r"^(0|-?[1-9][0-9]*)$"
CANONICAL_DECIMAL_PATTERN: Final[str] = (
    r"^(0|-?(0\.[0-9]*[1-9]|[1-9][0-9]*(\.[0-9]*[1-9])?))$"
)

_INTEGER_LITERAL: Final = re.compile(r"([+-]?)([0-9]+)")
_DECIMAL_LITERAL: Final = re.compile(r"([+-]?)([0-9]*)(?:\.([0-9]*))?")


# =============================================================================
# DIGIT STRING ↔ INT
# =============================================================================


def digits_to_int(digits: str) -> int:
    """
    Конверсия строки ASCII-цифр в неотрицательный int.

    Длинные строки собираются блоками по DIGIT_CHUNK_SIZE цифр,
    чтобы не упираться в лимит int_max_str_digits.

    Args:
        digits: Непустая строка из символов 0-9

    Returns:
        Неотрицательное целое
    """
    if len(digits) <= DIGIT_CHUNK_SIZE:
        return int(digits)

    head = len(digits) % DIGIT_CHUNK_SIZE or DIGIT_CHUNK_SIZE
    result = int(digits[:head])
    for start in range(head, len(digits), DIGIT_CHUNK_SIZE):
        result = result * _DIGIT_CHUNK_BASE + int(digits[start : start + DIGIT_CHUNK_SIZE])
    return result


def int_to_digits(value: int) -> str:
    """
    Конверсия int в десятичную строку без ведущих нулей.

    Examples:
        >>> int_to_digits(0)
        '0'
        >>> int_to_digits(-1200)
        '-1200'
    """
    if value < 0:
        return "-" + int_to_digits(-value)

    if value < _DIGIT_CHUNK_BASE:
        return str(value)

    chunks = []
    while value >= _DIGIT_CHUNK_BASE:
        value, low = divmod(value, _DIGIT_CHUNK_BASE)
        chunks.append(str(low).zfill(DIGIT_CHUNK_SIZE))
    chunks.append(str(value))
    return "".join(reversed(chunks))


# =============================================================================
# РАЗБОР ЛИТЕРАЛОВ
# =============================================================================


def parse_integer_literal(text: str) -> int:
    """
    Разбор целочисленного литерала.

    Args:
        text: Строка вида "[+-]digits" (пробелы по краям допустимы)

    Returns:
        Знаковое целое произвольной точности

    Raises:
        MalformedLiteral: Если строка не является целым литералом

    Examples:
        >>> parse_integer_literal("18446744073709551616")
        18446744073709551616
        >>> parse_integer_literal("-042")
        -42
    """
    match = _INTEGER_LITERAL.fullmatch(text.strip())
    if match is None:
        logger.debug("Rejected integer literal %r", text)
        raise MalformedLiteral(text, "expected an optionally signed digit string")

    sign, digits = match.groups()
    value = digits_to_int(digits)
    return -value if sign == "-" else value


def split_decimal_literal(text: str, scale: int | None = None) -> tuple[int, int]:
    """
    Разбор десятичного литерала в пару (mantissa, scale).

    Литерал делится по десятичной точке на целую и дробную части.
    Если scale не задан, он равен длине дробной части. Если задан —
    дробная часть дополняется нулями справа или обрезается (НЕ округляется)
    до ровно scale цифр. Мантисса = целая часть + скорректированная дробная.

    Args:
        text: Десятичный литерал, например "-3.14"
        scale: Явное количество дробных цифр (optional, >= 0)

    Returns:
        (mantissa, scale)

    Raises:
        MalformedLiteral: Если строка не является десятичным литералом
        ValueError: Если scale отрицательный

    Examples:
        >>> split_decimal_literal("3.14")
        (314, 2)
        >>> split_decimal_literal("3.14159", scale=2)
        (314, 2)
        >>> split_decimal_literal("-1.5", scale=3)
        (-1500, 3)
    """
    if scale is not None and scale < 0:
        raise ValueError(f"scale must be non-negative, got {scale}")

    match = _DECIMAL_LITERAL.fullmatch(text.strip())
    if match is None or not (match.group(2) or match.group(3)):
        logger.debug("Rejected decimal literal %r", text)
        raise MalformedLiteral(text, "expected digits with at most one decimal point")

    sign, integer_part, fractional_part = match.groups()
    fractional_part = fractional_part or ""

    if scale is None:
        scale = len(fractional_part)

    # Pad/truncate, never round
    adjusted = fractional_part.ljust(scale, "0")[:scale]
    combined = (integer_part + adjusted) or "0"

    mantissa = digits_to_int(combined)
    return (-mantissa if sign == "-" else mantissa), scale


def float_to_literal(value: float) -> str:
    """
    Конверсия float в десятичный литерал без экспоненты.

    Использует кратчайшее round-trip представление (repr), раскрывая
    экспоненциальную запись в позиционную и убирая хвост ".0" у целых.

    Raises:
        MalformedLiteral: Для NaN и Infinity (не представимы)

    Examples:
        >>> float_to_literal(0.5)
        '0.5'
        >>> float_to_literal(100.0)
        '100'
        >>> float_to_literal(1e-07)
        '0.0000001'
    """
    if not math.isfinite(value):
        logger.debug("Rejected non-finite float %r", value)
        raise MalformedLiteral(value, "NaN and Infinity are not representable")

    text = repr(value)

    if "e" in text:
        significand, exponent = text.split("e")
        sign = "-" if significand.startswith("-") else ""
        integer_part, _, fractional_part = significand.lstrip("-").partition(".")
        digits = integer_part + fractional_part
        point = len(integer_part) + int(exponent)

        if point <= 0:
            text = sign + "0." + "0" * (-point) + digits
        elif point >= len(digits):
            text = sign + digits + "0" * (point - len(digits))
        else:
            text = sign + digits[:point] + "." + digits[point:]

    if text.endswith(".0"):
        text = text[:-2]

    return text


# =============================================================================
# КОЭРЦИЯ ОПЕРАНДОВ
# =============================================================================


@singledispatch
def coerce_int(value: object) -> int:
    """
    Коэрция допустимого операнда Integer в int.

    - int → как есть
    - float → усечение к нулю (42.7 → 42, -42.7 → -42)
    - str → parse_integer_literal
    - Integer → внутреннее значение (регистрируется в big_integer)

    Raises:
        TypeError: Для неподдерживаемых типов
        MalformedLiteral: Для невалидных строк и NaN/Infinity
    """
    raise TypeError(f"Unsupported operand type for Integer: {type(value).__name__}")


@coerce_int.register(int)
def _coerce_int_from_int(value: int) -> int:
    return int(value)


@coerce_int.register(float)
def _coerce_int_from_float(value: float) -> int:
    if not math.isfinite(value):
        logger.debug("Rejected non-finite float %r", value)
        raise MalformedLiteral(value, "NaN and Infinity are not representable")
    return math.trunc(value)


@coerce_int.register(str)
def _coerce_int_from_str(value: str) -> int:
    return parse_integer_literal(value)


@singledispatch
def coerce_decimal_parts(value: object, scale: int | None = None) -> tuple[int, int]:
    """
    Коэрция допустимого операнда Decimal в пару (mantissa, scale).

    - int → (value, 0), при явном scale — (value * 10**scale, scale)
    - float → float_to_literal → split_decimal_literal
    - str → split_decimal_literal
    - Decimal / Integer → регистрируются в scaled_decimal

    Raises:
        TypeError: Для неподдерживаемых типов
        MalformedLiteral: Для невалидных строк и NaN/Infinity
    """
    raise TypeError(f"Unsupported operand type for Decimal: {type(value).__name__}")


@coerce_decimal_parts.register(int)
def _decimal_parts_from_int(value: int, scale: int | None = None) -> tuple[int, int]:
    if scale is None:
        return int(value), 0
    if scale < 0:
        raise ValueError(f"scale must be non-negative, got {scale}")
    return int(value) * 10**scale, scale


@coerce_decimal_parts.register(float)
def _decimal_parts_from_float(value: float, scale: int | None = None) -> tuple[int, int]:
    return split_decimal_literal(float_to_literal(value), scale)


@coerce_decimal_parts.register(str)
def _decimal_parts_from_str(value: str, scale: int | None = None) -> tuple[int, int]:
    return split_decimal_literal(value, scale)
