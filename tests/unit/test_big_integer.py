"""
Тесты для модуля Integer (big_integer)

Проверяет:
1. Конструирование из int/float/str/Integer
2. Арифметику произвольной точности
3. Деление и остаток с усечением к нулю
4. Степень и отказ на отрицательном показателе
5. Сравнения, предикаты и конверсии
6. Python-операторы и immutability
"""

import copy
import logging
import math
import pickle

import pytest

from levin_numbers.core.math.big_integer import (
    Int,
    Integer,
    pow10,
    trunc_divmod,
)
from levin_numbers.core.math.errors import (
    DivisionByZero,
    InvalidExponent,
    MalformedLiteral,
)
from levin_numbers.core.math.scaled_decimal import Decimal

# =============================================================================
# ТЕСТЫ ЦЕЛОЧИСЛЕННЫХ ПРИМИТИВОВ
# =============================================================================


class TestTruncDivmod:
    """Тесты для trunc_divmod"""

    def test_positive_operands(self) -> None:
        """Положительные операнды совпадают с divmod"""
        assert trunc_divmod(10, 3) == (3, 1)
        assert trunc_divmod(9, 3) == (3, 0)

    def test_quotient_truncates_toward_zero(self) -> None:
        """Частное усекается к нулю, а не к -inf"""
        assert trunc_divmod(-10, 3) == (-3, -1)
        assert trunc_divmod(10, -3) == (-3, 1)
        assert trunc_divmod(-10, -3) == (3, -1)

    def test_division_by_zero_raises(self) -> None:
        """Делитель 0 → DivisionByZero"""
        with pytest.raises(DivisionByZero, match="Division by zero"):
            trunc_divmod(1, 0)

    def test_division_by_zero_is_zero_division_error(self) -> None:
        """DivisionByZero совместим с ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError):
            trunc_divmod(0, 0)

    def test_division_by_zero_log_handles_huge_dividend(self, caplog) -> None:
        """DEBUG-запись формируется и для операнда длиннее 4300 цифр"""
        huge = 10**5000
        with caplog.at_level(logging.DEBUG, logger="levin_numbers.core.math.big_integer"):
            with pytest.raises(DivisionByZero):
                trunc_divmod(huge, 0)
        assert f"dividend_bits={huge.bit_length()}" in caplog.records[-1].getMessage()


class TestPow10:
    """Тесты для pow10"""

    def test_values(self) -> None:
        assert pow10(0) == 1
        assert pow10(3) == 1000
        assert pow10(40) == 10**40

    def test_negative_exponent_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            pow10(-1)


# =============================================================================
# ТЕСТЫ КОНСТРУИРОВАНИЯ
# =============================================================================


class TestConstruction:
    """Тесты конструирования Integer"""

    def test_from_int(self) -> None:
        """Из int"""
        assert Integer(42).to_number() == 42

    def test_from_string(self) -> None:
        """Из строки"""
        assert Integer("42").to_string() == "42"
        assert Integer("-42").to_string() == "-42"
        assert Integer("+7").to_string() == "7"

    def test_leading_zeros_are_canonicalized(self) -> None:
        """Ведущие нули не попадают в каноническую строку"""
        assert Integer("007").to_string() == "7"
        assert Integer("-000").to_string() == "0"

    def test_from_integer_copy(self) -> None:
        """Копирование другого Integer"""
        x = Integer(42)
        y = Integer(x)
        assert y.to_number() == 42
        assert y == x

    def test_float_truncates_toward_zero(self) -> None:
        """float усекается к нулю"""
        assert Integer(42.7).to_number() == 42
        assert Integer(-42.7).to_number() == -42
        assert Integer(0.9).to_number() == 0

    def test_large_literal(self) -> None:
        """Литерал за пределами 64 бит"""
        literal = "123456789012345678901234567890123456789012345"
        assert Integer(literal).to_string() == literal

    def test_int_alias(self) -> None:
        """Int — алиас Integer"""
        assert Int is Integer
        assert Int(5).add(3).to_string() == "8"

    @pytest.mark.parametrize("literal", ["", "abc", "1.5", "1e3", "--1", "1_000", "0x10"])
    def test_malformed_string_rejected(self, literal: str) -> None:
        """Невалидные строки → MalformedLiteral"""
        with pytest.raises(MalformedLiteral):
            Integer(literal)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_float_rejected(self, value: float) -> None:
        """NaN/Infinity → MalformedLiteral"""
        with pytest.raises(MalformedLiteral, match="not representable"):
            Integer(value)

    def test_unsupported_type_rejected(self) -> None:
        """Неподдерживаемый тип → TypeError"""
        with pytest.raises(TypeError, match="Unsupported operand type"):
            Integer([1, 2])  # type: ignore[arg-type]


# =============================================================================
# ТЕСТЫ АРИФМЕТИКИ
# =============================================================================


class TestArithmetic:
    """Тесты арифметических операций"""

    def test_add(self) -> None:
        assert Integer(5).add(3).to_number() == 8
        assert Integer(10).add(-5).to_number() == 5
        assert Integer(-5).add(-3).to_number() == -8

    def test_subtract(self) -> None:
        assert Integer(10).subtract(3).to_number() == 7
        assert Integer(5).subtract(10).to_number() == -5
        assert Integer(-5).subtract(3).to_number() == -8

    def test_multiply(self) -> None:
        assert Integer(5).multiply(3).to_number() == 15
        assert Integer(-5).multiply(3).to_number() == -15
        assert Integer(-5).multiply(-3).to_number() == 15

    def test_divide_truncates(self) -> None:
        """Деление усекается к нулю"""
        assert Integer(10).divide(2).to_number() == 5
        assert Integer(10).divide(3).to_number() == 3
        assert Integer(-10).divide(3).to_number() == -3

    def test_mod_follows_dividend_sign(self) -> None:
        """Знак остатка следует за делимым"""
        assert Integer(10).mod(3).to_number() == 1
        assert Integer(10).mod(5).to_number() == 0
        assert Integer(-10).mod(3).to_number() == -1
        assert Integer(10).mod(-3).to_number() == 1

    def test_divide_by_zero_raises(self) -> None:
        with pytest.raises(DivisionByZero):
            Integer(10).divide(0)

    def test_mod_by_zero_raises(self) -> None:
        with pytest.raises(DivisionByZero):
            Integer(10).mod("0")

    def test_pow(self) -> None:
        assert Integer(2).pow(3).to_number() == 8
        assert Integer(10).pow(0).to_number() == 1
        assert Integer(5).pow(2).to_number() == 25

    def test_zero_to_the_zero_is_one(self) -> None:
        """0 ** 0 == 1"""
        assert Integer(0).pow(0).to_string() == "1"

    def test_negative_exponent_raises(self) -> None:
        """Отрицательная степень → InvalidExponent"""
        with pytest.raises(InvalidExponent, match="non-negative") as exc_info:
            Integer(2).pow(-1)
        assert exc_info.value.exponent == -1

    def test_negative_exponent_log_handles_huge_base(self, caplog) -> None:
        """DEBUG-запись не форматирует основание целиком"""
        base = Integer(10**5000)
        with caplog.at_level(logging.DEBUG, logger="levin_numbers.core.math.big_integer"):
            with pytest.raises(InvalidExponent):
                base.pow(-2)
        assert "exponent=-2" in caplog.records[-1].getMessage()

    def test_large_pow(self) -> None:
        """10 ** 100 без потери точности"""
        assert Integer(10).pow(100).to_string() == "1" + "0" * 100

    def test_mixed_operand_types(self) -> None:
        """Операнды разных типов"""
        x = Integer(10)
        assert x.add("5").to_string() == "15"
        assert x.add(2.9).to_string() == "12"
        assert x.add(Integer(-10)).to_string() == "0"

    def test_abs(self) -> None:
        assert Integer(5).abs().to_number() == 5
        assert Integer(-5).abs().to_number() == 5
        assert Integer(0).abs().to_number() == 0

    def test_negate(self) -> None:
        assert Integer(5).negate().to_number() == -5
        assert Integer(-5).negate().to_number() == 5

    def test_negate_zero_has_no_sign(self) -> None:
        """negate(0) == 0 без артефакта знака"""
        result = Integer(0).negate()
        assert result.to_string() == "0"
        assert result.sign() == 0

    def test_overflow_past_uint64(self) -> None:
        """Переход через 2**64 - 1"""
        result = Integer("18446744073709551615").add(1)
        assert result.to_string() == "18446744073709551616"

    def test_operands_not_mutated(self) -> None:
        """Операции не изменяют операнды"""
        a = Integer(7)
        b = Integer(3)
        a.add(b)
        a.multiply(b)
        a.divide(b)
        assert a.to_string() == "7"
        assert b.to_string() == "3"


# =============================================================================
# ТЕСТЫ СРАВНЕНИЙ И ПРЕДИКАТОВ
# =============================================================================


class TestComparisons:
    """Тесты сравнений"""

    def test_equals(self) -> None:
        assert Integer(5).equals(5)
        assert Integer(5).equals("5")
        assert not Integer(5).equals(6)

    def test_ordering(self) -> None:
        assert Integer(3).lt(5)
        assert not Integer(5).lt(5)
        assert Integer(5).lte(5)
        assert Integer(5).gt(3)
        assert not Integer(5).gt(5)
        assert Integer(5).gte(5)

    def test_large_ordering(self) -> None:
        big = Integer("99999999999999999999999999999999999999999")
        assert big.gt("99999999999999999999999999999999999999998")
        assert big.negate().lt(0)


class TestPredicates:
    """Тесты предикатов"""

    def test_is_zero(self) -> None:
        assert Integer(0).is_zero()
        assert not Integer(1).is_zero()

    def test_is_positive_negative(self) -> None:
        assert Integer(5).is_positive()
        assert not Integer(0).is_positive()
        assert Integer(-5).is_negative()
        assert not Integer(0).is_negative()

    def test_parity(self) -> None:
        assert Integer(4).is_even()
        assert Integer(-4).is_even()
        assert Integer(0).is_even()
        assert Integer(3).is_odd()
        assert Integer(-3).is_odd()

    def test_sign(self) -> None:
        assert Integer(42).sign() == 1
        assert Integer(-42).sign() == -1
        assert Integer(0).sign() == 0


# =============================================================================
# ТЕСТЫ КОНВЕРСИЙ
# =============================================================================


class TestConversions:
    """Тесты конверсий"""

    def test_to_number(self) -> None:
        assert Integer(42).to_number() == 42
        assert Integer(-42).to_number() == -42
        assert isinstance(Integer(42).to_number(), float)

    def test_to_number_out_of_float_range_is_infinite(self) -> None:
        """За пределами диапазона float: ±inf, как у Decimal"""
        huge = "1" + "0" * 400
        assert Integer(huge).to_number() == math.inf
        assert Integer("-" + huge).to_number() == -math.inf
        assert Integer(huge).to_number() == Decimal(huge).to_number()

    def test_to_number_precision_loss_above_safe_range(self) -> None:
        """Выше 2**53 допускается потеря точности"""
        assert Integer(2**53 + 1).to_number() == float(2**53)

    def test_to_int_is_exact(self) -> None:
        literal = "18446744073709551616"
        assert Integer(literal).to_int() == 18446744073709551616
        assert Integer(literal).value == 18446744073709551616

    def test_to_string_radix(self) -> None:
        assert Integer(255).to_string(16) == "ff"
        assert Integer(8).to_string(2) == "1000"
        assert Integer(-255).to_string(16) == "-ff"
        assert Integer(0).to_string(2) == "0"
        assert Integer(35).to_string(36) == "z"

    def test_invalid_radix_rejected(self) -> None:
        with pytest.raises(ValueError, match="radix"):
            Integer(10).to_string(1)
        with pytest.raises(ValueError, match="radix"):
            Integer(10).to_string(37)

    def test_to_json(self) -> None:
        assert Integer(42).to_json() == "42"
        assert Integer(-7).to_json() == "-7"

    def test_very_long_value_round_trips(self) -> None:
        """Строки длиннее лимита int_max_str_digits"""
        literal = "9" * 5000
        assert Integer(literal).to_string() == literal


# =============================================================================
# ТЕСТЫ PYTHON DATA MODEL
# =============================================================================


class TestDataModel:
    """Тесты операторов и протоколов Python"""

    def test_operators(self) -> None:
        a = Integer(17)
        assert a + 3 == 20
        assert 3 + a == 20
        assert a - 20 == -3
        assert 20 - a == 3
        assert a * 2 == 34
        assert 2 * a == 34
        assert a ** 2 == 289
        assert -a == -17
        assert +a is a
        assert abs(Integer(-4)) == 4

    def test_floordiv_and_mod_truncate(self) -> None:
        """// и % используют усекающую семантику"""
        assert Integer(-10) // 3 == -3
        assert Integer(-10) % 3 == -1
        assert divmod(Integer(-10), 3) == (Integer(-3), Integer(-1))
        assert -10 // Integer(3) == -3

    def test_truediv_truncates(self) -> None:
        """/ на Integer - усекающий divide"""
        assert Integer(-10) / 3 == -3
        assert isinstance(Integer(7) / Integer(2), Integer)
        assert Integer(7) / Integer(2) == 3
        assert -7 / Integer(2) == -3
        with pytest.raises(DivisionByZero):
            Integer(1) / 0
        with pytest.raises(TypeError):
            Integer(1) / 1.5  # type: ignore[operator]

    def test_comparison_operators(self) -> None:
        assert Integer(1) < Integer(2)
        assert Integer(2) <= 2
        assert Integer(3) > 2
        assert Integer(3) >= Integer(3)
        assert Integer(3) != Integer(4)

    def test_unsupported_operand_returns_not_implemented(self) -> None:
        with pytest.raises(TypeError):
            Integer(1) + "1"  # type: ignore[operator]
        assert Integer(1) != "1"

    def test_hash_matches_int(self) -> None:
        assert hash(Integer(12345)) == hash(12345)
        assert {Integer(1), Integer(1), 1} == {1}

    def test_native_conversions(self) -> None:
        assert int(Integer(-9)) == -9
        assert float(Integer(3)) == 3.0
        assert bool(Integer(0)) is False
        assert bool(Integer(-1)) is True
        assert [10, 20, 30][Integer(1)] == 20

    def test_str_and_repr(self) -> None:
        assert str(Integer(-12)) == "-12"
        assert repr(Integer(-12)) == "Integer(-12)"

    def test_immutable(self) -> None:
        x = Integer(5)
        with pytest.raises(AttributeError, match="immutable"):
            x._value = 6  # type: ignore[misc]
        with pytest.raises(AttributeError, match="immutable"):
            del x._value
        assert x.to_string() == "5"

    def test_copy_and_pickle(self) -> None:
        x = Integer("123456789012345678901234567890")
        assert copy.copy(x) is x
        assert copy.deepcopy(x) is x
        restored = pickle.loads(pickle.dumps(x))
        assert restored == x
        assert isinstance(restored, Integer)
