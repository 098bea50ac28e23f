"""
Тесты для RationalValue и MixedNumber

Проверяет:
1. Нормализацию make(): знак в числителе, НОД = 1, ноль = 0/1
2. Отклонение неканонических значений при прямом создании
3. Immutability и value semantics
4. Overflow после сокращения
5. Разложение на смешанное число и обратно
"""

import pytest
from pydantic import ValidationError

from ratcalc.config import ArithmeticLimits
from ratcalc.core.domain import ONE, ZERO, MixedNumber, RationalValue, from_int, make, to_mixed
from ratcalc.core.errors import DivisionByZero, Overflow
from ratcalc.core.integers import gcd


# =============================================================================
# ТЕСТЫ make()
# =============================================================================


class TestMake:
    """Тесты нормализации make()"""

    def test_reduces_to_lowest_terms(self) -> None:
        """2/4 → 1/2"""
        value = make(2, 4)
        assert value.numerator == 1
        assert value.denominator == 2

    def test_sign_moves_to_numerator(self) -> None:
        """Отрицательный знаменатель → знак в числителе"""
        assert make(2, -4).as_tuple() == (-1, 2)
        assert make(-2, -4).as_tuple() == (1, 2)
        assert make(-2, 4).as_tuple() == (-1, 2)

    def test_zero_is_unique(self) -> None:
        """Любой ноль → 0/1"""
        assert make(0, 5) == ZERO
        assert make(0, -7) == ZERO
        assert make(0, 1).as_tuple() == (0, 1)

    def test_zero_denominator(self) -> None:
        """Знаменатель 0 → DivisionByZero"""
        with pytest.raises(DivisionByZero):
            make(5, 0)
        with pytest.raises(ZeroDivisionError):
            make(0, 0)

    @pytest.mark.parametrize("numerator", range(-12, 13))
    @pytest.mark.parametrize("denominator", [d for d in range(-9, 10) if d != 0])
    def test_canonical_invariants(self, numerator: int, denominator: int) -> None:
        """Инварианты канонической формы для всех пар"""
        value = make(numerator, denominator)

        assert value.denominator > 0
        if value.numerator == 0:
            assert value.denominator == 1
        else:
            assert gcd(value.numerator, value.denominator) == 1
        # Значение сохраняется: n/d == n'/d'
        assert value.numerator * denominator == numerator * value.denominator

    def test_overflow_checked_after_reduction(self) -> None:
        """Проверка разрядности применяется к сокращённым значениям"""
        limits = ArithmeticLimits(integer_bits=16)

        assert make(2**20, 2**20, limits) == ONE
        with pytest.raises(Overflow):
            make(2**20, 3, limits)

    def test_from_int(self) -> None:
        """Целое → n/1"""
        assert from_int(5).as_tuple() == (5, 1)
        assert from_int(-3).as_tuple() == (-3, 1)
        assert from_int(0) == ZERO


# =============================================================================
# ТЕСТЫ RationalValue
# =============================================================================


class TestRationalValue:
    """Тесты модели RationalValue"""

    def test_direct_construction_canonical(self) -> None:
        """Каноническая пара принимается напрямую"""
        value = RationalValue(numerator=3, denominator=4)
        assert value == make(3, 4)

    @pytest.mark.parametrize(
        "numerator,denominator",
        [
            (2, 4),  # не сокращена
            (0, 5),  # ноль не 0/1
            (1, -2),  # отрицательный знаменатель
            (1, 0),  # нулевой знаменатель
        ],
    )
    def test_direct_construction_rejects_non_canonical(self, numerator: int, denominator: int) -> None:
        """Неканоническая пара отклоняется валидатором"""
        with pytest.raises(ValidationError):
            RationalValue(numerator=numerator, denominator=denominator)

    def test_frozen(self) -> None:
        """Модель неизменяема"""
        value = make(1, 2)
        with pytest.raises(ValidationError):
            value.numerator = 3

    def test_value_semantics(self) -> None:
        """Равенство по значению, хэшируемость"""
        assert make(1, 2) == make(2, 4) == make(-3, -6)
        assert len({make(1, 2), make(2, 4), make(1, 3)}) == 2

    def test_str(self) -> None:
        """Строковое представление n/d"""
        assert str(make(3, 4)) == "3/4"
        assert str(make(-1, 2)) == "-1/2"
        assert str(make(5, 1)) == "5/1"

    def test_properties(self) -> None:
        """is_zero / is_integer / is_negative / is_proper"""
        assert ZERO.is_zero
        assert make(6, 3).is_integer
        assert make(-1, 2).is_negative
        assert not ZERO.is_negative
        assert make(3, 4).is_proper()
        assert make(-3, 4).is_proper()
        assert not make(5, 4).is_proper()
        assert not ONE.is_proper()


# =============================================================================
# ТЕСТЫ MixedNumber
# =============================================================================


class TestMixedNumber:
    """Тесты смешанного числа"""

    def test_improper_positive(self) -> None:
        """5/4 → 1 1/4"""
        mixed = to_mixed(make(5, 4))
        assert not mixed.is_negative
        assert mixed.whole == 1
        assert mixed.fractional_part == make(1, 4)
        assert str(mixed) == "1 1/4"

    def test_improper_negative(self) -> None:
        """-7/2 → -(3 1/2)"""
        mixed = to_mixed(make(-7, 2))
        assert mixed.is_negative
        assert mixed.whole == 3
        assert mixed.fractional_part == make(1, 2)
        assert str(mixed) == "-3 1/2"

    def test_proper(self) -> None:
        """3/4 → 0 3/4, без целой части в строке"""
        mixed = to_mixed(make(3, 4))
        assert mixed.whole == 0
        assert not mixed.has_whole
        assert str(mixed) == "3/4"
        assert str(to_mixed(make(-3, 4))) == "-3/4"

    def test_integer(self) -> None:
        """8/4 → 2, без дробной части"""
        mixed = to_mixed(make(8, 4))
        assert mixed.whole == 2
        assert not mixed.has_fraction
        assert str(mixed) == "2"

    def test_zero(self) -> None:
        """Ноль без знака"""
        mixed = to_mixed(ZERO)
        assert not mixed.is_negative
        assert mixed.whole == 0
        assert mixed.fractional_part == ZERO
        assert str(mixed) == "0"

    @pytest.mark.parametrize(
        "numerator,denominator",
        [(5, 4), (-7, 2), (3, 4), (-3, 4), (8, 4), (0, 1), (-9, 1), (1234, 7)],
    )
    def test_to_rational_roundtrip(self, numerator: int, denominator: int) -> None:
        """to_mixed → to_rational возвращает исходное значение"""
        value = make(numerator, denominator)
        assert to_mixed(value).to_rational() == value

    def test_to_mixed_beyond_64_bits(self) -> None:
        """to_mixed не перепроверяет разрядность; to_rational использует limits"""
        limits = ArithmeticLimits.unbounded()
        value = make(2**70 + 1, 2**70, limits)

        mixed = to_mixed(value)
        assert mixed.whole == 1
        assert mixed.fractional_part.as_tuple() == (1, 2**70)
        assert mixed.to_rational(limits) == value

        with pytest.raises(Overflow):
            mixed.to_rational(ArithmeticLimits(integer_bits=64))

    def test_rejects_improper_part(self) -> None:
        """Дробная часть ≥ 1 отклоняется"""
        with pytest.raises(ValidationError):
            MixedNumber(is_negative=False, whole=1, fractional_part=make(5, 4))

    def test_rejects_negative_part(self) -> None:
        """Знак только в is_negative"""
        with pytest.raises(ValidationError):
            MixedNumber(is_negative=False, whole=1, fractional_part=make(-1, 4))

    def test_rejects_negative_zero(self) -> None:
        """-0 не допускается"""
        with pytest.raises(ValidationError):
            MixedNumber(is_negative=True, whole=0, fractional_part=ZERO)
