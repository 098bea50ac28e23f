"""
Тесты для Rendering

Проверяет:
1. Форматирование дробей и смешанных чисел
2. Строки шагов для цепочки операций
3. Строки шагов для decimal → fraction
4. Строки шагов для LCD
"""

import pytest

from ratcalc.calculators.rendering import format_fraction, format_input, format_mixed, render_trace
from ratcalc.config import ArithmeticLimits
from ratcalc.core.domain import make, to_mixed
from ratcalc.core.math import compute_lcd, evaluate, from_decimal


# =============================================================================
# ТЕСТЫ ФОРМАТИРОВАНИЯ ЗНАЧЕНИЙ
# =============================================================================


class TestFormatValues:
    """Тесты format_*"""

    def test_format_fraction(self) -> None:
        """n/d; целые без знаменателя"""
        assert format_fraction(make(3, 4)) == "3/4"
        assert format_fraction(make(-3, 4)) == "-3/4"
        assert format_fraction(make(5, 1)) == "5"
        assert format_fraction(make(5, 1), always_show_denominator=True) == "5/1"

    @pytest.mark.parametrize(
        "value,expected",
        [((5, 4), "1 1/4"), ((-7, 2), "-3 1/2"), ((3, 4), "3/4"), ((4, 2), "2"), ((0, 1), "0")],
    )
    def test_format_mixed(self, value: tuple[int, int], expected: str) -> None:
        """RationalValue и MixedNumber форматируются одинаково"""
        assert format_mixed(make(*value)) == expected
        assert format_mixed(to_mixed(make(*value))) == expected

    def test_format_input(self) -> None:
        """Неправильная дробь показывается смешанным числом"""
        assert format_input(make(5, 4)) == "1 1/4"
        assert format_input(make(1, 4)) == "1/4"
        assert format_input(make(3, 1)) == "3"


# =============================================================================
# ТЕСТЫ ШАГОВ
# =============================================================================


class TestRenderEvaluation:
    """Шаги цепочки операций"""

    def test_subtraction_chain(self) -> None:
        """1/2 - 1/4 - 1/8"""
        trace = evaluate([make(1, 2), make(1, 4), make(1, 8)], ["-", "-"]).trace
        assert render_trace(trace) == [
            "Start with: 1/2",
            "1/2 - 1/4",
            "= 2/8",
            "= 1/4",
            "1/4 - 1/8",
            "= 4/32",
            "= 1/8",
            "Decimal: 0.125",
        ]

    def test_display_symbols(self) -> None:
        """× и ÷ в строках шагов"""
        lines = render_trace(evaluate([make(2, 3), make(3, 4)], ["*"]).trace)
        assert lines == ["Start with: 2/3", "2/3 × 3/4", "= 6/12", "= 1/2", "Decimal: 0.5"]

        lines = render_trace(evaluate([make(1, 2), make(1, 4)], ["/"]).trace)
        assert "1/2 ÷ 1/4" in lines

    def test_already_reduced_step(self) -> None:
        """Несокращённая пара совпадает с итогом: одна строка"""
        lines = render_trace(evaluate([make(3, 2), make(1, 1)], ["+"]).trace)
        assert lines == [
            "Start with: 3/2",
            "3/2 + 1",
            "= 5/2",
            "Decimal: 2.5",
            "Mixed number: 2 1/2",
        ]

    def test_single_operand(self) -> None:
        """Один операнд"""
        lines = render_trace(evaluate([make(3, 4)], []).trace)
        assert lines == ["Start with: 3/4", "Decimal: 0.75"]


class TestRenderDecimal:
    """Шаги decimal → fraction"""

    LIMITS = ArithmeticLimits()

    def test_reducible(self) -> None:
        """0.75 → 75/100 → 3/4"""
        lines = render_trace(from_decimal("0.75", self.LIMITS).trace)
        assert lines == [
            "Input decimal = 0.75",
            "Count decimal places = 2",
            "Multiply by 10^2 = 100",
            "Initial fraction = 75/100",
            "Find GCD(75, 100) = 25",
            "Simplify = 3/4",
        ]

    def test_mixed(self) -> None:
        """1.25 → 5/4 → 1 1/4"""
        lines = render_trace(from_decimal("1.25", self.LIMITS).trace)
        assert lines[-3:] == [
            "Find GCD(125, 100) = 25",
            "Simplify = 5/4",
            "Convert to mixed number = 1 1/4",
        ]

    def test_negative(self) -> None:
        """Знак сохраняется в исходной и сокращённой дроби"""
        lines = render_trace(from_decimal("-0.5", self.LIMITS).trace)
        assert "Initial fraction = -5/10" in lines
        assert "Find GCD(5, 10) = 5" in lines
        assert "Simplify = -1/2" in lines

    def test_already_simplest(self) -> None:
        """0.7 → 7/10 без сокращения"""
        lines = render_trace(from_decimal("0.7", self.LIMITS).trace)
        assert lines[-1] == "Fraction is already in simplest form"

    def test_whole_number(self) -> None:
        """5 → 5/1"""
        lines = render_trace(from_decimal("5", self.LIMITS).trace)
        assert lines == ["Input decimal = 5", "Whole number = 5/1"]


class TestRenderLcd:
    """Шаги LCD"""

    def test_scale_lines(self) -> None:
        """Одна строка на вход"""
        lines = render_trace(compute_lcd([make(1, 4), make(1, 6), make(1, 8)]).trace)
        assert lines == [
            "1/4 = 1/4 × 6/6 = 6/24",
            "1/6 = 1/6 × 4/4 = 4/24",
            "1/8 = 1/8 × 3/3 = 3/24",
        ]

    def test_improper_and_integer_inputs(self) -> None:
        """Неправильная дробь как смешанное число, целое с явным знаменателем"""
        lines = render_trace(compute_lcd([make(5, 4), make(3, 1)]).trace)
        assert lines == [
            "1 1/4 = 5/4 × 1/1 = 5/4",
            "3 = 3/1 × 4/4 = 12/4",
        ]
