"""
Тесты для Parser

Проверяет:
1. Целые, простые дроби, смешанные числа
2. Порядок сопоставления форм и обрезку пробелов
3. Нулевой знаменатель (ZeroDenominatorError = ParseError + DivisionByZero)
4. Отклонение десятичной записи и мусора
5. Разбор списков через разделитель
"""

import pytest

from ratcalc.config import ArithmeticLimits
from ratcalc.core.domain import make
from ratcalc.core.errors import (
    DivisionByZero,
    EmptyInput,
    Overflow,
    ParseError,
    ZeroDenominatorError,
)
from ratcalc.core.parsing import parse, parse_list


# =============================================================================
# ТЕСТЫ ДОПУСТИМЫХ ФОРМ
# =============================================================================


class TestParseForms:
    """Тесты распознавания форм"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("5", (5, 1)),
            ("-5", (-5, 1)),
            ("+5", (5, 1)),
            ("0", (0, 1)),
            ("3/4", (3, 4)),
            ("-3/4", (-3, 4)),
            ("3/-4", (-3, 4)),
            ("-3/-4", (3, 4)),
            ("6/8", (3, 4)),
            ("10/5", (2, 1)),
            ("0/9", (0, 1)),
            ("2 3/4", (11, 4)),
            ("1 1/2", (3, 2)),
            ("0 1/2", (1, 2)),
        ],
    )
    def test_valid_forms(self, text: str, expected: tuple[int, int]) -> None:
        """Каноническая дробь для каждой формы"""
        assert parse(text).as_tuple() == expected

    def test_mixed_number(self) -> None:
        """Смешанное число 2 3/4 = 11/4"""
        assert parse("2 3/4") == make(11, 4)

    def test_negative_mixed_number_sign_applies_to_whole(self) -> None:
        """Знак относится ко всему числу: -2 3/4 = -11/4"""
        assert parse("-2 3/4") == make(-11, 4)
        assert parse("-0 1/2") == make(-1, 2)

    def test_surrounding_whitespace(self) -> None:
        """Пробелы по краям игнорируются"""
        assert parse("  7  ") == make(7, 1)
        assert parse("\t2 3/4\n") == make(11, 4)

    def test_mixed_number_with_reducible_part(self) -> None:
        """Дробная часть смешанного числа сокращается вместе с целым"""
        assert parse("1 2/4") == make(3, 2)


# =============================================================================
# ТЕСТЫ ОШИБОК
# =============================================================================


class TestParseErrors:
    """Тесты отклонения некорректного текста"""

    def test_zero_denominator(self) -> None:
        """3/0 → ZeroDenominatorError, совместим с обеими категориями"""
        with pytest.raises(ZeroDenominatorError) as exc_info:
            parse("3/0")

        error = exc_info.value
        assert isinstance(error, ParseError)
        assert isinstance(error, DivisionByZero)
        assert error.original_text == "3/0"

    def test_zero_denominator_in_mixed_number(self) -> None:
        """2 1/0 → ZeroDenominatorError"""
        with pytest.raises(DivisionByZero):
            parse("2 1/0")

    def test_garbage(self) -> None:
        """abc → ParseError с исходным текстом"""
        with pytest.raises(ParseError) as exc_info:
            parse("abc")

        assert exc_info.value.original_text == "abc"
        assert '"abc"' in str(exc_info.value)

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty(self, text: str) -> None:
        """Пустой текст → ParseError"""
        with pytest.raises(ParseError, match="Input is required"):
            parse(text)

    def test_none(self) -> None:
        """None → ParseError"""
        with pytest.raises(ParseError):
            parse(None)

    @pytest.mark.parametrize("text", ["1.5", "0.75", "-2.0", "1/2.5"])
    def test_decimal_rejected(self, text: str) -> None:
        """Десятичная запись не принимается парсером дробей"""
        with pytest.raises(ParseError, match="Decimal"):
            parse(text)

    @pytest.mark.parametrize(
        "text",
        [
            "1/2/3",
            "2  3/4",  # два пробела
            "2 -3/4",  # знак у дробной части
            "2 3/-4",
            "1/",
            "/2",
            "- 5",
            "1 2",
            "٣/٤",  # не-ASCII цифры
            "½",
        ],
    )
    def test_malformed(self, text: str) -> None:
        """Некорректные формы → ParseError"""
        with pytest.raises(ParseError):
            parse(text)

    def test_literal_overflow(self) -> None:
        """Литерал вне разрядности → Overflow"""
        limits = ArithmeticLimits(integer_bits=16)

        with pytest.raises(Overflow):
            parse("99999", limits)
        with pytest.raises(Overflow):
            parse("1/99999", limits)

    def test_mixed_number_overflow(self) -> None:
        """whole × denominator вне разрядности → Overflow"""
        limits = ArithmeticLimits(integer_bits=16)

        assert parse("100 1/2", limits) == make(201, 2)
        with pytest.raises(Overflow):
            parse("20000 1/2", limits)

    def test_unbounded_literals(self) -> None:
        """Без ограничения разрядности большие литералы допустимы"""
        text = "123456789012345678901234567890/2"
        value = parse(text, ArithmeticLimits.unbounded())
        assert value == make(123456789012345678901234567890, 2, ArithmeticLimits.unbounded())


# =============================================================================
# ТЕСТЫ СПИСКОВ
# =============================================================================


class TestParseList:
    """Тесты parse_list"""

    def test_comma_separated(self) -> None:
        """Список через запятую, порядок сохраняется"""
        values = parse_list("1/4, 1/6, 1/8")
        assert values == [make(1, 4), make(1, 6), make(1, 8)]

    def test_mixed_forms(self) -> None:
        """Все формы в одном списке"""
        assert parse_list("3, 1 1/2, -2/4") == [make(3, 1), make(3, 2), make(-1, 2)]

    def test_custom_separator(self) -> None:
        """Пользовательский разделитель"""
        assert parse_list("1/2; 1/3", separator=";") == [make(1, 2), make(1, 3)]

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty(self, text: str) -> None:
        """Пустой текст → EmptyInput"""
        with pytest.raises(EmptyInput):
            parse_list(text)

    def test_empty_item(self) -> None:
        """Пустой элемент → ParseError"""
        with pytest.raises(ParseError, match="Empty item"):
            parse_list("1/2,,1/3")

    def test_bad_item(self) -> None:
        """Некорректный элемент → ParseError с текстом элемента"""
        with pytest.raises(ParseError) as exc_info:
            parse_list("1/4, x")
        assert exc_info.value.original_text.strip() == "x"

    def test_zero_denominator_item(self) -> None:
        """Нулевой знаменатель в элементе"""
        with pytest.raises(ZeroDenominatorError):
            parse_list("1/4, 1/0")
