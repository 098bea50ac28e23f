"""
Parser — Текст → RationalValue

Поддерживаемые формы (проверяются в этом порядке, побеждает первое совпадение):
1. Смешанное число:  "<int> <int>/<int>"  (ровно один пробел)
2. Простая дробь:    "<int>/<int>"
3. Целое:            "<int>"

Текст предварительно обрезается по краям. Десятичная запись здесь НЕ
принимается: она допустима только для decimal converter.

Знак смешанного числа относится ко всему числу: "-2 3/4" = -(2 + 3/4) = -11/4.
"""

import re
from typing import Final

from ratcalc.config import ArithmeticLimits, resolve_limits
from ratcalc.core.domain.rational import RationalValue, make
from ratcalc.core.errors import EmptyInput, ParseError, ZeroDenominatorError
from ratcalc.core.integers import checked_add, checked_mul, ensure_representable
from ratcalc.logging_config import get_logger

logger = get_logger(__name__)

# [0-9] вместо \d: int() принимает не-ASCII цифры, парсер их отклоняет
MIXED_NUMBER_RE: Final[re.Pattern[str]] = re.compile(r"([+-]?)([0-9]+) ([0-9]+)/([0-9]+)")
SIMPLE_FRACTION_RE: Final[re.Pattern[str]] = re.compile(r"([+-]?[0-9]+)/([+-]?[0-9]+)")
INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

DEFAULT_LIST_SEPARATOR: Final[str] = ","


def _literal(token: str, limits: ArithmeticLimits, original_text: str) -> int:
    value = int(token)
    ensure_representable(value, limits, what=f'literal "{token}" in "{original_text}"')
    return value


def _describe_failure(text: str) -> str:
    if "." in text:
        return "Decimal notation is not accepted here"
    if "/" in text:
        return "Malformed fraction"
    return "Not a number, fraction or mixed number"


def parse(text: str, limits: ArithmeticLimits | None = None) -> RationalValue:
    """
    Разбор целого, дроби или смешанного числа.

    Args:
        text: Исходный текст (например, "2 3/4", "-3/8", "5")
        limits: Лимиты разрядности (default: из настроек)

    Returns:
        Каноническая RationalValue

    Raises:
        ParseError: Если форма не распознана или компонент отсутствует
        ZeroDenominatorError: Если литерал знаменателя равен 0
        Overflow: Если литерал или числитель не представимы

    Examples:
        >>> parse("2 3/4")
        RationalValue(numerator=11, denominator=4)
        >>> parse("6/-8")
        RationalValue(numerator=-3, denominator=4)
    """
    if text is None:
        raise ParseError("Input is required", "")

    original_text = text
    stripped = text.strip()
    if not stripped:
        raise ParseError("Input is required", original_text)

    limits = resolve_limits(limits)

    match = MIXED_NUMBER_RE.fullmatch(stripped)
    if match:
        sign, whole_token, num_token, den_token = match.groups()
        whole = _literal(whole_token, limits, original_text)
        numerator = _literal(num_token, limits, original_text)
        denominator = _literal(den_token, limits, original_text)
        if denominator == 0:
            raise ZeroDenominatorError(original_text)

        numerator = checked_add(checked_mul(whole, denominator, limits), numerator, limits)
        if sign == "-":
            numerator = -numerator
        value = make(numerator, denominator, limits)
        logger.debug("parsed_mixed_number", text=stripped, result=str(value))
        return value

    match = SIMPLE_FRACTION_RE.fullmatch(stripped)
    if match:
        num_token, den_token = match.groups()
        numerator = _literal(num_token, limits, original_text)
        denominator = _literal(den_token, limits, original_text)
        if denominator == 0:
            raise ZeroDenominatorError(original_text)

        value = make(numerator, denominator, limits)
        logger.debug("parsed_fraction", text=stripped, result=str(value))
        return value

    if INTEGER_RE.fullmatch(stripped):
        value = make(_literal(stripped, limits, original_text), 1, limits)
        logger.debug("parsed_integer", text=stripped, result=str(value))
        return value

    raise ParseError(_describe_failure(stripped), original_text)


def parse_list(
    text: str,
    separator: str = DEFAULT_LIST_SEPARATOR,
    limits: ArithmeticLimits | None = None,
) -> list[RationalValue]:
    """
    Разбор списка значений, разделённых separator (по умолчанию запятая).

    Raises:
        EmptyInput: Если текст пуст
        ParseError: Если один из элементов пуст или некорректен
    """
    if text is None or not text.strip():
        raise EmptyInput("Please enter some numbers or fractions")

    limits = resolve_limits(limits)
    values = []
    for item in text.split(separator):
        if not item.strip():
            raise ParseError("Empty item in list", text)
        values.append(parse(item, limits))
    return values
