"""
Decimal ↔ Fraction Converter

Модуль обеспечивает точное преобразование между десятичной записью и дробью:
- from_decimal: конечная десятичная строка → каноническая дробь + смешанное число
- to_decimal_string: дробь → точная конечная десятичная строка
- format_decimal: дробь → десятичное приближение с округлением half-up

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Числитель строится конкатенацией цифр целой и дробной частей,
   а не умножением float на 10^n (float даёт ошибку округления уже
   на 0.1 + 0.2 и теряет точность после ~15 значащих цифр)
2. 10^n — точная целочисленная степень; n > max_decimal_places → Overflow
3. Знак фиксируется до нормализации и возвращается и в числитель, и в is_negative
4. to_decimal_string отказывает (NonTerminatingDecimal), если знаменатель
   содержит простые множители кроме 2 и 5
"""

import re
from dataclasses import dataclass
from typing import Final

from ratcalc.config import DEFAULT_DECIMAL_DISPLAY_PLACES, ArithmeticLimits, resolve_limits
from ratcalc.core.domain.mixed import MixedNumber, to_mixed
from ratcalc.core.domain.rational import RationalValue, make
from ratcalc.core.domain.trace import StepKind, Trace, TraceBuilder
from ratcalc.core.errors import DecimalFormatError, NonTerminatingDecimal, Overflow
from ratcalc.core.integers import ensure_representable, gcd
from ratcalc.logging_config import get_logger

logger = get_logger(__name__)

# Необязательный "-", цифры, необязательная точка с цифрами после неё
DECIMAL_RE: Final[re.Pattern[str]] = re.compile(r"(-?)([0-9]*)(?:\.([0-9]+))?")

NON_FINITE_TOKENS: Final[frozenset[str]] = frozenset({"inf", "infinity", "nan"})


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class DecimalConversionResult:
    """Результат преобразования десятичной строки в дробь."""

    fraction: RationalValue  # Каноническая дробь со знаком
    mixed: MixedNumber  # Смешанное число (whole может быть 0)
    is_negative: bool
    decimal_places: int

    # Для отображения шагов
    unreduced: tuple[int, int]  # (±digits, 10^decimal_places) до сокращения
    divisor: int  # НОД, на который сокращена дробь
    text: str  # Входная строка без пробелов по краям

    trace: Trace


# =============================================================================
# DECIMAL → FRACTION
# =============================================================================


def _reject(text: str, original_text: str) -> DecimalFormatError:
    lowered = text.lower().lstrip("+-")
    if lowered in NON_FINITE_TOKENS:
        return DecimalFormatError("Please enter a finite decimal number", original_text)
    if text.count(".") > 1:
        return DecimalFormatError("Multiple decimal points", original_text)
    return DecimalFormatError("Please enter a valid decimal number", original_text)


def from_decimal(text: str, limits: ArithmeticLimits | None = None) -> DecimalConversionResult:
    """
    Конечная десятичная запись → каноническая дробь.

    Алгоритм:
        1. Отделить знак (is_negative)
        2. decimal_places = число цифр после "." (0 без точки)
        3. denominator = 10^decimal_places (точная целочисленная степень)
        4. numerator = int(целые_цифры + дробные_цифры)
        5. make(±numerator, denominator), mixed = to_mixed(fraction)

    Args:
        text: Десятичная строка ("0.75", "-0.5", "12", ".5")
        limits: Лимиты арифметики (default: из настроек)

    Returns:
        DecimalConversionResult

    Raises:
        DecimalFormatError: Пусто, несколько точек, не-цифры, inf/nan
        Overflow: decimal_places > max_decimal_places или значение не представимо

    Examples:
        >>> from_decimal("1.25").fraction
        RationalValue(numerator=5, denominator=4)
    """
    original_text = "" if text is None else text
    stripped = original_text.strip()
    if not stripped:
        raise DecimalFormatError("Please enter a decimal number", original_text)

    match = DECIMAL_RE.fullmatch(stripped)
    if match is None:
        raise _reject(stripped, original_text)

    sign, integer_digits, fraction_digits = match.groups()
    fraction_digits = fraction_digits or ""
    if not integer_digits and not fraction_digits:
        raise _reject(stripped, original_text)

    limits = resolve_limits(limits)
    decimal_places = len(fraction_digits)
    if decimal_places > limits.max_decimal_places:
        raise Overflow(
            f"{decimal_places} decimal places exceed the maximum of {limits.max_decimal_places}"
        )

    denominator = ensure_representable(10**decimal_places, limits, what="denominator")
    digits = int(integer_digits + fraction_digits)
    ensure_representable(digits, limits, what="numerator")

    numerator = -digits if sign == "-" else digits
    fraction = make(numerator, denominator, limits)
    divisor = gcd(digits, denominator)
    mixed = to_mixed(fraction)

    trace = TraceBuilder()
    trace.add(
        StepKind.PARSE,
        fraction,
        unreduced=(numerator, denominator),
        factor=denominator,
        text=stripped,
    )
    trace.add(StepKind.SIMPLIFY, fraction, unreduced=(numerator, denominator), factor=divisor)
    trace.add(StepKind.RENDER, fraction, operands=(fraction,), text=str(mixed))

    logger.debug(
        "decimal_converted",
        text=stripped,
        decimal_places=decimal_places,
        fraction=str(fraction),
    )

    return DecimalConversionResult(
        fraction=fraction,
        mixed=mixed,
        # "-0.0" даёт ноль без знака: знак дроби и флаг совпадают
        is_negative=fraction.is_negative,
        decimal_places=decimal_places,
        unreduced=(numerator, denominator),
        divisor=divisor,
        text=stripped,
        trace=trace.build(),
    )


# =============================================================================
# FRACTION → DECIMAL
# =============================================================================


def _strip_factor(value: int, prime: int) -> tuple[int, int]:
    """(value без множителя prime, кратность prime)."""
    count = 0
    while value % prime == 0:
        value //= prime
        count += 1
    return value, count


def terminating_places(fraction: RationalValue) -> int | None:
    """
    Число знаков конечной десятичной записи или None, если она бесконечна.

    Examples:
        >>> terminating_places(make(3, 4))
        2
        >>> terminating_places(make(1, 3)) is None
        True
    """
    rest, twos = _strip_factor(fraction.denominator, 2)
    rest, fives = _strip_factor(rest, 5)
    if rest != 1:
        return None
    return max(twos, fives)


def to_decimal_string(fraction: RationalValue) -> str:
    """
    Точная конечная десятичная запись дроби.

    Raises:
        NonTerminatingDecimal: Если знаменатель содержит множители кроме 2 и 5

    Examples:
        >>> to_decimal_string(make(5, 4))
        '1.25'
        >>> to_decimal_string(make(-1, 2))
        '-0.5'
    """
    places = terminating_places(fraction)
    if places is None:
        raise NonTerminatingDecimal(fraction.numerator, fraction.denominator)

    scaled = abs(fraction.numerator) * (10**places // fraction.denominator)
    return _format_scaled(scaled, places, fraction.is_negative)


def format_decimal(fraction: RationalValue, places: int = DEFAULT_DECIMAL_DISPLAY_PLACES) -> str:
    """
    Десятичное приближение с округлением half-up и без хвостовых нулей.

    Округление выполняется в целых числах, без двойного округления.

    Examples:
        >>> format_decimal(make(1, 3))
        '0.333333'
        >>> format_decimal(make(2, 3))
        '0.666667'
        >>> format_decimal(make(-1, 8))
        '-0.125'
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    quotient, remainder = divmod(abs(fraction.numerator) * 10**places, fraction.denominator)
    if 2 * remainder >= fraction.denominator:
        quotient += 1

    return _format_scaled(quotient, places, fraction.is_negative and quotient != 0)


def _format_scaled(scaled: int, places: int, negative: bool) -> str:
    """scaled / 10^places как строка без хвостовых нулей."""
    integer_part, fractional_part = divmod(scaled, 10**places)
    text = str(integer_part)
    if places:
        digits = str(fractional_part).zfill(places).rstrip("0")
        if digits:
            text = f"{text}.{digits}"
    return f"-{text}" if negative else text
