"""
LCD Engine — Наименьший общий знаменатель и эквивалентные дроби

Для N ≥ 2 дробей:
    lcd = lcm(d_1, ..., d_N)
    multiplier_i = lcd / d_i           (делится нацело по построению)
    equivalent_i = (n_i × multiplier_i) / lcd

Эквивалентные дроби НЕ сокращаются: контракт операции — «выразить над
общим знаменателем», поэтому знаменатель каждой ровно lcd, даже если
дробь сократима. Для этого используется отдельный тип EquivalentFraction,
а инварианты RationalValue не ослабляются.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from pydantic import BaseModel, Field, model_validator

from ratcalc.config import ArithmeticLimits, resolve_limits
from ratcalc.core.domain.rational import RationalValue
from ratcalc.core.domain.trace import StepKind, Trace, TraceBuilder
from ratcalc.core.errors import InsufficientInputs
from ratcalc.core.integers import checked_mul, lcm_all
from ratcalc.logging_config import get_logger

logger = get_logger(__name__)

MIN_LCD_INPUTS: Final[int] = 2


# =============================================================================
# MODELS
# =============================================================================


class EquivalentFraction(BaseModel):
    """
    Дробь, выраженная над общим знаменателем (без сокращения).

    numerator / denominator == original, denominator == lcd.
    """

    original: RationalValue = Field(..., description="Исходная каноническая дробь")
    multiplier: int = Field(..., gt=0, description="lcd / original.denominator")
    numerator: int = Field(..., description="original.numerator × multiplier")
    denominator: int = Field(..., gt=0, description="Общий знаменатель (lcd)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_scaling(self) -> "EquivalentFraction":
        """Проверка, что дробь получена масштабированием original."""
        if self.original.denominator * self.multiplier != self.denominator:
            raise ValueError(
                f"{self.original} × {self.multiplier} does not give denominator {self.denominator}"
            )
        if self.original.numerator * self.multiplier != self.numerator:
            raise ValueError(
                f"{self.original} × {self.multiplier} does not give numerator {self.numerator}"
            )
        return self

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    @property
    def value(self) -> RationalValue:
        """Каноническое значение; validate_scaling гарантирует равенство с original."""
        return self.original


@dataclass(frozen=True)
class LCDResult:
    """Результат вычисления общего знаменателя."""

    lcd: int
    denominators: tuple[int, ...]  # Знаменатели входов в исходном порядке
    equivalents: tuple[EquivalentFraction, ...]  # В порядке входов
    trace: Trace


# =============================================================================
# LCD
# =============================================================================


def compute_lcd(
    inputs: Sequence[RationalValue],
    limits: ArithmeticLimits | None = None,
) -> LCDResult:
    """
    Наименьший общий знаменатель и эквивалентные дроби над ним.

    Args:
        inputs: N ≥ 2 канонических дробей
        limits: Лимиты арифметики (default: из настроек)

    Returns:
        LCDResult; equivalents в порядке inputs, по одному SCALE шагу на вход

    Raises:
        InsufficientInputs: Если N < 2
        Overflow: Если lcm или масштабированный числитель не представимы

    Examples:
        >>> result = compute_lcd([make(1, 4), make(1, 6), make(1, 8)])
        >>> result.lcd, [str(e) for e in result.equivalents]
        (24, ['6/24', '4/24', '3/24'])
    """
    if len(inputs) < MIN_LCD_INPUTS:
        raise InsufficientInputs(MIN_LCD_INPUTS, len(inputs))

    limits = resolve_limits(limits)
    denominators = tuple(value.denominator for value in inputs)
    lcd = lcm_all(denominators, limits)

    trace = TraceBuilder()
    equivalents = []
    for value in inputs:
        multiplier = lcd // value.denominator
        equivalent = EquivalentFraction(
            original=value,
            multiplier=multiplier,
            numerator=checked_mul(value.numerator, multiplier, limits),
            denominator=lcd,
        )
        equivalents.append(equivalent)
        trace.add(
            StepKind.SCALE,
            value,
            operands=(value,),
            unreduced=(equivalent.numerator, equivalent.denominator),
            factor=multiplier,
        )

    logger.debug("lcd_computed", input_count=len(inputs), lcd=lcd)

    return LCDResult(
        lcd=lcd,
        denominators=denominators,
        equivalents=tuple(equivalents),
        trace=trace.build(),
    )
