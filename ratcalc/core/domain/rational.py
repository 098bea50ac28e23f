"""
RationalValue — Каноническая точная дробь

Immutable Pydantic модель: числитель/знаменатель в несократимой форме.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0
2. gcd(|numerator|, denominator) == 1
3. Ноль представлен единственным образом: 0/1

Единственная точка нормализации — make(). Прямое создание модели
с неканоническими полями отклоняется валидатором.
"""

from typing import Final

from pydantic import BaseModel, Field, model_validator

from ratcalc.config import ArithmeticLimits
from ratcalc.core.errors import DivisionByZero
from ratcalc.core.integers import ensure_representable, gcd


class RationalValue(BaseModel):
    """
    Точная дробь в канонической форме.

    Value type: без identity, без мутаций, безопасна для шаринга между потоками.
    """

    numerator: int = Field(..., description="Числитель (знак дроби)")
    denominator: int = Field(..., gt=0, description="Знаменатель (всегда > 0)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_canonical(self) -> "RationalValue":
        """Проверка канонической формы: несократимость, ноль = 0/1."""
        if self.numerator == 0:
            if self.denominator != 1:
                raise ValueError(f"zero must be represented as 0/1, got 0/{self.denominator}")
            return self

        if gcd(self.numerator, self.denominator) != 1:
            raise ValueError(
                f"{self.numerator}/{self.denominator} is not in lowest terms; use make()"
            )
        return self

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    @property
    def is_zero(self) -> bool:
        return self.numerator == 0

    @property
    def is_integer(self) -> bool:
        return self.denominator == 1

    @property
    def is_negative(self) -> bool:
        return self.numerator < 0

    def is_proper(self) -> bool:
        """True если |numerator| < denominator (нет целой части)."""
        return abs(self.numerator) < self.denominator

    def as_tuple(self) -> tuple[int, int]:
        return self.numerator, self.denominator


def make(
    numerator: int,
    denominator: int,
    limits: ArithmeticLimits | None = None,
) -> RationalValue:
    """
    Нормализация пары (числитель, знаменатель) в RationalValue.

    Алгоритм:
        1. denominator == 0 → DivisionByZero
        2. denominator < 0 → смена знака обоих
        3. numerator == 0 → 0/1
        4. деление обоих на gcd(|numerator|, denominator)

    Args:
        numerator: Числитель (любой знак)
        denominator: Знаменатель (≠ 0)
        limits: Лимиты разрядности (default: из настроек)

    Returns:
        Каноническая RationalValue

    Raises:
        DivisionByZero: Если denominator == 0
        Overflow: Если результат не представим в разрядности limits

    Examples:
        >>> make(2, -4)
        RationalValue(numerator=-1, denominator=2)
        >>> make(0, -7)
        RationalValue(numerator=0, denominator=1)
    """
    if denominator == 0:
        raise DivisionByZero(f"denominator must not be zero (numerator={numerator})")

    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    if numerator == 0:
        return ZERO

    divisor = gcd(numerator, denominator)
    numerator //= divisor
    denominator //= divisor

    ensure_representable(numerator, limits, what="numerator")
    ensure_representable(denominator, limits, what="denominator")

    return RationalValue(numerator=numerator, denominator=denominator)


def from_int(value: int, limits: ArithmeticLimits | None = None) -> RationalValue:
    """Целое число как дробь value/1."""
    return make(value, 1, limits)


ZERO: Final[RationalValue] = RationalValue(numerator=0, denominator=1)
ONE: Final[RationalValue] = RationalValue(numerator=1, denominator=1)
