"""
MixedNumber — Производное представление дроби как «целое + правильная дробь»

Не хранится как самостоятельный источник истины: вычисляется из
RationalValue по требованию, чтобы исключить расхождение представлений.
"""

from pydantic import BaseModel, Field, model_validator

from ratcalc.config import ArithmeticLimits

from .rational import ZERO, RationalValue, make


class MixedNumber(BaseModel):
    """
    Смешанное число: (-1)^is_negative × (whole + fractional_part).

    fractional_part всегда правильная и неотрицательная: 0 ≤ num < den.
    """

    is_negative: bool = Field(..., description="Знак всего числа")
    whole: int = Field(..., ge=0, description="Целая часть (без знака)")
    fractional_part: RationalValue = Field(..., description="Дробная часть (0 ≤ num < den)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_fractional_part(self) -> "MixedNumber":
        """Проверка, что дробная часть правильная и неотрицательная."""
        part = self.fractional_part
        if part.numerator < 0 or part.numerator >= part.denominator:
            raise ValueError(f"fractional_part must satisfy 0 <= num < den, got {part}")
        if self.is_negative and self.whole == 0 and part.is_zero:
            raise ValueError("zero cannot be negative")
        return self

    def __str__(self) -> str:
        """Формат "-w n/d", без дробной части "-w", без целой "-n/d"."""
        sign = "-" if self.is_negative else ""
        part = self.fractional_part
        if not self.has_fraction:
            return f"{sign}{self.whole}"
        if not self.has_whole:
            return f"{sign}{part.numerator}/{part.denominator}"
        return f"{sign}{self.whole} {part.numerator}/{part.denominator}"

    @property
    def has_whole(self) -> bool:
        return self.whole != 0

    @property
    def has_fraction(self) -> bool:
        return not self.fractional_part.is_zero

    def to_rational(self, limits: ArithmeticLimits | None = None) -> RationalValue:
        """Обратное преобразование в RationalValue (limits как у make)."""
        part = self.fractional_part
        numerator = self.whole * part.denominator + part.numerator
        if self.is_negative:
            numerator = -numerator
        return make(numerator, part.denominator, limits)


def to_mixed(value: RationalValue) -> MixedNumber:
    """
    Разложение RationalValue на целую и дробную части.

    Повторной проверки разрядности нет: 0 ≤ remainder < denominator, а
    gcd(remainder, denominator) == gcd(|numerator|, denominator) == 1,
    поэтому дробная часть уже каноническая и не больше исходной дроби.

    Examples:
        >>> to_mixed(make(5, 4))    # 1 1/4
        >>> to_mixed(make(-7, 2))   # -(3 1/2)
        >>> to_mixed(make(3, 4))    # 0 3/4
    """
    whole, remainder = divmod(abs(value.numerator), value.denominator)
    return MixedNumber(
        is_negative=value.is_negative,
        whole=whole,
        fractional_part=(
            RationalValue(numerator=remainder, denominator=value.denominator) if remainder else ZERO
        ),
    )
