"""Decimal-to-Fraction Calculator — конечная десятичная запись → дробь."""

from dataclasses import dataclass
from typing import Any, Dict

from ratcalc.config import ArithmeticLimits
from ratcalc.core.contracts.validators import DecimalRequestValidator
from ratcalc.core.math.decimals import from_decimal

from .base import BaseCalculator, _Outcome
from .rendering import format_fraction, format_mixed, format_pair, render_trace


@dataclass(frozen=True)
class DecimalToFractionConfig:
    """Значения формы по умолчанию."""

    default_value: str = "0.75"


class DecimalToFractionCalculator(BaseCalculator):
    """Калькулятор decimal → fraction с исходной и сокращённой дробью."""

    name = "decimal_to_fraction"

    def __init__(
        self,
        config: DecimalToFractionConfig | None = None,
        limits: ArithmeticLimits | None = None,
    ):
        super().__init__(DecimalRequestValidator(), limits)
        self.config = config or DecimalToFractionConfig()

    def reset_form_data(self) -> Dict[str, Any]:
        return {"decimal_input": self.config.default_value}

    def _compute(self, form_data: Dict[str, Any]) -> _Outcome:
        conversion = from_decimal(form_data["decimal_input"], self.limits)
        fraction = conversion.fraction
        mixed = conversion.mixed

        return _Outcome(
            result={
                "decimal_input": conversion.text,
                "original": format_pair(*conversion.unreduced),
                "simplified": format_fraction(fraction, always_show_denominator=True),
                "mixed": format_mixed(mixed),
                "whole": mixed.whole,
                "numerator": fraction.numerator,
                "denominator": fraction.denominator,
                "is_negative": conversion.is_negative,
                "decimal_places": conversion.decimal_places,
                "divisor": conversion.divisor,
            },
            steps=render_trace(conversion.trace),
        )
