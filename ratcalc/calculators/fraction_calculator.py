"""Fraction Calculator — цепочка из 2–4 дробей с операторами +, -, ×, ÷.

Количество дробей передаётся явно (OperandSet), а не через состояние UI.
"""

from dataclasses import dataclass
from typing import Any, Dict

from ratcalc.config import ArithmeticLimits
from ratcalc.core.contracts.validators import FractionRequestValidator
from ratcalc.core.errors import OperatorMismatch
from ratcalc.core.math.arithmetic import OperandSet, evaluate_set
from ratcalc.core.parsing.parser import parse

from .base import BaseCalculator, _Outcome
from .rendering import format_fraction, format_mixed, render_trace


@dataclass(frozen=True)
class FractionCalculatorConfig:
    """Значения формы по умолчанию."""

    default_operands: tuple[str, ...] = ("1/2", "1/4", "1/8", "1/16")
    default_operator: str = "+"
    min_operands: int = 2
    max_operands: int = 4


class FractionCalculator(BaseCalculator):
    """Калькулятор дробей: левая свёртка операций над 2–4 операндами."""

    name = "fraction"

    def __init__(
        self,
        config: FractionCalculatorConfig | None = None,
        limits: ArithmeticLimits | None = None,
    ):
        super().__init__(FractionRequestValidator(), limits)
        self.config = config or FractionCalculatorConfig()

    def reset_form_data(self, operand_count: int = 2) -> Dict[str, Any]:
        """
        Данные формы по умолчанию для operand_count дробей.

        Raises:
            ValueError: Если operand_count вне [min_operands, max_operands]
        """
        if not self.config.min_operands <= operand_count <= self.config.max_operands:
            raise ValueError(
                f"operand_count must be in [{self.config.min_operands}, "
                f"{self.config.max_operands}], got {operand_count}"
            )
        return {
            "operands": list(self.config.default_operands[:operand_count]),
            "operators": [self.config.default_operator] * (operand_count - 1),
        }

    def _compute(self, form_data: Dict[str, Any]) -> _Outcome:
        texts = form_data["operands"]
        symbols = form_data["operators"]
        if len(symbols) != len(texts) - 1:
            raise OperatorMismatch(
                f"expected {len(texts) - 1} operators for {len(texts)} operands, got {len(symbols)}"
            )

        operand_set = OperandSet(
            operands=tuple(parse(text, self.limits) for text in texts),
            operators=tuple(symbols),
        )
        evaluation = evaluate_set(operand_set, self.limits)
        value = evaluation.result

        return _Outcome(
            result={
                "fraction": format_fraction(value),
                "numerator": value.numerator,
                "denominator": value.denominator,
                "decimal": evaluation.decimal,
                "mixed_number": format_mixed(evaluation.mixed) if evaluation.mixed is not None and not value.is_integer else None,
            },
            steps=render_trace(evaluation.trace),
        )
