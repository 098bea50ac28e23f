"""LCD Calculator — общий знаменатель для списка через запятую."""

from dataclasses import dataclass
from typing import Any, Dict

from ratcalc.config import ArithmeticLimits
from ratcalc.core.contracts.validators import LCDRequestValidator
from ratcalc.core.errors import EmptyInput, InsufficientInputs
from ratcalc.core.math.lcd import MIN_LCD_INPUTS, compute_lcd
from ratcalc.core.parsing.parser import parse_list

from .base import BaseCalculator, _Outcome
from .rendering import format_fraction, format_input, render_trace


@dataclass(frozen=True)
class LCDCalculatorConfig:
    """Значения формы по умолчанию."""

    default_numbers: str = "1/4, 1/6, 1/8"
    separator: str = ","


class LCDCalculator(BaseCalculator):
    """Калькулятор НОЗ: lcd, знаменатели и эквивалентные дроби."""

    name = "lcd"

    def __init__(
        self,
        config: LCDCalculatorConfig | None = None,
        limits: ArithmeticLimits | None = None,
    ):
        super().__init__(LCDRequestValidator(), limits)
        self.config = config or LCDCalculatorConfig()

    def reset_form_data(self) -> Dict[str, Any]:
        return {"numbers": self.config.default_numbers}

    def _compute(self, form_data: Dict[str, Any]) -> _Outcome:
        text = form_data["numbers"]
        if not text.strip():
            raise EmptyInput("no numbers given")

        item_count = len(text.split(self.config.separator))
        if item_count < MIN_LCD_INPUTS:
            raise InsufficientInputs(MIN_LCD_INPUTS, item_count)

        values = parse_list(text, self.config.separator, self.limits)
        lcd_result = compute_lcd(values, self.limits)

        denominators = ", ".join(str(d) for d in lcd_result.denominators)
        steps = [
            "Step 1: Rewrite the input values as fractions: "
            + ", ".join(format_fraction(v) for v in values),
            "Step 2: Find the least common multiple of the denominators:",
            f"Denominators: {denominators}",
            f"LCD = LCM({denominators}) = {lcd_result.lcd}",
            "Step 3: Convert each fraction to have the LCD as denominator:",
        ]
        steps.extend(render_trace(lcd_result.trace))

        return _Outcome(
            result={
                "lcd": lcd_result.lcd,
                "denominators": list(lcd_result.denominators),
                "equivalents": [
                    {
                        "original": format_input(e.original),
                        "multiplier": e.multiplier,
                        "equivalent": str(e),
                    }
                    for e in lcd_result.equivalents
                ],
            },
            steps=steps,
        )
