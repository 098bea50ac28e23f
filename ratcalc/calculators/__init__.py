"""Calculators — граница с UI для Fraction, LCD и Decimal-to-Fraction калькуляторов."""

from .base import ERROR_MESSAGES, BaseCalculator, CalculatorResult, error_message
from .decimal_to_fraction_calculator import DecimalToFractionCalculator, DecimalToFractionConfig
from .fraction_calculator import FractionCalculator, FractionCalculatorConfig
from .lcd_calculator import LCDCalculator, LCDCalculatorConfig
from .rendering import format_fraction, format_input, format_mixed, render_trace

__all__ = [
    # Base
    "BaseCalculator",
    "CalculatorResult",
    "ERROR_MESSAGES",
    "error_message",
    # Calculators
    "FractionCalculator",
    "FractionCalculatorConfig",
    "LCDCalculator",
    "LCDCalculatorConfig",
    "DecimalToFractionCalculator",
    "DecimalToFractionConfig",
    # Rendering
    "format_fraction",
    "format_input",
    "format_mixed",
    "render_trace",
]
