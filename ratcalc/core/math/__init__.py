"""
Core math modules для ratcalc

Точная арифметика над RationalValue: цепочки операций, общий знаменатель,
преобразования decimal ↔ fraction.
"""

# Arithmetic Evaluator
from ratcalc.core.math.arithmetic import (
    EvaluationResult,
    OperandSet,
    combine,
    evaluate,
    evaluate_set,
)

# Decimal ↔ Fraction
from ratcalc.core.math.decimals import (
    DecimalConversionResult,
    format_decimal,
    from_decimal,
    terminating_places,
    to_decimal_string,
)

# LCD Engine
from ratcalc.core.math.lcd import (
    MIN_LCD_INPUTS,
    EquivalentFraction,
    LCDResult,
    compute_lcd,
)

__all__ = [
    # Arithmetic — Types
    "EvaluationResult",
    "OperandSet",
    # Arithmetic — Functions
    "combine",
    "evaluate",
    "evaluate_set",
    # Decimal — Types
    "DecimalConversionResult",
    # Decimal — Functions
    "format_decimal",
    "from_decimal",
    "terminating_places",
    "to_decimal_string",
    # LCD — Constants
    "MIN_LCD_INPUTS",
    # LCD — Types
    "EquivalentFraction",
    "LCDResult",
    # LCD — Functions
    "compute_lcd",
]
