"""
ratcalc — exact rational-number engine for the fraction calculators.

Public entry points (pure, synchronous, thread-safe):
- parse:             text → RationalValue (integer, fraction, mixed number)
- evaluate:          left-to-right chain of +, -, ×, ÷ with a trace
- compute_lcd:       least common denominator + equivalent fractions
- from_decimal:      terminating decimal text → fraction + mixed number
- to_decimal_string: fraction → exact terminating decimal text
"""

from ratcalc.core.domain import MixedNumber, Operator, RationalValue, StepKind, Trace, make
from ratcalc.core.errors import (
    DecimalFormatError,
    DivisionByZero,
    EmptyInput,
    InsufficientInputs,
    NonTerminatingDecimal,
    OperatorMismatch,
    Overflow,
    ParseError,
    RationalEngineError,
    UnknownOperator,
    ZeroDenominatorError,
)
from ratcalc.core.math import compute_lcd, evaluate, from_decimal, to_decimal_string
from ratcalc.core.parsing import parse

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "parse",
    "evaluate",
    "compute_lcd",
    "from_decimal",
    "to_decimal_string",
    # Types
    "RationalValue",
    "MixedNumber",
    "Operator",
    "StepKind",
    "Trace",
    "make",
    # Errors
    "RationalEngineError",
    "ParseError",
    "DecimalFormatError",
    "ZeroDenominatorError",
    "DivisionByZero",
    "EmptyInput",
    "InsufficientInputs",
    "OperatorMismatch",
    "UnknownOperator",
    "Overflow",
    "NonTerminatingDecimal",
]
