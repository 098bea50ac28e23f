"""
Domain models and value objects.

Contains the exact rational value, its mixed-number view and the
computation trace records.
"""

from ratcalc.core.domain.mixed import MixedNumber, to_mixed
from ratcalc.core.domain.rational import ONE, ZERO, RationalValue, from_int, make
from ratcalc.core.domain.trace import (
    OperationStep,
    Operator,
    StepKind,
    Trace,
    TraceBuilder,
)

__all__ = [
    # Rational value
    "RationalValue",
    "make",
    "from_int",
    "ZERO",
    "ONE",
    # Mixed number
    "MixedNumber",
    "to_mixed",
    # Trace
    "Operator",
    "StepKind",
    "OperationStep",
    "Trace",
    "TraceBuilder",
]
