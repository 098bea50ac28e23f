"""
Core exact rational-number engine.

This module contains the integer utilities, the canonical rational value,
the parser, the arithmetic evaluator, the LCD engine and the
decimal <-> fraction converter. Everything here is pure and synchronous.
"""
