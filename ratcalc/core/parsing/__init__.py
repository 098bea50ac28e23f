"""Text → RationalValue parsing for integers, fractions and mixed numbers."""

from ratcalc.core.parsing.parser import parse, parse_list

__all__ = ["parse", "parse_list"]
