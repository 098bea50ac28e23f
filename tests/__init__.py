"""
Test suite for ratcalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
