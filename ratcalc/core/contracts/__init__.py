"""
Contract Validation Module

Модуль для валидации JSON контрактов калькуляторов ratcalc.
"""

from .validators import (
    CalculationResultValidator,
    ContractValidator,
    DecimalRequestValidator,
    FractionRequestValidator,
    LCDRequestValidator,
    SchemaLoader,
    validate_calculation_result,
    validate_decimal_request,
    validate_fraction_request,
    validate_lcd_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FractionRequestValidator",
    "LCDRequestValidator",
    "DecimalRequestValidator",
    "CalculationResultValidator",
    # Functions
    "validate_fraction_request",
    "validate_lcd_request",
    "validate_decimal_request",
    "validate_calculation_result",
]
