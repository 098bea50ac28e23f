"""Общая часть калькуляторов: результат, маппинг ошибок, шаблон calculate().

Калькулятор — граница с UI: принимает сырые поля формы (dict), валидирует
их по JSON Schema контракту, вызывает ядро и возвращает CalculatorResult.
Ошибки ядра не пробрасываются: они превращаются в сообщение пользователю,
а ранее показанное состояние UI остаётся нетронутым.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from ratcalc.config import ArithmeticLimits, resolve_limits
from ratcalc.core.contracts.validators import ContractValidator
from ratcalc.core.errors import (
    DivisionByZero,
    EmptyInput,
    InsufficientInputs,
    NonTerminatingDecimal,
    OperatorMismatch,
    Overflow,
    ParseError,
    RationalEngineError,
    UnknownOperator,
)
from ratcalc.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CalculatorResult:
    """Ответ калькулятора (соответствует calculation_result.json)."""

    calculator: str
    result: Dict[str, Any] | None
    steps: tuple[str, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "calculator": self.calculator,
            "ok": self.ok,
            "result": self.result,
            "steps": list(self.steps),
            "error": self.error,
        }


# =============================================================================
# ERROR MESSAGES
# =============================================================================

# Порядок важен: первый подходящий класс побеждает (подклассы раньше базовых)
ERROR_MESSAGES: tuple[tuple[type[RationalEngineError], str], ...] = (
    (DivisionByZero, "Cannot divide by zero."),
    (InsufficientInputs, "Please enter at least 2 numbers or fractions separated by commas."),
    (EmptyInput, "Please enter some numbers or fractions."),
    (OperatorMismatch, "Each pair of fractions needs exactly one operator."),
    (UnknownOperator, "Please choose an operator: +, -, × or ÷."),
    (Overflow, "The numbers are too large to calculate exactly."),
    (NonTerminatingDecimal, "This fraction has no terminating decimal form."),
)


def error_message(error: RationalEngineError) -> str:
    """
    Сообщение пользователю для ошибки ядра.

    ParseError показывается дословно (причина + исходный текст).
    """
    if isinstance(error, ParseError):
        return str(error)
    for error_type, message in ERROR_MESSAGES:
        if isinstance(error, error_type):
            return message
    return "Calculation error. Please check your inputs and try again."


# =============================================================================
# BASE CALCULATOR
# =============================================================================


@dataclass(frozen=True)
class _Outcome:
    result: Dict[str, Any]
    steps: list[str] = field(default_factory=list)


class BaseCalculator:
    """
    Шаблон калькулятора.

    Порядок:
    1. Валидация формы по контракту (ошибка → CalculatorResult с error)
    2. Вычисление через ядро (_compute)
    3. RationalEngineError → сообщение пользователю
    """

    name: str = ""

    def __init__(self, validator: ContractValidator, limits: ArithmeticLimits | None = None):
        self._validator = validator
        self._limits = resolve_limits(limits)

    @property
    def limits(self) -> ArithmeticLimits:
        return self._limits

    def calculate(self, form_data: Dict[str, Any]) -> CalculatorResult:
        """Вычисление по данным формы; никогда не бросает RationalEngineError."""
        contract_error = self._validator.first_error_message(form_data)
        if contract_error is not None:
            logger.warning("calculator_request_rejected", calculator=self.name, reason=contract_error)
            return self._failure(f"Invalid request: {contract_error}")

        try:
            outcome = self._compute(form_data)
        except RationalEngineError as e:
            logger.warning(
                "calculator_engine_error",
                calculator=self.name,
                error_type=type(e).__name__,
                error=str(e),
            )
            return self._failure(error_message(e))

        logger.info("calculation_completed", calculator=self.name, step_count=len(outcome.steps))
        return CalculatorResult(
            calculator=self.name,
            result=outcome.result,
            steps=tuple(outcome.steps),
        )

    def _failure(self, message: str) -> CalculatorResult:
        return CalculatorResult(calculator=self.name, result=None, error=message)

    def _compute(self, form_data: Dict[str, Any]) -> _Outcome:
        raise NotImplementedError
