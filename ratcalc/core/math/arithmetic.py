"""
Arithmetic Evaluator — Цепочка +, -, ×, ÷ над RationalValue

Модуль выполняет цепочку операций строго слева направо (left fold),
а не по приоритету операторов:

    ((a op1 b) op2 c) op3 d ...

Вычитание и деление неассоциативны, поэтому порядок свёртки — часть
контракта: 1/2 - 1/4 - 1/8 = (1/2 - 1/4) - 1/8 = 1/8, а не 3/8.

ФОРМУЛЫ:
    a/b + c/d = (ad + bc) / bd
    a/b - c/d = (ad - bc) / bd
    a/b × c/d = ac / bd
    a/b ÷ c/d = ad / bc      (c == 0 → DivisionByZero)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый промежуточный и итоговый результат проходит через make()
2. Каждое произведение/сумма проверяется на переполнение
3. Trace: на каждую итерацию COMBINE, затем SIMPLIFY; в конце RENDER
"""

from collections.abc import Sequence
from dataclasses import dataclass

from pydantic import BaseModel, Field, field_validator, model_validator

from ratcalc.config import ArithmeticLimits, resolve_limits
from ratcalc.core.domain.mixed import MixedNumber, to_mixed
from ratcalc.core.domain.rational import RationalValue, make
from ratcalc.core.domain.trace import Operator, StepKind, Trace, TraceBuilder
from ratcalc.core.errors import DivisionByZero, EmptyInput, OperatorMismatch
from ratcalc.core.integers import checked_add, checked_mul, gcd
from ratcalc.core.math.decimals import format_decimal
from ratcalc.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class EvaluationResult:
    """Результат вычисления цепочки."""

    result: RationalValue
    trace: Trace

    # Представления итога
    decimal: str  # Десятичное приближение (decimal_display_places знаков)
    mixed: MixedNumber | None  # Только если |numerator| >= denominator


# =============================================================================
# OPERAND SET
# =============================================================================


class OperandSet(BaseModel):
    """
    Явный набор операндов и операторов для evaluate.

    Заменяет неявное «текущее количество дробей» UI: количество операндов
    передаётся значением, а не разделяемым состоянием.
    """

    operands: tuple[RationalValue, ...] = Field(..., min_length=1)
    operators: tuple[Operator, ...] = ()

    model_config = {"frozen": True}

    @field_validator("operators", mode="before")
    @classmethod
    def coerce_symbols(cls, v):
        """Символы (+, -, ×, ÷ ...) приводятся к Operator."""
        return tuple(
            op if isinstance(op, Operator) else Operator.from_symbol(op) for op in v
        )

    @model_validator(mode="after")
    def validate_operator_count(self) -> "OperandSet":
        if len(self.operators) != len(self.operands) - 1:
            raise ValueError(
                f"expected {len(self.operands) - 1} operators for "
                f"{len(self.operands)} operands, got {len(self.operators)}"
            )
        return self

    def __len__(self) -> int:
        return len(self.operands)


# =============================================================================
# COMBINE
# =============================================================================


def _combine_unreduced(
    left: RationalValue,
    right: RationalValue,
    operator: Operator,
    limits: ArithmeticLimits,
) -> tuple[int, int]:
    """Пара (числитель, знаменатель) до нормализации."""
    a, b = left.numerator, left.denominator
    c, d = right.numerator, right.denominator

    if operator == Operator.ADD:
        return (
            checked_add(checked_mul(a, d, limits), checked_mul(b, c, limits), limits),
            checked_mul(b, d, limits),
        )
    if operator == Operator.SUB:
        return (
            checked_add(checked_mul(a, d, limits), -checked_mul(b, c, limits), limits),
            checked_mul(b, d, limits),
        )
    if operator == Operator.MUL:
        return checked_mul(a, c, limits), checked_mul(b, d, limits)
    if operator == Operator.DIV:
        if c == 0:
            raise DivisionByZero(f"cannot divide {left} by zero")
        return checked_mul(a, d, limits), checked_mul(b, c, limits)

    raise ValueError(f"Unknown operator: {operator!r}")


def combine(
    left: RationalValue,
    right: RationalValue,
    operator: Operator,
    limits: ArithmeticLimits | None = None,
) -> RationalValue:
    """
    Одна бинарная операция над двумя дробями.

    Raises:
        DivisionByZero: Деление на нулевой операнд
        Overflow: Промежуточное произведение не представимо
    """
    limits = resolve_limits(limits)
    numerator, denominator = _combine_unreduced(left, right, operator, limits)
    return make(numerator, denominator, limits)


# =============================================================================
# EVALUATE
# =============================================================================


def evaluate(
    operands: Sequence[RationalValue],
    operators: Sequence[Operator | str],
    limits: ArithmeticLimits | None = None,
) -> EvaluationResult:
    """
    Вычисление цепочки операций слева направо с записью trace.

    Args:
        operands: n ≥ 1 операндов
        operators: n - 1 операторов (Operator или символ)
        limits: Лимиты арифметики (default: из настроек)

    Returns:
        EvaluationResult с итогом, trace, десятичным и смешанным представлением

    Raises:
        EmptyInput: Если operands пуст
        OperatorMismatch: Если len(operators) != len(operands) - 1
        DivisionByZero: Деление на нулевой операнд
        Overflow: Выход за разрядность на любом шаге

    Examples:
        >>> evaluate([make(1, 2), make(1, 4), make(1, 8)], ["-", "-"]).result
        RationalValue(numerator=1, denominator=8)
    """
    if not operands:
        raise EmptyInput("evaluate requires at least one operand")
    if len(operators) != len(operands) - 1:
        raise OperatorMismatch(
            f"expected {len(operands) - 1} operators for {len(operands)} operands, "
            f"got {len(operators)}"
        )

    limits = resolve_limits(limits)
    trace = TraceBuilder()

    result = operands[0]
    for operand, raw_operator in zip(operands[1:], operators):
        operator = raw_operator if isinstance(raw_operator, Operator) else Operator.from_symbol(raw_operator)

        unreduced = _combine_unreduced(result, operand, operator, limits)
        combined = make(*unreduced, limits)

        trace.add(
            StepKind.COMBINE,
            combined,
            operands=(result, operand),
            operator=operator,
            unreduced=unreduced,
        )
        trace.add(
            StepKind.SIMPLIFY,
            combined,
            unreduced=unreduced,
            factor=gcd(*unreduced),
        )
        result = combined

    decimal = format_decimal(result, limits.decimal_display_places)
    mixed = None if result.is_proper() else to_mixed(result)
    trace.add(StepKind.RENDER, result, operands=(result,), text=decimal)

    logger.debug(
        "fraction_chain_evaluated",
        operand_count=len(operands),
        result=str(result),
        decimal=decimal,
    )

    return EvaluationResult(result=result, trace=trace.build(), decimal=decimal, mixed=mixed)


def evaluate_set(operand_set: OperandSet, limits: ArithmeticLimits | None = None) -> EvaluationResult:
    """evaluate() для явного OperandSet."""
    return evaluate(operand_set.operands, operand_set.operators, limits)
