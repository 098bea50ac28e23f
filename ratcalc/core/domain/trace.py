"""
Trace — Неизменяемая запись шагов вычисления

OperationStep фиксирует одно действие (разбор, комбинирование, сокращение,
масштабирование, представление). Trace создаётся один раз на вызов через
TraceBuilder и после build() не изменяется: это запись, а не живой лог.
"""

from enum import Enum

from pydantic import BaseModel, Field

from ratcalc.core.errors import UnknownOperator

from .rational import RationalValue


# =============================================================================
# ENUMS
# =============================================================================


class Operator(str, Enum):
    """Арифметический оператор (закрытое перечисление)."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def symbol(self) -> str:
        """Символ для отображения (×, ÷ вместо *, /)."""
        return _DISPLAY_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        """
        Оператор по символу (+, -, *, /, а также ×, ÷, −).

        Raises:
            UnknownOperator: Если символ неизвестен
        """
        key = symbol.strip()
        if key in _SYMBOL_ALIASES:
            return _SYMBOL_ALIASES[key]
        try:
            return cls(key)
        except ValueError:
            raise UnknownOperator(symbol) from None


_DISPLAY_SYMBOLS = {
    Operator.ADD: "+",
    Operator.SUB: "-",
    Operator.MUL: "×",
    Operator.DIV: "÷",
}

_SYMBOL_ALIASES = {
    "×": Operator.MUL,
    "x": Operator.MUL,
    "÷": Operator.DIV,
    "−": Operator.SUB,
}


class StepKind(str, Enum):
    """Тип шага вычисления."""

    PARSE = "PARSE"
    COMBINE = "COMBINE"
    SIMPLIFY = "SIMPLIFY"
    SCALE = "SCALE"
    RENDER = "RENDER"


# =============================================================================
# MODELS
# =============================================================================


class OperationStep(BaseModel):
    """
    Один шаг вычисления.

    unreduced — пара (числитель, знаменатель) до нормализации, если шаг
    её порождает (COMBINE, PARSE десятичной записи, SCALE).
    factor — множитель шага: НОД для SIMPLIFY, множитель для SCALE,
    10^n для PARSE десятичной записи.
    text — исходный текст для PARSE, отображаемая строка для RENDER.
    """

    kind: StepKind
    operands: tuple[RationalValue, ...] = ()
    operator: Operator | None = None
    result: RationalValue
    unreduced: tuple[int, int] | None = None
    factor: int | None = None
    text: str | None = None

    model_config = {"frozen": True}


class Trace(BaseModel):
    """Упорядоченная неизменяемая последовательность OperationStep."""

    steps: tuple[OperationStep, ...] = Field(default=())

    model_config = {"frozen": True}

    def __iter__(self):
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index: int) -> OperationStep:
        return self.steps[index]

    def of_kind(self, kind: StepKind) -> list[OperationStep]:
        """Шаги заданного типа в исходном порядке."""
        return [step for step in self.steps if step.kind == kind]

    def kinds(self) -> list[StepKind]:
        return [step.kind for step in self.steps]


class TraceBuilder:
    """
    Локальный накопитель шагов одного вызова.

    Append-only; build() возвращает неизменяемый Trace.
    """

    def __init__(self):
        self._steps: list[OperationStep] = []

    def add(self, kind: StepKind, result: RationalValue, **fields) -> OperationStep:
        step = OperationStep(kind=kind, result=result, **fields)
        self._steps.append(step)
        return step

    def build(self) -> Trace:
        return Trace(steps=tuple(self._steps))
