"""Rendering — RationalValue, MixedNumber и Trace в строки для отображения.

Trace содержит всё необходимое для восстановления шагов: рендер не
пересчитывает арифметику, а только форматирует записанные значения.
"""

from ratcalc.core.domain.mixed import MixedNumber, to_mixed
from ratcalc.core.domain.rational import RationalValue
from ratcalc.core.domain.trace import OperationStep, StepKind, Trace


# =============================================================================
# VALUES
# =============================================================================


def format_fraction(value: RationalValue, always_show_denominator: bool = False) -> str:
    """'n/d'; целые — просто 'n', если не запрошен явный знаменатель."""
    if value.is_integer and not always_show_denominator:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"


def format_mixed(value: MixedNumber | RationalValue) -> str:
    """'-w n/d' (см. MixedNumber.__str__); RationalValue раскладывается на лету."""
    if isinstance(value, RationalValue):
        value = to_mixed(value)
    return str(value)


def format_pair(numerator: int, denominator: int) -> str:
    return f"{numerator}/{denominator}"


def format_input(value: RationalValue) -> str:
    """Исходное значение для таблиц: неправильная дробь как смешанное число."""
    if value.is_integer or value.is_proper():
        return format_fraction(value)
    return format_mixed(value)


# =============================================================================
# STEPS
# =============================================================================


def _render_parse(step: OperationStep) -> list[str]:
    numerator, denominator = step.unreduced
    places = len(str(step.factor)) - 1
    lines = [f"Input decimal = {step.text}"]
    if places == 0:
        lines.append(f"Whole number = {format_pair(numerator, denominator)}")
        return lines
    lines.append(f"Count decimal places = {places}")
    lines.append(f"Multiply by 10^{places} = {step.factor}")
    lines.append(f"Initial fraction = {format_pair(numerator, denominator)}")
    return lines


def _render_simplify(step: OperationStep, previous: OperationStep | None) -> list[str]:
    numerator, denominator = step.unreduced

    if previous is not None and previous.kind == StepKind.PARSE:
        if denominator == 1:
            return []
        if step.factor > 1:
            return [
                f"Find GCD({abs(numerator)}, {denominator}) = {step.factor}",
                f"Simplify = {format_fraction(step.result, always_show_denominator=True)}",
            ]
        return ["Fraction is already in simplest form"]

    if (numerator, denominator) != step.result.as_tuple():
        return [f"= {format_pair(numerator, denominator)}", f"= {format_fraction(step.result)}"]
    return [f"= {format_fraction(step.result)}"]


def _render_combine(step: OperationStep, previous: OperationStep | None) -> list[str]:
    left, right = step.operands
    lines = []
    if previous is None:
        lines.append(f"Start with: {format_fraction(left)}")
    lines.append(f"{format_fraction(left)} {step.operator.symbol} {format_fraction(right)}")
    return lines


def _render_scale(step: OperationStep) -> list[str]:
    (original,) = step.operands
    numerator, lcd = step.unreduced
    multiplier = step.factor
    return [
        f"{format_input(original)} = {format_fraction(original, always_show_denominator=True)}"
        f" × {multiplier}/{multiplier} = {format_pair(numerator, lcd)}"
    ]


def _render_final(step: OperationStep, trace: Trace) -> list[str]:
    value = step.result
    if trace.of_kind(StepKind.PARSE):
        mixed = to_mixed(value)
        if mixed.has_whole and mixed.has_fraction:
            return [f"Convert to mixed number = {mixed}"]
        return []

    lines = []
    if step.text is not None:
        lines.append(f"Decimal: {step.text}")
    if not value.is_integer and not value.is_proper():
        lines.append(f"Mixed number: {format_mixed(value)}")
    if len(trace) == 1:
        lines.insert(0, f"Start with: {format_fraction(value)}")
    return lines


def render_step(step: OperationStep, previous: OperationStep | None, trace: Trace) -> list[str]:
    """Строки для одного шага (с учётом предыдущего шага)."""
    if step.kind == StepKind.PARSE:
        return _render_parse(step)
    if step.kind == StepKind.SIMPLIFY:
        return _render_simplify(step, previous)
    if step.kind == StepKind.COMBINE:
        return _render_combine(step, previous)
    if step.kind == StepKind.SCALE:
        return _render_scale(step)
    if step.kind == StepKind.RENDER:
        return _render_final(step, trace)
    raise ValueError(f"Unknown step kind: {step.kind!r}")


def render_trace(trace: Trace) -> list[str]:
    """
    Trace → человекочитаемые строки.

    Examples:
        evaluate([1/2, 1/4], ["-"]) →
            ["Start with: 1/2", "1/2 - 1/4", "= 2/8", "= 1/4", "Decimal: 0.25"]
    """
    lines: list[str] = []
    previous = None
    for step in trace:
        lines.extend(render_step(step, previous, trace))
        previous = step
    return lines
