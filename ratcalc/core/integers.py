"""
Integer Utilities — GCD/LCM над знаковыми целыми с контролем разрядности

Модуль обеспечивает целочисленные примитивы для rational engine:
- НОД (алгоритм Евклида по абсолютным значениям)
- НОК пары и левая свёртка НОК по последовательности
- Проверку, что значение представимо в выбранной разрядности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(0, 0) не определён (вызывающий обязан проверить заранее)
2. Переполнение никогда не «заворачивается»: выход за лимит → Overflow
3. Все операции детерминированы и не имеют состояния
"""

from collections.abc import Iterable

from ratcalc.config import ArithmeticLimits, resolve_limits
from ratcalc.core.errors import EmptyInput, Overflow


# =============================================================================
# ПРОВЕРКА РАЗРЯДНОСТИ
# =============================================================================


def ensure_representable(value: int, limits: ArithmeticLimits | None = None, what: str = "value") -> int:
    """
    Проверка, что целое помещается в разрядность из limits.

    Args:
        value: Проверяемое значение
        limits: Лимиты арифметики (default: из настроек)
        what: Имя величины для сообщения об ошибке

    Returns:
        value без изменений

    Raises:
        Overflow: Если |value| > 2**(bits-1) - 1
    """
    max_abs = resolve_limits(limits).max_abs
    if max_abs is not None and abs(value) > max_abs:
        raise Overflow(f"{what} {value} exceeds the representable range ±{max_abs}")
    return value


def checked_mul(a: int, b: int, limits: ArithmeticLimits | None = None) -> int:
    """Произведение с проверкой переполнения."""
    return ensure_representable(a * b, limits, what=f"product {a}*{b}")


def checked_add(a: int, b: int, limits: ArithmeticLimits | None = None) -> int:
    """Сумма с проверкой переполнения."""
    return ensure_representable(a + b, limits, what=f"sum {a}+{b}")


# =============================================================================
# НОД / НОК
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида на абсолютных значениях).

    Args:
        a: Первое целое
        b: Второе целое

    Returns:
        gcd(|a|, |b|) > 0

    Raises:
        ValueError: Если a == b == 0

    Examples:
        >>> gcd(12, -18)
        6
        >>> gcd(0, 7)
        7
    """
    if a == 0 and b == 0:
        raise ValueError("gcd(0, 0) is undefined")

    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int, limits: ArithmeticLimits | None = None) -> int:
    """
    Наименьшее общее кратное: |a*b| / gcd(a, b).

    lcm(x, 0) = 0 для любого x (включая 0).

    Raises:
        Overflow: Если произведение a*b не представимо
    """
    if a == 0 or b == 0:
        return 0

    product = checked_mul(a, b, limits)
    return abs(product) // gcd(a, b)


def lcm_all(values: Iterable[int], limits: ArithmeticLimits | None = None) -> int:
    """
    Левая свёртка lcm по непустой последовательности.

    Raises:
        EmptyInput: Если последовательность пуста
        Overflow: Если промежуточное произведение не представимо

    Examples:
        >>> lcm_all([4, 6, 8])
        24
    """
    iterator = iter(values)
    try:
        result = abs(next(iterator))
    except StopIteration:
        raise EmptyInput("lcm_all requires at least one value") from None

    limits = resolve_limits(limits)
    for value in iterator:
        result = lcm(result, value, limits)
    return result
