"""
Errors — Таксономия ошибок rational engine

Все ошибки восстановимые: движок никогда не завершает процесс,
каждая функция ядра пробрасывает типизированное исключение вызывающему.
Повторные попытки бессмысленны (ошибки детерминированы по входу).

Иерархия:
    RationalEngineError
    ├── ParseError (ValueError)
    │   ├── DecimalFormatError
    │   └── ZeroDenominatorError (+ DivisionByZero)
    ├── DivisionByZero (ZeroDivisionError)
    ├── EmptyInput (ValueError)
    ├── InsufficientInputs (ValueError)
    ├── OperatorMismatch (ValueError)
    ├── UnknownOperator (ValueError)
    ├── Overflow (OverflowError)
    └── NonTerminatingDecimal (ValueError)
"""


class RationalEngineError(Exception):
    """Базовый класс всех ошибок rational engine."""

    pass


class ParseError(RationalEngineError, ValueError):
    """
    Некорректный числовой текст.

    Сообщение показывается пользователю как есть, поэтому reason
    и original_text сохраняются отдельно.
    """

    def __init__(self, reason: str, original_text: str):
        self.reason = reason
        self.original_text = original_text
        super().__init__(f'{reason}: "{original_text}"')


class DecimalFormatError(ParseError):
    """Некорректная десятичная запись (пусто, две точки, не-цифры, inf/nan)."""

    pass


class DivisionByZero(RationalEngineError, ZeroDivisionError):
    """Нулевой знаменатель или деление на нулевой операнд."""

    pass


class ZeroDenominatorError(ParseError, DivisionByZero):
    """Литерал знаменателя `0` в тексте дроби."""

    def __init__(self, original_text: str):
        super().__init__("Denominator must not be zero", original_text)


class EmptyInput(RationalEngineError, ValueError):
    """Пустая последовательность там, где требуется хотя бы один элемент."""

    pass


class InsufficientInputs(RationalEngineError, ValueError):
    """Количество операндов меньше минимума функции."""

    def __init__(self, required: int, given: int):
        self.required = required
        self.given = given
        super().__init__(f"At least {required} inputs are required, got {given}")


class OperatorMismatch(RationalEngineError, ValueError):
    """Количество операторов не равно количеству операндов минус один."""

    pass


class UnknownOperator(RationalEngineError, ValueError):
    """Символ оператора вне закрытого набора +, -, ×, ÷."""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unknown operator: {symbol!r}")


class Overflow(RationalEngineError, OverflowError):
    """Числитель/знаменатель выходит за допустимую разрядность целых."""

    pass


class NonTerminatingDecimal(RationalEngineError, ValueError):
    """Знаменатель после сокращения содержит простые множители кроме 2 и 5."""

    def __init__(self, numerator: int, denominator: int):
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(
            f"{numerator}/{denominator} has no terminating decimal expansion "
            f"(denominator has prime factors other than 2 and 5)"
        )
