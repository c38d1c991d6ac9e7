"""
Errors — Таксономия исключений числовых типов

Все ошибки немедленные и локальные: поднимаются в точке нарушения и
пропагируют к вызывающему коду без retry и частичных результатов.

Каждое исключение дополнительно наследует подходящий встроенный класс,
поэтому код, ловящий ZeroDivisionError/ValueError/ArithmeticError,
продолжает работать без знания этого модуля.
"""


class NumbersError(Exception):
    """Базовый класс всех ошибок пакета."""

    pass


class InvalidConstruction(NumbersError, ValueError):
    """
    Невозможно сконструировать значение.

    Возникает при:
    - нулевом знаменателе BigRational
    - некорректном целочисленном литерале (from_strings)
    - NaN/Inf при конверсии float → BigRational
    """

    pass


class DivisionByZero(NumbersError, ZeroDivisionError):
    """Деление на точный ноль или инверсия точного нуля (BigRational, ComplexRational)."""

    pass


class NonIntegral(NumbersError, ArithmeticError):
    """Дробь без точного целого значения конвертируется в int."""

    pass


class NonTerminating(NumbersError, ArithmeticError):
    """
    Дробь не представима конечной десятичной записью.

    Reduced-знаменатель содержит простые множители кроме 2 и 5.
    Используйте round_to_decimal(precision) для округлённого результата.
    """

    pass


class DomainError(NumbersError, ValueError):
    """
    Нарушение области определения (только approximate-слой).

    log(0), логарифм по основанию 1, полюса tan/tanh, корень нулевой степени.
    """

    pass
