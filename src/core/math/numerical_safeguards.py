"""
Numerical Safeguards — Float Guards for Exact & Approximate Types

Модуль изолирует все проверки float на границе между точной и
приближённой арифметикой:
- Валидация float перед конверсией в BigRational (NaN/Inf запрещены)
- Epsilon-сравнения для Complex (приближённый слой)
- Валидация точности для десятичного округления

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в точный слой (InvalidConstruction)
2. Точность округления всегда >= 1 значащей цифры
3. Все операции детерминированы и не зависят от locale
"""

import math
from typing import Final

from src.core.math.errors import InvalidConstruction

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close около нуля, где относительная толерантность бесполезна
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Минимальная точность десятичного округления (значащие цифры)
MIN_DECIMAL_PRECISION: Final[int] = 1


# =============================================================================
# ВАЛИДАЦИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> float:
    """
    Валидация, что float конечен и может быть представлен точно.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        InvalidConstruction: Если value равно NaN или ±Inf

    Examples:
        >>> validate_finite(0.33, "value")
        0.33
    """
    if not is_valid_float(value):
        raise InvalidConstruction(
            f"{name} must be a finite float to be represented exactly, got {value}"
        )
    return value


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ ТОЧНОСТИ
# =============================================================================


def validate_precision(precision: int, name: str = "precision") -> int:
    """
    Валидация количества значащих цифр для десятичного округления.

    Args:
        precision: Количество значащих цифр
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        precision без изменений

    Raises:
        TypeError: Если precision не int
        ValueError: Если precision < MIN_DECIMAL_PRECISION
    """
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError(f"{name} must be an int, got {type(precision).__name__}")

    if precision < MIN_DECIMAL_PRECISION:
        raise ValueError(
            f"{name} must be >= {MIN_DECIMAL_PRECISION} significant digits, got {precision}"
        )

    return precision
