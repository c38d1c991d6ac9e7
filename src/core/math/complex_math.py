"""
ComplexMath — Transcendental Functions over Complex

Чистые функции без состояния над приближённым Complex:
- Степени и корни: pow, sqrt, cbrt, nth_root
- Экспонента и логарифм: exp, log
- Модуль и аргумент: abs, arg
- Тригонометрия: sin, cos, tan, asin, acos, atan
- Гиперболические: sinh, cosh, tanh

Имена pow/abs намеренно повторяют math/cmath и затеняют builtins внутри
модуля; встроенные pow/abs здесь не используются.

DomainError поднимается для log(0), логарифма по основанию 1, корня
нулевой степени и полюсов tan/tanh (знаменатель формулы точно 0.0).

ФОРМУЛЫ (z = x + yi):
    exp(z)  = e^x · (cos y + i·sin y)
    log(z)  = ln|z| + i·arg(z)
    tan(z)  = (sin 2x + i·sinh 2y) / (cos 2x + cosh 2y)
    tanh(z) = (tanh x + i·tan y) / (1 + i·tanh x · tan y)
    asin(z) = -i · log(iz + sqrt(1 - z²))
    acos(z) = -i · log(z + i·sqrt(1 - z²))
    atan(z) = (i/2) · (log(1 - iz) - log(1 + iz))
"""

import math
from typing import Final, Optional

from src.core.math.complex_float import Complex
from src.core.math.errors import DomainError

# =============================================================================
# CONSTANTS
# =============================================================================

TWO_PI: Final[float] = 2.0 * math.pi

_HALF_I: Final = Complex(0.0, 0.5)
_MINUS_I: Final = Complex.I.negate()


# =============================================================================
# СТЕПЕНИ И КОРНИ
# =============================================================================


def pow(base: Complex, exponent: Complex) -> Complex:
    """
    Комплексная степень base ** exponent = exp(exponent · log(base)).

    Быстрые пути: exponent == 0 → 1, base == 1 → 1, base == e → exp(exponent).

    Raises:
        DomainError: Если base == 0 и exponent != 0 (log(0))
    """
    if exponent == Complex.ZERO:
        return Complex.ONE
    if base == Complex.ONE:
        return Complex.ONE
    if base == Complex.E:
        return exp(exponent)

    return exp(exponent.multiply(log(base)))


def sqrt(z: Complex) -> Complex:
    """
    Главный квадратный корень.

    Для действительных z результат точный в пределах math.sqrt:
    sqrt(-4) = 2i, а не приближение через exp/log.
    """
    if z.is_real():
        if z.real > 0.0:
            return Complex(math.sqrt(z.real))
        return Complex(0.0, math.sqrt(-z.real))

    return nth_root(z, 2)


def cbrt(z: Complex) -> Complex:
    """Главный кубический корень."""
    return nth_root(z, 3)


def nth_root(z: Complex, n: int) -> Complex:
    """
    Главный корень степени n: z ** (1/n).

    Args:
        z: Подкоренное значение
        n: Степень корня (ненулевой int; отрицательная даёт 1 / корень)

    Raises:
        DomainError: Если n == 0, либо z == 0 при n < 0
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")
    if n == 0:
        raise DomainError("The 0th root is undefined.")
    if z == Complex.ZERO and n > 0:
        return Complex.ZERO

    return pow(z, Complex(1.0 / n))


# =============================================================================
# ЭКСПОНЕНТА И ЛОГАРИФМ
# =============================================================================


def exp(z: Complex) -> Complex:
    if z == Complex.ZERO:
        return Complex.ONE
    if z == Complex.ONE:
        return Complex.E
    if z.is_imaginary():
        return _euler(z.imaginary)

    return Complex(math.exp(z.real)).multiply(
        Complex(math.cos(z.imaginary), math.sin(z.imaginary))
    )


def _euler(x: float) -> Complex:
    """e^(ix) с точными значениями на кратных π/2 (по остатку от 2π)."""
    remainder = x % TWO_PI

    if remainder == 0.0:
        return Complex.ONE
    if remainder == 0.5 * math.pi:
        return Complex.I
    if remainder == math.pi:
        return Complex.ONE.negate()
    if remainder == 1.5 * math.pi:
        return _MINUS_I

    return Complex(math.cos(x), math.sin(x))


def log(z: Complex, base: Optional[Complex] = None) -> Complex:
    """
    Главное значение натурального логарифма либо логарифма по основанию base.

    Args:
        z: Аргумент логарифма
        base: Основание (по умолчанию e)

    Returns:
        ln|z| + i·arg(z), либо log(z) / log(base)

    Raises:
        DomainError: Если z == 0, base == 0 или base == 1
    """
    if base is not None:
        if base == Complex.ONE:
            raise DomainError(f"log_1({z}) is undefined.")
        return log(z).divide(log(base))

    if z == Complex.ZERO:
        raise DomainError("log(0) is undefined.")

    return Complex(math.log(abs(z)), arg(z))


# =============================================================================
# МОДУЛЬ И АРГУМЕНТ
# =============================================================================


def abs(z: Complex) -> float:
    """|z| = sqrt(x² + y²) без промежуточного переполнения (math.hypot)."""
    return math.hypot(z.real, z.imaginary)


def arg(z: Complex) -> float:
    """Аргумент z в (-π, π] через atan2."""
    return math.atan2(z.imaginary, z.real)


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def sin(z: Complex) -> Complex:
    return Complex(
        math.sin(z.real) * math.cosh(z.imaginary),
        math.cos(z.real) * math.sinh(z.imaginary),
    )


def cos(z: Complex) -> Complex:
    return Complex(
        math.cos(z.real) * math.cosh(z.imaginary),
        -math.sin(z.real) * math.sinh(z.imaginary),
    )


def tan(z: Complex) -> Complex:
    """
    Raises:
        DomainError: Если cos(2x) + cosh(2y) == 0.0 (полюс)
    """
    denom = math.cos(2.0 * z.real) + math.cosh(2.0 * z.imaginary)

    if denom == 0.0:
        raise DomainError(f"tan({z}) is undefined.")

    return Complex(math.sin(2.0 * z.real) / denom, math.sinh(2.0 * z.imaginary) / denom)


def asin(z: Complex) -> Complex:
    return _MINUS_I.multiply(log(z.multiply(Complex.I).add(sqrt(Complex.ONE.subtract(z.pow(2))))))


def acos(z: Complex) -> Complex:
    return _MINUS_I.multiply(log(z.add(Complex.I.multiply(sqrt(Complex.ONE.subtract(z.pow(2)))))))


def atan(z: Complex) -> Complex:
    """
    Raises:
        DomainError: В точках ветвления z = ±i (log(0))
    """
    iz = Complex.I.multiply(z)
    return _half_i_log(Complex.ONE.subtract(iz)).subtract(_half_i_log(Complex.ONE.add(iz)))


def _half_i_log(z: Complex) -> Complex:
    return _HALF_I.multiply(log(z))


# =============================================================================
# ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def sinh(z: Complex) -> Complex:
    return exp(z).subtract(exp(z.negate())).multiply(Complex.ONE_HALF)


def cosh(z: Complex) -> Complex:
    return exp(z).add(exp(z.negate())).multiply(Complex.ONE_HALF)


def tanh(z: Complex) -> Complex:
    """
    Raises:
        DomainError: Если cosh(2x) + cos(2y) == 0.0 (полюс, z = i·π/2 + i·kπ)
    """
    if math.cosh(2.0 * z.real) + math.cos(2.0 * z.imaginary) == 0.0:
        raise DomainError(f"tanh({z}) is undefined.")

    tanh_re = math.tanh(z.real)
    tan_im = math.tan(z.imaginary)

    return Complex(tanh_re, tan_im).divide(Complex(1.0, tanh_re * tan_im))
