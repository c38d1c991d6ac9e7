"""
Тесты для ComplexMath — Transcendental Functions over Complex

Проверяет:
1. Совпадение с cmath (главные значения) в пределах толерантности
2. Быстрые пути (exp(0), exp(1), e^(iπ), pow с base = 1/e)
3. DomainError: log(0), log_1, полюса tan/tanh, корень нулевой степени
"""

import cmath
import math

import pytest

from src.core.math import complex_math
from src.core.math.complex_float import Complex
from src.core.math.errors import DomainError

POINTS = [
    Complex(0.5, 0.25),
    Complex(-1.5, 2.0),
    Complex(2.0, -0.75),
    Complex(-0.3, -0.4),
]


def _close(actual: Complex, expected: complex, tol: float = 1e-9) -> bool:
    return actual.is_close(Complex(expected.real, expected.imag), rel_tol=tol, abs_tol=tol)


class TestAgainstCmath:
    """Главные значения совпадают с cmath."""

    @pytest.mark.parametrize(
        "name",
        ["exp", "log", "sqrt", "sin", "cos", "tan", "asin", "acos", "atan", "sinh", "cosh", "tanh"],
    )
    def test_unary_functions(self, name: str) -> None:
        ours = getattr(complex_math, name)
        reference = getattr(cmath, name)
        for z in POINTS:
            assert _close(ours(z), reference(complex(z))), f"{name}({z})"

    def test_abs_and_arg(self) -> None:
        for z in POINTS:
            assert complex_math.abs(z) == pytest.approx(abs(complex(z)))
            assert complex_math.arg(z) == pytest.approx(cmath.phase(complex(z)))

    def test_pow(self) -> None:
        base, exponent = Complex(1.5, -0.5), Complex(0.75, 0.25)
        assert _close(complex_math.pow(base, exponent), complex(base) ** complex(exponent))

    def test_log_with_base(self) -> None:
        z, base = Complex(8.0), Complex(2.0)
        assert complex_math.log(z, base).is_close(Complex(3.0))

    def test_cbrt_and_nth_root(self) -> None:
        z = Complex(-8.0, 0.0)
        expected = complex(-8.0) ** (1.0 / 3.0)
        assert _close(complex_math.cbrt(z), expected)
        assert _close(complex_math.nth_root(Complex(0.0, 16.0), 4), complex(0.0, 16.0) ** 0.25)
        assert complex_math.nth_root(Complex(4.0), -2).is_close(Complex(0.5))


class TestFastPaths:
    def test_exp_special_values(self) -> None:
        assert complex_math.exp(Complex.ZERO) == Complex.ONE
        assert complex_math.exp(Complex.ONE) == Complex.E

    def test_euler_exact_points(self) -> None:
        """e^(iπ) = -1 точно, без остатка 1.2e-16i."""
        assert complex_math.exp(Complex(0.0, math.pi)) == Complex(-1.0)
        assert complex_math.exp(Complex(0.0, 0.5 * math.pi)) == Complex.I
        assert complex_math.exp(Complex(0.0, 2.0 * math.pi)) == Complex.ONE

    def test_pow_fast_paths(self) -> None:
        z = Complex(0.3, 0.7)
        assert complex_math.pow(z, Complex.ZERO) == Complex.ONE
        assert complex_math.pow(Complex.ONE, z) == Complex.ONE
        assert complex_math.pow(Complex.E, z) == complex_math.exp(z)

    def test_sqrt_real(self) -> None:
        assert complex_math.sqrt(Complex(4.0)) == Complex(2.0)
        assert complex_math.sqrt(Complex(-4.0)) == Complex(0.0, 2.0)
        assert complex_math.sqrt(Complex.ZERO) == Complex.ZERO

    def test_root_of_zero(self) -> None:
        assert complex_math.cbrt(Complex.ZERO) == Complex.ZERO


class TestDomainErrors:
    def test_log_zero(self) -> None:
        with pytest.raises(DomainError, match="log"):
            complex_math.log(Complex.ZERO)

    def test_log_base_one(self) -> None:
        with pytest.raises(DomainError):
            complex_math.log(Complex(5.0), Complex.ONE)

    def test_pow_zero_base(self) -> None:
        with pytest.raises(DomainError):
            complex_math.pow(Complex.ZERO, Complex(2.0))

    def test_tan_pole(self) -> None:
        with pytest.raises(DomainError, match="tan"):
            complex_math.tan(Complex(math.pi / 2))

    def test_tanh_pole(self) -> None:
        with pytest.raises(DomainError, match="tanh"):
            complex_math.tanh(Complex(0.0, math.pi / 2))

    def test_atan_branch_points(self) -> None:
        with pytest.raises(DomainError):
            complex_math.atan(Complex.I)

    def test_zeroth_root(self) -> None:
        with pytest.raises(DomainError):
            complex_math.nth_root(Complex(2.0), 0)

    def test_domain_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            complex_math.log(Complex.ZERO)
