"""
Тесты для Complex — Approximate Double-Precision Complex Numbers

Проверяет:
1. Арифметику над float-парами
2. pow: squaring + быстрые пути для 0, ±1, ±i
3. IEEE-равенство и толерантное сравнение is_close
4. Строковое представление
"""

import math

import pytest

from src.core.math.complex_float import Complex


class TestArithmetic:
    def test_add_subtract(self) -> None:
        assert Complex(1.0, 2.0).add(Complex(0.5, -1.0)) == Complex(1.5, 1.0)
        assert Complex(1.0, 2.0).subtract(Complex(0.5, -1.0)) == Complex(0.5, 3.0)

    def test_multiply(self) -> None:
        assert Complex(1.0, 2.0).multiply(Complex(3.0, 4.0)) == Complex(-5.0, 10.0)

    def test_divide(self) -> None:
        assert Complex(-5.0, 10.0).divide(Complex(3.0, 4.0)) == Complex(1.0, 2.0)

    def test_divide_by_zero_raises_python_error(self) -> None:
        """Python float деление на 0.0 поднимает ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            Complex.ONE.divide(Complex.ZERO)

    def test_invert(self) -> None:
        assert Complex(0.0, 2.0).invert() == Complex(0.0, -0.5)

    def test_negate_conjugate(self) -> None:
        assert Complex(1.0, -2.0).negate() == Complex(-1.0, 2.0)
        assert Complex(1.0, -2.0).conjugate() == Complex(1.0, 2.0)

    def test_operators(self) -> None:
        z = Complex(1.0, 1.0)
        assert z + 1 == Complex(2.0, 1.0)
        assert 2.0 * z == Complex(2.0, 2.0)
        assert 1 - z == Complex(0.0, -1.0)
        assert z / 2 == Complex(0.5, 0.5)
        assert -z == Complex(-1.0, -1.0)
        assert z**2 == Complex(0.0, 2.0)

    def test_int_components_become_float(self) -> None:
        z = Complex(1, 2)
        assert isinstance(z.real, float)
        assert isinstance(z.imaginary, float)

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(TypeError):
            Complex("1.0")


class TestPow:
    def test_i_cycle(self) -> None:
        assert Complex.I.pow(2) == Complex(-1.0)
        assert Complex.I.pow(3) == Complex(0.0, -1.0)
        assert Complex.I.pow(4) == Complex.ONE
        assert Complex.I.pow(-1) == Complex(0.0, -1.0)

    def test_minus_one_parity(self) -> None:
        minus_one = Complex(-1.0)
        assert minus_one.pow(4) == Complex.ONE
        assert minus_one.pow(5) == minus_one

    def test_zero(self) -> None:
        assert Complex.ZERO.pow(3) == Complex.ZERO
        assert Complex.ZERO.pow(0) == Complex.ONE

    def test_squaring_matches_repeated_multiplication(self) -> None:
        z = Complex(0.5, -1.25)
        expected = Complex.ONE
        for n in range(0, 13):
            assert z.pow(n).is_close(expected)
            expected = expected.multiply(z)

    def test_non_int_exponent_rejected(self) -> None:
        with pytest.raises(TypeError):
            Complex.I.pow(0.5)


class TestEqualityAndPredicates:
    def test_ieee_equality(self) -> None:
        assert Complex(-0.0, 0.0) == Complex.ZERO
        assert Complex(math.nan) != Complex(math.nan)
        assert Complex(1.0) == 1

    def test_is_close(self) -> None:
        assert Complex(0.1 + 0.2, 1.0).is_close(Complex(0.3, 1.0))
        assert not Complex(0.1 + 0.2, 1.0) == Complex(0.3, 1.0)
        assert not Complex(1.0, 1.0).is_close(Complex(1.0, 1.1))

    def test_predicates(self) -> None:
        assert Complex.ZERO.is_real()
        assert Complex.ZERO.is_imaginary()
        assert Complex.I.is_imaginary()
        assert not Complex.I.is_real()

    def test_hash(self) -> None:
        assert hash(Complex(1.0, 2.0)) == hash(Complex(1, 2))
        assert hash(Complex(2.0)) == hash(2) == hash(2.0)
        assert len({Complex(2.0), 2, 2.0}) == 1
        assert hash(Complex(1.0, 2.0)) == hash(1 + 2j)

    def test_builtin_complex(self) -> None:
        assert complex(Complex(1.0, -2.0)) == 1 - 2j


class TestStr:
    def test_forms(self) -> None:
        assert str(Complex(1.5)) == "1.5"
        assert str(Complex.I) == "i"
        assert str(Complex(0.0, -1.0)) == "-i"
        assert str(Complex(0.0, 2.5)) == "2.5i"
        assert str(Complex(3.0, 5.0)) == "3.0 + 5.0i"
        assert str(Complex(3.0, 5.0).conjugate()) == "3.0 - 5.0i"
        assert str(Complex(3.0, 1.0)) == "3.0 + i"
        assert str(Complex(3.0, -1.0)) == "3.0 - i"


class TestConstants:
    def test_values(self) -> None:
        assert Complex.E.real == math.e
        assert Complex.PI.real == math.pi
        assert Complex.ONE_TENTH == Complex(0.1)
        assert Complex.TEN == Complex(10.0)
        assert Complex.TWO == Complex(2.0)
        assert Complex.ONE_HALF == Complex(0.5)
