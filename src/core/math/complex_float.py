"""
Complex — Approximate Double-Precision Complex Numbers

Неизменяемое комплексное число над парой float.

ВНИМАНИЕ: значения НЕ точные. Для точной арифметики используйте
ComplexRational. Модуль не зависит от точных типов.

Семантика float стандартная (IEEE 754), за одним исключением Python:
деление на точный 0.0 поднимает ZeroDivisionError, а не возвращает Inf/NaN.
"""

import math
from dataclasses import dataclass
from typing import ClassVar, Optional

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
)


def _as_complex(value: object) -> Optional["Complex"]:
    if isinstance(value, Complex):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Complex(float(value))
    return None


def _coerce(value: object, name: str) -> "Complex":
    number = _as_complex(value)
    if number is None:
        raise TypeError(f"{name} must be a Complex, int or float, got {type(value).__name__}")
    return number


@dataclass(frozen=True, eq=False)
class Complex:
    """
    Приближённое комплексное число real + imaginary·i.

    Равенство покомпонентное через IEEE == (NaN != NaN, -0.0 == 0.0).
    Для сравнения результатов вычислений используйте is_close().
    """

    real: float
    imaginary: float = 0.0

    ZERO: ClassVar["Complex"]
    ONE_HALF: ClassVar["Complex"]
    ONE_TENTH: ClassVar["Complex"]
    ONE: ClassVar["Complex"]
    TWO: ClassVar["Complex"]
    E: ClassVar["Complex"]
    PI: ClassVar["Complex"]
    TEN: ClassVar["Complex"]
    I: ClassVar["Complex"]

    def __post_init__(self):
        for name in ("real", "imaginary"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{name} must be a float, got {type(value).__name__}")

        # int → float, чтобы repr/str не зависели от типа аргумента
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imaginary", float(self.imaginary))

    def add(self, addend: "Complex | float") -> "Complex":
        addend = _coerce(addend, "addend")
        return Complex(self.real + addend.real, self.imaginary + addend.imaginary)

    def subtract(self, subtrahend: "Complex | float") -> "Complex":
        subtrahend = _coerce(subtrahend, "subtrahend")
        return Complex(self.real - subtrahend.real, self.imaginary - subtrahend.imaginary)

    def multiply(self, factor: "Complex | float") -> "Complex":
        factor = _coerce(factor, "factor")
        return Complex(
            self.real * factor.real - self.imaginary * factor.imaginary,
            self.real * factor.imaginary + self.imaginary * factor.real,
        )

    def divide(self, divisor: "Complex | float") -> "Complex":
        """
        Частное через c² + d².

        Raises:
            ZeroDivisionError: Если c² + d² == 0.0 (в том числе underflow)
        """
        divisor = _coerce(divisor, "divisor")
        denom = divisor.real * divisor.real + divisor.imaginary * divisor.imaginary

        return Complex(
            (self.real * divisor.real + self.imaginary * divisor.imaginary) / denom,
            (self.imaginary * divisor.real - self.real * divisor.imaginary) / denom,
        )

    def pow(self, exponent: int) -> "Complex":
        """
        Целая степень: тот же алгоритм, что у ComplexRational.pow.

        O(log|exponent|) умножений, O(1) для 0, ±1, ±i и exponent == 0.
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"exponent must be an int, got {type(exponent).__name__}")

        if exponent == 0:
            return Complex.ONE
        if exponent < 0:
            return self.invert().pow(-exponent)
        if self == Complex.ONE:
            return Complex.ONE
        if self == Complex.I:
            return _I_CYCLE[exponent % 4]
        if self == _MINUS_I:
            return _MINUS_I_CYCLE[exponent % 4]
        if self == _MINUS_ONE:
            return Complex.ONE if exponent % 2 == 0 else self
        if self == Complex.ZERO:
            return Complex.ZERO

        base = self
        result = Complex.ONE

        while exponent > 0:
            if exponent & 1:
                result = result.multiply(base)

            exponent >>= 1
            if exponent:
                base = base.multiply(base)

        return result

    def negate(self) -> "Complex":
        return Complex(-self.real, -self.imaginary)

    def invert(self) -> "Complex":
        denom = self.real * self.real + self.imaginary * self.imaginary
        return Complex(self.real / denom, -self.imaginary / denom)

    def conjugate(self) -> "Complex":
        return Complex(self.real, -self.imaginary)

    def is_real(self) -> bool:
        return self.imaginary == 0.0

    def is_imaginary(self) -> bool:
        return self.real == 0.0

    def is_close(
        self,
        other: "Complex | float",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Покомпонентное сравнение с толерантностью (см. numerical_safeguards.is_close)."""
        other = _coerce(other, "other")
        return is_close(self.real, other.real, rel_tol, abs_tol) and is_close(
            self.imaginary, other.imaginary, rel_tol, abs_tol
        )

    def __eq__(self, other: object) -> bool:
        number = _as_complex(other)
        if number is None:
            return NotImplemented
        return self.real == number.real and self.imaginary == number.imaginary

    def __hash__(self) -> int:
        return hash(complex(self.real, self.imaginary))

    def __add__(self, other: object) -> "Complex":
        number = _as_complex(other)
        return NotImplemented if number is None else self.add(number)

    def __radd__(self, other: object) -> "Complex":
        number = _as_complex(other)
        return NotImplemented if number is None else number.add(self)

    def __sub__(self, other: object) -> "Complex":
        number = _as_complex(other)
        return NotImplemented if number is None else self.subtract(number)

    def __rsub__(self, other: object) -> "Complex":
        number = _as_complex(other)
        return NotImplemented if number is None else number.subtract(self)

    def __mul__(self, other: object) -> "Complex":
        number = _as_complex(other)
        return NotImplemented if number is None else self.multiply(number)

    def __rmul__(self, other: object) -> "Complex":
        number = _as_complex(other)
        return NotImplemented if number is None else number.multiply(self)

    def __truediv__(self, other: object) -> "Complex":
        number = _as_complex(other)
        return NotImplemented if number is None else self.divide(number)

    def __rtruediv__(self, other: object) -> "Complex":
        number = _as_complex(other)
        return NotImplemented if number is None else number.divide(self)

    def __pow__(self, exponent: int) -> "Complex":
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> "Complex":
        return self.negate()

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    def __str__(self) -> str:
        if self.is_real():
            return repr(self.real)
        if self.is_imaginary():
            if self.imaginary == 1.0:
                return "i"
            if self.imaginary == -1.0:
                return "-i"
            return f"{self.imaginary!r}i"
        if self.imaginary < 0:
            coefficient = "" if self.imaginary == -1.0 else repr(-self.imaginary)
            return f"{self.real!r} - {coefficient}i"
        coefficient = "" if self.imaginary == 1.0 else repr(self.imaginary)
        return f"{self.real!r} + {coefficient}i"


Complex.ZERO = Complex(0.0)
Complex.ONE_HALF = Complex(0.5)
Complex.ONE_TENTH = Complex(0.1)
Complex.ONE = Complex(1.0)
Complex.TWO = Complex(2.0)
Complex.E = Complex(math.e)
Complex.PI = Complex(math.pi)
Complex.TEN = Complex(10.0)
Complex.I = Complex(0.0, 1.0)

_MINUS_ONE = Complex(-1.0)
_MINUS_I = Complex(0.0, -1.0)

_I_CYCLE = (Complex.ONE, Complex.I, _MINUS_ONE, _MINUS_I)
_MINUS_I_CYCLE = (Complex.ONE, _MINUS_I, _MINUS_ONE, Complex.I)
