"""
ComplexRational — Exact Complex Numbers with Rational Components

Неизменяемое комплексное число a + bi, где a и b: BigRational.

Модуль обеспечивает точную комплексную арифметику:
- add/subtract (покомпонентно), multiply, divide, invert
- Целые степени (exponentiation by squaring) с O(1) путями для 0, ±1, ±i
- conjugate/negate/reduce и каноническое строковое представление

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Компоненты не сокращаются автоматически; reduce() сокращает обе части
2. Равенство покомпонентное (по значению каждой BigRational части)
3. Ноль одновременно is_real() и is_imaginary()

ФОРМУЛЫ (x = a + bi, y = c + di):
    x * y = (ac - bd) + (ad + bc)i
    x / y = ((ac + bd) + (bc - ad)i) / (c² + d²)
    1 / x = (a - bi) / (a² + b²)
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from src.core.math.big_rational import BigRational
from src.core.math.errors import DivisionByZero

# =============================================================================
# HELPERS
# =============================================================================


def _as_rational_part(value: object, name: str) -> BigRational:
    if isinstance(value, BigRational):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return BigRational.value_of(value)
    raise TypeError(f"{name} must be a BigRational, int or float, got {type(value).__name__}")


def _as_complex_rational(value: object) -> Optional["ComplexRational"]:
    if isinstance(value, ComplexRational):
        return value
    if isinstance(value, BigRational):
        return ComplexRational(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return ComplexRational(BigRational(value, 1))
    return None


def _coerce(value: object, name: str) -> "ComplexRational":
    number = _as_complex_rational(value)
    if number is None:
        raise TypeError(
            f"{name} must be a ComplexRational, BigRational or int, got {type(value).__name__}"
        )
    return number


# =============================================================================
# COMPLEX RATIONAL
# =============================================================================


@dataclass(frozen=True, eq=False)
class ComplexRational:
    """
    Точное комплексное число real + imaginary·i.

    Immutable (frozen=True). Поддерживает только числа вида x + yi,
    где x, y рациональны.

    Examples:
        >>> str(ComplexRational.value_of(3, 5).conjugate())
        '3 - 5i'
        >>> ComplexRational.I.pow(2) == ComplexRational.ONE.negate()
        True
    """

    real: BigRational
    imaginary: BigRational = BigRational.ZERO

    ZERO: ClassVar["ComplexRational"]
    ONE: ClassVar["ComplexRational"]
    TWO: ClassVar["ComplexRational"]
    TEN: ClassVar["ComplexRational"]
    ONE_HALF: ClassVar["ComplexRational"]
    ONE_TENTH: ClassVar["ComplexRational"]
    I: ClassVar["ComplexRational"]

    def __post_init__(self):
        if not isinstance(self.real, BigRational):
            raise TypeError(f"real must be a BigRational, got {type(self.real).__name__}")
        if not isinstance(self.imaginary, BigRational):
            raise TypeError(
                f"imaginary must be a BigRational, got {type(self.imaginary).__name__}"
            )

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def value_of(
        cls,
        real: "BigRational | int | float",
        imaginary: "BigRational | int | float" = 0,
    ) -> "ComplexRational":
        """
        Комплексное число из int, float или BigRational частей.

        float конвертируется через BigRational.from_float (десятичная декомпозиция).

        Examples:
            >>> str(ComplexRational.value_of(3, 5))
            '3 + 5i'
            >>> str(ComplexRational.value_of(0.5))
            '5/10'
        """
        return cls(_as_rational_part(real, "real"), _as_rational_part(imaginary, "imaginary"))

    @classmethod
    def from_integer(cls, value: int) -> "ComplexRational":
        """Целое число как комплексное с нулевой мнимой частью."""
        return cls(BigRational(value, 1))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, addend: "ComplexRational | BigRational | int") -> "ComplexRational":
        addend = _coerce(addend, "addend")
        return ComplexRational(
            self.real.add(addend.real),
            self.imaginary.add(addend.imaginary),
        )

    def subtract(self, subtrahend: "ComplexRational | BigRational | int") -> "ComplexRational":
        subtrahend = _coerce(subtrahend, "subtrahend")
        return ComplexRational(
            self.real.subtract(subtrahend.real),
            self.imaginary.subtract(subtrahend.imaginary),
        )

    def multiply(self, factor: "ComplexRational | BigRational | int") -> "ComplexRational":
        factor = _coerce(factor, "factor")
        return ComplexRational(
            self.real.multiply(factor.real).subtract(self.imaginary.multiply(factor.imaginary)),
            self.real.multiply(factor.imaginary).add(self.imaginary.multiply(factor.real)),
        )

    def divide(self, divisor: "ComplexRational | BigRational | int") -> "ComplexRational":
        """
        Частное через общий точный делитель c² + d².

        Raises:
            DivisionByZero: Если делитель равен нулю (c² + d² = 0)
        """
        divisor = _coerce(divisor, "divisor")
        denom = divisor._squared_magnitude()

        if denom.signum() == 0:
            raise DivisionByZero("Tried to divide a complex rational number by zero.")

        return ComplexRational(
            self.real.multiply(divisor.real).add(self.imaginary.multiply(divisor.imaginary)).divide(denom),
            self.imaginary.multiply(divisor.real).subtract(self.real.multiply(divisor.imaginary)).divide(denom),
        )

    def pow(self, exponent: int) -> "ComplexRational":
        """
        Возведение в целую степень.

        Сложность O(log|exponent|) умножений. O(1) для exponent == 0 и для
        self ∈ {0, 1, -1, i, -i}:
        - i**n циклически 1, i, -1, -i по n mod 4
        - (-i)**n циклически 1, -i, -1, i по n mod 4
        - (-1)**n чередуется по чётности n

        Отрицательная степень: invert().pow(-exponent).

        Raises:
            DivisionByZero: Ноль в отрицательной степени
            TypeError: Если exponent не int
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"exponent must be an int, got {type(exponent).__name__}")

        if exponent == 0:
            return ComplexRational.ONE
        if exponent < 0:
            return self.invert().pow(-exponent)
        if self == ComplexRational.ONE:
            return ComplexRational.ONE
        if self == ComplexRational.I:
            return _I_CYCLE[exponent % 4]
        if self == _MINUS_I:
            return _MINUS_I_CYCLE[exponent % 4]
        if self == _MINUS_ONE:
            return ComplexRational.ONE if exponent % 2 == 0 else self
        if self == ComplexRational.ZERO:
            return ComplexRational.ZERO

        base = self
        result = ComplexRational.ONE

        while exponent > 0:
            if exponent & 1:
                result = result.multiply(base)

            exponent >>= 1
            if exponent:
                base = base.multiply(base)

        return result

    def negate(self) -> "ComplexRational":
        return ComplexRational(self.real.negate(), self.imaginary.negate())

    def invert(self) -> "ComplexRational":
        """
        1 / (a + bi) = (a - bi) / (a² + b²).

        Raises:
            DivisionByZero: Если число равно нулю
        """
        denom = self._squared_magnitude()

        if denom.signum() == 0:
            raise DivisionByZero("Tried to invert complex rational zero.")

        return ComplexRational(
            self.real.divide(denom),
            self.imaginary.divide(denom).negate(),
        )

    def conjugate(self) -> "ComplexRational":
        return ComplexRational(self.real, self.imaginary.negate())

    def reduce(self) -> "ComplexRational":
        """Сокращение обеих дробей независимо."""
        return ComplexRational(self.real.reduce(), self.imaginary.reduce())

    def is_real(self) -> bool:
        """True если мнимая часть равна нулю (ноль считается и real, и imaginary)."""
        return self.imaginary.signum() == 0

    def is_imaginary(self) -> bool:
        """True если действительная часть равна нулю."""
        return self.real.signum() == 0

    def equals(self, other: object) -> bool:
        number = _as_complex_rational(other)
        return number is not None and self._components_equal(number)

    def _squared_magnitude(self) -> BigRational:
        return self.real.multiply(self.real).add(self.imaginary.multiply(self.imaginary))

    def _components_equal(self, other: "ComplexRational") -> bool:
        return self.real == other.real and self.imaginary == other.imaginary

    # -------------------------------------------------------------------------
    # Python numeric protocol
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        number = _as_complex_rational(other)
        if number is None:
            return NotImplemented
        return self._components_equal(number)

    def __hash__(self) -> int:
        # Действительное значение хешируется как BigRational и int
        if self.is_real():
            return hash(self.real)
        return hash((self.real, self.imaginary))

    def __add__(self, other: object) -> "ComplexRational":
        number = _as_complex_rational(other)
        return NotImplemented if number is None else self.add(number)

    def __radd__(self, other: object) -> "ComplexRational":
        number = _as_complex_rational(other)
        return NotImplemented if number is None else number.add(self)

    def __sub__(self, other: object) -> "ComplexRational":
        number = _as_complex_rational(other)
        return NotImplemented if number is None else self.subtract(number)

    def __rsub__(self, other: object) -> "ComplexRational":
        number = _as_complex_rational(other)
        return NotImplemented if number is None else number.subtract(self)

    def __mul__(self, other: object) -> "ComplexRational":
        number = _as_complex_rational(other)
        return NotImplemented if number is None else self.multiply(number)

    def __rmul__(self, other: object) -> "ComplexRational":
        number = _as_complex_rational(other)
        return NotImplemented if number is None else number.multiply(self)

    def __truediv__(self, other: object) -> "ComplexRational":
        number = _as_complex_rational(other)
        return NotImplemented if number is None else self.divide(number)

    def __rtruediv__(self, other: object) -> "ComplexRational":
        number = _as_complex_rational(other)
        return NotImplemented if number is None else number.divide(self)

    def __pow__(self, exponent: int) -> "ComplexRational":
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> "ComplexRational":
        return self.negate()

    def __bool__(self) -> bool:
        return not (self.is_real() and self.is_imaginary())

    def __complex__(self) -> complex:
        return complex(float(self.real), float(self.imaginary))

    def __str__(self) -> str:
        if self.is_real():
            return str(self.real)

        if self.is_imaginary():
            if self.imaginary == BigRational.ONE:
                return "i"
            if self.imaginary == _MINUS_ONE_RATIONAL:
                return "-i"
            return f"{self.imaginary}i"

        if self.imaginary.signum() < 0:
            coefficient = "" if self.imaginary == _MINUS_ONE_RATIONAL else str(self.imaginary.negate())
            return f"{self.real} - {coefficient}i"

        coefficient = "" if self.imaginary == BigRational.ONE else str(self.imaginary)
        return f"{self.real} + {coefficient}i"


# =============================================================================
# CONSTANTS
# =============================================================================

ComplexRational.ZERO = ComplexRational(BigRational.ZERO)
ComplexRational.ONE_HALF = ComplexRational(BigRational.ONE_HALF)
ComplexRational.ONE_TENTH = ComplexRational(BigRational.ONE_TENTH)
ComplexRational.ONE = ComplexRational.from_integer(1)
ComplexRational.TWO = ComplexRational.from_integer(2)
ComplexRational.TEN = ComplexRational.from_integer(10)
ComplexRational.I = ComplexRational(BigRational.ZERO, BigRational.ONE)

_MINUS_ONE_RATIONAL = BigRational(-1, 1)
_MINUS_ONE = ComplexRational.ONE.negate()
_MINUS_I = ComplexRational.I.negate()

_I_CYCLE = (ComplexRational.ONE, ComplexRational.I, _MINUS_ONE, _MINUS_I)
_MINUS_I_CYCLE = (ComplexRational.ONE, _MINUS_I, _MINUS_ONE, ComplexRational.I)
