"""
BigRational — Exact Arbitrary-Precision Rational Numbers

Неизменяемое рациональное число: дробь двух неограниченных int.

Модуль обеспечивает точную арифметику без округлений:
- add/subtract/multiply/divide над дробями
- Возведение в целую степень (exponentiation by squaring, O(log|e|))
- Сравнение через знак разности (cross-multiplied comparison)
- Конверсии в int и decimal.Decimal (точные и с округлением)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator != 0 (иначе InvalidConstruction)
2. Операции НЕ сокращают результат; reduce() вызывается явно
3. Равенство определяется значением, а не парой (numerator, denominator):
   BigRational(2, 4) == BigRational(1, 2)
4. signum = sign(numerator) * sign(denominator); отрицательное значение
   может хранить минус в любом из компонентов

ФОРМУЛЫ (a/b, c/d):
    a/b + c/d = (a*d + c*b) / (b*d)
    a/b - c/d = (a*d - c*b) / (b*d)
    a/b * c/d = (a*c) / (b*d)
    a/b / c/d = (a*d) / (b*c)
"""

import decimal
import math
import re
from dataclasses import dataclass
from fractions import Fraction
from typing import ClassVar, Final, Optional

from src.core.math.config import DECIMAL64, ArithmeticConfig
from src.core.math.errors import (
    DivisionByZero,
    InvalidConstruction,
    NonIntegral,
    NonTerminating,
)
from src.core.math.numerical_safeguards import validate_finite

# =============================================================================
# CONSTANTS
# =============================================================================

# Целочисленный литерал для from_strings: знак + десятичные цифры, без пробелов и "_"
INTEGER_LITERAL_PATTERN: Final[str] = r"[+-]?[0-9]+"

_INTEGER_LITERAL: Final = re.compile(INTEGER_LITERAL_PATTERN)

# Контекст без округления: используется только для сдвига порядка (scaleb)
_EXACT_CONTEXT: Final = decimal.Context(
    prec=decimal.MAX_PREC, Emax=decimal.MAX_EMAX, Emin=decimal.MIN_EMIN
)


# =============================================================================
# HELPERS
# =============================================================================


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def _parse_integer(literal: str, name: str) -> int:
    if not isinstance(literal, str) or _INTEGER_LITERAL.fullmatch(literal) is None:
        raise InvalidConstruction(f"{name} is not a decimal integer literal: {literal!r}")
    # int(str) ограничен sys.get_int_max_str_digits(); Decimal -> int нет
    return int(_EXACT_CONTEXT.create_decimal(literal))


def integer_to_string(value: int) -> str:
    """Десятичная запись int любой длины (str(int) ограничен 4300 цифрами)."""
    return str(decimal.Decimal(value))


def _signum(value: int) -> int:
    return (value > 0) - (value < 0)


def _truncated_division(numerator: int, denominator: int) -> int:
    """Целочисленное деление с округлением к нулю (в отличие от floor у //)."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if _signum(numerator) * _signum(denominator) >= 0 else -quotient


def _as_rational(value: object) -> Optional["BigRational"]:
    if isinstance(value, BigRational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigRational(value, 1)
    return None


def _coerce(value: object, name: str) -> "BigRational":
    rational = _as_rational(value)
    if rational is None:
        raise TypeError(f"{name} must be a BigRational or int, got {type(value).__name__}")
    return rational


# =============================================================================
# BIG RATIONAL
# =============================================================================


@dataclass(frozen=True, eq=False)
class BigRational:
    """
    Точное рациональное число numerator/denominator.

    Immutable (frozen=True): каждая операция возвращает новый экземпляр.
    Дробь может храниться несокращённой; каноническую форму даёт reduce().

    Examples:
        >>> BigRational(-4, -2).reduce()
        BigRational(numerator=2, denominator=1)
        >>> BigRational(1, 2) == BigRational(2, 4)
        True
        >>> str(BigRational(7, 10))
        '7/10'
    """

    numerator: int
    denominator: int = 1

    ZERO: ClassVar["BigRational"]
    ONE: ClassVar["BigRational"]
    TWO: ClassVar["BigRational"]
    TEN: ClassVar["BigRational"]
    ONE_HALF: ClassVar["BigRational"]
    ONE_TENTH: ClassVar["BigRational"]

    def __post_init__(self):
        _require_int(self.numerator, "numerator")
        _require_int(self.denominator, "denominator")

        if self.denominator == 0:
            raise InvalidConstruction("Rational numbers must not have a denominator of zero.")

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def from_strings(cls, numerator: str, denominator: str) -> "BigRational":
        """
        Дробь из двух десятичных литералов.

        Args:
            numerator: Литерал числителя, например "7" или "-12"
            denominator: Литерал знаменателя

        Raises:
            InvalidConstruction: Если литерал некорректен или знаменатель равен 0

        Examples:
            >>> str(BigRational.from_strings("7", "10"))
            '7/10'
        """
        return cls(_parse_integer(numerator, "numerator"), _parse_integer(denominator, "denominator"))

    @classmethod
    def value_of(cls, value: int | float, denominator: Optional[int] = None) -> "BigRational":
        """
        Дробь из int (или пары int) либо из float.

        Для float используется десятичная декомпозиция (см. from_float).

        Examples:
            >>> str(BigRational.value_of(3))
            '3'
            >>> str(BigRational.value_of(7, 10))
            '7/10'
            >>> str(BigRational.value_of(0.33))
            '33/100'
        """
        if isinstance(value, float):
            if denominator is not None:
                raise TypeError("float values are converted without an explicit denominator")
            return cls.from_float(value)

        return cls(value, 1 if denominator is None else denominator)

    @classmethod
    def from_float(cls, value: float) -> "BigRational":
        """
        Точная дробь из десятичной записи float.

        Алгоритм (не зависит от locale):
        1. repr(value) даёт кратчайшую десятичную запись, которая round-trip'ится
           в тот же float (возможна научная нотация, например 1e-07)
        2. Запись разбирается как Decimal: цифры → числитель, порядок → степень 10
        3. Отрицательный порядок k → знаменатель 10**(-k);
           неотрицательный → числитель умножается на 10**k, знаменатель 1

        Результат не сокращается: 1.0 → 10/10. Кратчайшая запись содержит
        не более 17 значащих цифр, поэтому числитель ограничен 10**17,
        а знаменатель растёт только с порядком (5e-324 → 5/10**324).

        Raises:
            InvalidConstruction: Если value равно NaN или ±Inf
        """
        validate_finite(value, "value")

        sign, digits, exponent = decimal.Decimal(repr(float(value))).as_tuple()
        numerator = int("".join(str(digit) for digit in digits))
        if sign:
            numerator = -numerator

        if exponent < 0:
            return cls(numerator, 10 ** -exponent)
        return cls(numerator * 10 ** exponent, 1)

    @classmethod
    def from_fraction(cls, value: Fraction) -> "BigRational":
        """Дробь из fractions.Fraction (всегда уже сокращённой)."""
        return cls(value.numerator, value.denominator)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def reduce(self) -> "BigRational":
        """
        Каноническая форма: деление на НОД, знак только в числителе.

        Examples:
            >>> BigRational(-4, -2).reduce()
            BigRational(numerator=2, denominator=1)
            >>> BigRational(3, -6).reduce()
            BigRational(numerator=-1, denominator=2)
            >>> BigRational(0, -5).reduce()
            BigRational(numerator=0, denominator=1)
        """
        gcd = math.gcd(self.numerator, self.denominator)

        return BigRational(
            abs(self.numerator) // gcd * self.signum(),
            abs(self.denominator) // gcd,
        )

    def add(self, addend: "BigRational | int") -> "BigRational":
        addend = _coerce(addend, "addend")
        return BigRational(
            self.numerator * addend.denominator + addend.numerator * self.denominator,
            self.denominator * addend.denominator,
        )

    def subtract(self, subtrahend: "BigRational | int") -> "BigRational":
        subtrahend = _coerce(subtrahend, "subtrahend")
        return BigRational(
            self.numerator * subtrahend.denominator - subtrahend.numerator * self.denominator,
            self.denominator * subtrahend.denominator,
        )

    def multiply(self, factor: "BigRational | int") -> "BigRational":
        factor = _coerce(factor, "factor")
        return BigRational(
            self.numerator * factor.numerator,
            self.denominator * factor.denominator,
        )

    def divide(self, divisor: "BigRational | int") -> "BigRational":
        """
        Частное (a*d)/(b*c).

        Raises:
            DivisionByZero: Если значение делителя равно нулю
        """
        divisor = _coerce(divisor, "divisor")
        if divisor.signum() == 0:
            raise DivisionByZero("Tried to divide a rational number by zero.")

        return BigRational(
            self.numerator * divisor.denominator,
            self.denominator * divisor.numerator,
        )

    def pow(self, exponent: int) -> "BigRational":
        """
        Возведение в целую степень.

        Сложность O(log|exponent|) умножений (exponentiation by squaring).
        Специальные случаи за O(1): exponent == 0, self ∈ {0, 1, -1}.
        Отрицательная степень: invert().pow(-exponent).

        Результат НЕ сокращается.

        Args:
            exponent: Целый показатель (любого знака и размера)

        Raises:
            DivisionByZero: Ноль в отрицательной степени
            TypeError: Если exponent не int

        Examples:
            >>> str(BigRational(2, 3).pow(3))
            '8/27'
            >>> str(BigRational(2, 3).pow(-2))
            '9/4'
        """
        _require_int(exponent, "exponent")

        if exponent == 0:
            return BigRational.ONE
        if exponent < 0:
            return self.invert().pow(-exponent)
        if self == BigRational.ONE:
            return BigRational.ONE
        if self == _MINUS_ONE:
            return BigRational.ONE if exponent % 2 == 0 else self
        if self.signum() == 0:
            return BigRational.ZERO

        base = self
        result = BigRational.ONE

        while exponent > 0:
            if exponent & 1:
                result = result.multiply(base)

            exponent >>= 1
            if exponent:
                base = base.multiply(base)

        return result

    def invert(self) -> "BigRational":
        """
        Обратное значение d/n.

        Raises:
            DivisionByZero: Если числитель равен нулю
        """
        if self.numerator == 0:
            raise DivisionByZero("Tried to invert zero.")

        return BigRational(self.denominator, self.numerator)

    def abs(self) -> "BigRational":
        return self.negate() if self.signum() == -1 else self

    def negate(self) -> "BigRational":
        return BigRational(-self.numerator, self.denominator)

    def signum(self) -> int:
        """-1, 0 или 1: произведение знаков числителя и знаменателя."""
        return _signum(self.numerator) * _signum(self.denominator)

    def min(self, other: "BigRational") -> "BigRational":
        """Меньшее из двух значений; при равенстве возвращается other."""
        other = _coerce(other, "other")
        return self if self.compare_to(other) < 0 else other

    def max(self, other: "BigRational") -> "BigRational":
        """Большее из двух значений; при равенстве возвращается other."""
        other = _coerce(other, "other")
        return self if self.compare_to(other) > 0 else other

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare_to(self, other: "BigRational | int") -> int:
        """
        Сравнение значений: signum(self - other).

        Returns:
            -1 если self < other, 0 если значения равны, 1 если self > other
        """
        return self.subtract(_coerce(other, "other")).signum()

    def equals(self, other: object) -> bool:
        """Равенство значений независимо от представления дроби."""
        rational = _as_rational(other)
        return rational is not None and self.compare_to(rational) == 0

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_integer(self) -> int:
        """
        Точное целое значение дроби.

        Raises:
            NonIntegral: Если дробь не равна целому числу

        Examples:
            >>> BigRational(-6, 3).to_integer()
            -2
        """
        if self.numerator % self.denominator != 0:
            raise NonIntegral(f"{self} cannot be represented as an integer.")

        return self.round_down()

    def round_down(self) -> int:
        """
        Целая часть с отбрасыванием дробной (к нулю, как int(float)).

        Examples:
            >>> BigRational(7, 2).round_down()
            3
            >>> BigRational(-7, 2).round_down()
            -3
        """
        return _truncated_division(self.numerator, self.denominator)

    def to_decimal(self) -> decimal.Decimal:
        """
        Точная конечная десятичная запись.

        Конечная запись существует только если reduced-знаменатель имеет вид
        2**p * 5**q. Тогда n/d = n * (10**k / d) / 10**k, где k = max(p, q).

        Raises:
            NonTerminating: Если знаменатель содержит другие простые множители

        Examples:
            >>> BigRational(3, 8).to_decimal()
            Decimal('0.375')
        """
        reduced = self.reduce()

        rest = reduced.denominator
        twos = fives = 0
        while rest % 2 == 0:
            rest //= 2
            twos += 1
        while rest % 5 == 0:
            rest //= 5
            fives += 1

        if rest != 1:
            raise NonTerminating(f"{self} cannot be represented in decimal.")

        scale = max(twos, fives)
        scaled_numerator = reduced.numerator * (10 ** scale // reduced.denominator)

        return decimal.Decimal(scaled_numerator).scaleb(-scale, context=_EXACT_CONTEXT)

    def round_to_decimal(self, precision: "ArithmeticConfig | int" = DECIMAL64) -> decimal.Decimal:
        """
        Десятичное приближение с заданной точностью.

        Args:
            precision: Количество значащих цифр или ArithmeticConfig
                (по умолчанию DECIMAL64: 16 цифр, ROUND_HALF_EVEN)

        Raises:
            ValueError: Если точность < 1 значащей цифры

        Examples:
            >>> BigRational(1, 3).round_to_decimal(5)
            Decimal('0.33333')
        """
        if not isinstance(precision, ArithmeticConfig):
            precision = ArithmeticConfig(decimal_precision=precision)

        return precision.context().divide(
            decimal.Decimal(self.numerator), decimal.Decimal(self.denominator)
        )

    def to_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    # -------------------------------------------------------------------------
    # Python numeric protocol
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        rational = _as_rational(other)
        if rational is None:
            return NotImplemented
        return self.compare_to(rational) == 0

    def __hash__(self) -> int:
        # Совпадает с hash(int) и hash(Fraction) равного значения
        return hash(Fraction(self.numerator, self.denominator))

    def __lt__(self, other: object) -> bool:
        rational = _as_rational(other)
        if rational is None:
            return NotImplemented
        return self.compare_to(rational) < 0

    def __le__(self, other: object) -> bool:
        rational = _as_rational(other)
        if rational is None:
            return NotImplemented
        return self.compare_to(rational) <= 0

    def __gt__(self, other: object) -> bool:
        rational = _as_rational(other)
        if rational is None:
            return NotImplemented
        return self.compare_to(rational) > 0

    def __ge__(self, other: object) -> bool:
        rational = _as_rational(other)
        if rational is None:
            return NotImplemented
        return self.compare_to(rational) >= 0

    def __add__(self, other: object) -> "BigRational":
        rational = _as_rational(other)
        return NotImplemented if rational is None else self.add(rational)

    def __radd__(self, other: object) -> "BigRational":
        rational = _as_rational(other)
        return NotImplemented if rational is None else rational.add(self)

    def __sub__(self, other: object) -> "BigRational":
        rational = _as_rational(other)
        return NotImplemented if rational is None else self.subtract(rational)

    def __rsub__(self, other: object) -> "BigRational":
        rational = _as_rational(other)
        return NotImplemented if rational is None else rational.subtract(self)

    def __mul__(self, other: object) -> "BigRational":
        rational = _as_rational(other)
        return NotImplemented if rational is None else self.multiply(rational)

    def __rmul__(self, other: object) -> "BigRational":
        rational = _as_rational(other)
        return NotImplemented if rational is None else rational.multiply(self)

    def __truediv__(self, other: object) -> "BigRational":
        rational = _as_rational(other)
        return NotImplemented if rational is None else self.divide(rational)

    def __rtruediv__(self, other: object) -> "BigRational":
        rational = _as_rational(other)
        return NotImplemented if rational is None else rational.divide(self)

    def __pow__(self, exponent: int) -> "BigRational":
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> "BigRational":
        return self.negate()

    def __abs__(self) -> "BigRational":
        return self.abs()

    def __bool__(self) -> bool:
        return self.numerator != 0

    def __int__(self) -> int:
        return self.round_down()

    def __float__(self) -> float:
        return float(self.round_to_decimal(DECIMAL64))

    def __str__(self) -> str:
        if self.denominator in (1, -1):
            return integer_to_string(self.numerator * self.denominator)
        if self.numerator == 0:
            return "0"
        return f"{integer_to_string(self.numerator)}/{integer_to_string(self.denominator)}"

    def __repr__(self) -> str:
        return (
            f"BigRational(numerator={integer_to_string(self.numerator)}, "
            f"denominator={integer_to_string(self.denominator)})"
        )


# =============================================================================
# CONSTANTS
# =============================================================================

BigRational.ZERO = BigRational(0, 1)
BigRational.ONE = BigRational(1, 1)
BigRational.TWO = BigRational(2, 1)
BigRational.TEN = BigRational(10, 1)
BigRational.ONE_HALF = BigRational(1, 2)
BigRational.ONE_TENTH = BigRational(1, 10)

_MINUS_ONE: Final = BigRational(-1, 1)
