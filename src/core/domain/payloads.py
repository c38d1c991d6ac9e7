"""
Payloads — Модели сериализации числовых значений

Immutable Pydantic модели для передачи значений через JSON
(construction-by-components). Полная совместимость с JSON Schema
(contracts/schema/big_rational.json, complex_rational.json, complex.json).

Целые числа передаются десятичными строками: JSON number не гарантирует
точность больших целых, а BigRational не ограничен по размеру.

Строковое представление str(BigRational) НЕ является форматом обмена;
round-trip выполняется только через эти модели.
"""

from pydantic import BaseModel, Field, field_validator

from src.core.math.big_rational import BigRational, integer_to_string
from src.core.math.complex_float import Complex
from src.core.math.complex_rational import ComplexRational

# =============================================================================
# CONSTANTS
# =============================================================================

INTEGER_LITERAL_REGEX = r"^[+-]?[0-9]+$"


# =============================================================================
# RATIONAL PAYLOAD
# =============================================================================


class RationalPayload(BaseModel):
    """
    Сериализованная форма BigRational.

    Дробь передаётся как есть (не сокращается): {"numerator": "-4", "denominator": "-2"}.
    """

    numerator: str = Field(
        ..., pattern=INTEGER_LITERAL_REGEX, description="Десятичный литерал числителя"
    )
    denominator: str = Field(
        ..., pattern=INTEGER_LITERAL_REGEX, description="Десятичный литерал знаменателя (≠ 0)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("denominator")
    @classmethod
    def validate_denominator_non_zero(cls, v: str) -> str:
        """Знаменатель не может быть равен нулю (в любой записи: "0", "-00")."""
        if v.lstrip("+-").strip("0") == "":
            raise ValueError("denominator must not be zero")
        return v

    @classmethod
    def from_value(cls, value: BigRational) -> "RationalPayload":
        return cls(
            numerator=integer_to_string(value.numerator),
            denominator=integer_to_string(value.denominator),
        )

    def to_value(self) -> BigRational:
        return BigRational.from_strings(self.numerator, self.denominator)


# =============================================================================
# COMPLEX RATIONAL PAYLOAD
# =============================================================================


class ComplexRationalPayload(BaseModel):
    """Сериализованная форма ComplexRational: две RationalPayload."""

    real: RationalPayload = Field(..., description="Действительная часть")
    imaginary: RationalPayload = Field(..., description="Мнимая часть")

    model_config = {"frozen": True}

    @classmethod
    def from_value(cls, value: ComplexRational) -> "ComplexRationalPayload":
        return cls(
            real=RationalPayload.from_value(value.real),
            imaginary=RationalPayload.from_value(value.imaginary),
        )

    def to_value(self) -> ComplexRational:
        return ComplexRational(self.real.to_value(), self.imaginary.to_value())


# =============================================================================
# COMPLEX PAYLOAD
# =============================================================================


class ComplexPayload(BaseModel):
    """
    Сериализованная форма приближённого Complex.

    NaN/Inf запрещены: JSON их не представляет.
    """

    real: float = Field(..., description="Действительная часть")
    imaginary: float = Field(..., description="Мнимая часть")

    model_config = {"frozen": True, "allow_inf_nan": False}

    @classmethod
    def from_value(cls, value: Complex) -> "ComplexPayload":
        return cls(real=value.real, imaginary=value.imaginary)

    def to_value(self) -> Complex:
        return Complex(self.real, self.imaginary)
