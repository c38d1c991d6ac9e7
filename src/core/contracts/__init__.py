"""
Contract Validation Module

Модуль для валидации JSON контрактов числовых значений.
"""

from .validators import (
    BigRationalValidator,
    ComplexRationalValidator,
    ComplexValidator,
    ContractValidator,
    SchemaLoader,
    load_big_rational,
    load_complex,
    load_complex_rational,
    validate_big_rational,
    validate_complex,
    validate_complex_rational,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigRationalValidator",
    "ComplexRationalValidator",
    "ComplexValidator",
    # Functions
    "validate_big_rational",
    "validate_complex_rational",
    "validate_complex",
    "load_big_rational",
    "load_complex_rational",
    "load_complex",
]
