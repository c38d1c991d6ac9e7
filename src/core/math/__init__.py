"""
Core math modules для exact-numbers

Точные рациональные и комплексно-рациональные числа, приближённые
комплексные числа и трансцендентные функции над ними.
"""

# Errors
from src.core.math.errors import (
    DivisionByZero,
    DomainError,
    InvalidConstruction,
    NonIntegral,
    NonTerminating,
    NumbersError,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    MIN_DECIMAL_PRECISION,
    is_close,
    is_valid_float,
    validate_finite,
    validate_precision,
)

# Config
from src.core.math.config import (
    DECIMAL32,
    DECIMAL64,
    DECIMAL128,
    ArithmeticConfig,
)

# Exact types
from src.core.math.big_rational import BigRational
from src.core.math.complex_rational import ComplexRational

# Approximate types
from src.core.math.complex_float import Complex
from src.core.math import complex_math

__all__ = [
    # Errors
    "NumbersError",
    "InvalidConstruction",
    "DivisionByZero",
    "NonIntegral",
    "NonTerminating",
    "DomainError",
    # Numerical Safeguards
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "MIN_DECIMAL_PRECISION",
    "is_close",
    "is_valid_float",
    "validate_finite",
    "validate_precision",
    # Config
    "ArithmeticConfig",
    "DECIMAL32",
    "DECIMAL64",
    "DECIMAL128",
    # Exact types
    "BigRational",
    "ComplexRational",
    # Approximate types
    "Complex",
    "complex_math",
]
