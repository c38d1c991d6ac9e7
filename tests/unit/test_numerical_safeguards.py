"""
Тесты для модуля Numerical Safeguards и ArithmeticConfig

Проверяет:
1. Детекцию NaN/Inf перед конверсией float в точный слой
2. Epsilon-сравнения float
3. Валидацию точности округления
4. Пресеты ArithmeticConfig и построение decimal.Context
"""

import decimal
import math

import pytest

from src.core.math.config import DECIMAL32, DECIMAL64, DECIMAL128, ArithmeticConfig
from src.core.math.errors import InvalidConstruction, NumbersError
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    MIN_DECIMAL_PRECISION,
    is_close,
    is_valid_float,
    validate_finite,
    validate_precision,
)

# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ FLOAT
# =============================================================================


class TestFloatValidation:
    def test_valid_floats(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)
        assert is_valid_float(5e-324)

    def test_invalid_floats(self) -> None:
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)

    def test_validate_finite_passthrough(self) -> None:
        assert validate_finite(0.33, "value") == 0.33

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_validate_finite_rejects(self, value: float) -> None:
        with pytest.raises(InvalidConstruction, match="weight"):
            validate_finite(value, "weight")

    def test_invalid_construction_hierarchy(self) -> None:
        """InvalidConstruction ловится и как ValueError, и как NumbersError."""
        with pytest.raises(ValueError):
            validate_finite(math.nan, "value")
        with pytest.raises(NumbersError):
            validate_finite(math.nan, "value")


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestEpsilonComparisons:
    def test_defaults(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_is_close_relative(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert not is_close(1.0, 1.0 + 1e-6)
        assert is_close(1e20, 1e20 * (1 + 1e-10))

    def test_is_close_near_zero(self) -> None:
        assert is_close(0.0, 1e-13)
        assert not is_close(0.0, 1e-6)

    def test_is_close_custom_tolerance(self) -> None:
        assert is_close(1.0, 1.01, rel_tol=0.1)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ ТОЧНОСТИ
# =============================================================================


class TestPrecisionValidation:
    def test_valid(self) -> None:
        assert validate_precision(MIN_DECIMAL_PRECISION) == 1
        assert validate_precision(34) == 34

    def test_below_minimum(self) -> None:
        with pytest.raises(ValueError, match="digits"):
            validate_precision(0)

    @pytest.mark.parametrize("value", [16.0, "16", True])
    def test_wrong_type(self, value) -> None:
        with pytest.raises(TypeError):
            validate_precision(value)


# =============================================================================
# ТЕСТЫ ArithmeticConfig
# =============================================================================


class TestArithmeticConfig:
    def test_defaults(self) -> None:
        config = ArithmeticConfig()
        assert config.decimal_precision == 16
        assert config.rounding == decimal.ROUND_HALF_EVEN

    def test_presets(self) -> None:
        assert DECIMAL32.decimal_precision == 7
        assert DECIMAL64.decimal_precision == 16
        assert DECIMAL128.decimal_precision == 34

    def test_context(self) -> None:
        context = ArithmeticConfig(decimal_precision=5, rounding=decimal.ROUND_DOWN).context()
        assert context.prec == 5
        assert context.rounding == decimal.ROUND_DOWN
        assert context.divide(decimal.Decimal(2), decimal.Decimal(3)) == decimal.Decimal("0.66666")

    def test_context_is_fresh(self) -> None:
        assert DECIMAL64.context() is not DECIMAL64.context()

    def test_invalid_precision(self) -> None:
        with pytest.raises(ValueError):
            ArithmeticConfig(decimal_precision=0)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DECIMAL64.decimal_precision = 20
