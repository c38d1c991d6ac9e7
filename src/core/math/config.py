"""
ArithmeticConfig — Конфигурация десятичного округления

Аналог контекста точности: сколько значащих цифр оставлять и какой режим
округления применять, когда точное значение приходится приближать
десятичной дробью (round_to_decimal, float(BigRational)).
"""

import decimal
from dataclasses import dataclass

from src.core.math.numerical_safeguards import validate_precision


@dataclass(frozen=True)
class ArithmeticConfig:
    """Параметры десятичного округления.

    - decimal_precision: количество значащих цифр результата
    - rounding: режим округления модуля decimal (ROUND_HALF_EVEN, ROUND_DOWN, ...)
    """

    decimal_precision: int = 16
    rounding: str = decimal.ROUND_HALF_EVEN

    def __post_init__(self):
        validate_precision(self.decimal_precision, "decimal_precision")

    def context(self) -> decimal.Context:
        """Новый decimal.Context с параметрами конфигурации."""
        return decimal.Context(prec=self.decimal_precision, rounding=self.rounding)


# IEEE 754-2008 decimal форматы
DECIMAL32 = ArithmeticConfig(decimal_precision=7)
DECIMAL64 = ArithmeticConfig(decimal_precision=16)
DECIMAL128 = ArithmeticConfig(decimal_precision=34)
