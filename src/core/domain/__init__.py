"""
Domain models and value objects.

Contains the pydantic payload models used to move numeric values across
JSON boundaries.
"""

from src.core.domain.payloads import (
    INTEGER_LITERAL_REGEX,
    ComplexPayload,
    ComplexRationalPayload,
    RationalPayload,
)

__all__ = [
    "INTEGER_LITERAL_REGEX",
    "RationalPayload",
    "ComplexRationalPayload",
    "ComplexPayload",
]
