"""
Contract Validators — JSON Schema Boundary for Numeric Payloads

Входящий JSON проходит два слоя:
1. jsonschema (Draft 2020-12) против contracts/schema/<name>.json
2. Pydantic payload модель, которая строит BigRational / ComplexRational / Complex

Оба слоя принимают одни и те же данные; схема остаётся формальным контрактом
для внешних потребителей, модель отвечает за построение значения.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Type

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel

from src.core.domain.payloads import (
    ComplexPayload,
    ComplexRationalPayload,
    RationalPayload,
)
from src.core.math.big_rational import BigRational
from src.core.math.complex_float import Complex
from src.core.math.complex_rational import ComplexRational

# <repo>/contracts/schema
SCHEMA_DIR = Path(__file__).resolve().parents[3] / "contracts" / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Читает схемы из SCHEMA_DIR, проверяет их мета-схемой и кэширует."""

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени без расширения ('big_rational', 'complex', ...).

        Raises:
            FileNotFoundError: Нет файла <schema_name>.json
            ValueError: Файл не является корректной Draft 2020-12 схемой
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Пара (схема, payload модель) для одного числового типа."""

    schema_name: str
    payload_model: Type[BaseModel]

    def __init__(self):
        self.schema = _SCHEMA_LOADER.load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """Raises jsonschema.ValidationError при первом нарушении."""
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(data)

    def load(self, data: Dict[str, Any]):
        """Проверка схемой, затем построение значения через payload модель."""
        self.validate(data)
        return self.payload_model.model_validate(data).to_value()


class BigRationalValidator(ContractValidator):
    schema_name = "big_rational"
    payload_model = RationalPayload


class ComplexRationalValidator(ContractValidator):
    schema_name = "complex_rational"
    payload_model = ComplexRationalPayload


class ComplexValidator(ContractValidator):
    schema_name = "complex"
    payload_model = ComplexPayload


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_big_rational(data: Dict[str, Any]) -> None:
    BigRationalValidator().validate(data)


def validate_complex_rational(data: Dict[str, Any]) -> None:
    ComplexRationalValidator().validate(data)


def validate_complex(data: Dict[str, Any]) -> None:
    ComplexValidator().validate(data)


def load_big_rational(data: Dict[str, Any]) -> BigRational:
    """
    JSON контракт → BigRational (дробь не сокращается).

    Raises:
        jsonschema.ValidationError: Данные не соответствуют big_rational.json
    """
    return BigRationalValidator().load(data)


def load_complex_rational(data: Dict[str, Any]) -> ComplexRational:
    return ComplexRationalValidator().load(data)


def load_complex(data: Dict[str, Any]) -> Complex:
    return ComplexValidator().load(data)
