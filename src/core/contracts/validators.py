"""
JSON Schema Contract Validators

Проверка JSON payload на границах pricing engine (persisted параметры
продажи, запросы создания продажи и котировок) по контрактам
schema/*.json внутри пакета src.core.contracts (Draft 2020-12).

Схемы:
- curve_parameters.json (замороженные параметры продажи)
- sale_launch.json (запрос на создание продажи)
- quote_request.json (запрос котировки)

Все числовые поля контрактов — JSON integer: float отвергается ещё до
Pydantic модели и математики.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

from jsonschema import Draft202012Validator, SchemaError

from src.core.domain.curve_parameters import CurveParameters

# Схемы поставляются как package data рядом с модулем
DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузка и компиляция JSON Schema контрактов.

    Схема читается с диска один раз, проходит meta-validation и хранится
    вместе со скомпилированным Draft202012Validator.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Contract schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._validators: Dict[str, Draft202012Validator] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def available(self) -> List[str]:
        """Имена всех контрактов в каталоге схем."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема контракта по имени (без расширения .json).

        Raises:
            FileNotFoundError: контракт отсутствует
            ValueError: файл не является корректной Draft 2020-12 схемой
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Contract schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except SchemaError as e:
            raise ValueError(f"Contract {schema_name!r} is not a valid schema: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema

    def validator_for(self, schema_name: str) -> Draft202012Validator:
        """Скомпилированный validator контракта (кэшируется)."""
        validator = self._validators.get(schema_name)
        if validator is None:
            validator = Draft202012Validator(self.load_schema(schema_name))
            self._validators[schema_name] = validator
        return validator


@lru_cache(maxsize=None)
def default_loader() -> SchemaLoader:
    """Общий SchemaLoader для DEFAULT_SCHEMA_DIR (создаётся при первом обращении)."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка payload против одного контракта.

    validate() бросает jsonschema.ValidationError на первом нарушении;
    error_messages() собирает все нарушения для диагностики.
    """

    schema_name: str = ""

    def __init__(self, loader: SchemaLoader | None = None):
        self.validator = (loader or default_loader()).validator_for(self.schema_name)

    @property
    def schema(self) -> Dict[str, Any]:
        return self.validator.schema

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: payload не соответствует контракту
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """Все нарушения в виде '<json path>: <message>', по порядку пути."""
        errors = sorted(self.validator.iter_errors(data), key=lambda e: e.json_path)
        return [f"{error.json_path}: {error.message}" for error in errors]


class CurveParametersValidator(ContractValidator):
    """curve_parameters.json: замороженные параметры продажи."""

    schema_name = "curve_parameters"


class SaleLaunchValidator(ContractValidator):
    """sale_launch.json: sale_cap, quad_cap, target_raised."""

    schema_name = "sale_launch"


class QuoteRequestValidator(ContractValidator):
    """quote_request.json: операция Quoter над замороженной кривой."""

    schema_name = "quote_request"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_curve_parameters(data: Dict[str, Any]) -> None:
    """
    Валидация persisted curve_parameters.

    Raises:
        jsonschema.ValidationError: payload не соответствует контракту
    """
    CurveParametersValidator().validate(data)


def validate_sale_launch(data: Dict[str, Any]) -> None:
    """Валидация sale_launch запроса."""
    SaleLaunchValidator().validate(data)


def validate_quote_request(data: Dict[str, Any]) -> None:
    """Валидация quote_request."""
    QuoteRequestValidator().validate(data)


def load_curve_parameters(data: Dict[str, Any]) -> CurveParameters:
    """
    Загрузка persisted параметров: JSON Schema контракт, затем Pydantic модель.

    Схема проверяет форму и диапазоны; модель — межполевой инвариант
    quad_cap <= sale_cap.

    Raises:
        jsonschema.ValidationError: payload не соответствует контракту
        InvalidParameters: нарушен инвариант модели
    """
    validate_curve_parameters(data)
    return CurveParameters.model_validate(data)
