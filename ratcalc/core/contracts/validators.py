"""
JSON Schema Contract Validators

Модуль для валидации запросов и ответов калькуляторов согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (ratcalc/core/contracts/schema/):
- fraction_request.json
- lcd_request.json
- decimal_request.json
- calculation_result.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def available(self) -> list[str]:
        """Имена всех схем в каталоге (без расширения)."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'lcd_request')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации (ValidationError)."""
        return self.validator.iter_errors(data)

    def first_error_message(self, data: Dict[str, Any]) -> str | None:
        """
        Сообщение самой релевантной ошибки или None, если данные валидны.

        Используется калькуляторами для ответа пользователю.
        """
        error = best_match(self.validator.iter_errors(data))
        if error is None:
            return None
        location = "/".join(str(part) for part in error.absolute_path)
        return f"{location}: {error.message}" if location else error.message


class FractionRequestValidator(ContractValidator):
    """Валидатор запроса калькулятора дробей."""

    def __init__(self):
        super().__init__("fraction_request")


class LCDRequestValidator(ContractValidator):
    """Валидатор запроса калькулятора НОЗ."""

    def __init__(self):
        super().__init__("lcd_request")


class DecimalRequestValidator(ContractValidator):
    """Валидатор запроса калькулятора decimal → fraction."""

    def __init__(self):
        super().__init__("decimal_request")


class CalculationResultValidator(ContractValidator):
    """Валидатор ответа любого калькулятора."""

    def __init__(self):
        super().__init__("calculation_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_fraction_request(data: Dict[str, Any]) -> None:
    """
    Валидация запроса калькулятора дробей.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    FractionRequestValidator().validate(data)


def validate_lcd_request(data: Dict[str, Any]) -> None:
    """
    Валидация запроса калькулятора НОЗ.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    LCDRequestValidator().validate(data)


def validate_decimal_request(data: Dict[str, Any]) -> None:
    """
    Валидация запроса калькулятора decimal → fraction.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DecimalRequestValidator().validate(data)


def validate_calculation_result(data: Dict[str, Any]) -> None:
    """
    Валидация ответа калькулятора.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CalculationResultValidator().validate(data)
