"""
JSON Schema Contract Validators

Модуль для валидации JSON конфигурации форматов согласно JSON Schema
контрактам. Использует библиотеку jsonschema (Draft 2020-12).

Схемы (каталог schema/ рядом с модулем):
- number_format_spec.json: сериализованный NumberFormatSpec
- locale_format_request.json: запрос пресета {locale, role, number_field}
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в schema/ внутри пакета contracts и устанавливаются
    вместе с ним.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'number_format_spec')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


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
        return self.validator.is_valid(data)

    def collect_errors(self, data: Dict[str, Any]) -> list[str]:
        """
        Все ошибки валидации в виде "path: message".

        Returns:
            Пустой список, если данные валидны
        """
        errors: list[ValidationError] = sorted(
            self.validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path]
        )
        return [
            f"{'/'.join(str(p) for p in error.absolute_path) or '<root>'}: {error.message}"
            for error in errors
        ]


class NumberFormatSpecValidator(ContractValidator):
    """Валидатор сериализованного NumberFormatSpec."""

    def __init__(self):
        super().__init__("number_format_spec")


class LocaleFormatRequestValidator(ContractValidator):
    """Валидатор запроса пресета локали."""

    def __init__(self):
        super().__init__("locale_format_request")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_number_format_spec(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    NumberFormatSpecValidator().validate(data)


def validate_locale_format_request(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    LocaleFormatRequestValidator().validate(data)
