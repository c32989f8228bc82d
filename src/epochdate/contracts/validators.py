"""
JSON Schema Contract Validators

Модуль для валидации сериализованных дат согласно JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- epoch_date.json (JSON скаляр EpochDate: "YYYY-MM-DD" или null)

Схема проверяет только форму и грубый диапазон годов; точную границу
(2149-06-06) и существование даты проверяет EpochDate.from_json.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в contracts/schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path = Path(__file__).parent / "schema"):
        self._schema_dir = schema_dir
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'epoch_date')

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

        # meta-validation
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

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class EpochDateValidator(ContractValidator):
    """Валидатор для epoch_date контракта (уже декодированный JSON скаляр)."""

    def __init__(self):
        super().__init__("epoch_date")

    def validate_json(self, data: str) -> None:
        """
        Валидация JSON текста (до декодирования).

        Raises:
            json.JSONDecodeError: Если текст не является JSON
            ValidationError: Если скаляр не соответствует схеме
        """
        self.validate(json.loads(data))


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_epoch_date(data: Any) -> None:
    """
    Валидация сериализованной даты.

    Args:
        data: Декодированный JSON скаляр ("YYYY-MM-DD" или None)

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    EpochDateValidator().validate(data)
