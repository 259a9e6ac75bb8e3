"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (contracts/schema/):
- vector_snapshot.json: снимок NumericVector (dtype, size, elements)
- extremum_result.json: результат max()/min() (single / ties)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем и устанавливаются
    вместе с пакетом.
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
            schema_name: Имя схемы без расширения (например, 'vector_snapshot')

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

        # Meta-validation самой схемы
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
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class VectorSnapshotValidator(ContractValidator):
    """Валидатор для vector_snapshot контракта"""

    def __init__(self):
        super().__init__("vector_snapshot")


class ExtremumResultValidator(ContractValidator):
    """Валидатор для extremum_result контракта"""

    def __init__(self):
        super().__init__("extremum_result")


# Валидаторы без состояния: создаются один раз при импорте
_VECTOR_SNAPSHOT_VALIDATOR = VectorSnapshotValidator()
_EXTREMUM_RESULT_VALIDATOR = ExtremumResultValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_vector_snapshot(data: Dict[str, Any]) -> None:
    """
    Валидация vector_snapshot данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    _VECTOR_SNAPSHOT_VALIDATOR.validate(data)


def validate_extremum_result(data: Dict[str, Any]) -> None:
    """
    Валидация extremum_result данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    _EXTREMUM_RESULT_VALIDATOR.validate(data)
