"""
JSON Schema Contract Validators

Модуль для валидации wire-представлений value-типов согласно JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (плоские JSON объекты, без вложенного конверта):
- point.json          {x, y}
- size.json           {width, height}
- rect.json           {x, y, width, height}
- line.json           {start: {x, y}, end: {x, y}}
- numeric_range.json  {min, max, value}
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ShapeValidationError(TypeError):
    """
    Данные не соответствуют wire-форме целевого типа.

    Бросается до создания экземпляра: частично заполненный объект
    никогда не создаётся. Исходная ошибка (JSONDecodeError или
    jsonschema.ValidationError) доступна через __cause__.
    """

    def __init__(self, schema_name: str, reason: str):
        super().__init__(f"Invalid {schema_name} representation: {reason}")
        self.schema_name = schema_name
        self.reason = reason


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
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
            schema_name: Имя схемы без расширения (например, 'point')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не является валидной JSON Schema
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

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
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
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Args:
            data: Данные для валидации

        Raises:
            ShapeValidationError: Если данные не соответствуют схеме
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            logger.debug("Rejected %s payload: %s", self.schema_name, e.message)
            raise ShapeValidationError(self.schema_name, e.message) from e

    def is_valid(self, data: Any) -> bool:
        """
        Проверка валидности данных без exception.

        Returns:
            True если данные валидны, False иначе
        """
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            jsonschema.ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)

    def parse(self, text: str) -> Dict[str, Any]:
        """
        Разбор JSON текста с проверкой формы.

        Args:
            text: JSON строка

        Returns:
            Провалидированный dict

        Raises:
            ShapeValidationError: Если текст не является JSON или не соответствует схеме
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.debug("Rejected %s payload: malformed JSON (%s)", self.schema_name, e)
            raise ShapeValidationError(self.schema_name, f"malformed JSON: {e.msg}") from e

        self.validate(data)
        return data


class PointValidator(ContractValidator):
    """Валидатор для point контракта."""

    def __init__(self):
        super().__init__("point")


class SizeValidator(ContractValidator):
    """Валидатор для size контракта."""

    def __init__(self):
        super().__init__("size")


class RectValidator(ContractValidator):
    """Валидатор для rect контракта (плоская форма origin + size)."""

    def __init__(self):
        super().__init__("rect")


class LineValidator(ContractValidator):
    """Валидатор для line контракта (start/end — вложенные point формы)."""

    def __init__(self):
        super().__init__("line")


class NumericRangeValidator(ContractValidator):
    """Валидатор для numeric_range контракта."""

    def __init__(self):
        super().__init__("numeric_range")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_point(data: Any) -> None:
    """
    Валидация point данных.

    Raises:
        ShapeValidationError: Если данные не соответствуют схеме
    """
    PointValidator().validate(data)


def validate_size(data: Any) -> None:
    """
    Валидация size данных.

    Raises:
        ShapeValidationError: Если данные не соответствуют схеме
    """
    SizeValidator().validate(data)


def validate_rect(data: Any) -> None:
    """
    Валидация rect данных.

    Raises:
        ShapeValidationError: Если данные не соответствуют схеме
    """
    RectValidator().validate(data)


def validate_line(data: Any) -> None:
    """
    Валидация line данных.

    Raises:
        ShapeValidationError: Если данные не соответствуют схеме
    """
    LineValidator().validate(data)


def validate_numeric_range(data: Any) -> None:
    """
    Валидация numeric_range данных.

    Raises:
        ShapeValidationError: Если данные не соответствуют схеме
    """
    NumericRangeValidator().validate(data)


def parse_shape(text: str, schema_name: str) -> Dict[str, Any]:
    """
    Разбор JSON строки в dict с проверкой по схеме schema_name.

    Raises:
        ShapeValidationError: Если текст не является JSON или не соответствует схеме
    """
    return ContractValidator(schema_name).parse(text)
