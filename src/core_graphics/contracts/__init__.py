"""
Contract Validation Module

Модуль для валидации JSON wire-представлений value-типов.
"""

from .validators import (
    ContractValidator,
    LineValidator,
    NumericRangeValidator,
    PointValidator,
    RectValidator,
    SchemaLoader,
    ShapeValidationError,
    SizeValidator,
    parse_shape,
    validate_line,
    validate_numeric_range,
    validate_point,
    validate_rect,
    validate_size,
)

__all__ = [
    # Exceptions
    "ShapeValidationError",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PointValidator",
    "SizeValidator",
    "RectValidator",
    "LineValidator",
    "NumericRangeValidator",
    # Functions
    "validate_point",
    "validate_size",
    "validate_rect",
    "validate_line",
    "validate_numeric_range",
    "parse_shape",
]
