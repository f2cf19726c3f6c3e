"""
core_graphics — value-типы двумерной геометрии и ограниченные числовые диапазоны.

Пакет не зависит от внешних систем (DOM, события ввода, рендеринг):
координаты и прямоугольники поступают через базовые классы domain.sources.
"""

from core_graphics.contracts import ShapeValidationError
from core_graphics.domain import (
    Line,
    NumericRange,
    Point,
    RangeBoundsError,
    Rect,
    Size,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Point",
    "Size",
    "Rect",
    "Line",
    "NumericRange",
    "RangeBoundsError",
    "ShapeValidationError",
]
