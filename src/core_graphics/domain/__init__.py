"""
Domain models и value objects.

Содержит value-типы ядра: Point, Size, Rect, Line, NumericRange.
"""

from core_graphics.domain.line import Line
from core_graphics.domain.numeric_range import (
    DEFAULT_MAX,
    DEFAULT_MIN,
    DEFAULT_STEP,
    DEFAULT_VALUE,
    EMPTY_VALUE,
    NumericRange,
    NumericRangeOptions,
    RangeBoundsError,
)
from core_graphics.domain.point import Point, RelativePosition
from core_graphics.domain.rect import Rect, RectEdges
from core_graphics.domain.size import Size
from core_graphics.domain.sources import (
    BoundingBoxSource,
    PointerCoordinateSource,
    PointType,
)

__all__ = [
    # Geometry
    "Point",
    "RelativePosition",
    "Size",
    "Rect",
    "RectEdges",
    "Line",
    # Numeric range
    "NumericRange",
    "NumericRangeOptions",
    "RangeBoundsError",
    "DEFAULT_MIN",
    "DEFAULT_MAX",
    "DEFAULT_STEP",
    "DEFAULT_VALUE",
    "EMPTY_VALUE",
    # External sources
    "PointType",
    "PointerCoordinateSource",
    "BoundingBoxSource",
]
