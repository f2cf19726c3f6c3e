"""
Sources — внешние поставщики координат

Ядро не знает о событиях ввода и об элементах на экране. Оно получает
уже готовые пары {x, y} и прямоугольники {x, y, width, height} от
внешних адаптеров, которые наследуют базовые классы этого модуля.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Mapping


class PointType(str, Enum):
    """Система координат указателя"""

    PAGE = "page"
    CLIENT = "client"


class PointerCoordinateSource(ABC):
    """
    Поставщик координат указателя.

    По событию платформы (touch / mouse / pointer) возвращает {x, y}
    в выбранной системе координат. Различение типов событий полностью
    лежит на реализации.
    """

    @abstractmethod
    def get_coordinates(self, event: Any, point_type: PointType) -> Mapping[str, float]:
        """Координаты события в системе point_type."""


class BoundingBoxSource(ABC):
    """
    Поставщик ограничивающего прямоугольника внешней поверхности
    (например, отрисованного элемента).
    """

    @abstractmethod
    def get_bounding_rect(self) -> Mapping[str, float]:
        """Прямоугольник {x, y, width, height}."""
