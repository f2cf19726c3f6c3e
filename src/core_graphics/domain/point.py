"""
Point — Двумерная координата

Immutable Pydantic модель точки на плоскости.
Все операции (add, negate, multiply, pixel_align, ...) возвращают новый
экземпляр; исходная точка никогда не изменяется, поэтому одну и ту же
точку можно безопасно разделять между прямоугольниками и отрезками.

Wire-форма: {"x": number, "y": number}
"""

from __future__ import annotations

import json
import math
from typing import TYPE_CHECKING, Any, Callable, Mapping, NamedTuple, Optional, Union

from pydantic import BaseModel, Field

from core_graphics.contracts import PointValidator
from core_graphics.domain.sources import PointerCoordinateSource, PointType
from core_graphics.math.numerical_safeguards import ieee_divide, round_half_even

if TYPE_CHECKING:
    from core_graphics.domain.rect import Rect


PointLike = Union["Point", Mapping[str, float]]


class RelativePosition(NamedTuple):
    """Положение точки относительно прямоугольника"""

    point: "Point"  # Координаты относительно левого верхнего угла
    progress: "Point"  # Доли ширины/высоты (x / width, y / height)


# =============================================================================
# POINT MODEL
# =============================================================================


class Point(BaseModel):
    """
    Точка с координатами (x, y).

    NaN — допустимое промежуточное состояние: арифметика не проверяет
    координаты и распространяет NaN/Inf дальше.
    """

    x: float = Field(..., description="Координата x")
    y: float = Field(..., description="Координата y")

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Создание
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, x: float, y: float) -> Point:
        """Создание точки из координат."""
        return cls(x=x, y=y)

    @classmethod
    def zero(cls) -> Point:
        """Новая точка (0, 0)."""
        return cls(x=0.0, y=0.0)

    @classmethod
    def coerce(cls, value: PointLike) -> Point:
        """
        Приведение Point или mapping {x, y} к Point.

        Лишние ключи mapping игнорируются.
        """
        if isinstance(value, Point):
            return value
        return cls.model_validate(value)

    @classmethod
    def from_string(cls, text: str) -> Point:
        """
        Создание точки из JSON строки, например '{"x": 10, "y": 20}'.

        Raises:
            ShapeValidationError: Если текст не является point формой
        """
        data = PointValidator().parse(text)
        return cls(x=data["x"], y=data["y"])

    @classmethod
    def from_pointer(
        cls,
        event: Any,
        source: PointerCoordinateSource,
        point_type: PointType = PointType.PAGE,
    ) -> Point:
        """
        Создание точки из события указателя через внешний поставщик координат.

        Args:
            event: Событие платформы (передаётся поставщику как есть)
            source: Поставщик координат
            point_type: Система координат (page/client)
        """
        coordinates = source.get_coordinates(event, point_type)
        return cls.coerce(coordinates)

    @staticmethod
    def is_shape(value: Any) -> bool:
        """Структурная проверка: у значения есть поля x и y."""
        if isinstance(value, Mapping):
            return "x" in value and "y" in value
        return hasattr(value, "x") and hasattr(value, "y")

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    @property
    def value(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    def to_dict(self) -> dict[str, float]:
        return self.value

    def to_string(self) -> str:
        return json.dumps(self.value, separators=(",", ":"))

    def __str__(self) -> str:
        return self.to_string()

    # -------------------------------------------------------------------------
    # Геометрия (вызываются и как Point.distance(a, b))
    # -------------------------------------------------------------------------

    def distance(self, other: Optional[PointLike] = None) -> float:
        """
        Евклидово расстояние до другой точки (по умолчанию — до начала координат).

        Симметрично: Point.distance(a, b) == Point.distance(b, a).
        """
        target = Point.zero() if other is None else Point.coerce(other)
        return math.hypot(self.x - target.x, self.y - target.y)

    def angle(self, other: PointLike) -> float:
        """
        Угол направления на другую точку в градусах.

        atan2(dy, dx) минус 90°, так что 0° соответствует направлению "вверх"
        по оси y.
        """
        target = Point.coerce(other)
        return math.degrees(math.atan2(target.y - self.y, target.x - self.x)) - 90

    def center(self, other: PointLike) -> Point:
        """Середина отрезка между двумя точками."""
        target = Point.coerce(other)
        return Point(x=(self.x + target.x) / 2, y=(self.y + target.y) / 2)

    def is_equal(self, other: Optional[PointLike]) -> bool:
        """Точное покомпонентное равенство (без epsilon); None не равен ничему."""
        if other is None:
            return False
        target = Point.coerce(other)
        return self.x == target.x and self.y == target.y

    @staticmethod
    def closest(*candidates: PointLike) -> Callable[[PointLike], PointLike]:
        """
        Функция выбора ближайшей точки из набора кандидатов.

        Возвращённая функция принимает точку запроса и отдаёт кандидата
        с минимальным расстоянием; при равенстве — первого по порядку.
        """

        def select(query: PointLike) -> PointLike:
            target = Point.coerce(query)
            distances = [target.distance(candidate) for candidate in candidates]
            return candidates[distances.index(min(distances))]

        return select

    def relative_to(self, rect: Rect, scroll: Optional[PointLike] = None) -> RelativePosition:
        """
        Координаты точки относительно левого верхнего угла прямоугольника.

        Args:
            rect: Опорный прямоугольник
            scroll: Смещение прокрутки опорной поверхности (optional)

        Returns:
            RelativePosition: относительная точка и доли (x / width, y / height).
            Для прямоугольника нулевой ширины/высоты доли равны ±inf/nan.
        """
        offset = Point.zero() if scroll is None else Point.coerce(scroll)

        left = rect.x + offset.x
        top = rect.y + offset.y

        x = self.x - left
        y = self.y - top

        return RelativePosition(
            point=Point(x=x, y=y),
            progress=Point(x=ieee_divide(x, rect.width), y=ieee_divide(y, rect.height)),
        )

    # -------------------------------------------------------------------------
    # Операции (возвращают новую точку)
    # -------------------------------------------------------------------------

    def add(self, *points: PointLike) -> Point:
        """Векторная сумма с каждой из точек по порядку."""
        x, y = self.x, self.y
        for point in points:
            other = Point.coerce(point)
            x += other.x
            y += other.y
        return Point(x=x, y=y)

    def negate(self) -> Point:
        return Point(x=-self.x, y=-self.y)

    def subtract(self, point: PointLike) -> Point:
        return self.add(Point.coerce(point).negate())

    def multiply(self, value: float) -> Point:
        return Point(x=self.x * value, y=self.y * value)

    def divide(self, value: float) -> Point:
        """Деление на скаляр; деление на ноль даёт ±inf/nan."""
        return Point(x=ieee_divide(self.x, value), y=ieee_divide(self.y, value))

    def pixel_align(self) -> Point:
        """Округление координат до ближайшего целого (half-even)."""
        return Point(x=round_half_even(self.x), y=round_half_even(self.y))

    round = pixel_align
