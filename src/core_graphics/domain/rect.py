"""
Rect — Прямоугольник, выровненный по осям

Immutable Pydantic модель прямоугольника: origin (Point) + size (Size).
Все производные координаты (min/mid/max, углы, середины сторон, центр,
стороны) вычисляются из origin и size при каждом обращении и нигде не
хранятся.

Wire-форма (плоская, композиция наружу не выставляется):
    {"x": number, "y": number, "width": number, "height": number}
"""

from __future__ import annotations

import json
import math
from typing import Any, Mapping, NamedTuple, Optional, Union

from pydantic import BaseModel, Field, model_serializer, model_validator

from core_graphics.contracts import RectValidator, validate_rect
from core_graphics.domain.point import Point, PointLike
from core_graphics.domain.size import Size
from core_graphics.domain.sources import BoundingBoxSource
from core_graphics.math.numerical_safeguards import ieee_divide, round_half_even

RectLike = Union["Rect", Mapping[str, float]]


class RectEdges(NamedTuple):
    """Стороны прямоугольника как пары угловых точек"""

    top: tuple[Point, Point]  # (top_left, top_right)
    right: tuple[Point, Point]  # (top_right, bottom_right)
    bottom: tuple[Point, Point]  # (bottom_left, bottom_right)
    left: tuple[Point, Point]  # (top_left, bottom_left)


# =============================================================================
# RECT MODEL
# =============================================================================


class Rect(BaseModel):
    """
    Прямоугольник с началом в origin и размерами size.

    Координатная математика делегируется Point, размерная — Size.
    Принимает как вложенную форму (origin=..., size=...), так и плоскую
    (x=..., y=..., width=..., height=...).
    """

    origin: Point = Field(..., description="Левый верхний угол")
    size: Size = Field(..., description="Ширина и высота")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def unflatten(cls, data: Any) -> Any:
        """Плоская форма {x, y, width, height} → {origin, size}."""
        if isinstance(data, Mapping) and "origin" not in data and "size" not in data:
            return {
                "origin": {key: data[key] for key in ("x", "y") if key in data},
                "size": {key: data[key] for key in ("width", "height") if key in data},
            }
        return data

    @model_serializer(mode="plain")
    def flatten(self) -> dict[str, float]:
        return self.to_dict()

    # -------------------------------------------------------------------------
    # Создание
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, x: float, y: float, width: float, height: float) -> Rect:
        return cls(origin=Point(x=x, y=y), size=Size(width=width, height=height))

    @classmethod
    def zero(cls) -> Rect:
        """Новый прямоугольник с нулевыми origin и size."""
        return cls(origin=Point.zero(), size=Size.zero())

    @classmethod
    def coerce(cls, value: RectLike) -> Rect:
        if isinstance(value, Rect):
            return value
        return cls.model_validate(value)

    @classmethod
    def from_points(cls, *points: PointLike) -> Rect:
        """
        Минимальный прямоугольник, содержащий все точки.

        Raises:
            ValueError: Если не передано ни одной точки
        """
        if not points:
            raise ValueError("from_points requires at least one point")

        coerced = [Point.coerce(point) for point in points]
        xs = [point.x for point in coerced]
        ys = [point.y for point in coerced]

        x = min(xs)
        y = min(ys)

        return cls.create(x, y, max(xs) - x, max(ys) - y)

    @classmethod
    def from_bounding_box(cls, source: BoundingBoxSource) -> Rect:
        """
        Прямоугольник по ограничивающему боксу внешней поверхности.

        Raises:
            ShapeValidationError: Если поставщик вернул не rect форму
        """
        box = dict(source.get_bounding_rect())
        validate_rect(box)
        return cls.create(box["x"], box["y"], box["width"], box["height"])

    @classmethod
    def from_string(cls, text: str) -> Rect:
        """
        Создание прямоугольника из JSON строки.

        Raises:
            ShapeValidationError: Если текст не является rect формой
        """
        data = RectValidator().parse(text)
        return cls.create(data["x"], data["y"], data["width"], data["height"])

    @staticmethod
    def is_shape(value: Any) -> bool:
        """Структурная проверка: у значения есть и point, и size поля."""
        return Size.is_shape(value) and Point.is_shape(value)

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, float]:
        return {**self.origin.value, **self.size.value}

    @property
    def value(self) -> dict[str, float]:
        return self.to_dict()

    def to_string(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    def __str__(self) -> str:
        return self.to_string()

    # -------------------------------------------------------------------------
    # Геометрические свойства
    # -------------------------------------------------------------------------

    @property
    def x(self) -> float:
        return self.origin.x

    @property
    def y(self) -> float:
        return self.origin.y

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def aspect_ratio(self) -> float:
        return self.size.aspect_ratio

    @property
    def is_empty(self) -> bool:
        return self.size.is_empty

    @property
    def top_left_point(self) -> Point:
        return Point(x=self.min_x, y=self.min_y)

    @property
    def top_right_point(self) -> Point:
        return Point(x=self.max_x, y=self.min_y)

    @property
    def bottom_left_point(self) -> Point:
        return Point(x=self.min_x, y=self.max_y)

    @property
    def bottom_right_point(self) -> Point:
        return Point(x=self.max_x, y=self.max_y)

    @property
    def center_point(self) -> Point:
        return Point(x=self.mid_x, y=self.mid_y)

    @property
    def corner_points(self) -> tuple[Point, Point, Point, Point]:
        """Углы по часовой стрелке: TL, TR, BR, BL."""
        return (
            self.top_left_point,
            self.top_right_point,
            self.bottom_right_point,
            self.bottom_left_point,
        )

    @property
    def top_center_point(self) -> Point:
        return Point(x=self.mid_x, y=self.min_y)

    @property
    def right_center_point(self) -> Point:
        return Point(x=self.max_x, y=self.mid_y)

    @property
    def bottom_center_point(self) -> Point:
        return Point(x=self.mid_x, y=self.max_y)

    @property
    def left_center_point(self) -> Point:
        return Point(x=self.min_x, y=self.mid_y)

    @property
    def center_points(self) -> tuple[Point, Point, Point, Point]:
        """Середины сторон: top, right, bottom, left."""
        return (
            self.top_center_point,
            self.right_center_point,
            self.bottom_center_point,
            self.left_center_point,
        )

    @property
    def edges(self) -> RectEdges:
        return RectEdges(
            top=(self.top_left_point, self.top_right_point),
            right=(self.top_right_point, self.bottom_right_point),
            bottom=(self.bottom_left_point, self.bottom_right_point),
            left=(self.top_left_point, self.bottom_left_point),
        )

    # -------------------------------------------------------------------------
    # Проверки (вызываются и как Rect.intersects(a, b))
    # -------------------------------------------------------------------------

    def is_equal(self, other: Optional[Rect]) -> bool:
        if other is None:
            return False
        return self.origin.is_equal(other.origin) and self.size.is_equal(other.size)

    def contains_point(self, point: PointLike) -> bool:
        """
        Включает ли прямоугольник точку (границы включительно).

        Если x или y самого прямоугольника равны NaN, результат всегда False.
        """
        p = Point.coerce(point)

        if math.isnan(self.x) or math.isnan(self.y):
            return False

        return self.min_x <= p.x <= self.max_x and self.min_y <= p.y <= self.max_y

    def contains_rect(self, rect: RectLike) -> bool:
        """Все четыре угла rect лежат внутри self."""
        other = Rect.coerce(rect)
        return all(self.contains_point(corner) for corner in other.corner_points)

    def contains(self, point_or_rect: Union[PointLike, RectLike]) -> bool:
        if isinstance(point_or_rect, Rect) or (
            isinstance(point_or_rect, Mapping) and Rect.is_shape(point_or_rect)
        ):
            return self.contains_rect(point_or_rect)
        return self.contains_point(point_or_rect)

    def intersects(self, other: RectLike) -> bool:
        """
        Пересекаются ли прямоугольники (separating-axis test).

        Неравенства строгие: касание по стороне или углу пересечением не считается.
        """
        b = Rect.coerce(other)
        return (
            self.min_x < b.max_x
            and self.min_y < b.max_y
            and self.max_x > b.min_x
            and self.max_y > b.min_y
        )

    def overlaps_x(self, other: RectLike) -> bool:
        """Перекрываются ли проекции на ось X."""
        b = Rect.coerce(other)
        return self.min_x < b.max_x and self.max_x > b.min_x

    def overlaps_y(self, other: RectLike) -> bool:
        """Перекрываются ли проекции на ось Y."""
        b = Rect.coerce(other)
        return self.min_y < b.max_y and self.max_y > b.min_y

    def overlaps(self, other: RectLike) -> bool:
        """
        Перекрытие хотя бы по одной из осей.

        Более слабое отношение, чем intersects: прямоугольники в одной
        "строке", но разнесённые по горизонтали, перекрываются (по Y),
        но не пересекаются.
        """
        return self.overlaps_x(other) or self.overlaps_y(other)

    def distance_from_point(self, point: PointLike) -> float:
        """
        Расстояние от точки до прямоугольника (0, если точка внутри).

        По каждой оси берётся зазор до ближайшей стороны (0 внутри
        проекции), результат — евклидова норма двух зазоров.
        """
        p = Point.coerce(point)

        dx = 0.0
        if p.x < self.min_x:
            dx = self.min_x - p.x
        elif p.x > self.max_x:
            dx = p.x - self.max_x

        dy = 0.0
        if p.y < self.min_y:
            dy = self.min_y - p.y
        elif p.y > self.max_y:
            dy = p.y - self.max_y

        return Point(x=dx, y=dy).distance()

    # -------------------------------------------------------------------------
    # Комбинирование
    # -------------------------------------------------------------------------

    def intersection(self, other: RectLike) -> Rect:
        """
        Общая часть двух прямоугольников.

        ВАЖНО: для непересекающихся прямоугольников ширина/высота
        получаются отрицательными. Проверяйте intersects заранее.
        """
        b = Rect.coerce(other)

        x = max(self.x, b.x)
        y = max(self.y, b.y)
        x2 = min(self.max_x, b.max_x)
        y2 = min(self.max_y, b.max_y)

        return Rect.create(x, y, x2 - x, y2 - y)

    @classmethod
    def merge(cls, *rects: RectLike) -> Rect:
        """
        Ограничивающий прямоугольник объединения.

        Raises:
            ValueError: Если не передано ни одного прямоугольника
        """
        if not rects:
            raise ValueError("merge requires at least one rect")

        coerced = [cls.coerce(rect) for rect in rects]
        low = Point(x=min(r.min_x for r in coerced), y=min(r.min_y for r in coerced))
        high = Point(x=max(r.max_x for r in coerced), y=max(r.max_y for r in coerced))

        return cls.from_points(low, high)

    # -------------------------------------------------------------------------
    # Операции (возвращают новый прямоугольник)
    # -------------------------------------------------------------------------

    def inflate(self, delta: float) -> Rect:
        """Каждая сторона сдвигается наружу на delta."""
        if delta == 0:
            return self
        return Rect(
            origin=self.origin.add(Point(x=-delta, y=-delta)),
            size=Size(width=self.width + 2 * delta, height=self.height + 2 * delta),
        )

    def inset(self, delta: float) -> Rect:
        """Каждая сторона сдвигается внутрь на delta; размеры не уходят ниже 0."""
        return Rect.create(
            self.x + delta,
            self.y + delta,
            max(0.0, self.width - 2 * delta),
            max(0.0, self.height - 2 * delta),
        )

    def shift(self, dx: float = 0.0, dy: float = 0.0) -> Rect:
        return Rect(origin=self.origin.add(Point(x=dx, y=dy)), size=self.size)

    def multiply(self, factor: float) -> Rect:
        return Rect.create(
            self.x * factor,
            self.y * factor,
            self.width * factor,
            self.height * factor,
        )

    def divide(self, factor: float) -> Rect:
        return Rect.create(
            ieee_divide(self.x, factor),
            ieee_divide(self.y, factor),
            ieee_divide(self.width, factor),
            ieee_divide(self.height, factor),
        )

    def to_origin(self) -> Rect:
        return Rect(origin=Point.zero(), size=self.size)

    def set_size(
        self,
        width: Optional[float] = None,
        height: Optional[float] = None,
        lock_aspect_ratio: bool = False,
    ) -> Rect:
        return Rect(
            origin=self.origin,
            size=self.size.set(width=width, height=height, lock_aspect_ratio=lock_aspect_ratio),
        )

    def pixel_align(self) -> Rect:
        """
        Выравнивание по пиксельной сетке.

        Округляются ближняя (x, y) и дальняя (x + width, y + height) стороны
        по отдельности; размеры пересчитываются как разность округлённых
        сторон и не уходят ниже 0.
        """
        x = round_half_even(self.x)
        y = round_half_even(self.y)

        far_x = round_half_even(self.max_x)
        far_y = round_half_even(self.max_y)

        width = max(far_x - x, 0.0)
        height = max(far_y - y, 0.0)

        return Rect.create(x, y, width, height)
