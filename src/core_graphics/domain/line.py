"""
Line — Отрезок между двумя точками

Immutable Pydantic модель отрезка (start, end).
Длина и угол делегируются Point.

Wire-форма: {"start": {"x", "y"}, "end": {"x", "y"}}
"""

from __future__ import annotations

import json
import math
from typing import Optional

from pydantic import BaseModel, Field

from core_graphics.contracts import LineValidator
from core_graphics.domain.point import Point, PointLike


class Line(BaseModel):
    """
    Отрезок от start до end.

    Направленный: Line(a, b) и Line(b, a) не равны.
    Вырожденный отрезок (start == end) имеет длину 0 и неопределённый угол (NaN).
    """

    start: Point = Field(..., description="Начальная точка")
    end: Point = Field(..., description="Конечная точка")

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Создание
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, start: PointLike, end: PointLike) -> Line:
        return cls(start=Point.coerce(start), end=Point.coerce(end))

    @classmethod
    def from_string(cls, text: str) -> Line:
        """
        Создание отрезка из JSON строки.

        Raises:
            ShapeValidationError: Если текст не является line формой
        """
        data = LineValidator().parse(text)
        return cls.create(data["start"], data["end"])

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict[str, dict[str, float]]:
        return {"start": self.start.value, "end": self.end.value}

    def to_string(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    def __str__(self) -> str:
        return self.to_string()

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def start_x(self) -> float:
        return self.start.x

    @property
    def start_y(self) -> float:
        return self.start.y

    @property
    def end_x(self) -> float:
        return self.end.x

    @property
    def end_y(self) -> float:
        return self.end.y

    @property
    def dx(self) -> float:
        return self.end.x - self.start.x

    @property
    def dy(self) -> float:
        return self.end.y - self.start.y

    @property
    def length(self) -> float:
        return self.start.distance(self.end)

    @property
    def angle(self) -> float:
        """Угол направления start → end в градусах (см. Point.angle); NaN для вырожденного отрезка."""
        if self.start.is_equal(self.end):
            return math.nan
        return self.start.angle(self.end)

    @property
    def midpoint(self) -> Point:
        return self.start.center(self.end)

    @property
    def is_orthogonal(self) -> bool:
        """Отрезок параллелен одной из осей."""
        return self.start.x == self.end.x or self.start.y == self.end.y

    def is_equal(self, other: Line) -> bool:
        return self.start.is_equal(other.start) and self.end.is_equal(other.end)

    # -------------------------------------------------------------------------
    # Пересечение и проекция
    # -------------------------------------------------------------------------

    def intersection(self, other: Line) -> Optional[Point]:
        """
        Точка пересечения прямых, проходящих через два отрезка.

        Прямые бесконечны: точка может лежать вне обоих отрезков.

        Returns:
            Point, либо None для параллельных или совпадающих прямых
        """
        a, b = self.start, self.end
        c, d = other.start, other.end

        # Определитель направляющих векторов
        u = (b.x - a.x) * (d.y - c.y) - (b.y - a.y) * (d.x - c.x)
        if u == 0:
            return None

        t = ((c.x - a.x) * (d.y - c.y) - (c.y - a.y) * (d.x - c.x)) / u

        return Point(x=a.x + t * (b.x - a.x), y=a.y + t * (b.y - a.y))

    def perpendicular_line(self, point: PointLike) -> Line:
        """Отрезок, проходящий через point перпендикулярно self (направление повёрнуто на 90°)."""
        p = Point.coerce(point)

        dx = self.start.x - self.end.x
        dy = self.start.y - self.end.y

        return Line(start=Point(x=p.x - dy, y=p.y + dx), end=p)

    def project(self, point: PointLike) -> Optional[Point]:
        """Ортогональная проекция точки на прямую; None для вырожденного отрезка."""
        return self.intersection(self.perpendicular_line(point))

    # -------------------------------------------------------------------------
    # Операции (возвращают новый отрезок)
    # -------------------------------------------------------------------------

    def shift(self, dx: float = 0.0, dy: float = 0.0) -> Line:
        offset = Point(x=dx, y=dy)
        return Line(start=self.start.add(offset), end=self.end.add(offset))

    def with_start(self, start: PointLike) -> Line:
        return Line(start=Point.coerce(start), end=self.end)

    def with_end(self, end: PointLike) -> Line:
        return Line(start=self.start, end=Point.coerce(end))
