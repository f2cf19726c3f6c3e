"""
Тесты для Line

Проверяет:
1. Создание и wire-форму {start, end}
2. Длину, угол, середину
3. Пересечение прямых, перпендикуляр и проекцию
4. Вырожденные отрезки (start == end)
"""

import math

import pytest

from core_graphics.contracts import ShapeValidationError
from core_graphics.domain import Line, Point


@pytest.fixture
def diagonal():
    """Отрезок (0, 0) → (10, 10)."""
    return Line.create(Point.create(0, 0), Point.create(10, 10))


@pytest.fixture
def horizontal():
    """Отрезок (0, 0) → (10, 0)."""
    return Line.create({"x": 0, "y": 0}, {"x": 10, "y": 0})


class TestLineCreation:
    """Тесты создания отрезка"""

    def test_create_from_mappings(self, horizontal) -> None:
        assert horizontal.start.is_equal(Point.zero())
        assert horizontal.end.is_equal(Point.create(10, 0))

    def test_from_string(self) -> None:
        line = Line.from_string('{"start": {"x": 1, "y": 2}, "end": {"x": 3, "y": 4}}')

        assert (line.start_x, line.start_y, line.end_x, line.end_y) == (1.0, 2.0, 3.0, 4.0)

    def test_from_string_wrong_shape(self) -> None:
        with pytest.raises(ShapeValidationError, match="Invalid line representation"):
            Line.from_string('{"start": {"x": 1}, "end": {"x": 3, "y": 4}}')

    def test_to_string(self, horizontal) -> None:
        assert horizontal.to_string() == (
            '{"start":{"x":0.0,"y":0.0},"end":{"x":10.0,"y":0.0}}'
        )

    def test_round_trip_through_string(self, diagonal) -> None:
        assert Line.from_string(str(diagonal)).is_equal(diagonal)


class TestLineProperties:
    """Тесты свойств"""

    def test_length(self) -> None:
        assert Line.create({"x": 0, "y": 0}, {"x": 3, "y": 4}).length == 5.0

    def test_deltas(self, diagonal) -> None:
        assert diagonal.dx == 10.0
        assert diagonal.dy == 10.0

    def test_angle(self, horizontal) -> None:
        assert horizontal.angle == -90.0

    def test_degenerate_line(self) -> None:
        """start == end: длина 0, угол не определён"""
        line = Line.create({"x": 2, "y": 2}, {"x": 2, "y": 2})

        assert line.length == 0.0
        assert math.isnan(line.angle)

    def test_midpoint(self, diagonal) -> None:
        assert diagonal.midpoint.value == {"x": 5.0, "y": 5.0}

    def test_is_orthogonal(self, diagonal, horizontal) -> None:
        assert horizontal.is_orthogonal
        assert not diagonal.is_orthogonal

    def test_is_equal_is_directional(self, horizontal) -> None:
        reversed_line = Line.create(horizontal.end, horizontal.start)

        assert horizontal.is_equal(Line.create({"x": 0, "y": 0}, {"x": 10, "y": 0}))
        assert not horizontal.is_equal(reversed_line)


class TestLineIntersection:
    """Тесты пересечения прямых"""

    def test_crossing_diagonals(self, diagonal) -> None:
        other = Line.create({"x": 0, "y": 10}, {"x": 10, "y": 0})

        point = diagonal.intersection(other)

        assert point is not None
        assert point.value == {"x": 5.0, "y": 5.0}

    def test_symmetric(self, diagonal) -> None:
        other = Line.create({"x": 0, "y": 10}, {"x": 10, "y": 0})

        assert Line.intersection(other, diagonal).is_equal(diagonal.intersection(other))

    def test_lines_are_infinite(self) -> None:
        """Точка пересечения может лежать вне отрезков"""
        a = Line.create({"x": 0, "y": 0}, {"x": 1, "y": 0})
        b = Line.create({"x": 5, "y": -1}, {"x": 5, "y": 1})

        assert a.intersection(b).value == {"x": 5.0, "y": 0.0}

    def test_parallel_lines(self, horizontal) -> None:
        assert horizontal.intersection(horizontal.shift(dy=5)) is None

    def test_coincident_lines(self, horizontal) -> None:
        assert horizontal.intersection(horizontal) is None


class TestLineProjection:
    """Тесты перпендикуляра и проекции"""

    def test_perpendicular_line(self, horizontal) -> None:
        perpendicular = horizontal.perpendicular_line(Point.create(5, 5))

        assert perpendicular.end.value == {"x": 5.0, "y": 5.0}
        assert perpendicular.start_x == perpendicular.end_x

    def test_project(self, horizontal) -> None:
        assert horizontal.project({"x": 5, "y": 5}).value == {"x": 5.0, "y": 0.0}

    def test_project_onto_diagonal(self, diagonal) -> None:
        assert diagonal.project(Point.create(10, 0)).value == {"x": 5.0, "y": 5.0}

    def test_project_onto_degenerate(self) -> None:
        line = Line.create({"x": 1, "y": 1}, {"x": 1, "y": 1})

        assert line.project(Point.create(4, 4)) is None


class TestLineOperations:
    """Тесты операций"""

    def test_shift(self, horizontal) -> None:
        shifted = horizontal.shift(dx=1, dy=2)

        assert shifted.start.value == {"x": 1.0, "y": 2.0}
        assert shifted.end.value == {"x": 11.0, "y": 2.0}
        assert horizontal.start.is_equal(Point.zero())

    def test_with_start_and_end(self, horizontal) -> None:
        line = horizontal.with_start({"x": -1, "y": -1}).with_end(Point.create(3, 3))

        assert line.to_dict() == {"start": {"x": -1.0, "y": -1.0}, "end": {"x": 3.0, "y": 3.0}}
