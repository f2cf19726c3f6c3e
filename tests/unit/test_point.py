"""
Тесты для Point

Проверяет:
1. Создание (create, zero, coerce, from_string, from_pointer)
2. Immutability
3. Геометрию (distance, angle, center, closest, relative_to)
4. Арифметику (add, subtract, multiply, divide) и пиксельное выравнивание
5. Распространение NaN/Inf без исключений
"""

import math

import pytest
from pydantic import ValidationError

from core_graphics.contracts import ShapeValidationError
from core_graphics.domain import Point, PointType, PointerCoordinateSource, Rect

# =============================================================================
# FIXTURES
# =============================================================================


class FakePointerSource(PointerCoordinateSource):
    """Поставщик координат, отдающий фиксированные page/client координаты."""

    def __init__(self):
        self.calls = []

    def get_coordinates(self, event, point_type):
        self.calls.append((event, point_type))
        if point_type == PointType.CLIENT:
            return {"x": 5, "y": 6}
        return {"x": 105, "y": 206}


@pytest.fixture
def pointer_source():
    return FakePointerSource()


# =============================================================================
# CREATION
# =============================================================================


class TestPointCreation:
    """Тесты создания точки"""

    def test_create(self) -> None:
        point = Point.create(3, 4)

        assert point.x == 3.0
        assert point.y == 4.0

    def test_zero_returns_fresh_instance(self) -> None:
        """zero() — фабрика, а не разделяемый синглтон"""
        first = Point.zero()
        second = Point.zero()

        assert first.is_equal(second)
        assert first == second
        assert first.value == {"x": 0.0, "y": 0.0}

    def test_coerce_mapping(self) -> None:
        """Лишние ключи mapping игнорируются"""
        point = Point.coerce({"x": 1, "y": 2, "label": "a"})

        assert point.value == {"x": 1.0, "y": 2.0}

    def test_coerce_point_is_identity(self) -> None:
        point = Point.create(1, 2)

        assert Point.coerce(point) is point

    def test_from_string(self) -> None:
        point = Point.from_string('{"x": 10, "y": -20.5}')

        assert point.value == {"x": 10.0, "y": -20.5}

    def test_from_string_wrong_shape(self) -> None:
        with pytest.raises(ShapeValidationError):
            Point.from_string('{"random": 3}')

    def test_from_string_malformed(self) -> None:
        with pytest.raises(ShapeValidationError, match="malformed JSON"):
            Point.from_string("not json")

    def test_is_shape(self) -> None:
        assert Point.is_shape({"x": 1, "y": 2})
        assert Point.is_shape(Point.zero())
        assert Point.is_shape(Rect.create(0, 0, 1, 1))
        assert not Point.is_shape({"x": 1})
        assert not Point.is_shape(42)


class TestPointFromPointer:
    """Тесты создания точки из события указателя"""

    def test_fake_source_is_a_source(self, pointer_source) -> None:
        assert isinstance(pointer_source, PointerCoordinateSource)

    def test_page_coordinates_by_default(self, pointer_source) -> None:
        event = object()

        point = Point.from_pointer(event, pointer_source)

        assert point.value == {"x": 105.0, "y": 206.0}
        assert pointer_source.calls == [(event, PointType.PAGE)]

    def test_client_coordinates(self, pointer_source) -> None:
        point = Point.from_pointer(None, pointer_source, PointType.CLIENT)

        assert point.value == {"x": 5.0, "y": 6.0}


# =============================================================================
# IMMUTABILITY & REPRESENTATIONS
# =============================================================================


class TestPointImmutability:
    """Тесты неизменяемости"""

    def test_assignment_rejected(self) -> None:
        point = Point.create(1, 2)

        with pytest.raises(ValidationError):
            point.x = 5

    def test_operations_do_not_mutate(self) -> None:
        point = Point.create(1, 2)

        point.add(Point.create(10, 10))
        point.multiply(3)
        point.negate()

        assert point.value == {"x": 1.0, "y": 2.0}

    def test_hashable(self) -> None:
        """Frozen модели можно использовать как ключи"""
        assert len({Point.create(1, 2), Point.create(1, 2)}) == 1


class TestPointRepresentations:
    """Тесты представлений"""

    def test_to_string(self) -> None:
        assert Point.create(1, 2).to_string() == '{"x":1.0,"y":2.0}'

    def test_str(self) -> None:
        point = Point.create(1.5, -2)

        assert str(point) == point.to_string()

    def test_round_trip_through_string(self) -> None:
        point = Point.create(12.25, -7)

        assert Point.from_string(point.to_string()).is_equal(point)


# =============================================================================
# GEOMETRY
# =============================================================================


class TestPointGeometry:
    """Тесты геометрических операций"""

    def test_distance(self) -> None:
        assert Point.create(0, 0).distance(Point.create(3, 4)) == 5.0

    def test_distance_to_origin_by_default(self) -> None:
        assert Point.create(-3, -4).distance() == 5.0

    def test_distance_unbound_call(self) -> None:
        """Point.distance(a, b) — статическая форма вызова"""
        a = Point.create(1, 1)
        b = Point.create(4, 5)

        assert Point.distance(a, b) == Point.distance(b, a) == 5.0

    def test_distance_to_mapping(self) -> None:
        assert Point.create(0, 0).distance({"x": 0, "y": 2}) == 2.0

    def test_angle(self) -> None:
        origin = Point.zero()

        assert origin.angle(Point.create(0, 1)) == 0.0
        assert origin.angle(Point.create(1, 0)) == -90.0
        assert origin.angle(Point.create(-1, 0)) == 90.0

    def test_center(self) -> None:
        center = Point.create(0, 0).center(Point.create(10, -4))

        assert center.value == {"x": 5.0, "y": -2.0}

    def test_is_equal_is_exact(self) -> None:
        assert Point.create(0.1 + 0.2, 0).is_equal(Point.create(0.1 + 0.2, 0))
        assert not Point.create(0.1 + 0.2, 0).is_equal(Point.create(0.3, 0))

    def test_is_equal_none(self) -> None:
        """None не равен ни одной точке"""
        assert not Point.create(0, 0).is_equal(None)

    def test_closest(self) -> None:
        select = Point.closest(Point.create(20, 0), Point.create(30, 0))

        assert select(Point.create(12, 0)).is_equal(Point.create(20, 0))
        assert select(Point.create(28, 0)).is_equal(Point.create(30, 0))

    def test_closest_tie_returns_first(self) -> None:
        first = Point.create(-1, 0)
        second = Point.create(1, 0)

        assert Point.closest(first, second)(Point.zero()) is first

    def test_closest_returns_candidate_object(self) -> None:
        candidate = {"x": 5, "y": 5}

        assert Point.closest(candidate)(Point.zero()) is candidate


class TestPointRelativeTo:
    """Тесты relative_to"""

    def test_relative_position(self) -> None:
        rect = Rect.create(10, 20, 100, 50)

        result = Point.create(60, 45).relative_to(rect)

        assert result.point.value == {"x": 50.0, "y": 25.0}
        assert result.progress.value == {"x": 0.5, "y": 0.5}

    def test_scroll_offset(self) -> None:
        rect = Rect.create(10, 20, 100, 50)

        result = Point.create(60, 45).relative_to(rect, Point.create(10, 5))

        assert result.point.value == {"x": 40.0, "y": 20.0}

    def test_zero_sized_rect(self) -> None:
        """Нулевая ширина/высота — inf/nan без исключения"""
        rect = Rect.create(0, 0, 0, 0)

        result = Point.create(5, 0).relative_to(rect)

        assert result.progress.x == math.inf
        assert math.isnan(result.progress.y)


# =============================================================================
# ARITHMETIC
# =============================================================================


class TestPointArithmetic:
    """Тесты арифметики"""

    def test_add_many(self) -> None:
        total = Point.create(1, 1).add(Point.create(2, 3), {"x": 10, "y": 10})

        assert total.value == {"x": 13.0, "y": 14.0}

    def test_add_nothing(self) -> None:
        point = Point.create(1, 1)

        assert point.add().is_equal(point)

    def test_subtract(self) -> None:
        assert Point.create(5, 5).subtract(Point.create(2, 7)).value == {"x": 3.0, "y": -2.0}

    def test_negate(self) -> None:
        assert Point.create(5, -5).negate().value == {"x": -5.0, "y": 5.0}

    def test_multiply(self) -> None:
        assert Point.create(2, -3).multiply(2.5).value == {"x": 5.0, "y": -7.5}

    def test_divide(self) -> None:
        assert Point.create(5, 10).divide(2).value == {"x": 2.5, "y": 5.0}

    def test_divide_by_zero(self) -> None:
        """Деление на ноль даёт ±inf, а не исключение"""
        result = Point.create(5, -10).divide(0)

        assert result.x == math.inf
        assert result.y == -math.inf

    def test_nan_propagates(self) -> None:
        result = Point.create(math.nan, 1).add(Point.create(1, 1))

        assert math.isnan(result.x)
        assert result.y == 2.0


class TestPointPixelAlign:
    """Тесты пиксельного выравнивания"""

    def test_pixel_align(self) -> None:
        assert Point.create(10.56, 60).pixel_align().value == {"x": 11.0, "y": 60.0}

    def test_round_alias(self) -> None:
        point = Point.create(1.4, -1.6)

        assert point.round().is_equal(point.pixel_align())

    def test_half_even(self) -> None:
        assert Point.create(2.5, 3.5).pixel_align().value == {"x": 2.0, "y": 4.0}

    def test_idempotent(self) -> None:
        aligned = Point.create(7.3, -2.8).pixel_align()

        assert aligned.pixel_align().is_equal(aligned)
