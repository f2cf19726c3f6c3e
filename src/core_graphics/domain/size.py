"""
Size — Ширина и высота

Immutable Pydantic модель размера.

Wire-форма: {"width": number, "height": number}
"""

from __future__ import annotations

import json
import math
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field

from core_graphics.contracts import SizeValidator
from core_graphics.math.numerical_safeguards import ieee_divide


class Size(BaseModel):
    """
    Размер (width, height).

    ВАЖНО: is_empty истинно только когда ОБА измерения равны нулю.
    Размер 0×5 пустым не считается, хотя его площадь равна нулю.
    """

    width: float = Field(..., description="Ширина")
    height: float = Field(..., description="Высота")

    model_config = {"frozen": True}  # Immutable

    # -------------------------------------------------------------------------
    # Создание
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, width: float, height: float) -> Size:
        return cls(width=width, height=height)

    @classmethod
    def zero(cls) -> Size:
        """Новый размер 0×0."""
        return cls(width=0.0, height=0.0)

    @classmethod
    def from_radius(cls, radius: float) -> Size:
        """Квадрат со стороной 2 × radius."""
        return cls(width=radius * 2, height=radius * 2)

    @classmethod
    def from_square(cls, dimension: float) -> Size:
        """Квадрат со стороной dimension."""
        return cls(width=dimension, height=dimension)

    @classmethod
    def from_string(cls, text: str) -> Size:
        """
        Создание размера из JSON строки.

        Raises:
            ShapeValidationError: Если текст не является size формой
        """
        data = SizeValidator().parse(text)
        return cls(width=data["width"], height=data["height"])

    @staticmethod
    def is_shape(value: Any) -> bool:
        """Структурная проверка: у значения есть поля width и height."""
        if isinstance(value, Mapping):
            return "width" in value and "height" in value
        return hasattr(value, "width") and hasattr(value, "height")

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    @property
    def value(self) -> dict[str, float]:
        return {"width": self.width, "height": self.height}

    def to_dict(self) -> dict[str, float]:
        return self.value

    def to_string(self) -> str:
        return json.dumps(self.value, separators=(",", ":"))

    def __str__(self) -> str:
        return self.to_string()

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def aspect_ratio(self) -> float:
        """width / height; при height == 0 — ±inf или nan."""
        return ieee_divide(self.width, self.height)

    @property
    def longest_side(self) -> float:
        return max(self.width, self.height)

    @property
    def shortest_side(self) -> float:
        return min(self.width, self.height)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 and self.height == 0

    def is_equal(self, other: Size) -> bool:
        return self.width == other.width and self.height == other.height

    # -------------------------------------------------------------------------
    # Операции (возвращают новый размер)
    # -------------------------------------------------------------------------

    def flip(self) -> Size:
        """Размер с переставленными шириной и высотой."""
        return Size(width=self.height, height=self.width)

    def set(
        self,
        width: Optional[float] = None,
        height: Optional[float] = None,
        lock_aspect_ratio: bool = False,
    ) -> Size:
        """
        Обновление ширины и/или высоты.

        При lock_aspect_ratio=True и заданном только одном измерении второе
        вычисляется из ТЕКУЩЕГО соотношения сторон:
        - задана ширина → height = width / aspect_ratio
        - задана высота → width = height × aspect_ratio

        Если текущее соотношение сторон равно нулю или NaN, фиксация
        пропускается.

        Args:
            width: Новая ширина (optional)
            height: Новая высота (optional)
            lock_aspect_ratio: Сохранять текущее соотношение сторон

        Returns:
            Новый размер
        """
        new_width = self.width if width is None else width
        new_height = self.height if height is None else height

        ratio = self.aspect_ratio
        ratio_usable = ratio != 0 and not math.isnan(ratio)

        if lock_aspect_ratio and ratio_usable:
            if width is None and height is not None:
                new_width = height * ratio
            elif width is not None and height is None:
                new_height = width / ratio

        return Size(width=new_width, height=new_height)
