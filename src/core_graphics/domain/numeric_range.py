"""
NumericRange — Ограниченное скалярное значение

Значение (число или строка пользовательского ввода) с границами min/max,
шагом и точностью отображения. Типичное применение — состояние слайдера
или числового поля ввода.

Immutable dataclass: каждая операция (clamp, increment, snap_to_step, ...)
возвращает новый экземпляр. Опции, с которыми цепочка была создана,
переносятся в каждый следующий экземпляр, поэтому reset() возвращает
исходные значения, а не текущее состояние.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. max >= min при создании, иначе RangeBoundsError
2. value НЕ обязано лежать в [min, max] — только после clamp()
3. Пустая строка "" — значение "ещё не задано": is_in_range истинно,
   increment/decrement начинают отсчёт с ±step
"""

import logging
import math
from dataclasses import dataclass, field, replace
from typing import Callable, Final, Iterator, Optional, Sequence, Union

from core_graphics.contracts import NumericRangeValidator
from core_graphics.math.number_format import (
    count_decimals,
    format_number,
    parse_numeric,
    to_fixed,
)
from core_graphics.math.numerical_safeguards import (
    clamp as clamp_value,
    ieee_divide,
    interpolate_range,
    round_to_epsilon,
)

logger = logging.getLogger(__name__)

RangeValue = Union[float, str]
RangeTuple = tuple[float, float]

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

DEFAULT_MIN: Final[float] = 0.0
DEFAULT_MAX: Final[float] = 100.0
DEFAULT_STEP: Final[float] = 1.0
DEFAULT_VALUE: Final[float] = 0.0

# Значение "ещё не задано"
EMPTY_VALUE: Final[str] = ""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RangeBoundsError(ValueError):
    """Диапазон создаётся с max < min."""

    pass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class NumericRangeOptions:
    """Опции создания диапазона (сохраняются для reset)."""

    min: float = DEFAULT_MIN
    max: float = DEFAULT_MAX
    step: float = DEFAULT_STEP
    precision: Optional[int] = None
    value: RangeValue = DEFAULT_VALUE


# =============================================================================
# NUMERIC RANGE
# =============================================================================


@dataclass(frozen=True)
class NumericRange:
    """
    Значение с границами, шагом и точностью.

    Attributes:
        min: Нижняя граница
        max: Верхняя граница (>= min)
        step: Шаг increment/decrement/snap и итерации
        precision: Явная точность (знаков после точки), None — вычисляется
        value: Текущее значение: число или строка ввода
        options: Опции создания, к которым возвращает reset()
    """

    min: float = DEFAULT_MIN
    max: float = DEFAULT_MAX
    step: float = DEFAULT_STEP
    precision: Optional[int] = None
    value: RangeValue = DEFAULT_VALUE
    options: Optional[NumericRangeOptions] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.max < self.min:
            logger.debug("Refused numeric range with min=%s max=%s", self.min, self.max)
            raise RangeBoundsError(
                f"max cannot be less than min (min={self.min}, max={self.max})"
            )

        if self.options is None:
            object.__setattr__(
                self,
                "options",
                NumericRangeOptions(
                    min=self.min,
                    max=self.max,
                    step=self.step,
                    precision=self.precision,
                    value=self.value,
                ),
            )

    # -------------------------------------------------------------------------
    # Создание
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        min_value: float,
        max_value: float,
        value: Optional[RangeValue] = None,
    ) -> "NumericRange":
        """Диапазон [min_value, max_value] с необязательным значением."""
        if value is None:
            return cls(min=min_value, max=max_value)
        return cls(min=min_value, max=max_value, value=value)

    @classmethod
    def from_options(cls, options: NumericRangeOptions) -> "NumericRange":
        return cls(
            min=options.min,
            max=options.max,
            step=options.step,
            precision=options.precision,
            value=options.value,
            options=options,
        )

    @classmethod
    def from_tuple(cls, bounds: RangeTuple) -> "NumericRange":
        min_value, max_value = bounds
        return cls(min=min_value, max=max_value)

    @classmethod
    def from_percent(
        cls,
        percent: float,
        min_value: float = DEFAULT_MIN,
        max_value: float = DEFAULT_MAX,
    ) -> "NumericRange":
        """
        Диапазон, значение которого — доля percent от ширины диапазона.

        percent не ограничивается [0, 1]: from_percent(5, 0, 10) даёт 50.
        """
        value = (max_value - min_value) * percent + min_value
        return cls(min=min_value, max=max_value, value=value)

    @classmethod
    def from_values(
        cls,
        values: Sequence[float],
        min_value: float,
        max_value: float,
    ) -> list["NumericRange"]:
        """
        Разбиение отсортированного списка значений на соседние диапазоны.

        Границы i-го диапазона — соседние значения values[i-1] и values[i+1]
        (для крайних — общие min_value / max_value).

        Example:
            values=[20, 50, 80], min=0, max=100 →
            [0..50 (20), 20..80 (50), 50..100 (80)]
        """
        ranges = []
        last = len(values) - 1
        for i, value in enumerate(values):
            lower = values[i - 1] if i > 0 else min_value
            upper = values[i + 1] if i < last else max_value
            ranges.append(cls(min=lower, max=upper, value=value))
        return ranges

    @classmethod
    def from_string(cls, text: str) -> "NumericRange":
        """
        Создание диапазона из JSON строки {"min", "max", "value"}.

        Raises:
            ShapeValidationError: Если текст не является numeric_range формой
            RangeBoundsError: Если max < min
        """
        data = NumericRangeValidator().parse(text)
        return cls(min=data["min"], max=data["max"], value=data["value"])

    def with_options(self, **overrides) -> "NumericRange":
        """Новый диапазон из исходных опций, дополненных overrides."""
        return NumericRange.from_options(replace(self.options, **overrides))

    # -------------------------------------------------------------------------
    # Статические помощники
    # -------------------------------------------------------------------------

    @staticmethod
    def parse(value: RangeValue) -> float:
        """Число из значения; буквы и прочие символы в строке отбрасываются."""
        return parse_numeric(value)

    @staticmethod
    def transform(input_bounds: RangeTuple, output_bounds: RangeTuple) -> Callable[[float], float]:
        """
        Функция линейного отображения [in_min, in_max] → [out_min, out_max].

        Если хотя бы один из диапазонов имеет нулевую ширину,
        функция всегда возвращает out_min.

        Raises:
            RangeBoundsError: Если в одном из кортежей max < min
        """
        source = NumericRange.from_tuple(input_bounds)
        target = NumericRange.from_tuple(output_bounds)

        def apply(value: float) -> float:
            return interpolate_range(value, source.min, source.max, target.min, target.max)

        return apply

    # -------------------------------------------------------------------------
    # Представления
    # -------------------------------------------------------------------------

    def value_of(self) -> float:
        """Числовое значение (NaN, если value не разбирается)."""
        return parse_numeric(self.value)

    def __float__(self) -> float:
        return self.value_of()

    def to_string(self) -> str:
        """Значение, отформатированное с computed_precision знаками."""
        return to_fixed(self.value_of(), self.computed_precision)

    def __str__(self) -> str:
        return self.to_string()

    def to_dict(self) -> dict[str, RangeValue]:
        return {"min": self.min, "max": self.max, "value": self.value}

    def __iter__(self) -> Iterator[float]:
        """
        Значения от min до max включительно с шагом step.

        Каждый вызов iter() начинает обход заново с min.

        Raises:
            ValueError: Если step <= 0 (последовательность бесконечна)
        """
        if self.step <= 0:
            raise ValueError(f"step must be positive to iterate, got {self.step}")

        index = 0
        current = self.min
        while current <= self.max:
            yield current
            index += 1
            current = self.min + index * self.step

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def step_precision(self) -> int:
        """Количество десятичных знаков шага."""
        return count_decimals(self.step)

    @property
    def computed_precision(self) -> int:
        """
        Точность отображения значения.

        Явная precision, если задана; иначе max(знаки значения, знаки шага),
        а для нечислового значения — знаки шага.
        """
        if self.precision is not None:
            return self.precision

        num = self.value_of()
        if math.isnan(num):
            return self.step_precision
        return max(count_decimals(num), self.step_precision)

    @property
    def is_in_range(self) -> bool:
        if self.value == EMPTY_VALUE:
            return True
        num = self.value_of()
        return self.min <= num <= self.max

    @property
    def is_at_min(self) -> bool:
        return self.value_of() == self.min

    @property
    def is_at_max(self) -> bool:
        return self.value_of() == self.max

    def to_percent(self) -> float:
        """Положение значения в диапазоне, в процентах."""
        return ieee_divide((self.value_of() - self.min) * 100, self.max - self.min)

    # -------------------------------------------------------------------------
    # Переходы (возвращают новый диапазон)
    # -------------------------------------------------------------------------

    def set_value(self, value: RangeValue) -> "NumericRange":
        return replace(self, value=value)

    def set_step(self, step: float) -> "NumericRange":
        return replace(self, step=step)

    def set_to_min(self) -> "NumericRange":
        return replace(self, value=format_number(self.min))

    def set_to_max(self) -> "NumericRange":
        return replace(self, value=format_number(self.max))

    def clamp(self) -> "NumericRange":
        """
        Ограничение значения границами [min, max].

        Результат форматируется с явной precision (не computed_precision).
        """
        bounded = clamp_value(self.value_of(), self.min, self.max)
        return replace(self, value=to_fixed(bounded, self.precision))

    def to_precision(self) -> "NumericRange":
        return replace(self, value=to_fixed(self.value_of(), self.computed_precision))

    def increment(self, step: Optional[float] = None) -> "NumericRange":
        """
        Увеличение значения на step (по умолчанию — шаг диапазона).

        Границы не применяются: для ограничения вызовите clamp().
        """
        delta = self.step if step is None else step
        if self.value == EMPTY_VALUE:
            return replace(self, value=parse_numeric(delta))
        return replace(self, value=self.value_of() + delta)

    def decrement(self, step: Optional[float] = None) -> "NumericRange":
        """
        Уменьшение значения на step (по умолчанию — шаг диапазона).

        Границы не применяются: для ограничения вызовите clamp().
        """
        delta = self.step if step is None else step
        if self.value == EMPTY_VALUE:
            return replace(self, value=parse_numeric(-delta))
        return replace(self, value=self.value_of() - delta)

    def snap_to_step(self) -> "NumericRange":
        """
        Округление значения до ближайшего кратного step (половины — к +inf).

        Результат форматируется с точностью шага (step_precision).
        При step == 0 значение становится "NaN"; исключений не бросает.
        """
        snapped = round_to_epsilon(self.value_of(), self.step)
        return replace(self, value=to_fixed(snapped, self.step_precision))

    def reset(self) -> "NumericRange":
        """Диапазон с опциями, с которыми он был создан."""
        return NumericRange.from_options(self.options)
