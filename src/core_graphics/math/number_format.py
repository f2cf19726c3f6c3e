"""
Number Format — подсчёт десятичных знаков, форматирование и разбор чисел

Используется NumericRange для работы со значениями, которые приходят из
пользовательского ввода как строки ("12.5px", "-3", "") и должны
отображаться с заданной точностью.

Правила форматирования совпадают с привычным текстовым видом чисел
в веб-интерфейсах: целые значения без дробной части ("6", а не "6.0"),
нечисловые — "NaN", "Infinity", "-Infinity".
"""

import math
import re
from typing import Final, Union

from core_graphics.math.numerical_safeguards import is_valid_float, round_half_up

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Максимальное число десятичных знаков, которое ищет count_decimals
MAX_DECIMAL_PLACES: Final[int] = 20

# Точность округления в to_fixed, если число знаков не задано
DEFAULT_FORMAT_DECIMALS: Final[int] = 10

# Порог, начиная с которого целые числа печатаются в экспоненциальной форме
_EXPONENT_THRESHOLD: Final[float] = 1e21

# Всё, кроме букв/цифр/подчёркивания, точки и минуса, вырезается при разборе
_NON_NUMERIC_CHARS = re.compile(r"[^\w.-]+")

# Числовой префикс строки (аналог parseFloat)
_FLOAT_PREFIX = re.compile(
    r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


# =============================================================================
# ДЕСЯТИЧНЫЕ ЗНАКИ
# =============================================================================


def count_decimals(value: float) -> int:
    """
    Количество значащих десятичных знаков числа.

    Масштабирует значение степенями 10, пока округление не станет точным.
    Поиск ограничен MAX_DECIMAL_PLACES знаками.

    Args:
        value: Исходное значение

    Returns:
        Число десятичных знаков (0 для целых и для NaN/Inf)

    Examples:
        >>> count_decimals(5.0)
        0
        >>> count_decimals(0.25)
        2
        >>> count_decimals(-2.5)
        1
    """
    if not is_valid_float(value):
        return 0

    scale = 1.0
    places = 0
    while places < MAX_DECIMAL_PLACES:
        if round_half_up(value * scale) / scale == value:
            break
        scale *= 10
        places += 1
    return places


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_number(value: float) -> str:
    """
    Текстовое представление числа.

    Examples:
        >>> format_number(6.0)
        '6'
        >>> format_number(2.5)
        '2.5'
        >>> format_number(float("nan"))
        'NaN'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))
    return repr(float(value))


def to_fixed(value: float, decimals: int | None = None) -> str:
    """
    Округление и форматирование числа с фиксированным количеством знаков.

    При decimals = None значение округляется до DEFAULT_FORMAT_DECIMALS знаков
    и печатается без хвостовых нулей. При decimals = 0 печатается целое.

    Args:
        value: Исходное значение
        decimals: Количество знаков после точки (optional)

    Returns:
        Строка с отформатированным значением

    Examples:
        >>> to_fixed(2.375, 2)
        '2.38'
        >>> to_fixed(6.0, 1)
        '6.0'
        >>> to_fixed(5.5, 0)
        '6'
        >>> to_fixed(0.1 + 0.2)
        '0.3'
    """
    if not is_valid_float(value):
        return format_number(value)

    scale = 10 ** (DEFAULT_FORMAT_DECIMALS if decimals is None else decimals)
    rounded = round_half_up(value * scale) / scale

    if decimals:
        return f"{rounded:.{decimals}f}"
    return format_number(rounded)


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_float(text: str) -> float:
    """
    Разбор числового префикса строки.

    Ведущие пробелы игнорируются, хвост после числа отбрасывается.
    Если строка не начинается с числа, возвращается NaN.

    Examples:
        >>> parse_float("12.5px")
        12.5
        >>> parse_float("-Infinity")
        -inf
        >>> parse_float("abc")
        nan
    """
    match = _FLOAT_PREFIX.match(text.strip())
    if match is None:
        return math.nan
    return float(match.group(0))


def parse_numeric(value: Union[float, str]) -> float:
    """
    Преобразование значения (числа или строки) в float.

    Из строки удаляются все символы, кроме букв, цифр, подчёркивания,
    точки и минуса, затем разбирается числовой префикс.

    Args:
        value: Число или строка

    Returns:
        float, либо NaN если число не распознано

    Examples:
        >>> parse_numeric("$ 1 200.5")
        1200.5
        >>> parse_numeric(7)
        7.0
        >>> parse_numeric("")
        nan
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    cleaned = _NON_NUMERIC_CHARS.sub("", str(value))
    return parse_float(cleaned)
