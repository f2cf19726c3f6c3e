"""
Numerical Safeguards — примитивы арифметики для value-типов

Модуль собирает в одном месте все численные операции, поведение которых
на граничных значениях должно быть одинаковым во всём ядре:
- Деление по правилам IEEE 754 (±inf / nan вместо ZeroDivisionError)
- Два режима округления: half-even (пиксельное выравнивание) и half-up (шаги, форматирование)
- Квантование по шагу
- Ограничение значения диапазоном и линейное отображение диапазонов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не бросает исключение на NaN/Inf: невалидные значения
   проходят насквозь и распространяются дальше
2. Деление на ноль никогда не бросает исключение
3. Все операции детерминированы и воспроизводимы
"""

import math

# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE 754.

    В отличие от оператора `/` не бросает ZeroDivisionError:
    деление на ноль даёт ±inf, а 0/0 и nan/0 дают nan.

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        Частное, либо ±inf / nan при нулевом знаменателе

    Examples:
        >>> ieee_divide(10.0, 4.0)
        2.5
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0:
        return numerator / denominator

    if numerator == 0 or math.isnan(numerator):
        return math.nan

    # Знак нуля в знаменателе учитывается так же, как в IEEE 754
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


# =============================================================================
# ОКРУГЛЕНИЕ И КВАНТОВАНИЕ
# =============================================================================


def round_half_even(value: float) -> float:
    """
    Округление до ближайшего целого, половины — к чётному.

    Используется для пиксельного выравнивания координат.
    NaN/Inf возвращаются без изменений.

    Examples:
        >>> round_half_even(10.56)
        11.0
        >>> round_half_even(2.5)
        2.0
        >>> round_half_even(3.5)
        4.0
    """
    if not is_valid_float(value):
        return value
    return float(round(value))


def round_half_up(value: float) -> float:
    """
    Округление до ближайшего целого, половины — в сторону +inf.

    Используется при подсчёте десятичных знаков, форматировании и квантовании.
    NaN/Inf возвращаются без изменений.

    Дробная часть сравнивается с 0.5 после floor, поэтому результат точен
    и для 0.49999999999999994, и для целых больше 2**52.

    Examples:
        >>> round_half_up(2.5)
        3.0
        >>> round_half_up(-2.5)
        -2.0
        >>> round_half_up(0.49999999999999994)
        0.0
    """
    if not is_valid_float(value):
        return value

    floored = math.floor(value)
    if value - floored >= 0.5:
        return float(floored + 1)
    return float(floored)


def round_to_epsilon(value: float, eps: float) -> float:
    """
    Округление значения до ближайшего кратного epsilon.

    round_half_up(value / eps) × eps: половины округляются в сторону +inf,
    деление выполняется по IEEE 754. Исключений не бросает:
    eps == 0 даёт NaN, отрицательный eps допустим, NaN/Inf проходят насквозь.

    Args:
        value: Значение для округления
        eps: Шаг квантования

    Returns:
        Округлённое значение

    Examples:
        >>> round_to_epsilon(5.0, 2.0)
        6.0
        >>> round_to_epsilon(-5.0, 2.0)
        -4.0
        >>> round_to_epsilon(8.0, 5.0)
        10.0
        >>> round_to_epsilon(1.23456789, 0.01)
        1.23
        >>> round_to_epsilon(5.0, 0.0)
        nan
    """
    steps = round_half_up(ieee_divide(value, eps))
    return steps * eps


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    NaN на входе остаётся NaN (сравнения с NaN ложны).

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, 10.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def interpolate_range(
    value: float,
    in_min: float,
    in_max: float,
    out_min: float,
    out_max: float,
) -> float:
    """
    Линейное отображение значения из [in_min, in_max] в [out_min, out_max].

    Если хотя бы один из диапазонов имеет нулевую ширину, возвращается out_min.

    Examples:
        >>> interpolate_range(5.0, 0.0, 10.0, 0.0, 100.0)
        50.0
        >>> interpolate_range(5.0, 0.0, 0.0, 3.0, 7.0)
        3.0
    """
    if in_min == in_max or out_min == out_max:
        return out_min

    ratio = (out_max - out_min) / (in_max - in_min)
    return out_min + ratio * (value - in_min)
