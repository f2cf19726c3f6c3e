"""
Core math modules для core_graphics

Численные примитивы с единообразным поведением на NaN/Inf и нулевых делителях.
"""

# Numerical Safeguards
from core_graphics.math.numerical_safeguards import (
    clamp,
    ieee_divide,
    interpolate_range,
    is_valid_float,
    round_half_even,
    round_half_up,
    round_to_epsilon,
)

# Number Format
from core_graphics.math.number_format import (
    DEFAULT_FORMAT_DECIMALS,
    MAX_DECIMAL_PLACES,
    count_decimals,
    format_number,
    parse_float,
    parse_numeric,
    to_fixed,
)

__all__ = [
    # Numerical Safeguards
    "clamp",
    "ieee_divide",
    "interpolate_range",
    "is_valid_float",
    "round_half_even",
    "round_half_up",
    "round_to_epsilon",
    # Number Format: constants
    "DEFAULT_FORMAT_DECIMALS",
    "MAX_DECIMAL_PLACES",
    # Number Format: functions
    "count_decimals",
    "format_number",
    "parse_float",
    "parse_numeric",
    "to_fixed",
]
