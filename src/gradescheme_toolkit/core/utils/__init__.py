"""
Utils Package

Numeric helpers. File helpers live in `core.utils.serialization`, which
is not re-exported here because the models import these helpers.
"""

from .numbers import (
    NumberFormat,
    DEFAULT_NUMBER_FORMAT,
    PERCENTAGE_DISPLAY_SCALE,
    format_number,
    parse_number,
    round_to_two_decimal_places,
    round_to_four_decimal_places,
    to_display,
    to_stored,
)

__all__ = [
    "NumberFormat",
    "DEFAULT_NUMBER_FORMAT",
    "PERCENTAGE_DISPLAY_SCALE",
    "format_number",
    "parse_number",
    "round_to_two_decimal_places",
    "round_to_four_decimal_places",
    "to_display",
    "to_stored",
]
