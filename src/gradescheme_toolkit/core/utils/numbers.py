"""
Module: numbers

Purpose:
    Numeric primitives shared by the editor and the stored models:
    rounding, locale-aware parsing of user input, display formatting,
    and conversion between stored fractions and display values.

Key Functions:
    - round_to_two_decimal_places(value) / round_to_four_decimal_places(value)
    - parse_number(text, number_format): Parse user text, NaN on failure
    - format_number(value): Render a float the way the editor displays it
    - to_display(stored_fraction, scaling_factor_display)
    - to_stored(display_text, scaling_factor_display, number_format)

Dependencies:
    - decimal (std)
    - math (std)

Used By:
    - editor.editor.GradingSchemeEditor
    - core.models.scheme.GradingSchemeData.grade_for

Rounding:
    All rounding is round-half-away-from-zero applied to the shortest
    decimal representation of the float (so 0.125 rounds to 0.13, not
    to whatever the binary value nearest 0.125 would suggest).
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_UP


PERCENTAGE_DISPLAY_SCALE = 100

_TWO_PLACES = Decimal("0.01")
_FOUR_PLACES = Decimal("0.0001")


@dataclass(frozen=True, slots=True)
class NumberFormat:
    """
    Separators used when parsing user-typed numbers.

    Attributes:
        decimal_separator: Character between integer and fractional part
        thousands_separator: Grouping character, ignored when parsing

    Invariants:
        - both separators are single characters
        - the separators differ

    Example:
        >>> fmt = NumberFormat(decimal_separator=",", thousands_separator=".")
        >>> parse_number("1.234,5", fmt)
        1234.5
    """

    decimal_separator: str = "."
    thousands_separator: str = ","

    def __post_init__(self) -> None:
        """Validate separators on construction."""
        if len(self.decimal_separator) != 1:
            raise ValueError(f"decimal_separator must be one character: {self.decimal_separator!r}")
        if len(self.thousands_separator) != 1:
            raise ValueError(f"thousands_separator must be one character: {self.thousands_separator!r}")
        if self.decimal_separator == self.thousands_separator:
            raise ValueError("decimal_separator and thousands_separator must differ")


DEFAULT_NUMBER_FORMAT = NumberFormat()

_NUMERIC_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


# ─────────────────────────────────────────────────────────────────────────────
# Rounding
# ─────────────────────────────────────────────────────────────────────────────

def _round(value: float, places: Decimal) -> float:
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    # Precision must cover every integer digit plus the quantized places.
    context = Context(prec=max(28, exact.adjusted() - places.as_tuple().exponent + 2))
    return float(exact.quantize(places, rounding=ROUND_HALF_UP, context=context))


def round_to_two_decimal_places(value: float) -> float:
    """Round half away from zero to 2 decimal places. NaN and inf pass through."""
    return _round(value, _TWO_PLACES)


def round_to_four_decimal_places(value: float) -> float:
    """Round half away from zero to 4 decimal places. NaN and inf pass through."""
    return _round(value, _FOUR_PLACES)


# ─────────────────────────────────────────────────────────────────────────────
# Parsing and formatting
# ─────────────────────────────────────────────────────────────────────────────

def parse_number(text: str, number_format: NumberFormat = DEFAULT_NUMBER_FORMAT) -> float:
    """
    Parse user-entered text as a number.

    Thousands separators are dropped and the locale decimal separator is
    normalized to ".". Anything that is not a plain signed decimal
    (optionally with exponent) after normalization is rejected.

    Args:
        text: Raw text from an input field
        number_format: Separators to honour

    Returns:
        The parsed float, or NaN if the text is not a number
    """
    cleaned = text.strip().replace(number_format.thousands_separator, "")
    if number_format.decimal_separator != ".":
        if "." in cleaned:
            return math.nan
        cleaned = cleaned.replace(number_format.decimal_separator, ".")
    if not _NUMERIC_RE.fullmatch(cleaned):
        return math.nan
    return float(cleaned)


def format_number(value: float) -> str:
    """
    Render a float without trailing zeros.

    Example:
        >>> format_number(90.0)
        '90'
        >>> format_number(85.5)
        '85.5'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    return format(Decimal(repr(value)).normalize(), "f")


# ─────────────────────────────────────────────────────────────────────────────
# Unit conversion
# ─────────────────────────────────────────────────────────────────────────────

def display_scaling_factor(stored_scaling_factor: float, points_based: bool) -> float:
    """Convert a stored scaling factor to display units."""
    return stored_scaling_factor * (1 if points_based else PERCENTAGE_DISPLAY_SCALE)


def stored_scaling_factor(display_scaling: float, points_based: bool) -> float:
    """Convert a display scaling factor back to stored units."""
    return display_scaling / (1 if points_based else PERCENTAGE_DISPLAY_SCALE)


def to_display(stored_fraction: float, scaling_factor_display: float) -> str:
    """Convert a stored fractional bound into its display string."""
    return format_number(round_to_two_decimal_places(stored_fraction * scaling_factor_display))


def to_stored(
    display_text: str,
    scaling_factor_display: float,
    number_format: NumberFormat = DEFAULT_NUMBER_FORMAT,
) -> float:
    """
    Convert display text back into a stored fraction.

    The parsed value is rounded to 2 places before dividing.

    Returns:
        round4(round2(parsed) / scaling_factor_display), or NaN when the
        text is not a number or the scaling factor is zero or NaN
    """
    parsed = parse_number(display_text, number_format)
    if math.isnan(parsed):
        return math.nan
    if scaling_factor_display == 0 or math.isnan(scaling_factor_display):
        return math.nan
    return round_to_four_decimal_places(round_to_two_decimal_places(parsed) / scaling_factor_display)
