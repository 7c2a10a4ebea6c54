"""
Unit conversions between user-facing measures and the office document's
native units.
"""

import math

from config.constants import (
    HALF_POINTS_PER_POINT,
    LINE_SPACING_UNIT,
    PERCENT_WIDTH_FULL,
    TWIPS_PER_CM,
)


def _round_half_up(value: float) -> int:
    # 850.5 -> 851; round() would give 850
    return int(math.floor(value + 0.5))


def cm_to_twips(cm: float) -> int:
    """Centimeters to twips, using the format's 567 twips/cm convention."""
    return _round_half_up(cm * TWIPS_PER_CM)


def pt_to_half_points(pt: float) -> int:
    """Font size in points to the w:sz half-point value."""
    return _round_half_up(pt * HALF_POINTS_PER_POINT)


def line_spacing_to_units(multiplier: float) -> int:
    """Line spacing multiplier to the w:line value (240 = single)."""
    return _round_half_up(multiplier * LINE_SPACING_UNIT)


def column_width_pct(column_count: int) -> int:
    """Width of one column in fiftieths of a percent of the table width."""
    if column_count < 1:
        raise ValueError(f"column_count must be positive, got {column_count}")
    return PERCENT_WIDTH_FULL // column_count
