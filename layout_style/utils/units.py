"""Unit conversion helpers for font design units and percentages."""
from __future__ import annotations

DESIGN_UNITS_PER_EM = 1000
PERCENT = 100


def design_units_to_points(value: float, font_size: float) -> float:
    """Convert a value in glyph space (1/1000 em) to points at the given font size."""
    return value * font_size / DESIGN_UNITS_PER_EM


def percent_to_factor(percent: float) -> float:
    """Convert a percentage such as a horizontal scaling of 100 into a factor."""
    return percent / PERCENT
