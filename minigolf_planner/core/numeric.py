"""Small numeric helpers shared by the grid, search and stroke model."""

from math import floor


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +inf (2.5 -> 3, unlike round())."""
    return floor(value + 0.5)
