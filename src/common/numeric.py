"""Numeric helpers shared by the velocity and scoring code."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounding up (2.5 -> 3, unlike round())."""
    return math.floor(value + 0.5)
