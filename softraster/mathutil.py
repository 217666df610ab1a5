"""Small numeric helpers shared by the vector, colour and bitmap types."""

import math


def lerp(a, b, t):
    """Linearly interpolate from ``a`` to ``b`` by ``t``."""
    return a + t * (b - a)


def clamp(x, low, high):
    """Limit ``x`` to the closed range ``[low, high]``."""
    return min(max(x, low), high)


def round_half_away(x):
    """Round to the nearest integer, with halves rounded away from zero."""
    if x < 0:
        return -math.floor(-x + 0.5)
    return math.floor(x + 0.5)