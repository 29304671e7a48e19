"""Rounding and clamping shared by the scorers."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    # Strip float noise first so 92.49999999999999 rounds like 92.5
    return int(math.floor(round(value, 6) + 0.5))


def clamp_score(value: float) -> int:
    """Round and clamp a score to 0-100."""
    return max(0, min(100, round_half_up(value)))
