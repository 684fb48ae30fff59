"""Frequency bounds, defaults, and slider curve parameters."""

from __future__ import annotations

MIN_FREQUENCY = 0.1
AVG_FREQUENCY = 1.0
MAX_FREQUENCY = 10.0

# Age used for items that have never been practiced
DEFAULT_ITEM_AGE = 7

SLIDER_MIN = 0.0
SLIDER_MAX = 1.0
SLIDER_CENTER = 0.5

# Exponents line the 0.5x and 2x frequencies up with the slider tick marks
LOW_CURVE_EXPONENT = 1.07
HIGH_CURVE_EXPONENT = 3.5
