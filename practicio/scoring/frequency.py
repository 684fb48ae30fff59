"""Nonlinear mapping between relative frequency and a [0, 1] slider.

The lower half of the frequency range (0.1x..1x) maps onto slider 1.0..0.5 and
the upper half (1x..10x) onto 0.5..0.0, each with its own exponent. The two
directions are inverses only up to floating point error.
"""

from __future__ import annotations

import math

from practicio.scoring.constants import (
    AVG_FREQUENCY,
    HIGH_CURVE_EXPONENT,
    LOW_CURVE_EXPONENT,
    MAX_FREQUENCY,
    MIN_FREQUENCY,
    SLIDER_CENTER,
    SLIDER_MAX,
    SLIDER_MIN,
)


def clampFrequency(frequency: float) -> float:
    """Clamp into [0.1, 10.0]; NaN counts as average frequency."""
    if math.isnan(frequency):
        return AVG_FREQUENCY
    return min(max(frequency, MIN_FREQUENCY), MAX_FREQUENCY)


def sliderFromFrequency(frequency: float) -> float:
    """Map 0.1...10.0 to 1.0...0.0 (1.0x sits at 0.5)."""
    f = clampFrequency(frequency)
    if f < AVG_FREQUENCY:
        ratio = (f - MIN_FREQUENCY) / (AVG_FREQUENCY - MIN_FREQUENCY)
        return 1.0 - ratio ** (1.0 / LOW_CURVE_EXPONENT) * SLIDER_CENTER
    if f > AVG_FREQUENCY:
        ratio = (f - AVG_FREQUENCY) / (MAX_FREQUENCY - AVG_FREQUENCY)
        return SLIDER_CENTER - ratio ** (1.0 / HIGH_CURVE_EXPONENT) * SLIDER_CENTER
    return SLIDER_CENTER


def frequencyFromSlider(slider: float) -> float:
    """Map 0.0...1.0 to 10.0...0.1 (0.5 gives exactly 1.0x)."""
    inv = 1.0 - min(max(slider, SLIDER_MIN), SLIDER_MAX)
    if inv < SLIDER_CENTER:
        return MIN_FREQUENCY + (inv / SLIDER_CENTER) ** LOW_CURVE_EXPONENT * (
            AVG_FREQUENCY - MIN_FREQUENCY
        )
    if inv > SLIDER_CENTER:
        return AVG_FREQUENCY + ((inv - SLIDER_CENTER) / SLIDER_CENTER) ** HIGH_CURVE_EXPONENT * (
            MAX_FREQUENCY - AVG_FREQUENCY
        )
    return AVG_FREQUENCY


def displayFrequency(frequency: float) -> float:
    """Clamped frequency rounded to one decimal for display."""
    return round(10.0 * clampFrequency(frequency)) / 10.0


def formatFrequency(frequency: float) -> str:
    """'2.0x (more often)', '0.5x (less often)', or plain '1.0x'."""
    shown = displayFrequency(frequency)
    if shown > 1.1:
        return f"{shown:.1f}x (more often)"
    if shown < 0.9:
        return f"{shown:.1f}x (less often)"
    return f"{shown:.1f}x"
