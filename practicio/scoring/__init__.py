"""Practice-priority scoring: item age, urgency score, tiers, and sorting."""

from practicio.scoring.age import itemAge
from practicio.scoring.frequency import (
    clampFrequency,
    displayFrequency,
    formatFrequency,
    frequencyFromSlider,
    sliderFromFrequency,
)
from practicio.scoring.score import classifyTier, itemScore, tierThresholds
from practicio.scoring.sort import sortItems

__all__ = [
    "classifyTier",
    "clampFrequency",
    "displayFrequency",
    "formatFrequency",
    "frequencyFromSlider",
    "itemAge",
    "itemScore",
    "sliderFromFrequency",
    "sortItems",
    "tierThresholds",
]
