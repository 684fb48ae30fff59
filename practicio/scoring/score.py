"""Urgency score and population-relative color tiers."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from practicio.models import PracticeItem, Tier, TierThresholds
from practicio.scoring.age import itemAge
from practicio.scoring.frequency import clampFrequency


def itemScore(item: PracticeItem, now: datetime | None = None) -> float:
    """Days since last practice divided by clamped relative frequency.

    Never-practiced items count as DEFAULT_ITEM_AGE days old.
    """
    freq = clampFrequency(item.relative_frequency)
    return itemAge(item.last_practice, now) / freq


def tierThresholds(
    items: Sequence[PracticeItem], now: datetime | None = None
) -> TierThresholds:
    """(medium, high) score thresholds for a population of items.

    With two or more items: medium = (3*mean + max) / 4, high = (mean + 2*max) / 3.
    """
    now = now or datetime.now()
    scores = [itemScore(item, now) for item in items]
    if not scores:
        return TierThresholds(0.0, 0.0)
    if len(scores) == 1:
        return TierThresholds(scores[0], scores[0])
    mean = sum(scores) / len(scores)
    top = max(scores)
    return TierThresholds((3.0 * mean + top) / 4.0, (mean + 2.0 * top) / 3.0)


def classifyTier(
    item: PracticeItem,
    medium: float,
    high: float,
    now: datetime | None = None,
) -> Tier:
    """Tier for one item; anything practiced today is neutral."""
    if item.last_practice is not None and itemAge(item.last_practice, now) == 0:
        return Tier.neutral
    score = itemScore(item, now)
    if score > high:
        return Tier.high
    if score > medium:
        return Tier.medium
    return Tier.neutral
