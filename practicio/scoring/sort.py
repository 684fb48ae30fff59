"""Item ordering under the four sort policies."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from practicio.models import PracticeItem, SortOrder
from practicio.scoring.age import sameCalendar
from practicio.scoring.score import itemScore

logger = logging.getLogger("practicio")


def _practiceKey(item: PracticeItem, now: datetime) -> float:
    """Epoch seconds of last practice on now's calendar; never practiced sorts first."""
    if item.last_practice is None:
        return float("-inf")
    try:
        return sameCalendar(item.last_practice, now).timestamp()
    except (OverflowError, ValueError, OSError):
        return float("-inf")


def sortItems(
    items: Iterable[PracticeItem],
    policy: SortOrder = SortOrder.score,
    now: datetime | None = None,
) -> list[PracticeItem]:
    """Return a new, stably sorted list. Score sorts descending, the rest ascending."""
    policy = SortOrder(policy)
    now = now or datetime.now()
    logger.debug("Sorting items by %s", policy.value)
    if policy is SortOrder.alphabetical:
        return sorted(items, key=lambda item: item.name or "")
    if policy is SortOrder.lastPracticed:
        return sorted(items, key=lambda item: _practiceKey(item, now))
    if policy is SortOrder.frequency:
        return sorted(items, key=lambda item: item.relative_frequency)
    return sorted(items, key=lambda item: itemScore(item, now), reverse=True)
