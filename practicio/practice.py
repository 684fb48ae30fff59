"""Practiced-today toggling with a two-slot history, plus item labels."""

from __future__ import annotations

from datetime import datetime

from practicio.models import PracticeItem
from practicio.scoring.age import itemAge
from practicio.scoring.frequency import formatFrequency


def isPracticedToday(item: PracticeItem, now: datetime | None = None) -> bool:
    if item.last_practice is None:
        return False
    return itemAge(item.last_practice, now) == 0


def markPracticed(item: PracticeItem, now: datetime | None = None) -> PracticeItem:
    """Copy of item practiced at now; the previous date moves to the undo slot."""
    now = now or datetime.now()
    if isPracticedToday(item, now):
        return item
    return item.model_copy(
        update={"last_practice": now, "last_last_practice": item.last_practice}
    )


def unmarkPracticed(item: PracticeItem, now: datetime | None = None) -> PracticeItem:
    """Copy of item with today's practice undone. Only one level of undo."""
    if not isPracticedToday(item, now):
        return item
    return item.model_copy(
        update={"last_practice": item.last_last_practice, "last_last_practice": None}
    )


def togglePracticed(item: PracticeItem, now: datetime | None = None) -> PracticeItem:
    now = now or datetime.now()
    if isPracticedToday(item, now):
        return unmarkPracticed(item, now)
    return markPracticed(item, now)


def lastPracticedLabel(item: PracticeItem, now: datetime | None = None) -> str:
    if item.last_practice is None:
        return "Last practiced: Never"
    days = itemAge(item.last_practice, now)
    if days == 0:
        return "Last practiced: Today"
    unit = "day" if abs(days) == 1 else "days"
    if days < 0:
        return f"Last practiced: in {-days} {unit}"
    return f"Last practiced: {days} {unit} ago"


def frequencyLabel(frequency: float) -> str:
    return f"Practice frequency: {formatFrequency(frequency)}"
