"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from practicio.models import PracticeCategory, PracticeItem

NOW = datetime(2024, 3, 10, 12, 0)


def daysAgo(days: int, now: datetime = NOW) -> datetime:
    return now - timedelta(days=days)


def makeItem(
    name: str | None = "Item",
    frequency: float = 1.0,
    days: int | None = None,
    now: datetime = NOW,
    **kwargs,
) -> PracticeItem:
    """Item last practiced `days` before now (None = never practiced)."""
    last = daysAgo(days, now) if days is not None else None
    return PracticeItem(name=name, relative_frequency=frequency, last_practice=last, **kwargs)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def category() -> PracticeCategory:
    return PracticeCategory(
        name="Exercises",
        items=[
            makeItem("Scales", days=8),
            makeItem("Arpeggios", days=1),
            makeItem("Etude", days=0),
        ],
    )
