"""Service layer — composes the scoring core for the CLI and other callers."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from practicio.errors import CategoryNotFoundError, SnapshotError
from practicio.models import (
    CategoryRanking,
    CategorySummary,
    PracticeCategory,
    RankedItem,
    Snapshot,
    SortOrder,
)
from practicio.practice import isPracticedToday
from practicio.scoring import classifyTier, itemAge, itemScore, sortItems, tierThresholds

logger = logging.getLogger("practicio")


def loadSnapshot(path: str | Path) -> Snapshot:
    """Read and validate a JSON snapshot exported by the item store."""
    p = Path(path).expanduser()
    try:
        raw = p.read_text()
    except OSError as e:
        raise SnapshotError(f"Cannot read snapshot {p}: {e}") from e
    try:
        snapshot = Snapshot.model_validate_json(raw)
    except ValidationError as e:
        raise SnapshotError(f"Invalid snapshot {p}: {e}") from e
    logger.info("Loaded %d categories from %s", len(snapshot.categories), p)
    return snapshot


# ── Categories ───────────────────────────────────────────────


def svcListCategories(snapshot: Snapshot) -> list[CategorySummary]:
    """Categories by name, with item counts."""
    ordered = sorted(snapshot.categories, key=lambda c: c.name or "")
    return [CategorySummary(id=c.id, name=c.name, item_count=len(c.items)) for c in ordered]


def svcFindCategory(snapshot: Snapshot, key: str) -> PracticeCategory:
    """Look a category up by id, then by case-insensitive name."""
    for category in snapshot.categories:
        if str(category.id) == key:
            return category
    lowered = key.casefold()
    for category in snapshot.categories:
        if (category.name or "").casefold() == lowered:
            return category
    raise CategoryNotFoundError(key)


# ── Ranking ──────────────────────────────────────────────────


def svcRankCategory(
    category: PracticeCategory,
    policy: SortOrder = SortOrder.score,
    now: datetime | None = None,
) -> CategoryRanking:
    """Sort a category's items and attach age, score, and tier to each.

    Thresholds are computed over the whole category regardless of policy.
    """
    now = now or datetime.now()
    medium, high = tierThresholds(category.items, now)
    ranked = [
        RankedItem(
            item=item,
            age=itemAge(item.last_practice, now),
            score=itemScore(item, now),
            tier=classifyTier(item, medium, high, now),
            practiced_today=isPracticedToday(item, now),
        )
        for item in sortItems(category.items, policy, now)
    ]
    return CategoryRanking(
        category_id=category.id,
        category_name=category.name,
        policy=SortOrder(policy),
        medium_threshold=medium,
        high_threshold=high,
        items=ranked,
    )
