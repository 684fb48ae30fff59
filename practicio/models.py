"""Pydantic models for practice items, categories, and ranking results."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import NamedTuple
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class SortOrder(str, Enum):
    alphabetical = "alphabetical"
    lastPracticed = "lastPracticed"
    frequency = "frequency"
    score = "score"


class Tier(str, Enum):
    neutral = "neutral"
    medium = "medium"
    high = "high"


class PracticeItem(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str | None = None
    relative_frequency: float = 1.0  # clamped only when scoring
    last_practice: datetime | None = None
    last_last_practice: datetime | None = None  # restored when "practiced today" is undone
    notes: str | None = None


class PracticeCategory(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str | None = None
    items: list[PracticeItem] = Field(default_factory=list)


class Snapshot(BaseModel):
    """Categories exported by the item store."""

    categories: list[PracticeCategory] = Field(default_factory=list)


class TierThresholds(NamedTuple):
    medium: float
    high: float


class RankedItem(BaseModel):
    item: PracticeItem
    age: int
    score: float
    tier: Tier = Tier.neutral
    practiced_today: bool = False


class CategoryRanking(BaseModel):
    category_id: UUID
    category_name: str | None = None
    policy: SortOrder
    medium_threshold: float = 0.0
    high_threshold: float = 0.0
    items: list[RankedItem] = Field(default_factory=list)


class CategorySummary(BaseModel):
    id: UUID
    name: str | None = None
    item_count: int = 0
