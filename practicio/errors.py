"""Errors raised outside the scoring core."""

from __future__ import annotations


class PracticioError(Exception):
    pass


class SnapshotError(PracticioError):
    """Snapshot file missing, unreadable, or failing validation."""


class CategoryNotFoundError(PracticioError):
    def __init__(self, key: str):
        super().__init__(f"Category not found: {key}")
        self.key = key
