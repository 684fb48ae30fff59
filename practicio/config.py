"""Config loading from ~/.practicio/config.json with env var overrides."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import ClassVar
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from practicio.models import SortOrder

CONFIG_DIR = Path.home() / ".practicio"
CONFIG_PATH = CONFIG_DIR / "config.json"


class DisplayConfig(BaseModel):
    sort_order: SortOrder = SortOrder.score
    timezone: str | None = None  # IANA name; None = local time
    show_scores: bool = True

    @field_validator("timezone")
    @classmethod
    def _knownTimezone(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except ZoneInfoNotFoundError as e:
            raise ValueError(f"Unknown timezone {v!r}") from e
        return v


class PracticioConfig(BaseSettings):
    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="PRACTICIO_",
        extra="ignore",
    )
    snapshot_path: str = Field(default_factory=lambda: str(CONFIG_DIR / "practice.json"))
    display: DisplayConfig = Field(default_factory=DisplayConfig)


def loadConfig() -> PracticioConfig:
    """Load config from ~/.practicio/config.json with env var overrides."""
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        return PracticioConfig(**raw)
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    config = PracticioConfig()
    CONFIG_PATH.write_text(config.model_dump_json(indent=2))
    return config


def resolveNow(config: PracticioConfig) -> datetime:
    """Current time on the configured calendar (naive local time when unset)."""
    tz = config.display.timezone
    if tz is None:
        return datetime.now()
    return datetime.now(ZoneInfo(tz))
