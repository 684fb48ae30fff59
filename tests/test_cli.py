"""CLI command tests — non-interactive paths via typer.testing.CliRunner."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from practicio.cli import _cli
from practicio.models import PracticeCategory, Snapshot
from tests.conftest import NOW, makeItem

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path: Path):
    """Redirect CONFIG_DIR / CONFIG_PATH to tmp_path for every test."""
    cfg_dir = tmp_path / ".practicio"
    cfg_dir.mkdir()
    cfg_path = cfg_dir / "config.json"
    with (
        patch("practicio.config.CONFIG_DIR", cfg_dir),
        patch("practicio.config.CONFIG_PATH", cfg_path),
    ):
        yield


@pytest.fixture
def snapshot_file(tmp_path: Path, category: PracticeCategory) -> str:
    snapshot = Snapshot(
        categories=[
            category,
            PracticeCategory(name="Repertoire", items=[makeItem("Minuet", days=2)]),
        ]
    )
    path = tmp_path / "practice.json"
    path.write_text(snapshot.model_dump_json())
    return str(path)


def _rank(*args: str):
    return runner.invoke(_cli, ["rank", *args, "--now", NOW.isoformat(), "--format", "json"])


# ── rank ─────────────────────────────────────────────────────


def test_rank_json(snapshot_file: str):
    result = _rank(snapshot_file, "--category", "Exercises")
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["ok"] is True
    ranking = data["rankings"][0]
    assert ranking["policy"] == "score"
    assert [r["item"]["name"] for r in ranking["items"]] == ["Scales", "Arpeggios", "Etude"]
    assert ranking["items"][0]["tier"] == "high"
    assert ranking["items"][2]["practiced_today"] is True


def test_rank_allCategories(snapshot_file: str):
    result = _rank(snapshot_file)
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [r["category_name"] for r in data["rankings"]] == ["Exercises", "Repertoire"]


def test_rank_sortOption(snapshot_file: str):
    result = _rank(snapshot_file, "-c", "exercises", "--sort", "alphabetical")
    assert result.exit_code == 0
    items = json.loads(result.output)["rankings"][0]["items"]
    assert [r["item"]["name"] for r in items] == ["Arpeggios", "Etude", "Scales"]


def test_rank_sortFromConfig(snapshot_file: str):
    runner.invoke(_cli, ["config", "set", "display.sort_order", "lastPracticed"])
    result = _rank(snapshot_file, "-c", "Exercises")
    ranking = json.loads(result.output)["rankings"][0]
    assert ranking["policy"] == "lastPracticed"
    assert [r["item"]["name"] for r in ranking["items"]] == ["Scales", "Arpeggios", "Etude"]


def test_rank_snapshotFromConfig(snapshot_file: str):
    runner.invoke(_cli, ["config", "set", "snapshot_path", snapshot_file])
    result = _rank("-c", "Repertoire")
    assert result.exit_code == 0
    items = json.loads(result.output)["rankings"][0]["items"]
    assert [r["item"]["name"] for r in items] == ["Minuet"]


def test_rank_missingCategory(snapshot_file: str):
    result = _rank(snapshot_file, "-c", "Nope")
    assert result.exit_code == 1
    data = json.loads(result.output)
    assert data["ok"] is False
    assert "Nope" in data["error"]


def test_rank_missingSnapshot(tmp_path: Path):
    result = _rank(str(tmp_path / "missing.json"))
    assert result.exit_code == 1
    assert json.loads(result.output)["ok"] is False


def test_rank_badNow(snapshot_file: str):
    result = runner.invoke(_cli, ["rank", snapshot_file, "--now", "yesterday", "-f", "json"])
    assert result.exit_code == 1
    assert "Invalid --now" in json.loads(result.output)["error"]


def test_rank_human(snapshot_file: str):
    result = runner.invoke(_cli, ["rank", snapshot_file, "--now", NOW.isoformat()])
    assert result.exit_code == 0
    assert "Scales" in result.output
    assert "Minuet" in result.output
    assert "8 days ago" in result.output


# ── categories ───────────────────────────────────────────────


def test_categories_json(snapshot_file: str):
    result = runner.invoke(_cli, ["categories", snapshot_file, "--format", "json"])
    assert result.exit_code == 0
    cats = json.loads(result.output)["categories"]
    assert [(c["name"], c["item_count"]) for c in cats] == [("Exercises", 3), ("Repertoire", 1)]


# ── frequency / slider ───────────────────────────────────────


def test_frequency_json():
    result = runner.invoke(_cli, ["frequency", "1.0", "--format", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["slider"] == 0.5
    assert data["display"] == "1.0x"


def test_slider_json():
    result = runner.invoke(_cli, ["slider", "0.0", "--format", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["frequency"] == pytest.approx(10.0)
    assert data["display"] == "10.0x (more often)"


def test_badFormat():
    result = runner.invoke(_cli, ["frequency", "1.0", "--format", "xml"])
    assert result.exit_code != 0


# ── config ───────────────────────────────────────────────────


def test_configList_json():
    result = runner.invoke(_cli, ["config", "list", "--format", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["display"]["sort_order"] == "score"
    assert "snapshot_path" in data


def test_configGet_json():
    result = runner.invoke(_cli, ["config", "get", "display.sort_order", "--format", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["value"] == "score"
    assert data["type"] == "SortOrder"


def test_configGet_missing_json():
    result = runner.invoke(_cli, ["config", "get", "nonexistent.key", "--format", "json"])
    assert result.exit_code == 1
    assert json.loads(result.output)["ok"] is False


def test_configSet_bool_json():
    result = runner.invoke(
        _cli, ["config", "set", "display.show_scores", "false", "--format", "json"]
    )
    assert result.exit_code == 0
    assert json.loads(result.output)["value"] is False


def test_configSet_invalidSortOrder():
    result = runner.invoke(
        _cli, ["config", "set", "display.sort_order", "random", "--format", "json"]
    )
    assert result.exit_code == 1
    assert json.loads(result.output)["ok"] is False


def test_configSet_unknownTimezone():
    result = runner.invoke(
        _cli, ["config", "set", "display.timezone", "Mars/Olympus", "--format", "json"]
    )
    assert result.exit_code == 1
    assert "Mars/Olympus" in json.loads(result.output)["error"]


def test_configGet_types_json():
    result = runner.invoke(_cli, ["config", "get", "snapshot_path", "--format", "json"])
    assert json.loads(result.output)["type"] == "str"
    result = runner.invoke(_cli, ["config", "get", "display.timezone", "--format", "json"])
    data = json.loads(result.output)
    assert data["value"] is None
    assert data["type"] == "str | None"


def test_configGet_sectionIsNotAKey():
    result = runner.invoke(_cli, ["config", "get", "display", "--format", "json"])
    assert result.exit_code == 1
    assert json.loads(result.output)["ok"] is False


def test_configSet_timezoneRoundTrip():
    result = runner.invoke(
        _cli, ["config", "set", "display.timezone", "UTC", "--format", "json"]
    )
    assert result.exit_code == 0
    result = runner.invoke(
        _cli, ["config", "set", "display.timezone", "none", "--format", "json"]
    )
    assert result.exit_code == 0
    assert json.loads(result.output)["value"] is None
    result = runner.invoke(_cli, ["config", "get", "display.sort_order", "--format", "json"])
    assert json.loads(result.output)["value"] == "score"
