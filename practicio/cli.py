"""Practicio CLI — rank practice items, inspect frequencies, edit config."""

from __future__ import annotations

import contextlib
import json
import logging
from datetime import datetime
from importlib.metadata import PackageNotFoundError, version
from typing import Any, get_args

import typer
from pydantic import BaseModel
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from practicio.config import DisplayConfig, PracticioConfig, loadConfig, resolveNow
from practicio.errors import PracticioError
from practicio.models import CategoryRanking, SortOrder, Tier
from practicio.practice import lastPracticedLabel
from practicio.scoring import formatFrequency, frequencyFromSlider, sliderFromFrequency
from practicio.service import loadSnapshot, svcFindCategory, svcListCategories, svcRankCategory

logger = logging.getLogger("practicio")

_TIER_STYLES = {Tier.high: "bold red", Tier.medium: "yellow", Tier.neutral: ""}

# ============================================================
# Output helpers
# ============================================================


def _checkFormat(format: str) -> None:
    if format not in ("human", "json"):
        raise typer.BadParameter(f"Invalid format {format!r}; choose human or json")


def _fail(format: str, message: str) -> None:
    if format == "json":
        print(json.dumps({"ok": False, "error": message}))
    else:
        _console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(1)


def _renderRanking(ranking: CategoryRanking, now: datetime, show_scores: bool) -> None:
    title = ranking.category_name or "Unknown"
    t = Table(title=title, box=box.SIMPLE, padding=(0, 1))
    t.add_column("#", style="dim", justify="right")
    t.add_column("item")
    t.add_column("last practiced", style="dim")
    t.add_column("frequency")
    if show_scores:
        t.add_column("score", justify="right")
    for i, row in enumerate(ranking.items, 1):
        style = "strike dim" if row.practiced_today else _TIER_STYLES[row.tier]
        cells: list[Any] = [
            str(i),
            Text(row.item.name or "Unknown", style=style),
            lastPracticedLabel(row.item, now).removeprefix("Last practiced: "),
            formatFrequency(row.item.relative_frequency),
        ]
        if show_scores:
            cells.append(f"{row.score:.2f}")
        t.add_row(*cells)
    _console.print(t)
    if not ranking.items:
        _console.print("[dim]No practice items in this category.[/dim]")


# ============================================================
# Config CLI helpers
# ============================================================

_SECTIONS: dict[str, type[BaseModel]] = {"display": DisplayConfig}


def _fmtVal(v: Any) -> str:
    if v is None:
        return "[dim](not set)[/dim]"
    if isinstance(v, bool):
        return "true" if v else "false"
    return str(v)


def _configField(dotpath: str) -> tuple[str, str, Any] | None:
    """(section, key, annotation) for a settable key; section is "" at top level."""
    section, _, key = dotpath.rpartition(".")
    if not section:
        field = PracticioConfig.model_fields.get(key)
        if key in _SECTIONS or field is None:
            return None
        return "", key, field.annotation
    model = _SECTIONS.get(section)
    field = model.model_fields.get(key) if model else None
    if field is None:
        return None
    return section, key, field.annotation


def _typeName(ann: Any) -> str:
    args = [a for a in get_args(ann) if a is not type(None)]
    if args:
        return f"{args[0].__name__} | None"
    return ann.__name__


def _coerce(value: str, ann: Any) -> Any:
    """bool and None need coercing; enums and strings are validated by pydantic."""
    if value.lower() in ("none", "null") and type(None) in get_args(ann):
        return None
    if ann is bool:
        if value.lower() in ("true", "yes", "1"):
            return True
        if value.lower() in ("false", "no", "0"):
            return False
        raise ValueError(f"Expected bool, got {value!r}")
    return value


def _renderConfigSection(title: str, pairs: list[tuple[str, Any, Any]]) -> None:
    """Print a key/value table, highlighting values that differ from the default."""
    _console.print(f"\n[bold]{title}[/bold]")
    t = Table(show_header=False, box=box.SIMPLE, padding=(0, 1))
    t.add_column("key", style="dim")
    t.add_column("val")
    for key, val, default in pairs:
        fmt = _fmtVal(val)
        t.add_row(key, f"[yellow]{fmt}[/yellow]" if val != default else fmt)
    _console.print(t)


# ============================================================
# CLI (typer)
# ============================================================

_cli = typer.Typer(
    name="practicio",
    help="Track practice items and rank them by how overdue they are.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
_config_cli = typer.Typer(help="Read/write [bold]~/.practicio/config.json[/bold].")
_cli.add_typer(_config_cli, name="config")

_console = Console()


def _printVersion(value: bool) -> None:
    if not value:
        return
    try:
        print(version("practicio"))
    except PackageNotFoundError:
        print("unknown")
    raise typer.Exit()


@_cli.callback()
def _default(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    show_version: bool = typer.Option(
        False, "--version", callback=_printVersion, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Configure logging for every subcommand."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s | %(message)s",
    )


@_cli.command()
def rank(
    snapshot: str | None = typer.Argument(
        None, help="Snapshot JSON file (default: snapshot_path from config)"
    ),
    category: str | None = typer.Option(
        None, "--category", "-c", help="Category name or id (default: all categories)"
    ),
    sort: SortOrder | None = typer.Option(
        None, "--sort", "-s", help="alphabetical|lastPracticed|frequency|score"
    ),
    now: str | None = typer.Option(None, "--now", help="ISO timestamp to rank against"),
    format: str = typer.Option("human", "--format", "-f", help="Output format: human|json"),
) -> None:
    """Rank practice items, most overdue first by default."""
    _checkFormat(format)
    cfg = loadConfig()
    policy = sort or cfg.display.sort_order
    if now:
        try:
            at = datetime.fromisoformat(now)
        except ValueError:
            _fail(format, f"Invalid --now timestamp: {now}")
    else:
        at = resolveNow(cfg)

    try:
        snap = loadSnapshot(snapshot or cfg.snapshot_path)
        categories = [svcFindCategory(snap, category)] if category else snap.categories
    except PracticioError as e:
        _fail(format, str(e))

    logger.debug("Ranking %d categories by %s at %s", len(categories), policy, at)
    rankings = [svcRankCategory(c, policy, at) for c in categories]
    if format == "json":
        print(json.dumps({"ok": True, "rankings": [r.model_dump(mode="json") for r in rankings]}))
        return
    if not rankings:
        _console.print("[dim]No categories in snapshot.[/dim]")
    for ranking in rankings:
        _renderRanking(ranking, at, cfg.display.show_scores)


@_cli.command()
def categories(
    snapshot: str | None = typer.Argument(
        None, help="Snapshot JSON file (default: snapshot_path from config)"
    ),
    format: str = typer.Option("human", "--format", "-f", help="Output format: human|json"),
) -> None:
    """List categories by name with their item counts."""
    _checkFormat(format)
    cfg = loadConfig()
    try:
        snap = loadSnapshot(snapshot or cfg.snapshot_path)
    except PracticioError as e:
        _fail(format, str(e))

    summaries = svcListCategories(snap)
    if format == "json":
        payload = [s.model_dump(mode="json") for s in summaries]
        print(json.dumps({"ok": True, "categories": payload}))
        return
    t = Table(box=box.SIMPLE, padding=(0, 1))
    t.add_column("category")
    t.add_column("items", justify="right")
    for s in summaries:
        t.add_row(Text(s.name or "Unknown"), str(s.item_count))
    _console.print(t)


@_cli.command()
def frequency(
    value: float = typer.Argument(help="Relative frequency, 0.1 to 10.0"),
    format: str = typer.Option("human", "--format", "-f", help="Output format: human|json"),
) -> None:
    """Show the slider position for a relative frequency."""
    _checkFormat(format)
    slider_pos = sliderFromFrequency(value)
    display = formatFrequency(value)
    if format == "json":
        print(json.dumps({"frequency": value, "slider": slider_pos, "display": display}))
    else:
        _console.print(f"[bold]{display}[/bold]  slider = {slider_pos:.4f}")


@_cli.command()
def slider(
    value: float = typer.Argument(help="Slider position, 0.0 to 1.0"),
    format: str = typer.Option("human", "--format", "-f", help="Output format: human|json"),
) -> None:
    """Show the relative frequency for a slider position."""
    _checkFormat(format)
    freq = frequencyFromSlider(value)
    display = formatFrequency(freq)
    if format == "json":
        print(json.dumps({"slider": value, "frequency": freq, "display": display}))
    else:
        _console.print(f"slider {value:.4f} = [bold]{display}[/bold]  ({freq:.4f})")


@_config_cli.command("list")
def config_list(
    format: str = typer.Option("human", "--format", "-f", help="Output format: human|json"),
) -> None:
    """Pretty-print the current config grouped by section."""
    _checkFormat(format)
    cfg = loadConfig()

    if format == "json":
        print(cfg.model_dump_json())
        raise typer.Exit()

    defaults = PracticioConfig()
    _renderConfigSection("General", [("snapshot_path", cfg.snapshot_path, defaults.snapshot_path)])
    _renderConfigSection(
        "Display",
        [
            (k, getattr(cfg.display, k), getattr(defaults.display, k))
            for k in DisplayConfig.model_fields
        ],
    )


@_config_cli.command("get")
def config_get(
    dotpath: str = typer.Argument(help="Dot-separated key, e.g. display.sort_order"),
    format: str = typer.Option("human", "--format", "-f", help="Output format: human|json"),
) -> None:
    """Get a single config value."""
    _checkFormat(format)
    field = _configField(dotpath)
    if field is None:
        _fail(format, f"Key not found: {dotpath}")
    section, key, ann = field
    data = loadConfig().model_dump(mode="json")
    value = data[section][key] if section else data[key]
    if format == "json":
        print(json.dumps({"key": dotpath, "value": value, "type": _typeName(ann)}))
    else:
        type_hint = f"[dim]({_typeName(ann)})[/dim]"
        _console.print(f"[bold]{dotpath}[/bold] = {_fmtVal(value)}  {type_hint}")


@_config_cli.command("set")
def config_set(
    dotpath: str = typer.Argument(help="Dot-separated key, e.g. display.timezone"),
    value: str = typer.Argument(help="Value (validated against the config schema)"),
    format: str = typer.Option("human", "--format", "-f", help="Output format: human|json"),
) -> None:
    """Set a config value."""
    _checkFormat(format)
    from practicio.config import CONFIG_PATH

    field = _configField(dotpath)
    if field is None:
        _fail(format, f"Key not found: {dotpath}")
    section, key, ann = field
    try:
        coerced = _coerce(value, ann)
    except ValueError as e:
        _fail(format, str(e))

    raw: dict = {}
    if CONFIG_PATH.exists():
        with contextlib.suppress(json.JSONDecodeError):
            raw = json.loads(CONFIG_PATH.read_text())
    target = raw
    if section:
        if not isinstance(raw.get(section), dict):
            raw[section] = {}
        target = raw[section]
    target[key] = coerced

    try:
        PracticioConfig(**raw)
    except ValueError as e:
        _fail(format, str(e))

    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(json.dumps(raw, indent=2) + "\n")
    if format == "json":
        print(json.dumps({"ok": True, "key": dotpath, "value": coerced}))
    else:
        _console.print(f"[green]Set[/green] {dotpath} = {coerced!r}")


def main() -> None:
    _cli()


if __name__ == "__main__":
    main()
