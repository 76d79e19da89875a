#!filepath: hypertime/cli.py
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError
from rich import print
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hypertime import __version__, logs
from hypertime.config import AppConfig
from hypertime.core.chunks import history_at
from hypertime.core.events import get_non_past_events
from hypertime.core.god_view import GodView
from hypertime.core.oracle import get_next_interesting_time
from hypertime.core.time import is_finite
from hypertime.engine import SnapshotTimeline, evolve_until
from hypertime.observability.instrumentation import Instrumentation, NoOpInstrumentation
from hypertime.rules import parse_ruleset
from hypertime.utils.errors import UserInputError

app = typer.Typer(help="Hypertime branching-timeline simulator")
console = Console()


def _fmt(x) -> str:
    if is_finite(x):
        return str(x)
    return "inf" if x > 0 else "-inf"


def _fail(message: str):
    logs.warning(f"[CLI] {message}")
    print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(code=2)


def _load(rules_file: Path, config: Optional[Path]):
    try:
        cfg = AppConfig.load(str(config) if config else None)
    except (FileNotFoundError, yaml.YAMLError, ValidationError) as e:
        _fail(f"invalid config: {e}")
    logs.configure(cfg.log)
    try:
        rules = parse_ruleset(rules_file.read_text(encoding="utf-8"))
    except UserInputError as e:
        _fail(str(e))
    return cfg, rules


def _boxes_table(gv: GodView) -> Table:
    table = Table(title=f"Past boxes (now={_fmt(gv.now)})")
    for col in ("trip", "r0", "rf", "depart_h0", "arrive_h0"):
        table.add_column(col)
    for b in gv.past:
        table.add_row(
            str(b.trip_id), _fmt(b.r0), _fmt(b.rf),
            _fmt(b.start.depart_h0), _fmt(b.start.arrive_h0),
        )
    return table


def _chunks_table(gv: GodView) -> Table:
    table = Table(title="Partition")
    for col in ("start", "end", "length", "history"):
        table.add_column(col)
    for c in gv.chunks:
        table.add_row(
            _fmt(c.start), _fmt(c.end), _fmt(c.length), ", ".join(sorted(c.history)) or "-"
        )
    return table


def _metrics_table(inst: Instrumentation) -> Table:
    table = Table(title="Run metrics")
    table.add_column("metric")
    table.add_column("value")
    for name, value in inst.metrics.as_dict().items():
        table.add_row(name, _fmt(value))
    return table


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def run(
    rules_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    until: Optional[float] = typer.Option(None, help="target real time"),
    max_steps: Optional[int] = typer.Option(None, help="cap on steps"),
    config: Optional[Path] = typer.Option(None, help="YAML config"),
):
    """
    Evolve a ruleset from the initial universe and print the box log.
    """
    cfg, rules = _load(rules_file, config)
    target = until if until is not None else cfg.simulation.target_time
    steps = max_steps if max_steps is not None else cfg.simulation.max_steps

    inst = Instrumentation() if cfg.simulation.record_timeline else NoOpInstrumentation()
    gv = evolve_until(target, GodView.initial(rules), max_steps=steps, inst=inst)
    inst.generate_timeline_report(rules_file.name)

    console.print(_boxes_table(gv))
    console.print(_chunks_table(gv))
    if cfg.simulation.record_timeline:
        console.print(_metrics_table(inst))


@app.command()
def events(
    rules_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    steps: int = typer.Option(0, min=0, help="steps to apply first"),
    config: Optional[Path] = typer.Option(None, help="YAML config"),
):
    """
    Debug view: non-past events and next interesting time after N steps.
    """
    _, rules = _load(rules_file, config)
    gv = SnapshotTimeline(GodView.initial(rules)).seek(steps)

    table = Table(title=f"Non-past events (now={_fmt(gv.now)})")
    for col in ("trip", "r0", "depart_h0", "arrive_h0"):
        table.add_column(col)
    for e in get_non_past_events(gv):
        table.add_row(str(e.trip_id), _fmt(e.r0), _fmt(e.depart_h0), _fmt(e.arrive_h0))
    console.print(table)
    print(f"next interesting time: {_fmt(get_next_interesting_time(gv))}")


@app.command()
def history(
    rules_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    at: float = typer.Argument(..., min=0, help="hypertime to inspect"),
    steps: int = typer.Option(0, min=0, help="steps to apply first"),
    config: Optional[Path] = typer.Option(None, help="YAML config"),
):
    """
    Which travelers have reached hypertime AT, as of N steps in.
    """
    _, rules = _load(rules_file, config)
    gv = SnapshotTimeline(GodView.initial(rules)).seek(steps)

    travelers = ", ".join(sorted(history_at(gv.chunks, at))) or "-"
    print(f"now={_fmt(gv.now)} h={_fmt(at)} history: {travelers}")


if __name__ == "__main__":
    app()

# python -m hypertime.cli run rules.txt --until 20
