"""Command-line interface to run the composition demos."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from . import config as app_config
from .demos import DEMOS, run_demo
from .utils.logging import InvocationCounter, setup_logging

app = typer.Typer(add_completion=False)
console = Console()


@app.command("run")
def run(
    config: Optional[Path] = typer.Option(None, help="Path to a demos YAML config"),
    demo: Optional[List[str]] = typer.Option(None, "--demo", "-d", help="Demo to run; repeat for several"),
    log_level: Optional[str] = typer.Option(None, help="Override the configured log level"),
    trace: bool = typer.Option(False, help="Print how many times each stage was invoked"),
) -> None:
    names = demo or list(DEMOS)
    unknown = [name for name in names if name not in DEMOS]
    if unknown:
        raise typer.BadParameter(
            f"Unknown demo(s) {unknown}; expected one of {sorted(DEMOS)}.", param_hint="--demo"
        )

    cfg = app_config.load_app_config(config) if config is not None else app_config.default_config()
    if log_level is not None:
        cfg.logging.level = log_level
    setup_logging(level=cfg.logging.level, rich_tracebacks=cfg.logging.rich_tracebacks)

    counter = InvocationCounter() if trace else None
    for name in names:
        result = run_demo(name, cfg, counter)
        console.print(result.message, highlight=False, markup=False)

    if counter is not None:
        table = Table(title="Stage invocations")
        table.add_column("stage")
        table.add_column("calls", justify="right")
        for label, calls in counter.counts.items():
            table.add_row(label, str(calls))
        console.print(table)


@app.command("list")
def list_demos() -> None:
    for name in DEMOS:
        console.print(name, highlight=False)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
