#!/usr/bin/env python3
"""Weighted Sliding Puzzle Solver.

Usage::

    python main.py solve queries.txt answers.txt     # batch protocol
    python main.py solve queries.txt -f rich         # Rich panels
    python main.py generate -s 3 -n 10 --reuse 3     # random batch on stdout
"""

import importlib
import logging
import random
import sys
import time
from contextlib import nullcontext
from enum import StrEnum
from pathlib import Path
from typing import Optional, TextIO

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.errors import PuzzleError  # noqa: E402
from frontend.cli.input_handler import Query, format_queries  # noqa: E402

err_console = Console(stderr=True)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _run_frontend(frontend: Frontend, source: TextIO, out: TextIO) -> int:
    mod = importlib.import_module(_RUNNERS[frontend])
    if frontend is Frontend.rich:
        return mod.run(source, console=Console(file=out))
    return mod.run(source, out)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def solve(
    input_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True,
        help="Batch of queries to answer.",
    ),
    output: Optional[Path] = typer.Argument(
        None, dir_okay=False,
        help="Where to write answers. Defaults to stdout.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output style.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress to stderr.",
    ),
    timing: bool = typer.Option(
        False, "--timing",
        help="Report elapsed time to stderr.",
    ),
) -> None:
    """Answer a batch of weighted sliding puzzle queries."""
    _configure_logging(verbose)
    started = time.perf_counter()

    try:
        with (
            input_file.open() as source,
            output.open("w") if output else nullcontext(sys.stdout) as out,
        ):
            answered = _run_frontend(frontend, source, out)
    except PuzzleError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc

    if timing:
        elapsed = (time.perf_counter() - started) * 1000
        err_console.print(f"Answered {answered} queries in {elapsed:.0f} ms")


@app.command()
def generate(
    output: Optional[Path] = typer.Argument(
        None, dir_okay=False,
        help="Where to write the batch. Defaults to stdout.",
    ),
    size: int = typer.Option(
        3, "-s", "--size",
        min=2, max=4,
        help="Grid size (2-4).",
    ),
    count: int = typer.Option(
        5, "-n", "--count",
        min=1,
        help="Number of initial/cost pairs.",
    ),
    depth: int = typer.Option(
        20, "--depth",
        min=0,
        help="Random moves used to scramble each board.",
    ),
    reuse: int = typer.Option(
        1, "--reuse",
        min=1,
        help="Goals asked in a row for each initial/cost pair.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for reproducible batches.",
    ),
) -> None:
    """Write a random batch of reachable queries."""
    rng = random.Random(seed)
    queries: list[Query] = []
    for _ in range(count):
        initial = GameGenerator.generate(size, depth, rng)
        cost_line = " ".join(str(c) for c in GameGenerator.random_costs(size, rng))
        for _ in range(reuse):
            goal = GameGenerator.scramble(initial, depth, rng)
            queries.append(Query(initial.state, goal.state, cost_line))

    text = format_queries(queries)
    if output is None:
        sys.stdout.write(text)
    else:
        output.write_text(text)


if __name__ == "__main__":
    app()
