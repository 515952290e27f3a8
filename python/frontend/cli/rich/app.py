"""Rich terminal frontend: tables, colours, and panels.

Answers the same batch as the vanilla frontend, but shows every query as
a panel holding the cost summary, the move tokens and the boards along
the path, replayed move by move.
"""

from __future__ import annotations

from collections.abc import Iterable

import rich.box
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.board import BLANK, Board
from backend.models.solution import Solution
from frontend.cli.input_handler import Query, read_queries

# Paths longer than this are summarised instead of drawn board by board.
MAX_DRAWN_BOARDS = 12


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, goal: Board) -> Table:
    """Return a Rich Table of the grid, tiles already in place in green."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    n = board.dimension
    for _ in range(n):
        table.add_column(width=1, justify="center")

    for y in range(n):
        cells: list[str] = []
        for x in range(n):
            val = board.tile_at(x, y)
            if val == BLANK:
                cells.append("[dim]·[/dim]")
            elif val == goal.tile_at(x, y):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _render_path(solution: Solution, goal: Board) -> Columns | Text:
    game = GamePlay(solution.path[0])
    boards = [game.board]
    for move in solution.moves():
        game.move(move)
        boards.append(game.board)

    if len(boards) > MAX_DRAWN_BOARDS:
        return Text(f"({len(boards)} boards, path not drawn)", style="dim")
    return Columns([_render_board(b, goal) for b in boards])


def _render_query(index: int, query: Query, solution: Solution) -> Panel:
    goal = Board(query.goal)

    summary = Text()
    summary.append("Steps: ", style="dim")
    summary.append(str(solution.steps), style="bold yellow")
    summary.append("    Cost: ", style="dim")
    summary.append(str(solution.cost), style="bold yellow")

    if not solution.reachable:
        body = Group(summary, Text("Goal is unreachable.", style="bold red"))
        border = "red"
    else:
        moves = Text(" ".join(str(m) for m in solution.moves()) or "(no moves)")
        body = Group(summary, moves, Text(""), _render_path(solution, goal))
        border = "bright_blue"

    return Panel(
        body,
        title=f"[bold cyan]#{index}  {query.initial} → {query.goal}[/bold cyan]",
        border_style=border,
        padding=(1, 2),
    )


# -- public entry point -------------------------------------------------------


def run(
    source: Iterable[str],
    console: Console | None = None,
    solver: Solver | None = None,
) -> int:
    """Answer every query in *source*, printing one panel each."""
    console = console or Console()
    solver = solver or Solver()
    answered = 0
    for query in read_queries(source):
        solution = solver.query(query.initial, query.cost_line, query.goal)
        answered += 1
        console.print(_render_query(answered, query, solution))
    return answered
