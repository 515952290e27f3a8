"""Vanilla frontend: the plain line-oriented batch protocol.

One output line per query::

    <steps> <cost> [<tile><dir> ...]

Unreachable goals print ``-1 -1``.

The direction letter is where the *tile* slid (``U``, ``D``, ``L``,
``R``), so ``8L`` means tile 8 moved left and the blank moved right.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from backend.engine.gamesolver import Solver
from backend.models.solution import Solution
from frontend.cli.input_handler import read_queries


def format_solution(solution: Solution) -> str:
    head = f"{solution.steps} {solution.cost}"
    if not solution.reachable:
        return head
    return " ".join([head, *(str(m) for m in solution.moves())])


def run(source: Iterable[str], out: TextIO, solver: Solver | None = None) -> int:
    """Answer every query in *source*, writing one line each to *out*.

    Returns the number of queries answered.
    """
    solver = solver or Solver()
    answered = 0
    for query in read_queries(source):
        solution = solver.query(query.initial, query.cost_line, query.goal)
        out.write(format_solution(solution) + "\n")
        answered += 1
    return answered
