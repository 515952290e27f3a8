"""Parity pre-filter for goal boards."""

from __future__ import annotations

from backend.models.board import BLANK, Board


def is_solvable(start: Board, goal: Board) -> bool:
    """Return True if *goal* passes the inversion-parity test from *start*.

    Tiles are compared by their order in *goal*, with the blank stripped
    from both boards.  Both loop bounds stop before the last grid
    position.
    """
    cells = len(start.state)
    s = [c for c in start.state if c != BLANK]
    rank = {c: i for i, c in enumerate(c for c in goal.state if c != BLANK)}

    inversions = 0
    for i in range(cells - 1):
        for j in range(i + 1, cells - 1):
            if rank[s[j]] < rank[s[i]]:
                inversions += 1
    return inversions % 2 == 0
