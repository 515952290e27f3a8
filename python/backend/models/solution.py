"""Solved path, rebuilt from the search tree."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from backend.models.board import Board, Move

if TYPE_CHECKING:
    from backend.engine.pathsearch.engine import SearchRecord


@dataclass(frozen=True)
class Solution:
    cost: int
    steps: int
    path: tuple[Board, ...]
    reachable: bool = True

    @classmethod
    def unreachable(cls) -> Solution:
        return cls(cost=-1, steps=-1, path=(), reachable=False)

    @classmethod
    def from_records(
        cls, records: Mapping[Board, SearchRecord], goal: Board
    ) -> Solution:
        """Follow predecessor links from *goal* back to the root.

        *goal* must already be settled.
        """
        final = records[goal]
        path: list[Board] = [goal]
        record = final
        while record.predecessor is not None:
            path.append(record.predecessor)
            record = records[record.predecessor]
        path.reverse()
        return cls(
            cost=math.trunc(final.distance),
            steps=len(path) - 1,
            path=tuple(path),
        )

    def moves(self) -> list[Move]:
        return [a.move_to(b) for a, b in zip(self.path, self.path[1:])]
