"""Dijkstra search over the lazily generated board graph.

The graph is never built: ``Board.neighbors()`` is called when a board is
settled.  All mutable search state (memo of records, frontier, counters)
lives in a :class:`Session` so that a later query with the same initial
board and cost model can pick up where the previous one stopped.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field

from backend.errors import ExhaustedSearchError
from backend.models.board import Board
from backend.models.cost import CostModel

log = logging.getLogger(__name__)


@dataclass
class SearchRecord:
    """Best known route to one board."""

    board: Board
    distance: float = math.inf
    steps: float = math.inf
    predecessor: Board | None = None
    settled: bool = False

    def reset(self) -> None:
        self.distance = math.inf
        self.steps = math.inf
        self.predecessor = None
        self.settled = False


def by_distance_then_steps(record: SearchRecord) -> tuple[float, float]:
    return record.distance, record.steps


class Frontier:
    """Binary heap of boards ordered by ``key(record)``.

    Equal keys pop in insertion order.  A board may be queued several
    times; entries are snapshots of the key at push time.
    """

    def __init__(
        self, key: Callable[[SearchRecord], tuple] = by_distance_then_steps
    ) -> None:
        self._key = key
        self._heap: list[tuple[tuple, int, Board]] = []
        self._counter = itertools.count()

    def push(self, record: SearchRecord) -> None:
        heapq.heappush(
            self._heap, (self._key(record), next(self._counter), record.board)
        )

    def pop(self) -> Board:
        return heapq.heappop(self._heap)[2]

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


@dataclass
class Session:
    """Search state for one (initial board, cost model) pair."""

    initial: Board
    cost_model: CostModel
    records: dict[Board, SearchRecord] = field(default_factory=dict)
    frontier: Frontier = field(default_factory=Frontier)
    expanded: int = 0
    generated: int = 0

    def matches(self, initial: Board, cost_model: CostModel) -> bool:
        return self.initial == initial and self.cost_model == cost_model

    def record(self, board: Board) -> SearchRecord:
        """Return the record for *board*, creating it on first discovery."""
        rec = self.records.get(board)
        if rec is None:
            rec = SearchRecord(board)
            self.records[board] = rec
            self.generated += 1
        return rec

    def is_settled(self, board: Board) -> bool:
        rec = self.records.get(board)
        return rec is not None and rec.settled


class ShortestPathEngine:
    """Runs and resumes Dijkstra searches held in :class:`Session` objects."""

    def open_session(
        self,
        initial: Board,
        cost_model: CostModel,
        session: Session | None = None,
    ) -> Session:
        """Start a search from *initial*, recycling *session* if given.

        A recycled session keeps its records, reset to the unreached
        state, only when it starts from the same board; otherwise the
        memo is dropped.  The frontier is emptied before the root is
        queued.
        """
        if session is None:
            session = Session(initial=initial, cost_model=cost_model)
        else:
            if session.initial == initial:
                for rec in session.records.values():
                    rec.reset()
            else:
                session.records.clear()
                session.generated = 0
            session.frontier.clear()
            session.initial = initial
            session.cost_model = cost_model
            session.expanded = 0

        root = session.record(initial)
        root.distance = 0
        root.steps = 0
        session.frontier.push(root)
        log.debug(
            "Opened session from %s with %d known boards",
            initial, len(session.records),
        )
        return session

    def expand_toward(
        self, session: Session, goal: Board | None = None
    ) -> SearchRecord | None:
        """Settle boards until *goal* is settled or the frontier is empty.

        Every settled board has its neighbors relaxed, the goal included,
        so a later call on the same session can route through it.  With
        ``goal=None`` the whole reachable component is explored and
        ``None`` is returned.
        """
        if goal is not None and session.is_settled(goal):
            log.debug("Reusing settled record for %s", goal)
            return session.records[goal]

        frontier = session.frontier
        while frontier:
            board = frontier.pop()
            current = session.records[board]
            if current.settled:
                continue
            current.settled = True
            session.expanded += 1
            self._relax_neighbors(session, current)

            if board == goal:
                log.debug(
                    "Settled %s at distance %s after %d expansions",
                    goal, current.distance, session.expanded,
                )
                return current

        if goal is not None:
            raise ExhaustedSearchError(goal.state, session.expanded)
        log.debug("Explored %d boards from %s", session.expanded, session.initial)
        return None

    def explore(self, session: Session) -> None:
        """Settle every board reachable from the session's root."""
        self.expand_toward(session, None)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _relax_neighbors(session: Session, current: SearchRecord) -> None:
        board = current.board
        for nb in board.neighbors():
            rec = session.record(nb)
            if rec.settled:
                continue
            distance = current.distance + session.cost_model.edge_cost(board, nb)
            steps = current.steps + 1
            if distance < rec.distance or (
                distance == rec.distance and steps < rec.steps
            ):
                rec.distance = distance
                rec.steps = steps
                rec.predecessor = board
                session.frontier.push(rec)
