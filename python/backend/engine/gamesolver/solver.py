"""Weighted sliding puzzle solver."""

from __future__ import annotations

import logging
from collections import Counter

from backend.engine.pathsearch import Session, ShortestPathEngine
from backend.engine.solvability import is_solvable
from backend.errors import ConfigurationError
from backend.models.board import Board
from backend.models.cost import CostModel
from backend.models.solution import Solution

log = logging.getLogger(__name__)


class Solver:
    """Answers path queries, keeping one search session between calls.

    A query reuses the session's settled boards and frontier only when
    the immediately preceding query had the same initial board and cost
    model.
    """

    def __init__(self, engine: ShortestPathEngine | None = None) -> None:
        self.engine = engine or ShortestPathEngine()
        self.session: Session | None = None
        self._previous: tuple[Board, CostModel] | None = None

    def query(self, initial: str, cost_line: str, goal: str) -> Solution:
        """Solve, reusing the live session when the previous query had the same inputs."""
        start, costs, target = self._parse(initial, cost_line, goal)
        repeated = self._previous == (start, costs)
        self._previous = (start, costs)
        if repeated and self.session is not None and self.session.matches(start, costs):
            return self._solution(target)
        return self._solve(start, costs, target)

    def solve(self, initial: str, cost_line: str, goal: str) -> Solution:
        """Start a fresh session from *initial* and solve toward *goal*."""
        return self._solve(*self._parse(initial, cost_line, goal))

    def solution(self, goal: str) -> Solution:
        """Solve *goal* against the live session."""
        if self.session is None:
            raise RuntimeError("solution() needs a session; call solve() first.")
        target = Board(goal)
        self._check_goal(self.session.initial, target)
        return self._solution(target)

    # -- helpers --------------------------------------------------------------

    def _solve(self, start: Board, costs: CostModel, target: Board) -> Solution:
        if not is_solvable(start, target):
            log.info("Goal %s is unreachable from %s", target, start)
            return Solution.unreachable()

        self.session = self.engine.open_session(start, costs, self.session)
        self.engine.expand_toward(self.session, target)
        return Solution.from_records(self.session.records, target)

    def _solution(self, target: Board) -> Solution:
        session = self.session
        if not is_solvable(session.initial, target):
            log.info("Goal %s is unreachable from %s", target, session.initial)
            return Solution.unreachable()

        self.engine.expand_toward(session, target)
        return Solution.from_records(session.records, target)

    @classmethod
    def _parse(
        cls, initial: str, cost_line: str, goal: str
    ) -> tuple[Board, CostModel, Board]:
        start = Board(initial)
        target = Board(goal)
        cls._check_goal(start, target)
        costs = CostModel.parse(cost_line, start.dimension)
        return start, costs, target

    @staticmethod
    def _check_goal(start: Board, target: Board) -> None:
        if Counter(start.state) != Counter(target.state):
            raise ConfigurationError(
                f"Goal {target.state!r} is not a rearrangement of {start.state!r}."
            )
