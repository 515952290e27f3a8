"""Exception hierarchy for the puzzle solver."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by the solver."""


class ConfigurationError(PuzzleError, ValueError):
    """A board literal, goal or cost line cannot be used for a session."""


class InputFormatError(PuzzleError, ValueError):
    """The batch input does not follow the line-oriented record format."""


class ExhaustedSearchError(PuzzleError, RuntimeError):
    """The frontier ran dry before the goal board was settled.

    The solvability check admitted the goal, so reaching this means the
    parity rule and the connectivity of the board graph disagree.
    """

    def __init__(self, goal: str, expanded: int) -> None:
        super().__init__(
            f"No path found to {goal!r} after settling {expanded} boards."
        )
        self.goal = goal
        self.expanded = expanded
