"""Board model for the weighted sliding puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from math import isqrt

from backend.errors import ConfigurationError

BLANK = "G"


class Direction(StrEnum):
    """Where the *tile* slid, named by its one-letter move code."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"


@dataclass(frozen=True)
class Move:
    tile: str
    direction: Direction

    def __str__(self) -> str:
        return f"{self.tile}{self.direction.value}"


def tile_value(symbol: str) -> int:
    """Numeric value of a tile symbol: ``1``..``9``, then ``A`` = 10 onwards.

    Letters are case-insensitive.  Non-alphanumeric symbols map to -1.
    """
    try:
        return int(symbol, 36)
    except ValueError:
        return -1


@dataclass(frozen=True)
class Board:
    """One puzzle configuration.

    ``state`` lists the tile symbols in row-major order with exactly one
    ``BLANK``.  Boards are values: equal states mean equal boards.
    """

    state: str

    def __post_init__(self) -> None:
        size = isqrt(len(self.state))
        if size < 2 or size * size != len(self.state):
            raise ConfigurationError(
                f"Board {self.state!r} has {len(self.state)} cells, "
                f"expected a square number of at least 4."
            )
        blanks = self.state.count(BLANK)
        if blanks != 1:
            raise ConfigurationError(
                f"Board {self.state!r} must contain exactly one {BLANK!r}, "
                f"found {blanks}."
            )

    # -- queries --------------------------------------------------------------

    @property
    def dimension(self) -> int:
        return isqrt(len(self.state))

    @property
    def blank_index(self) -> int:
        return self.state.index(BLANK)

    def coords(self, index: int) -> tuple[int, int]:
        """Map a cell index to ``(x, y)`` grid coordinates."""
        return index % self.dimension, index // self.dimension

    def tile_at(self, x: int, y: int) -> str:
        return self.state[y * self.dimension + x]

    # -- graph ----------------------------------------------------------------

    def neighbors(self) -> list[Board]:
        """Boards reachable by sliding one tile into the blank.

        Blank moves are tried up, down, left, right; moves that would
        leave the grid are skipped.
        """
        n = self.dimension
        bi = self.blank_index
        bx, by = self.coords(bi)
        out: list[Board] = []
        for dx, dy in ((0, -1), (0, 1), (-1, 0), (1, 0)):
            nx, ny = bx + dx, by + dy
            if not (0 <= nx < n and 0 <= ny < n):
                continue
            out.append(self._swap(bi, ny * n + nx))
        return out

    def move_to(self, other: Board) -> Move:
        """Describe the single slide that turns this board into *other*."""
        if other not in self.neighbors():
            raise ValueError(f"{other.state!r} is not one move away from {self.state!r}.")

        first = self.blank_index
        second = other.blank_index
        xf, yf = self.coords(first)
        xi, yi = self.coords(second)
        if xf > xi:
            direction = Direction.RIGHT
        elif xf < xi:
            direction = Direction.LEFT
        elif yf > yi:
            direction = Direction.DOWN
        else:
            direction = Direction.UP
        return Move(tile=self.state[second], direction=direction)

    # -- helpers --------------------------------------------------------------

    def _swap(self, blank: int, target: int) -> Board:
        cells = list(self.state)
        cells[blank], cells[target] = cells[target], cells[blank]
        return Board("".join(cells))

    def __str__(self) -> str:
        return self.state
