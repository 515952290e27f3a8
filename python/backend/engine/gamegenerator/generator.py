"""Generates reachable puzzle instances and cost vectors."""

from __future__ import annotations

import random

from backend.errors import ConfigurationError
from backend.models.board import BLANK, Board

# Tile alphabet up to 4×4; larger boards would need the blank's letter.
TILE_SYMBOLS = "123456789ABCDEF"
MIN_SIZE = 2
MAX_SIZE = 4


class GameGenerator:
    """Creates boards by walking random legal moves from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the ordered board (tiles ascending, blank bottom-right)."""
        if not MIN_SIZE <= size <= MAX_SIZE:
            raise ConfigurationError(
                f"Board size must be between {MIN_SIZE} and {MAX_SIZE}, got {size}."
            )
        return Board(TILE_SYMBOLS[: size * size - 1] + BLANK)

    @staticmethod
    def scramble(board: Board, depth: int, rng: random.Random) -> Board:
        """Walk *depth* random moves from *board*, never undoing the last one."""
        prev: Board | None = None
        for _ in range(depth):
            neighbors = board.neighbors()
            if prev in neighbors and len(neighbors) > 1:
                neighbors.remove(prev)
            prev, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(size: int, depth: int, rng: random.Random) -> Board:
        return GameGenerator.scramble(GameGenerator.solved(size), depth, rng)

    @staticmethod
    def random_costs(
        size: int, rng: random.Random, low: int = 1, high: int = 9
    ) -> list[int]:
        return [rng.randint(low, high) for _ in range(size * size - 1)]
