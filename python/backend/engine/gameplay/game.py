"""Replays move sequences against a board."""

from __future__ import annotations

from collections.abc import Iterable

from backend.models.board import BLANK, Board, Direction, Move


class GamePlay:
    """Tracks a board as moves are applied to it."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, move: Move) -> bool:
        """Slide ``move.tile`` in ``move.direction`` into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        board = self.board
        n = board.dimension
        bx, by = board.coords(board.blank_index)

        # The offset points to the tile that will slide into the blank.
        # UP   → tile at (bx, by+1) moves up   → blank shifts down
        # DOWN → tile at (bx, by-1) moves down → blank shifts up
        # LEFT → tile at (bx+1, by) moves left → blank shifts right
        # RIGHT→ tile at (bx-1, by) moves right→ blank shifts left
        offsets = {
            Direction.UP: (0, 1),
            Direction.DOWN: (0, -1),
            Direction.LEFT: (1, 0),
            Direction.RIGHT: (-1, 0),
        }
        dx, dy = offsets[move.direction]
        tx, ty = bx + dx, by + dy

        if not (0 <= tx < n and 0 <= ty < n):
            return False
        if board.tile_at(tx, ty) != move.tile:
            return False

        cells = list(board.state)
        cells[by * n + bx] = move.tile
        cells[ty * n + tx] = BLANK
        self.board = Board("".join(cells))
        self.moves += 1
        return True

    def replay(self, moves: Iterable[Move]) -> bool:
        """Apply *moves* in order, stopping at the first invalid one."""
        return all(self.move(m) for m in moves)

    # -- queries --------------------------------------------------------------

    def reached(self, goal: Board) -> bool:
        return self.board == goal
