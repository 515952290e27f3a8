from backend.models.board import BLANK, Board, Direction, Move, tile_value
from backend.models.cost import CostModel
from backend.models.solution import Solution

__all__ = [
    "BLANK",
    "Board",
    "CostModel",
    "Direction",
    "Move",
    "Solution",
    "tile_value",
]
