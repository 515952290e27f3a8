"""Per-tile movement costs."""

from __future__ import annotations

from dataclasses import dataclass

from backend.errors import ConfigurationError
from backend.models.board import Board, tile_value


@dataclass(frozen=True)
class CostModel:
    """Cost of sliding each tile, indexed by ``tile_value(tile) - 1``."""

    costs: tuple[int, ...]

    @classmethod
    def parse(cls, cost_line: str, dimension: int) -> CostModel:
        """Read ``dimension² - 1`` whitespace-separated integers.

        Tokens past the required count are ignored.

        Example::

            CostModel.parse("1 2 3 4 5 6 7 8", 3)
        """
        needed = dimension * dimension - 1
        tokens = cost_line.split()
        if len(tokens) < needed:
            raise ConfigurationError(
                f"Cost line {cost_line!r} has {len(tokens)} values, "
                f"expected {needed} for a {dimension}×{dimension} board."
            )
        try:
            costs = tuple(int(tok) for tok in tokens[:needed])
        except ValueError as exc:
            raise ConfigurationError(f"Cost line {cost_line!r} is not all integers.") from exc
        return cls(costs=costs)

    def edge_cost(self, first: Board, second: Board) -> int:
        """Cost of the transition *first* → *second*.

        The moved tile sits in *first* where *second* has its blank.  A
        symbol outside the cost vector (the blank itself) costs 0.
        """
        index = tile_value(first.state[second.blank_index]) - 1
        if 0 <= index < len(self.costs):
            return self.costs[index]
        return 0
