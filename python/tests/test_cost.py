"""Cost model parsing and edge costs."""

from __future__ import annotations

import pytest

from backend.errors import ConfigurationError
from backend.models.board import Board
from backend.models.cost import CostModel


def test_parse_reads_one_cost_per_tile() -> None:
    model = CostModel.parse("1 2 3 4 5 6 7 8", 3)
    assert model.costs == (1, 2, 3, 4, 5, 6, 7, 8)


def test_parse_ignores_extra_tokens_and_spacing() -> None:
    model = CostModel.parse("  4\t3  2 9 9", 2)
    assert model.costs == (4, 3, 2)


@pytest.mark.parametrize("line", ["", "1 2 3 4 5 6 7", "1"])
def test_parse_rejects_short_lines(line: str) -> None:
    with pytest.raises(ConfigurationError):
        CostModel.parse(line, 3)


def test_parse_rejects_non_integers() -> None:
    with pytest.raises(ConfigurationError):
        CostModel.parse("1 2 x 4 5 6 7 8", 3)


def test_models_compare_by_value() -> None:
    assert CostModel.parse("1 2 3", 2) == CostModel.parse("1  2 3 ", 2)
    assert CostModel.parse("1 2 3", 2) != CostModel.parse("3 2 1", 2)


def test_edge_cost_charges_the_moved_tile() -> None:
    model = CostModel.parse("10 20 30 40 50 60 70 80", 3)
    before = Board("1234567G8")
    assert model.edge_cost(before, Board("12345678G")) == 80
    assert model.edge_cost(before, Board("1234G6758")) == 50
    assert model.edge_cost(before, Board("123456G78")) == 70


def test_edge_cost_uses_letter_tiles_on_4x4() -> None:
    model = CostModel.parse(" ".join(str(i) for i in range(1, 16)), 4)
    before = Board("123456789ABCDEFG")
    assert model.edge_cost(before, Board("123456789ABCDEGF")) == 15
    assert model.edge_cost(before, Board("123456789ABGDEFC")) == 12


@pytest.mark.parametrize(
    "state, line",
    [
        ("12345678G", "1 2 3 4 5 6 7 8"),
        ("123456789ABCDEFG", " ".join(["1"] * 15)),
    ],
)
def test_degenerate_blank_transition_costs_nothing(state: str, line: str) -> None:
    board = Board(state)
    model = CostModel.parse(line, board.dimension)
    assert model.edge_cost(board, board) == 0


def test_symbol_outside_cost_vector_costs_nothing() -> None:
    model = CostModel.parse("5 5 5", 2)
    assert model.edge_cost(Board("09AG"), Board("09GA")) == 0
    assert model.edge_cost(Board("10AG"), Board("1G0A")) == 0
