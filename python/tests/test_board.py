"""Board model: validation, coordinates, neighbor generation, move naming."""

from __future__ import annotations

import pytest

from backend.errors import ConfigurationError
from backend.models.board import BLANK, Board, Direction, Move, tile_value

SOLVED_3x3 = "12345678G"


# -- helpers ------------------------------------------------------------------


def _board_with_blank_at(index: int) -> Board:
    cells = [c for c in SOLVED_3x3 if c != BLANK]
    cells.insert(index, BLANK)
    return Board("".join(cells))


def _diff_positions(a: Board, b: Board) -> set[int]:
    return {i for i, (x, y) in enumerate(zip(a.state, b.state)) if x != y}


# -- validation ---------------------------------------------------------------


@pytest.mark.parametrize("state", ["", "123G5", "12345678", "1G34G678G", "G"])
def test_rejects_invalid_states(state: str) -> None:
    with pytest.raises(ConfigurationError):
        Board(state)


def test_configuration_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Board("1234")


def test_dimension_and_coords() -> None:
    board = Board("123456G78")
    assert board.dimension == 3
    assert board.blank_index == 6
    assert board.coords(6) == (0, 2)
    assert board.coords(5) == (2, 1)
    assert board.tile_at(2, 1) == "6"


def test_boards_are_values() -> None:
    assert Board(SOLVED_3x3) == Board(SOLVED_3x3)
    assert len({Board(SOLVED_3x3), Board(SOLVED_3x3)}) == 1


# -- neighbors ----------------------------------------------------------------


@pytest.mark.parametrize(
    "index, expected",
    [(0, 2), (2, 2), (6, 2), (8, 2), (1, 3), (3, 3), (5, 3), (7, 3), (4, 4)],
)
def test_neighbor_count_by_blank_position(index: int, expected: int) -> None:
    assert len(_board_with_blank_at(index).neighbors()) == expected


@pytest.mark.parametrize("index", range(9))
def test_neighbors_swap_blank_with_one_adjacent_tile(index: int) -> None:
    board = _board_with_blank_at(index)
    bx, by = board.coords(board.blank_index)
    for nb in board.neighbors():
        changed = _diff_positions(board, nb)
        assert changed == {board.blank_index, nb.blank_index}
        nx, ny = nb.coords(nb.blank_index)
        assert abs(nx - bx) + abs(ny - by) == 1
        assert nb.state[board.blank_index] == board.state[nb.blank_index]


def test_neighbors_on_4x4() -> None:
    board = Board("123456789ABCDEFG")
    assert {nb.state for nb in board.neighbors()} == {
        "123456789ABGDEFC",
        "123456789ABCDEGF",
    }


# -- moves --------------------------------------------------------------------


@pytest.mark.parametrize(
    "before, after, token",
    [
        ("1234567G8", "12345678G", "8L"),
        ("12345678G", "1234567G8", "8R"),
        ("12345G786", "12345678G", "6U"),
        ("12345678G", "12345G786", "6D"),
    ],
)
def test_move_to_names_tile_and_direction(before: str, after: str, token: str) -> None:
    assert str(Board(before).move_to(Board(after))) == token


def test_move_to_rejects_distant_board() -> None:
    with pytest.raises(ValueError):
        Board("G12345678").move_to(Board("12345678G"))


def test_move_token() -> None:
    assert str(Move("A", Direction.UP)) == "AU"


@pytest.mark.parametrize(
    "symbol, value", [("1", 1), ("9", 9), ("A", 10), ("f", 15), ("G", 16), ("*", -1)]
)
def test_tile_value(symbol: str, value: int) -> None:
    assert tile_value(symbol) == value
