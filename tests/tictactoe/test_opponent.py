"""Unit tests for src/tictactoe/opponent.py"""

from unittest.mock import Mock, patch

import pytest

from src.tictactoe.board import Board
from src.tictactoe.cells import Cell
from src.tictactoe.opponent import (
    block,
    select_move,
    take_any,
    take_center,
    take_corner,
    win_now,
)


def _single_mark_boards() -> list[tuple[list[str], int]]:
    """Every board with at most one mark on it, with the move the opponent must pick."""
    cases: list[tuple[list[str], int]] = [([""] * 9, 4)]
    for symbol in ("X", "O"):
        for index in range(9):
            state = [""] * 9
            state[index] = symbol
            # center is taken first. If the center is taken, the first corner.
            cases.append((state, 0 if index == 4 else 4))
    return cases


@pytest.mark.parametrize("state, expected", _single_mark_boards())
def test_opening_moves(state: list[str], expected: int) -> None:
    """Fixed-point regression over all boards with at most one move played."""
    board = Board.from_state(state)
    assert select_move(board) == expected
    # same board in, same move out
    assert all(select_move(board) == expected for _ in range(5))
    # the real board is never touched
    assert board.to_state() == state


def test_scenario_center_taken_picks_first_corner() -> None:
    board = Board.from_state(["", "", "", "", "X", "", "", "", ""])
    assert select_move(board) == 0


def test_win_now_before_block() -> None:
    """Both sides have two in a row: completing your own line comes first."""
    board = Board.from_state(["X", "X", "", "O", "O", "", "", "", ""])
    assert win_now(board) == 5
    assert block(board) == 2
    assert select_move(board) == 5


def test_block_before_center() -> None:
    board = Board.from_state(["X", "X", "", "", "", "", "", "", "O"])
    assert win_now(board) is None
    assert select_move(board) == 2


def test_opponent_completes_row_instead_of_blocking() -> None:
    """Opponent holds 0 and 1 while the player threatens the middle row: winning on 2 beats blocking on 3."""
    board = Board.from_state(["O", "O", "", "", "X", "X", "", "", ""])
    assert select_move(board) == 2


def test_lowest_winning_cell() -> None:
    """O can win on 2 (top row) and on 6 (left column): ties go to the lowest index."""
    board = Board.from_state(["O", "O", "", "O", "X", "X", "", "X", ""])
    assert win_now(board) == 2
    assert select_move(board) == 2


def test_lowest_blocking_cell() -> None:
    """X threatens 2 (top row) and 6 (left column): block the lowest."""
    board = Board.from_state(["X", "X", "", "X", "O", "", "", "", ""])
    assert win_now(board) is None
    assert block(board) == 2
    assert select_move(board) == 2


@pytest.mark.parametrize(
    "state, expected",
    [
        (["", "", "", "", "X", "", "", "", ""], 0),
        (["O", "", "", "", "X", "", "", "", ""], 2),
        (["O", "", "X", "", "X", "", "", "", ""], 6),
        (["O", "", "X", "", "X", "", "O", "", ""], 8),
        (["O", "", "X", "", "X", "", "O", "", "X"], None),
    ],
)
def test_take_corner_in_fixed_order(state: list[str], expected: int | None) -> None:
    assert take_corner(Board.from_state(state)) == expected


def test_take_center() -> None:
    assert take_center(Board.empty()) == 4
    assert take_center(Board.from_state(["", "", "", "", "O", "", "", "", ""])) is None


def test_take_any_in_ascending_order() -> None:
    assert take_any(Board.from_state(["X", "O", "", "", "", "", "", "", ""])) == 2
    assert take_any(Board.from_state(["X", "O", "X", "O", "X", "O", "O", "X", "O"])) is None


def test_falls_back_to_first_empty_cell() -> None:
    """Center and corners taken, nobody can complete a line: first empty cell."""
    board = Board.from_state(["X", "O", "X", "", "X", "", "O", "X", "O"])
    assert win_now(board) is None
    assert block(board) is None
    assert select_move(board) == 3


def test_full_board_has_no_move() -> None:
    board = Board.from_state(["X", "O", "X", "O", "X", "O", "O", "X", "O"])
    assert select_move(board) is None


def test_hypothetical_moves_leave_board_untouched() -> None:
    state = ["X", "X", "", "O", "", "", "", "", ""]
    board = Board.from_state(state)
    _ = select_move(board)
    assert board.to_state() == state
    assert board.cell(2) == Cell.EMPTY


def test_rules_are_tried_in_order() -> None:
    """Stop at the first rule that comes up with a cell."""
    first = Mock(return_value=None)
    second = Mock(return_value=7)
    third = Mock(return_value=1)
    with patch("src.tictactoe.opponent.SELECTION_RULES", [first, second, third]):
        assert select_move(Board.empty()) == 7
    first.assert_called_once()
    second.assert_called_once()
    third.assert_not_called()
