"""
The computer opponent.

Picks a move by trying a fixed list of rules, from most to least urgent. The first rule that comes up with a cell wins.
Every rule scans cells in ascending order, so the same board always produces the same move.
"""

from typing import Callable, Optional

from src.tictactoe.board import Board
from src.tictactoe.cells import Cell
from src.tictactoe.evaluator import is_win
from src.tictactoe.grid import CENTER, CORNERS

SelectionRule = Callable[[Board], Optional[int]]


def winning_cell(board: Board, mark: Cell) -> Optional[int]:
    """Lowest empty cell that would complete a line for the given mark"""
    for index in board.empty_cells():
        scratch = board.copy()
        scratch.place(index, mark)
        if is_win(scratch, mark):
            return index
    return None


def win_now(board: Board) -> Optional[int]:
    return winning_cell(board, Cell.OPPONENT)


def block(board: Board) -> Optional[int]:
    """Take the cell the player needs to complete a line"""
    return winning_cell(board, Cell.PLAYER)


def take_center(board: Board) -> Optional[int]:
    return CENTER if board.is_empty(CENTER) else None


def take_corner(board: Board) -> Optional[int]:
    return next((corner for corner in CORNERS if board.is_empty(corner)), None)


def take_any(board: Board) -> Optional[int]:
    empty = board.empty_cells()
    return empty[0] if empty else None


SELECTION_RULES: list[SelectionRule] = [
    win_now,
    block,
    take_center,
    take_corner,
    take_any,
]


def select_move(board: Board) -> Optional[int]:
    """Cell the opponent plays next. None if the board is full."""
    for rule in SELECTION_RULES:
        index = rule(board)
        if index is not None:
            return index
    return None
