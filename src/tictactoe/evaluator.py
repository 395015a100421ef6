"""Detect the end of a game: three in a row, or a full board."""

from typing import Optional

from src.tictactoe.board import Board
from src.tictactoe.cells import Cell
from src.tictactoe.grid import WIN_LINES


def is_win(board: Board, mark: Cell) -> bool:
    """True if any row, column or diagonal is completely filled with the given mark"""
    return any(all(board.cells[index] == mark for index in line) for line in WIN_LINES)


def winner(board: Board) -> Optional[Cell]:
    for mark in (Cell.PLAYER, Cell.OPPONENT):
        if is_win(board, mark):
            return mark
    return None


def is_draw(board: Board) -> bool:
    return board.is_full() and winner(board) is None
