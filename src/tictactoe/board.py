"""The board holds the marks placed so far and enforces where a new mark may go"""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import CellOccupiedError, GameStateError, OutOfRangeError
from src.tictactoe.cells import Cell, cell_from_symbol, cell_to_symbol
from src.tictactoe.grid import BOARD_SIZE, is_within_bounds


@dataclass
class Board:
    cells: list[Cell]

    @classmethod
    def empty(cls) -> Self:
        return cls([Cell.EMPTY] * BOARD_SIZE)

    @classmethod
    def from_state(cls, state: list[Optional[str]]) -> Self:
        """Construct a board from its stored text form.

        The stored form is a list of 9 symbols, read row by row:
        ["X", "", "", "", "O", "", "", "", ""]
        means the player holds the top-left corner and the opponent holds the center.
        """
        if len(state) != BOARD_SIZE:
            raise GameStateError(
                f"Board state must contain {BOARD_SIZE} cells, got {len(state)}."
            )
        return cls([cell_from_symbol(symbol) for symbol in state])

    def to_state(self) -> list[str]:
        return [cell_to_symbol(cell) for cell in self.cells]

    def cell(self, index: int) -> Cell:
        self._assert_within_bounds(index)
        return self.cells[index]

    def place(self, index: int, mark: Cell) -> None:
        """Put a mark on an empty cell"""
        self._assert_within_bounds(index)
        if self.cells[index] != Cell.EMPTY:
            raise CellOccupiedError(f"Cell {index} is already occupied.")
        self.cells[index] = mark

    def is_empty(self, index: int) -> bool:
        return self.cell(index) == Cell.EMPTY

    def is_full(self) -> bool:
        return all(cell != Cell.EMPTY for cell in self.cells)

    def empty_cells(self) -> list[int]:
        """Indices of all empty cells, in ascending order"""
        return [index for index, cell in enumerate(self.cells) if cell == Cell.EMPTY]

    def count(self, cell: Cell) -> int:
        return self.cells.count(cell)

    def copy(self) -> Self:
        """Scratch copy, to try out a move without touching this board"""
        return type(self)(list(self.cells))

    def _assert_within_bounds(self, index: int) -> None:
        if not is_within_bounds(index):
            raise OutOfRangeError(
                f"Cell index {index} is outside of the board (0-{BOARD_SIZE - 1})."
            )
