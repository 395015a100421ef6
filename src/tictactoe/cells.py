"""Defines what can occupy a cell of the board"""

from enum import Enum, auto
from typing import Optional

from src.core.exceptions import GameStateError
from src.core.shared_types import EMPTY_SYMBOL, OPPONENT_SYMBOL, PLAYER_SYMBOL


class Cell(Enum):
    EMPTY = auto()
    PLAYER = auto()
    OPPONENT = auto()


CELL_TO_SYMBOL: dict[Cell, str] = {
    Cell.EMPTY: EMPTY_SYMBOL,
    Cell.PLAYER: PLAYER_SYMBOL,
    Cell.OPPONENT: OPPONENT_SYMBOL,
}

SYMBOL_TO_CELL: dict[str, Cell] = {value: key for key, value in CELL_TO_SYMBOL.items()}


def cell_from_symbol(symbol: Optional[str]) -> Cell:
    # NOTE: a freshly created board used to be stored as an array of nulls, so None reads as an empty cell.
    if symbol is None:
        return Cell.EMPTY
    if symbol not in SYMBOL_TO_CELL:
        raise GameStateError(
            f"Unknown cell symbol: {symbol!r}. Expected one of {list(SYMBOL_TO_CELL)}"
        )
    return SYMBOL_TO_CELL[symbol]


def cell_to_symbol(cell: Cell) -> str:
    return CELL_TO_SYMBOL[cell]
