"""Unit tests for src/tictactoe/cells.py"""

import pytest

from src.core.exceptions import GameStateError
from src.tictactoe.cells import (
    CELL_TO_SYMBOL,
    Cell,
    cell_from_symbol,
    cell_to_symbol,
)


@pytest.mark.parametrize(
    "symbol, expected",
    [("", Cell.EMPTY), ("X", Cell.PLAYER), ("O", Cell.OPPONENT), (None, Cell.EMPTY)],
)
def test_cell_from_symbol(symbol: str | None, expected: Cell) -> None:
    """Stored symbols map onto cells. A null (as in old records of new games) is an empty cell."""
    assert cell_from_symbol(symbol) == expected


@pytest.mark.parametrize("symbol", ["x", "o", " ", "Z", "XO"])
def test_unknown_symbol(symbol: str) -> None:
    with pytest.raises(GameStateError):
        _ = cell_from_symbol(symbol)


def test_every_cell_has_a_symbol() -> None:
    """The mapping is complete and symbols are unique."""
    assert set(CELL_TO_SYMBOL.keys()) == set(Cell)
    assert len(set(CELL_TO_SYMBOL.values())) == len(Cell)
    for cell in Cell:
        assert cell_from_symbol(cell_to_symbol(cell)) == cell
