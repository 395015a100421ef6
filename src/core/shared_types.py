"""
Type definitions used across layers
"""

from enum import StrEnum


class Outcome(StrEnum):
    IN_PROGRESS = "in progress"
    PLAYER_WIN = "player win"
    OPPONENT_WIN = "opponent win"
    DRAW = "draw"


# The symbols used to store a board as text. The human player is always X, the computer always O.
PLAYER_SYMBOL = "X"
OPPONENT_SYMBOL = "O"
EMPTY_SYMBOL = ""
