"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Type aliases to make GameModel easier to read
UserId = str
CellSymbol = str


@dataclass
class GameModel:
    """Transport-safe representation of a tic-tac-toe game used between API, Service, DB, and Game layers."""

    user_id: UserId
    board_state: list[CellSymbol]
    outcome: str
    created_at: datetime
    completed_at: Optional[datetime]
    completed: bool
    # Revision of the stored record this data was read from. 0 = not stored yet.
    version: int = 0


@dataclass(frozen=True)
class StatsUpdate:
    """Instruction to add one finished game to a user's statistics."""

    user_id: UserId
    won: bool
