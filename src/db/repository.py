"""Protocol repository (can implement later for SQL Alchemy / simple Excel table etc.)"""

from typing import Optional, Protocol
from uuid import UUID

from src.core.models import GameModel, StatsUpdate
from src.tictactoe.stats import UserStats


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def get_game(self, game_id: UUID, user_id: str) -> GameModel | None:
        """Get game by ID, if record exists and belongs to the given user."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        ...

    def update_game(
        self,
        game_id: UUID,
        game: GameModel,
        stats_update: Optional[StatsUpdate] = None,
    ) -> GameModel | None:
        """
        Write new state of an existing record, together with the statistics of a finished game (all or nothing).

        Raises ConcurrencyConflictError when the record changed since `game.version` was read.
        """
        ...

    def list_games(self, user_id: str, limit: int) -> list[tuple[UUID, GameModel]]:
        """Most recent games of a user first."""
        ...

    def get_user_stats(self, user_id: str) -> UserStats | None:
        """Statistics of a user, if the user exists."""
        ...
