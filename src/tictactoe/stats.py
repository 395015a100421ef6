"""Cumulative statistics of a user, updated every time one of their games ends."""

from dataclasses import dataclass

from src.core.exceptions import GameStateError


@dataclass
class UserStats:
    wins: int = 0
    games_played: int = 0

    def __post_init__(self) -> None:
        if self.wins < 0 or self.games_played < 0:
            raise GameStateError(
                f"Counters cannot be negative: wins={self.wins}, games_played={self.games_played}"
            )
        if self.wins > self.games_played:
            raise GameStateError(
                f"Cannot have more wins ({self.wins}) than games played ({self.games_played})."
            )

    def record_completion(self, won: bool) -> None:
        """
        Count one finished game.

        ---
        NOTE: Not idempotent. The caller is responsible for calling this exactly once per finished game.
        """
        self.games_played += 1
        if won:
            self.wins += 1
