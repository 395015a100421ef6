"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn:
the player's mark, the check for the end of the game, and the opponent's reply.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Self

from src.core.exceptions import GameCompletedError, GameStateError
from src.core.models import GameModel
from src.core.shared_types import Outcome
from src.tictactoe.board import Board
from src.tictactoe.cells import Cell
from src.tictactoe.evaluator import is_draw, is_win
from src.tictactoe.opponent import select_move

WIN_OUTCOMES: dict[Cell, Outcome] = {
    Cell.PLAYER: Outcome.PLAYER_WIN,
    Cell.OPPONENT: Outcome.OPPONENT_WIN,
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    user_id: str
    board: Board
    outcome: Outcome
    created_at: datetime
    completed_at: Optional[datetime] = None

    @classmethod
    def new_game(cls, user_id: str, now: Optional[datetime] = None) -> Self:
        """Empty board, nobody has played yet."""
        return cls(
            user_id=user_id,
            board=Board.empty(),
            outcome=Outcome.IN_PROGRESS,
            created_at=now or utc_now(),
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.outcome not in [outcome.value for outcome in Outcome]:
            raise GameStateError(
                f"Invalid outcome: {model.outcome!r}. \nPick one from {','.join(Outcome)}"
            )
        outcome = Outcome(model.outcome)
        is_terminal = outcome != Outcome.IN_PROGRESS
        if model.completed != is_terminal:
            raise GameStateError(
                f"Completed flag ({model.completed}) does not match outcome {outcome!r}."
            )
        if is_terminal and model.completed_at is None:
            raise GameStateError("A completed game must have a completion time.")

        board = Board.from_state(model.board_state)
        if board.count(Cell.OPPONENT) > board.count(Cell.PLAYER) + 1:
            raise GameStateError(
                "Opponent cannot have more than one mark more than the player."
            )

        return cls(
            user_id=model.user_id,
            board=board,
            outcome=outcome,
            created_at=model.created_at,
            completed_at=model.completed_at if is_terminal else None,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            user_id=self.user_id,
            board_state=self.board.to_state(),
            outcome=str(self.outcome),
            created_at=self.created_at,
            completed_at=self.completed_at,
            completed=self.completed,
        )

    @property
    def completed(self) -> bool:
        return self.outcome != Outcome.IN_PROGRESS

    @property
    def player_won(self) -> bool:
        return self.outcome == Outcome.PLAYER_WIN

    def make_move(self, index: int, now: Optional[datetime] = None) -> Optional[int]:
        """
        Play the player's mark on the given cell and let the opponent reply.

        Returns the cell the opponent played, or None if the game ended before the opponent got a turn.
        Raises before touching the board if the move is not allowed.
        """
        if self.completed:
            raise GameCompletedError(
                f"Game is already completed. outcome: {self.outcome}"
            )
        now = now or utc_now()

        self.board.place(index, Cell.PLAYER)
        if self._update_outcome(Cell.PLAYER, now):
            return None

        opponent_index = select_move(self.board)
        if opponent_index is None:
            # Board is full, which _update_outcome has already dealt with above.
            return None
        self.board.place(opponent_index, Cell.OPPONENT)
        self._update_outcome(Cell.OPPONENT, now)
        return opponent_index

    def _update_outcome(self, mark: Cell, now: datetime) -> bool:
        """Check whether the mark just placed ended the game. Returns True if it did."""
        if is_win(self.board, mark):
            self._complete(WIN_OUTCOMES[mark], now)
        elif is_draw(self.board):
            self._complete(Outcome.DRAW, now)
        return self.completed

    def _complete(self, outcome: Outcome, now: datetime) -> None:
        self.outcome = outcome
        self.completed_at = now
