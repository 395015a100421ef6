"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    GameListResponse,
    GameResponse,
    GetGameRequest,
    GetStatsRequest,
    ListGamesRequest,
    MoveRequest,
    MoveResponse,
    UserStatsResponse,
)
from src.core.exceptions import GameNotFoundError
from src.core.models import GameModel, StatsUpdate
from src.db.repository import GameRepository
from src.tictactoe.game import Game, utc_now

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class GameService:
    """Orchestration of layers for tic-tac-toe games against the computer."""

    def __init__(self, repository: GameRepository, clock: Clock = utc_now) -> None:
        self.repo = repository
        self.clock = clock

    # -- API routes logic ---
    def create_game(self, request: CreateGameRequest) -> GameResponse:
        """Player requested to start a new game."""

        # Create a new Game, and convert into GameModel
        new_game = Game.new_game(user_id=request.user_id, now=self.clock())

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s for user %s", game_id, request.user_id)

        return self._create_game_response(game_id, stored_game)

    def get_game(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        game_model = self._fetch_game(request.game_id, request.user_id)
        return self._create_game_response(request.game_id, game_model)

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """
        Player puts a mark on a cell, the computer replies.

        The new game state and (if the game just ended) the user's statistics are stored in one go.
        Nothing is stored when the move gets rejected.
        """

        # Retrieve persisted GameModel from repository
        stored_model = self._fetch_game(request.game_id, request.user_id)

        # Create a new Game instance from the retrieved GameModel, and attempt the move
        game = Game.from_model(stored_model)
        opponent_move = game.make_move(request.index, now=self.clock())
        logger.debug(
            "Game %s: player played %s, opponent replied %s",
            request.game_id,
            request.index,
            opponent_move,
        )

        # Capture updated state in GameModel. Keep the version we read, so the repository can detect a concurrent update.
        after_move = replace(game.to_model(), version=stored_model.version)

        # A game can only end once: moves on a completed game are rejected by Game.make_move()
        stats_update = (
            StatsUpdate(user_id=request.user_id, won=game.player_won)
            if game.completed
            else None
        )

        stored_after_move = self.repo.update_game(
            request.game_id, after_move, stats_update
        )
        if stored_after_move is None:
            raise GameNotFoundError(f"Game with game_id={request.game_id} not found.")

        if game.completed:
            logger.info(
                "Game %s of user %s ended: %s",
                request.game_id,
                request.user_id,
                game.outcome,
            )

        response = self._create_game_response(request.game_id, stored_after_move)
        return MoveResponse(
            **response.model_dump(),
            player_move=request.index,
            opponent_move=opponent_move,
        )

    def list_games(self, request: ListGamesRequest) -> GameListResponse:
        """Most recent games of the user first."""
        games = self.repo.list_games(request.user_id, request.limit)
        return GameListResponse(
            user_id=request.user_id,
            games=[
                self._create_game_response(game_id, model) for game_id, model in games
            ],
        )

    def get_user_stats(self, request: GetStatsRequest) -> UserStatsResponse:
        """Wins and games played of the user."""
        stats = self.repo.get_user_stats(request.user_id)
        if stats is None:
            raise GameNotFoundError(f"User {request.user_id!r} not found.")
        return UserStatsResponse(
            user_id=request.user_id,
            wins=stats.wins,
            games_played=stats.games_played,
        )

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            user_id=model.user_id,
            board=model.board_state,
            outcome=model.outcome,
            created_at=model.created_at,
            completed_at=model.completed_at,
            completed=model.completed,
        )

    def _fetch_game(self, game_id: UUID, user_id: str) -> GameModel:
        """
        Attempt to find the game in the repository and raise error if it fails.

        NOTE: a game of another user is reported exactly like a game that does not exist.
        """
        game_model = self.repo.get_game(game_id, user_id)
        if game_model is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game_model
