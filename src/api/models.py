"""Requests and Response models"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Outcome

CellSymbol = str


# --- REQUEST MODELS ---
class UserScopedRequest(BaseModel):
    """Every request acts on behalf of the user handed to us by the authentication layer."""

    user_id: str

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("User ID cannot be empty.")
        return value


class CreateGameRequest(UserScopedRequest):
    pass


class GetGameRequest(UserScopedRequest):
    game_id: UUID


class MoveRequest(UserScopedRequest):
    game_id: UUID
    index: int


class ListGamesRequest(UserScopedRequest):
    limit: int = 10

    @field_validator("limit")
    @classmethod
    def validate_limit(cls, value: int) -> int:
        if value < 1:
            raise InvalidRequestError(f"Limit must be at least 1, got {value}.")
        return value


class GetStatsRequest(UserScopedRequest):
    pass


class MovePayload(BaseModel):
    """Body of the HTTP move request (game and user come from the path and the headers)."""

    index: int


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    user_id: str
    board: list[CellSymbol]
    outcome: Outcome
    created_at: datetime
    completed_at: Optional[datetime]
    completed: bool


class MoveResponse(GameResponse):
    player_move: int
    opponent_move: Optional[int]


class GameListResponse(BaseModel):
    user_id: str
    games: list[GameResponse]


class UserStatsResponse(BaseModel):
    user_id: str
    wins: int
    games_played: int
