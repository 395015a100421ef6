"""HTTP endpoints. Each route only translates HTTP into a request model and hands it to the GameService."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Header, Path, Query, status
from sqlalchemy.orm import Session

from src.api.models import (
    CreateGameRequest,
    GameListResponse,
    GameResponse,
    GetGameRequest,
    GetStatsRequest,
    ListGamesRequest,
    MovePayload,
    MoveRequest,
    MoveResponse,
    UserStatsResponse,
)
from src.core.config import get_settings
from src.db.database import get_db
from src.db.sql_repository import SQLGameRepository
from src.services.game_service import GameService

games_router = APIRouter(prefix="/games", tags=["Game"])
users_router = APIRouter(prefix="/users", tags=["User"])


# --- DEPENDENCIES ---
def get_game_service(db: Session = Depends(get_db)) -> GameService:
    return GameService(SQLGameRepository(db))


def current_user_id(
    x_user_id: str = Header(..., description="ID of the authenticated user"),
) -> str:
    """The authentication layer in front of this service puts the user's ID in this header."""
    return x_user_id


# --- GAME ROUTES ---
@games_router.post(
    "",
    response_model=GameResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start a new game",
)
def create_game(
    user_id: str = Depends(current_user_id),
    service: GameService = Depends(get_game_service),
) -> GameResponse:
    return service.create_game(CreateGameRequest(user_id=user_id))


@games_router.get("", response_model=GameListResponse, summary="Recent games")
def list_games(
    limit: Optional[int] = Query(None, description="Maximum amount of games to return"),
    user_id: str = Depends(current_user_id),
    service: GameService = Depends(get_game_service),
) -> GameListResponse:
    page_size = limit if limit is not None else get_settings().history_page_size
    return service.list_games(ListGamesRequest(user_id=user_id, limit=page_size))


@games_router.get("/{game_id}", response_model=GameResponse, summary="Get game state")
def get_game(
    game_id: UUID = Path(..., description="ID of the game to retrieve"),
    user_id: str = Depends(current_user_id),
    service: GameService = Depends(get_game_service),
) -> GameResponse:
    return service.get_game(GetGameRequest(game_id=game_id, user_id=user_id))


@games_router.post(
    "/{game_id}/moves", response_model=MoveResponse, summary="Make a move"
)
def make_move(
    payload: MovePayload,
    game_id: UUID = Path(..., description="ID of the game to play the move on"),
    user_id: str = Depends(current_user_id),
    service: GameService = Depends(get_game_service),
) -> MoveResponse:
    return service.make_move(
        MoveRequest(game_id=game_id, user_id=user_id, index=payload.index)
    )


# --- USER ROUTES ---
@users_router.get(
    "/me/stats", response_model=UserStatsResponse, summary="Wins and games played"
)
def get_my_stats(
    user_id: str = Depends(current_user_id),
    service: GameService = Depends(get_game_service),
) -> UserStatsResponse:
    return service.get_user_stats(GetStatsRequest(user_id=user_id))
