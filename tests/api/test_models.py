from uuid import UUID, uuid4

import pytest

from src.api.models import (
    CreateGameRequest,
    GetGameRequest,
    ListGamesRequest,
    MovePayload,
    MoveRequest,
)
from src.core.exceptions import InvalidRequestError


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - user ID --
@pytest.mark.parametrize("user_id", ["", " ", "\t"])
def test_empty_user_id(user_id: str, mock_id: UUID) -> None:
    """Every request needs the user it acts for."""
    with pytest.raises(InvalidRequestError):
        _ = CreateGameRequest(user_id=user_id)
    with pytest.raises(InvalidRequestError):
        _ = GetGameRequest(game_id=mock_id, user_id=user_id)
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(game_id=mock_id, user_id=user_id, index=4)


def test_valid_requests(mock_id: UUID) -> None:
    request = MoveRequest(game_id=mock_id, user_id="don't hate the player", index=4)
    assert request.game_id == mock_id
    assert request.index == 4


def test_move_index_range_is_left_to_the_game(mock_id: UUID) -> None:
    """Out of range indices pass validation here: the board decides (and raises OutOfRangeError)."""
    request = MoveRequest(game_id=mock_id, user_id="player", index=9)
    assert request.index == 9
    assert MovePayload(index=-1).index == -1


# -- Validation - ListGamesRequest --
def test_default_limit() -> None:
    assert ListGamesRequest(user_id="player").limit == 10


@pytest.mark.parametrize("limit", [0, -1])
def test_invalid_limit(limit: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = ListGamesRequest(user_id="player", limit=limit)
