"""Implementation of (Game)Repository using SQLAlchemy"""

import json
import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator, Optional
from uuid import UUID, uuid4

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from src.core.exceptions import (
    ConcurrencyConflictError,
    GameError,
    GameNotFoundError,
)
from src.core.models import GameModel, StatsUpdate
from src.db.schema import DBGame, DBUser
from src.tictactoe.stats import UserStats

logger = logging.getLogger(__name__)


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: UUID, user_id: str) -> GameModel | None:
        """Get game by ID, if record exists and belongs to the given user."""
        game_db = self._fetch_game(game_id)
        if game_db and game_db.user_id == user_id:
            return self._to_model(game_db)
        return None

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""

        new_id = uuid4()
        with self._transaction():
            if self._fetch_user(game.user_id) is None:
                raise GameNotFoundError(f"User {game.user_id!r} not found.")
            last_number = self.db.scalar(
                select(func.max(DBGame.number)).where(DBGame.user_id == game.user_id)
            )
            game_db = DBGame(
                id=new_id,
                user_id=game.user_id,
                number=(last_number or 0) + 1,
                outcome=game.outcome,
                board_state=json.dumps(game.board_state),
                created_at=game.created_at,
                completed_at=game.completed_at,
                completed=game.completed,
            )
            self.db.add(game_db)
        self.db.refresh(game_db)
        return self._to_model(game_db), new_id

    def update_game(
        self,
        game_id: UUID,
        game: GameModel,
        stats_update: Optional[StatsUpdate] = None,
    ) -> GameModel | None:
        """
        Write new state of an existing record, together with the statistics of a finished game.

        Both land in the same transaction: either the game and the statistics are stored, or neither is.
        """
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        if game_db.version != game.version:
            logger.warning(
                "Rejected update of game %s: read at version %s, stored version is %s",
                game_id,
                game.version,
                game_db.version,
            )
            raise ConcurrencyConflictError(
                f"Game {game_id} was changed by another request. Reload and try again."
            )

        with self._transaction():
            game_db.outcome = game.outcome
            game_db.board_state = json.dumps(game.board_state)
            game_db.completed_at = game.completed_at
            game_db.completed = game.completed
            if stats_update is not None:
                self._record_completion(stats_update)
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def list_games(self, user_id: str, limit: int) -> list[tuple[UUID, GameModel]]:
        """Most recent games of a user first."""
        query = (
            select(DBGame)
            .where(DBGame.user_id == user_id)
            .order_by(DBGame.created_at.desc(), DBGame.number.desc())
            .limit(limit)
        )
        return [(game_db.id, self._to_model(game_db)) for game_db in self.db.scalars(query)]

    def get_user_stats(self, user_id: str) -> UserStats | None:
        """Statistics of a user, if the user exists."""
        user_db = self.db.get(DBUser, user_id)
        if user_db is None:
            return None
        return UserStats(wins=user_db.wins, games_played=user_db.games_played)

    def create_user(self, username: str) -> str:
        """
        Register a user and return the new user ID.

        ---
        NOTE: Users belong to the authentication side of the application. This is only here to bootstrap a database (and for tests).
        """
        user_id = str(uuid4())
        with self._transaction():
            self.db.add(DBUser(id=user_id, username=username))
        return user_id

    def _record_completion(self, stats_update: StatsUpdate) -> None:
        """Add a finished game to the user's counters (does not commit)."""
        user_db = self._fetch_user(stats_update.user_id)
        if user_db is None:
            raise GameNotFoundError(f"User {stats_update.user_id!r} not found.")

        stats = UserStats(wins=user_db.wins, games_played=user_db.games_played)
        stats.record_completion(stats_update.won)
        user_db.wins = stats.wins
        user_db.games_played = stats.games_played

    @contextmanager
    def _transaction(self) -> Iterator[None]:
        """Commit everything done inside the block, or roll all of it back."""
        try:
            yield
            self.db.commit()
        except StaleDataError as exc:
            self.db.rollback()
            logger.warning("Concurrent update detected: %s", exc)
            raise ConcurrencyConflictError(
                "Game was changed by another request. Reload and try again."
            ) from exc
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("Write rejected by the database: %s", exc.orig)
            raise ConcurrencyConflictError(
                "Data was changed by another request. Reload and try again."
            ) from exc
        except (SQLAlchemyError, GameError):
            self.db.rollback()
            raise

    def _fetch_game(self, game_id: UUID) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        return self.db.scalar(query)

    def _fetch_user(self, user_id: str) -> DBUser | None:
        query = select(DBUser).where(DBUser.id == user_id).with_for_update()
        return self.db.scalar(query)

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            user_id=game_db.user_id,
            board_state=json.loads(game_db.board_state),
            outcome=game_db.outcome,
            created_at=_as_utc(game_db.created_at),
            completed_at=(
                _as_utc(game_db.completed_at) if game_db.completed_at else None
            ),
            completed=game_db.completed,
            version=game_db.version,
        )


def _as_utc(moment: datetime) -> datetime:
    """SQLite hands back naive datetimes. Everything stored here is UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment
