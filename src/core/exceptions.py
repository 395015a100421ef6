"""
Custom exceptions shared by all layers.

Every exception raised on purpose derives from GameError, so the API layer can catch a single type
and translate it into a response.
"""


class GameError(Exception):
    """Top-level exception for anything that goes wrong while playing or storing a game."""


class InvalidRequestError(GameError):
    """Request data could not be interpreted."""


class GameStateError(GameError):
    """Stored game data is inconsistent (unknown outcome, malformed board, ...)."""


class IllegalMoveError(GameError):
    """The requested move is not allowed on the current board."""


class OutOfRangeError(IllegalMoveError):
    """Cell index outside of the board."""


class CellOccupiedError(IllegalMoveError):
    """Cell already holds a mark."""


class GameCompletedError(GameError):
    """The game has ended, no more moves are accepted."""


class RepositoryError(GameError):
    """Persistence layer could not fulfill the request."""


class GameNotFoundError(RepositoryError):
    """
    Unknown game ID, or the game belongs to somebody else.

    NOTE both cases raise the same error on purpose: callers must not learn whether another user's game exists.
    """


class ConcurrencyConflictError(RepositoryError):
    """Another request updated the same game first."""
