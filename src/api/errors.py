"""Translate the custom exceptions into HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.core.exceptions import (
    ConcurrencyConflictError,
    GameCompletedError,
    GameError,
    GameNotFoundError,
    GameStateError,
    IllegalMoveError,
    InvalidRequestError,
)

logger = logging.getLogger(__name__)

# Looked up along the exception's class hierarchy, so subclasses inherit the code of their parent
ERROR_STATUS_CODES: dict[type[GameError], int] = {
    GameNotFoundError: 404,
    GameCompletedError: 409,
    ConcurrencyConflictError: 409,
    IllegalMoveError: 400,
    InvalidRequestError: 422,
    GameStateError: 500,
    GameError: 400,
}


def status_code_for(exc: GameError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[error_type]
    return 400


async def handle_game_error(request: Request, exc: GameError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GameError, handle_game_error)  # type: ignore[arg-type]
