"""FastAPI application: wires the routers, the error handlers, logging and the database together."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from src.api.errors import register_exception_handlers
from src.api.routes import games_router, users_router
from src.core.config import get_settings
from src.core.logging_config import configure_logging
from src.db.database import init_db


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    init_db()
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Tic Tac Toe Backend",
        description="Play tic-tac-toe against the computer. Games and statistics are stored per user.",
        version="0.1.0",
        lifespan=lifespan,
    )
    register_exception_handlers(app)
    app.include_router(games_router)
    app.include_router(users_router)

    @app.get("/", tags=["Health"])
    def health_check() -> dict[str, str]:
        """Health Check endpoint for backend"""
        return {"message": "Healthy"}

    return app


app = create_app()
