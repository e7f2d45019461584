"""FastAPI application serving client-safe player views."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prospect import __version__
from prospect.api.routers import players_router, teams_router
from prospect.api.services.player_store import get_player_store
from prospect.config import get_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    config = get_config()
    for error in config.validate():
        logger.warning(f"Config: {error}")
    logger.info("Prospect API starting up...")
    yield
    logger.info("Prospect API shutting down...")
    get_player_store().clear()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Prospect API",
        description="Player generation with scouting uncertainty",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://127.0.0.1:3000",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(players_router, prefix="/api/v1")
    app.include_router(teams_router, prefix="/api/v1")

    @app.get("/")
    async def root() -> dict:
        """Root endpoint - API info."""
        return {
            "name": "Prospect API",
            "version": __version__,
            "description": "Player generation with scouting uncertainty",
            "docs": "/docs",
        }

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        store = get_player_store()
        return {
            "status": "healthy",
            "players": store.player_count,
            "rosters": store.roster_count,
        }

    return app


app = create_app()


def run_api(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Run the API server."""
    uvicorn.run(
        "prospect.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    run_api(reload=True)
