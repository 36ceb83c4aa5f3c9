"""FastAPI application for the playsketch classifier."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from playsketch import __version__
from playsketch.api.routers import classify_router
from playsketch.config import get_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    config = get_config()
    logger.info(
        f"playsketch API starting up (center_x={config.center_x}, "
        f"line_of_scrimmage={config.line_of_scrimmage})"
    )
    yield
    logger.info("playsketch API shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="playsketch API",
        description="Drawn play-diagram path classification",
        version=__version__,
        lifespan=lifespan,
    )

    # Configure CORS for the diagram editor
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

    app.include_router(classify_router, prefix="/api/v1")

    @app.get("/")
    async def root() -> dict:
        """Root endpoint - API info."""
        return {
            "name": "playsketch API",
            "version": __version__,
            "description": "Drawn play-diagram path classification",
            "docs": "/docs",
        }

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        return {"status": "healthy", "config_errors": get_config().validate()}

    return app


# Create app instance
app = create_app()


def run_api(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Run the API server."""
    uvicorn.run(
        "playsketch.api.main:app",
        host=host,
        port=port,
        reload=reload,
    )
