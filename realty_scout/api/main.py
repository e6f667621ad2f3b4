"""
FastAPI main application for Realty Scout.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging

from realty_scout import __version__
from realty_scout.api.routers import favorites, listings
from realty_scout.config.app_config import AppSettings, get_app_settings
from realty_scout.session.browse_session import BrowseSession, create_session

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup
    logger.info("Starting Realty Scout API...")
    if app.state.session is None:
        app.state.session = create_session(app.state.settings)
    logger.info(f"Catalog loaded with {len(app.state.session.catalog)} listing(s)")

    yield

    # Shutdown
    logger.info("Shutting down Realty Scout API...")


def create_app(
    session: Optional[BrowseSession] = None,
    settings: Optional[AppSettings] = None
) -> FastAPI:
    """
    Build the API application.

    Args:
        session: Pre-built session; created from settings at startup if omitted
        settings: Application settings; read from the environment if omitted
    """
    app = FastAPI(
        title="Realty Scout API",
        description="Property listing search with filters, favorites and CSV export",
        version=__version__,
        lifespan=lifespan
    )
    app.state.settings = settings or get_app_settings()
    app.state.session = session

    # CORS middleware - allow all origins for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "version": __version__
        }

    app.include_router(listings.router, tags=["listings"])
    app.include_router(favorites.router, tags=["favorites"])
    return app


app = create_app()
