"""
Request dependencies shared by the API routers.
"""

from fastapi import HTTPException, Request

from realty_scout.config.app_config import AppSettings
from realty_scout.session.browse_session import BrowseSession


def get_browse_session(request: Request) -> BrowseSession:
    """Session created at startup and held on the application state"""
    session = getattr(request.app.state, "session", None)
    if session is None:
        raise HTTPException(status_code=503, detail="Catalog not loaded")
    return session


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings
