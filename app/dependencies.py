# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# The store, mirror and settings live on app.state (see app/main.py), so
# each app instance has its own and tests never share state.
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from core.services import UserMirror, UserStore


def get_user_store(request: Request) -> UserStore:
    """Get the UserStore owned by this app."""
    return request.app.state.user_store


def get_user_mirror(request: Request) -> UserMirror:
    """Get the UserMirror owned by this app."""
    return request.app.state.user_mirror


def get_app_settings(request: Request) -> Settings:
    """Get the settings the app was created with."""
    return request.app.state.settings


# Type aliases for dependency injection
UserStoreDep = Annotated[UserStore, Depends(get_user_store)]
UserMirrorDep = Annotated[UserMirror, Depends(get_user_mirror)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
