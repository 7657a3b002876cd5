# forum/core/dependencies.py

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from forum.core.config import Settings, get_settings
from forum.core.errors import AuthError
from forum.core.session import SessionContext, SessionRegistry, read_cached_user
from forum.database import get_db
from forum.schemas.user import CachedUser


def get_session_registry(db: Session = Depends(get_db)) -> SessionRegistry:
    return SessionRegistry(db)


def get_session_context(
    request: Request,
    registry: SessionRegistry = Depends(get_session_registry),
    settings: Settings = Depends(get_settings),
) -> SessionContext:
    """Validate the session cookie of a protected request"""
    token = request.cookies.get(settings.session_cookie_name)
    user_id = registry.validate(token)
    cached_user = read_cached_user(request.cookies.get(settings.user_cookie_name), settings)
    return SessionContext(user_id=user_id, token=token, cached_user=cached_user)


def get_cached_user(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> CachedUser:
    """User cookie snapshot, for display only"""
    cached_user = read_cached_user(request.cookies.get(settings.user_cookie_name), settings)
    if cached_user is None:
        raise AuthError("User not authenticated")
    return cached_user
