# forum/core/session.py

"""Session tokens and the cookies that carry them.

A session is the nullable ``users.session_id`` column. Once issued a token
stays on the user row until the next login finds it empty; nothing revokes
it server side and expiry is left to the cookies.

Two cookies travel together and share one absolute expiry:

* the session cookie holds the opaque token and is the only thing consulted
  for authorization;
* the user cookie holds a signed ``{id, username, email}`` snapshot so pages
  can show who is logged in without reading the store. It is a cache and can
  be stale.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Response
from jose import JWTError, jwt
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from forum.core.config import Settings
from forum.core.errors import InvalidSessionError, PersistenceError
from forum.models.user import UserModel
from forum.schemas.user import CachedUser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionContext:
    """Identity resolved for one request.

    ``user_id`` and ``token`` come from a validated session token.
    ``cached_user`` is whatever the user cookie claimed and is not
    authoritative.
    """

    user_id: int
    token: str
    cached_user: Optional[CachedUser] = None


def new_session_token() -> str:
    return str(uuid.uuid4())


class SessionRegistry:

    def __init__(self, db: Session):
        self.db = db

    def issue(self, user_id: int, replace: bool = True) -> str:
        """Store a fresh token on the user row and return it.

        With ``replace=False`` the token is only written while the row holds
        none; when another request stored one first, that token is returned.
        """
        token = new_session_token()
        stmt = update(UserModel).where(UserModel.user_id == user_id)
        if not replace:
            stmt = stmt.where(UserModel.session_id.is_(None))
        stmt = stmt.values(session_id=token).execution_options(synchronize_session=False)
        stored = None
        try:
            changed = self.db.execute(stmt).rowcount
            if not changed:
                stored = self.db.execute(
                    select(UserModel.session_id).where(UserModel.user_id == user_id)
                ).one_or_none()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to store session: {e.__class__.__name__}") from e

        if changed:
            logger.info("Issued session for user_id=%s", user_id)
            return token
        if stored is None or not stored.session_id:
            raise PersistenceError(f"Cannot issue session: user {user_id} does not exist")
        logger.info("Kept concurrently issued session for user_id=%s", user_id)
        return stored.session_id

    def ensure(self, user_id: int, existing_token: Optional[str]) -> str:
        """Keep an existing token, issue one only when there is none"""
        if existing_token:
            return existing_token
        return self.issue(user_id, replace=False)

    def validate(self, token: Optional[str]) -> int:
        """Resolve the user holding ``token``"""
        if not token:
            raise InvalidSessionError("Session not found")
        try:
            stmt = select(UserModel.user_id).where(UserModel.session_id == token)
            user_id = self.db.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise InvalidSessionError("Invalid session") from e
        if user_id is None:
            raise InvalidSessionError("Invalid session")
        return user_id


def session_expiry(settings: Settings, now: Optional[datetime] = None) -> datetime:
    now = now or datetime.now(timezone.utc)
    return now + timedelta(minutes=settings.session_expire_minutes)


def encode_cached_user(user: CachedUser, settings: Settings, expires_at: datetime) -> str:
    claims = user.model_dump()
    claims["exp"] = expires_at
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def read_cached_user(value: Optional[str], settings: Settings) -> Optional[CachedUser]:
    """Decode the user cookie; None when missing, expired or tampered with"""
    if not value:
        return None
    try:
        claims = jwt.decode(value, settings.secret_key, algorithms=[settings.algorithm])
        return CachedUser(**claims)
    except (JWTError, SchemaValidationError):
        return None


def set_session_cookies(
    response: Response,
    token: str,
    user: CachedUser,
    settings: Settings,
    now: Optional[datetime] = None,
) -> datetime:
    """Write the session and user cookies with one shared expiry"""
    expires_at = session_expiry(settings, now)
    cookie_options = dict(
        expires=expires_at,
        path="/",
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
    )
    response.set_cookie(settings.session_cookie_name, token, **cookie_options)
    response.set_cookie(
        settings.user_cookie_name,
        encode_cached_user(user, settings, expires_at),
        **cookie_options,
    )
    return expires_at
