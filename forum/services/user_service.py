# forum/services/user_service.py

import logging
from typing import Optional, Tuple
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from forum.core.auth import get_password_hash, verify_password
from forum.core.errors import AuthError, ConflictError, MismatchError, PersistenceError
from forum.core.session import SessionRegistry, new_session_token
from forum.models.user import UserModel
from forum.schemas.user import CachedUser, UserRegister, UserLogin

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class UserService:

    def __init__(self, db: Session, registry: Optional[SessionRegistry] = None):
        self.db = db
        self.registry = registry or SessionRegistry(db)

    def get_user_by_email(self, email: str) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.email == email)
        return self.db.execute(stmt).scalar_one_or_none()

    def register(self, user_data: UserRegister) -> Tuple[CachedUser, str]:
        """Create a user together with its first session.

        The token is written by the same INSERT as the user row, so a failed
        registration leaves neither behind. Returns the user snapshot and the
        session token.
        """
        # hash before touching the store so a hashing failure leaves no row behind
        password_hash = get_password_hash(user_data.password)
        token = new_session_token()

        try:
            # duplicate email
            if self.get_user_by_email(user_data.email):
                logger.warning("Registration rejected: email already registered")
                raise ConflictError("Email already exists")

            user_model = UserModel(
                username=user_data.username,
                email=user_data.email,
                password_hash=password_hash,
                session_id=token,
            )
            self.db.add(user_model)
            self.db.commit()
            self.db.refresh(user_model)
        except IntegrityError as e:
            # a concurrent registration won the race on the unique index
            self.db.rollback()
            logger.warning("Registration rejected by unique constraint")
            raise ConflictError("Username or email already exists") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to register user: {e.__class__.__name__}") from e

        logger.info("Registered user_id=%s username=%s", user_model.user_id, user_model.username)
        return self._build_cached_user(user_model), token

    def login(self, login_data: UserLogin) -> Tuple[CachedUser, str]:
        """Check credentials and return the user's session, issuing one if absent"""
        try:
            user_model = self.get_user_by_email(login_data.email)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to load user: {e.__class__.__name__}") from e

        if user_model is None:
            raise AuthError(INVALID_CREDENTIALS)
        try:
            verify_password(login_data.password, user_model.password_hash)
        except MismatchError as e:
            logger.warning("Login rejected for user_id=%s", user_model.user_id)
            raise AuthError(INVALID_CREDENTIALS) from e

        token = self.registry.ensure(user_model.user_id, user_model.session_id)
        return self._build_cached_user(user_model), token

    def _build_cached_user(self, user_model: UserModel) -> CachedUser:
        return CachedUser(id=user_model.user_id, username=user_model.username, email=user_model.email)
