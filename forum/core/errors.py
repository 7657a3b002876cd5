# forum/core/errors.py

from fastapi import status


class ForumError(Exception):
    """Base class for errors surfaced by the forum core.

    Each subclass carries the HTTP status the handler layer answers with.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(ForumError):
    """Malformed input or a referenced entity that does not exist."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ForumError):
    """A uniqueness rule would be violated."""

    status_code = status.HTTP_409_CONFLICT


class AuthError(ForumError):
    """Bad credentials or a missing session."""

    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidSessionError(AuthError):
    """No user holds the presented session token."""


class PersistenceError(ForumError):
    """A store write failed."""


class QueryError(ForumError):
    """An aggregation read failed."""


class HashingError(ForumError):
    """The password hashing backend failed."""


class MismatchError(AuthError):
    """The password does not match the stored digest."""
