# forum/core/auth.py

from passlib.context import CryptContext
from forum.core.errors import HashingError, MismatchError, ValidationError

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt only looks at the first 72 bytes of a secret
BCRYPT_MAX_BYTES = 72


def _too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > BCRYPT_MAX_BYTES


def get_password_hash(password: str) -> str:
    """Hash a password with a per-call salt"""
    if _too_long(password):
        raise ValidationError(f"Password longer than {BCRYPT_MAX_BYTES} bytes")
    try:
        return pwd_context.hash(password)
    except (ValueError, TypeError) as e:
        raise HashingError(f"Could not hash password: {e.__class__.__name__}") from e


def verify_password(plain_password: str, hashed_password: str) -> None:
    """Check a password against its digest, raising MismatchError on failure"""
    if _too_long(plain_password):
        raise MismatchError("Password does not match")
    try:
        matched = pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        raise MismatchError("Password does not match") from e
    if not matched:
        raise MismatchError("Password does not match")
