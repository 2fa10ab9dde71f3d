"""
Password hashing and access-token helpers.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from werkzeug.security import generate_password_hash, check_password_hash

from healthwallet.core.config import Settings

__all__ = [
    "JWTError",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
]


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return check_password_hash(password_hash, password)


def create_access_token(
    user_id: int,
    email: str,
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Issue a signed token identifying a user.

    Args:
        user_id: Primary key of the user (stored as the ``sub`` claim)
        email: User email, carried for convenience
        settings: Application settings holding the signing key
        expires_delta: Lifetime override; defaults to ``jwt_expire_minutes``

    Returns:
        Encoded JWT string
    """
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expire_minutes)
    payload = {
        "sub": str(user_id),
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> int:
    """
    Verify a token and return the user id it was issued for.

    Raises:
        JWTError: signature, expiry or claim problems
    """
    payload = jwt.decode(
        token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
    )
    subject = payload.get("sub")
    if subject is None:
        raise JWTError("Token has no subject")
    try:
        return int(subject)
    except (TypeError, ValueError):
        raise JWTError("Token subject is not a user id")
