"""JWT access tokens.

A token carries the user id in the ``user_id`` claim and expires after
ACCESS_TOKEN_EXPIRE_MINUTES.
"""
import os
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from core.errors import InvalidTokenError

JWT_SECRET = os.environ.get("JWT_SECRET", "dev-secret-change")
JWT_ALGORITHM = os.environ.get("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24 * 7))

USER_ID_CLAIM = "user_id"


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    claims = {USER_ID_CLAIM: user_id, "exp": expire}
    return jwt.encode(claims, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> int:
    """Return the user id in ``token``; raise InvalidTokenError otherwise."""
    if not token or not token.strip():
        raise InvalidTokenError(token)
    try:
        claims = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        raise InvalidTokenError(token) from e

    user_id = claims.get(USER_ID_CLAIM)
    # bool is an int subclass; a JSON true must not resolve to user 1
    if type(user_id) is not int:
        raise InvalidTokenError(token)
    return user_id
