"""Bearer credential encoding and decoding.

Two schemes are supported. ``simple`` is the placeholder ``simple-token-<id>``
string, which carries no confidentiality or tamper resistance. ``jwt`` signs an
access token with python-jose. Both expose the same contract: an opaque string
that maps back to a user id.
"""
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt

from ..config import settings
from ..core.exceptions import InvalidCredentialError, NotAuthenticatedError
from ..core.logger import logger
from ..database.base import MAX_ID

BEARER_PREFIX = "Bearer "
MAX_ID_DIGITS = len(str(MAX_ID))
SIMPLE_TOKEN_PREFIX = "simple-token-"

TOKEN_ISSUER = "tracker-auth"
TOKEN_AUDIENCE = "tracker-app"


def _parse_user_id(value: str) -> int:
    if not value or not value.isascii() or not value.isdigit():
        raise InvalidCredentialError()
    if len(value) > MAX_ID_DIGITS:
        raise InvalidCredentialError()
    user_id = int(value)
    if user_id <= 0 or user_id > MAX_ID:
        raise InvalidCredentialError()
    return user_id


def create_simple_token(user_id: int) -> str:
    return f"{SIMPLE_TOKEN_PREFIX}{user_id}"


def verify_simple_token(token: str) -> int:
    if not token.startswith(SIMPLE_TOKEN_PREFIX):
        raise InvalidCredentialError()
    return _parse_user_id(token[len(SIMPLE_TOKEN_PREFIX):])


def create_access_token(user_id: int, expires_minutes: Optional[int] = None) -> str:
    if expires_minutes is None:
        expires_minutes = settings.ACCESS_TOKEN_EXPIRE_MINUTES
    now = datetime.now(timezone.utc)
    expire = now + timedelta(minutes=expires_minutes)

    payload = {
        "sub": str(user_id),
        "exp": expire,
        "iat": now,
        "jti": secrets.token_urlsafe(16),
        "type": "access",
        "iss": TOKEN_ISSUER,
        "aud": TOKEN_AUDIENCE,
    }

    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_access_token(token: str) -> int:
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
            issuer=TOKEN_ISSUER,
            audience=TOKEN_AUDIENCE,
        )
    except JWTError as e:
        logger.warning(f"JWT decoding error: {e}")
        raise InvalidCredentialError()

    if payload.get("type") != "access":
        raise InvalidCredentialError()
    return _parse_user_id(str(payload.get("sub", "")))


def issue_token(user_id: int, scheme: Optional[str] = None) -> str:
    scheme = scheme or settings.AUTH_TOKEN_SCHEME
    if scheme == "jwt":
        return create_access_token(user_id)
    return create_simple_token(user_id)


def authenticate(authorization: Optional[str], scheme: Optional[str] = None) -> int:
    """Resolve an ``Authorization`` header value to a user id.

    Raises ``NotAuthenticatedError`` when the header is absent and
    ``InvalidCredentialError`` for any other shape.
    """
    if authorization is None or not authorization.strip():
        raise NotAuthenticatedError()
    if not authorization.startswith(BEARER_PREFIX):
        raise InvalidCredentialError()

    token = authorization[len(BEARER_PREFIX):]
    scheme = scheme or settings.AUTH_TOKEN_SCHEME
    if scheme == "jwt":
        return verify_access_token(token)
    return verify_simple_token(token)
