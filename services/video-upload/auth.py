"""Bearer token extraction and JWT validation."""

from datetime import datetime, timedelta, timezone
from typing import Mapping
from uuid import UUID

from jose import JWTError, jwt

from exceptions import InvalidCredentialsError, MissingCredentialsError

TOKEN_ISSUER = "tubely-access"
JWT_ALGORITHM = "HS256"


def get_bearer_token(headers: Mapping[str, str]) -> str:
    """
    Extracts the token from an ``Authorization: Bearer <token>`` header.

    Raises:
        MissingCredentialsError: If the header is absent or not a bearer token.
    """
    authorization = headers.get("authorization") or headers.get("Authorization")
    if not authorization:
        raise MissingCredentialsError()

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise MissingCredentialsError("Malformed Authorization header")
    return token


def validate_jwt(token: str, secret: str) -> UUID:
    """
    Validates an access token and returns the user id in its subject.

    Raises:
        InvalidCredentialsError: If the signature, issuer, expiry or subject is bad.
    """
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[JWT_ALGORITHM],
            issuer=TOKEN_ISSUER,
        )
        return UUID(claims["sub"])
    except (JWTError, KeyError, ValueError, TypeError) as e:
        raise InvalidCredentialsError(e) from e


def make_jwt(user_id: UUID, secret: str, expires_in: timedelta) -> str:
    """Issues an access token for a user."""
    now = datetime.now(timezone.utc)
    claims = {
        "iss": TOKEN_ISSUER,
        "sub": str(user_id),
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(claims, secret, algorithm=JWT_ALGORITHM)
