"""Access token encoding and decoding (PyJWT)."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from forum.config import AuthSettings

REQUIRED_CLAIMS = ["id", "username", "exp"]


class JWTError(Exception):
    """Token could not be decoded into a usable identity."""


class TokenPayload(BaseModel):
    """Claims carried by an access token."""

    id: str
    username: str
    exp: datetime


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Sign an access token for the user, expiring after the configured window."""
    expires_at = datetime.now(timezone.utc) + timedelta(
        minutes=settings.jwt_expiry_minutes
    )
    claims = {"id": user_id, "username": username, "exp": expires_at}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode and check an access token.

    Raises:
        JWTError: If the signature is wrong, the token has expired, or a
            required claim is absent or mistyped
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.MissingRequiredClaimError as e:
        raise JWTError(f"Malformed token payload: missing {e.claim}") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except PydanticValidationError as e:
        raise JWTError("Malformed token payload") from e
