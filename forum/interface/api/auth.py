"""Bearer token authentication for mutating routes."""

from fastapi import HTTPException, status

from forum.domain.service import AuthenticatedUser, JWTService
from forum.util.jwt import JWTError

BEARER_PREFIX = "Bearer "


def authenticate(jwt_service: JWTService, authorization: str | None) -> AuthenticatedUser:
    """Resolve the caller from an ``Authorization: Bearer <jwt>`` header.

    Args:
        jwt_service: JWT service for token verification
        authorization: Raw Authorization header value

    Returns:
        The authenticated user

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authentication",
        )
    try:
        return jwt_service.verify_token(authorization[len(BEARER_PREFIX) :])
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        ) from e
