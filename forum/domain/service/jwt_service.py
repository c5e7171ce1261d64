"""Authentication boundary: turns a bearer token into a verified user."""

import logfire
from pydantic import BaseModel

from forum.config import AuthSettings
from forum.domain.value import UserId
from forum.util.jwt import JWTError, create_token, verify_token


class AuthenticatedUser(BaseModel):
    """Verified identity handed to mutating use cases.

    Only ``user_id`` reaches storage; display names are always read back
    through the users table. ``username`` is kept so the identity has the
    same `{userId, username}` shape the authentication service issues.
    """

    user_id: UserId
    username: str


class JWTService:
    """Issues and checks access tokens with the configured secret.

    Issuing exists for collaborators (the authentication service, tests);
    the forum itself only verifies.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str) -> str:
        """Sign a token for the user."""
        return create_token(user_id, username, self.auth_settings)

    def verify_token(self, token: str) -> AuthenticatedUser:
        """Resolve the user a token was issued to.

        Args:
            token: Encoded JWT

        Returns:
            The authenticated user

        Raises:
            JWTError: If the token is invalid, expired or malformed
        """
        try:
            payload = verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Rejected access token", error=str(e))
            raise
        return AuthenticatedUser(user_id=UserId(payload.id), username=payload.username)
