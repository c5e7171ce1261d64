"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from forum.config import AuthSettings
from forum.domain.service import JWTService
from forum.util.jwt import JWTError


@pytest.fixture
def auth_settings():
    return AuthSettings(jwt_secret="test-secret", jwt_expiry_minutes=5)


@pytest.fixture
def jwt_service(auth_settings):
    return JWTService(auth_settings=auth_settings)


class TestJWTService:
    """Tests for JWTService."""

    def test_token_round_trip_yields_user(self, jwt_service):
        """A freshly minted token should verify to the same user."""
        # Arrange
        token = jwt_service.create_token("user-123", "dicoding")

        # Act
        user = jwt_service.verify_token(token)

        # Assert
        assert user.user_id == "user-123"
        assert user.username == "dicoding"

    def test_expired_token_raises(self, jwt_service, auth_settings):
        token = jwt.encode(
            {
                "id": "user-123",
                "username": "dicoding",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)

    def test_token_signed_with_other_secret_raises(self, jwt_service):
        other = JWTService(AuthSettings(jwt_secret="another-secret"))
        token = other.create_token("user-123", "dicoding")

        with pytest.raises(JWTError, match="Invalid token"):
            jwt_service.verify_token(token)

    def test_payload_without_username_is_malformed(self, jwt_service, auth_settings):
        token = jwt.encode(
            {
                "id": "user-123",
                "exp": datetime.now(timezone.utc) + timedelta(minutes=1),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="Malformed"):
            jwt_service.verify_token(token)

    def test_mistyped_claim_is_malformed(self, jwt_service, auth_settings):
        token = jwt.encode(
            {
                "id": "user-123",
                "username": 42,
                "exp": datetime.now(timezone.utc) + timedelta(minutes=1),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="Malformed"):
            jwt_service.verify_token(token)

    def test_garbage_is_invalid(self, jwt_service):
        with pytest.raises(JWTError, match="Invalid token"):
            jwt_service.verify_token("not-a-jwt")
