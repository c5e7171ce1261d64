"""Unit tests for bearer authentication."""

import pytest
from fastapi import HTTPException

from forum.config import AuthSettings
from forum.domain.service import JWTService
from forum.interface.api.auth import authenticate


@pytest.fixture
def jwt_service():
    return JWTService(AuthSettings(jwt_secret="test-secret"))


class TestAuthenticate:
    """Tests for authenticate."""

    def test_valid_bearer_token(self, jwt_service):
        token = jwt_service.create_token("user-123", "dicoding")

        user = authenticate(jwt_service, f"Bearer {token}")

        assert user.user_id == "user-123"

    @pytest.mark.parametrize("header", [None, "", "Token abc", "Bearer not-a-jwt"])
    def test_rejects_missing_or_invalid(self, jwt_service, header):
        with pytest.raises(HTTPException) as exc_info:
            authenticate(jwt_service, header)

        assert exc_info.value.status_code == 401
