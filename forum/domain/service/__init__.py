"""Domain services."""

from .jwt_service import AuthenticatedUser, JWTService

__all__ = [
    "AuthenticatedUser",
    "JWTService",
]
