"""Domain service providers."""

from dishka import Scope, provide

from forum.config import AuthSettings
from forum.domain.service import JWTService
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services, stateless and cheap to build per request."""

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        return JWTService(auth_settings=auth_settings)
