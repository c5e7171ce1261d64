"""Settings and ambient collaborators: id suffixes and the clock."""

from datetime import datetime, timezone
from uuid import uuid4

from dishka import Scope, provide

from forum.config import AuthSettings, Settings
from forum.domain.value import Clock, IdGenerator
from forum.util.di.base import ProviderBase


def random_suffix() -> str:
    return uuid4().hex[:16]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProdConfigProvider(ProviderBase):
    """Application-wide values, built once per container."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Read settings from the environment and ``.env``."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_id_generator(self) -> IdGenerator:
        return random_suffix

    @provide
    def provide_clock(self) -> Clock:
        return utc_now
