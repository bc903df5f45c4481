"""Configuration providers. These are never mocked; tests override via env."""

from dishka import Scope, provide

from ranker.config import AuthSettings, Settings
from ranker.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Loads Settings once per container and exposes the auth section."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Auth section, needed on its own by the JWT service."""
        return settings.auth
