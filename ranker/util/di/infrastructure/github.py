"""GitHub infrastructure providers."""

from dishka import Scope, provide

from ranker.adapter.github.client import GitHubOAuthClient, RealGitHubOAuthClient
from ranker.config import Settings
from ranker.util.di.base import ProviderBase


class GitHubProvider(ProviderBase):
    """GitHub component base."""

    __mock_component__ = "github"


class ProdGitHubProvider(GitHubProvider):
    """Production GitHub provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_github_oauth_client(self, settings: Settings) -> GitHubOAuthClient:
        """Provide GitHub OAuth client.

        Returns:
            GitHub OAuth client

        Raises:
            ValueError: If GitHub OAuth credentials are not configured
        """
        if not settings.auth.github.client_id:
            raise ValueError("GitHub OAuth client ID must be configured")
        if not settings.auth.github.client_secret:
            raise ValueError("GitHub OAuth client secret must be configured")

        return RealGitHubOAuthClient(
            client_id=settings.auth.github.client_id,
            client_secret=settings.auth.github.client_secret,
            redirect_uri=settings.auth.github_callback_url,
        )
