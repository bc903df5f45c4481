"""Authentication domain service."""

from typing import Any

from ranker.domain.value import AuthProvider, FederatedIdentity

from .base import Service
from .identity_service import IdentityService


class OAuthClient:
    """Generic OAuth client interface for all providers."""

    async def initiate_authorization(self, state: str) -> str:
        """Initiate OAuth authorization flow.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        raise NotImplementedError

    async def complete_authorization(self, code: str, state: str) -> dict[str, Any]:
        """Complete OAuth authorization flow.

        Args:
            code: Authorization code from OAuth callback
            state: State parameter for verification

        Returns:
            Raw identity assertion (provider, uid, nickname, display_name)
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for federated authentication.

    Dispatches to the OAuth client registered for each provider and
    validates what the provider hands back.
    """

    def __init__(
        self,
        oauth_clients: dict[AuthProvider, OAuthClient],
        identity_service: IdentityService,
    ) -> None:
        """Initialize auth service.

        Args:
            oauth_clients: Map of provider to OAuth client implementation
            identity_service: Identity assertion validation
        """
        self.oauth_clients = oauth_clients
        self.identity_service = identity_service

    def _client(self, provider: AuthProvider) -> OAuthClient:
        client = self.oauth_clients.get(provider)
        if not client:
            raise ValueError(f"Unsupported provider: {provider}")
        return client

    async def initiate_login(self, provider: AuthProvider, state: str) -> str:
        """Initiate OAuth login flow.

        Args:
            provider: Identity provider to use
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to

        Raises:
            ValueError: If provider not supported
        """
        return await self._client(provider).initiate_authorization(state)

    async def complete_login(
        self, provider: AuthProvider, code: str, state: str
    ) -> FederatedIdentity:
        """Complete OAuth login flow.

        Args:
            provider: Identity provider used
            code: Authorization code from OAuth callback
            state: State parameter for verification

        Returns:
            Validated identity assertion

        Raises:
            ValueError: If provider not supported
            ValidationError: If the provider's assertion is malformed
        """
        assertion = await self._client(provider).complete_authorization(code, state)
        return self.identity_service.parse_assertion(assertion)
