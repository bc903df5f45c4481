"""GitHub OAuth client implementation.

Implements the OAuth web application flow for GitHub sign-in.
"""

import time
from typing import Any
from urllib.parse import urlencode

import httpx
import logfire

from ranker.adapter.error import ProviderError
from ranker.domain.service.auth_service import OAuthClient
from ranker.domain.value import AuthProvider


class GitHubOAuthError(ProviderError):
    """GitHub OAuth error."""

    pass


# An authorization not completed within this many seconds is abandoned
STATE_TTL_SECONDS = 600


class GitHubOAuthClient(OAuthClient):
    """Base class for GitHub OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGitHubOAuthClient(GitHubOAuthClient):
    """GitHub OAuth client over the web application flow."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
    ) -> None:
        """Initialize GitHub OAuth client.

        Args:
            client_id: GitHub OAuth app client ID
            client_secret: GitHub OAuth app client secret
            redirect_uri: Callback URL registered with GitHub
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri

        # OAuth endpoints
        self.authorize_url = "https://github.com/login/oauth/authorize"
        self.token_url = "https://github.com/login/oauth/access_token"
        self.user_info_url = "https://api.github.com/user"

        # Outstanding states issued by initiate_authorization, mapped to their
        # expiry on the monotonic clock. Single process only.
        self._pending_states: dict[str, float] = {}
        self._clock = time.monotonic

    async def initiate_authorization(self, state: str) -> str:
        """Initiate GitHub OAuth authorization flow.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        self._prune_expired_states()
        self._pending_states[state] = self._clock() + STATE_TTL_SECONDS

        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": "read:user",
            "state": state,
        }

        auth_url = f"{self.authorize_url}?{urlencode(params)}"

        logfire.info(
            "GitHub OAuth authorization initiated",
            state=state,
            redirect_uri=self.redirect_uri,
        )

        return auth_url

    def _prune_expired_states(self) -> None:
        now = self._clock()
        expired = [
            state
            for state, expires_at in self._pending_states.items()
            if expires_at <= now
        ]
        for state in expired:
            del self._pending_states[state]
        if expired:
            logfire.info("Expired OAuth states dropped", count=len(expired))

    async def complete_authorization(self, code: str, state: str) -> dict[str, Any]:
        """Complete GitHub OAuth authorization flow.

        Args:
            code: Authorization code from GitHub callback
            state: State parameter for verification

        Returns:
            Raw identity assertion built from the GitHub profile

        Raises:
            GitHubOAuthError: If OAuth flow fails
        """
        self._prune_expired_states()
        if self._pending_states.pop(state, None) is None:
            raise GitHubOAuthError("Invalid or expired state")

        access_token = await self._exchange_code_for_token(code)
        user_info = await self._get_user_info(access_token)

        logfire.info(
            "GitHub OAuth completed",
            login=user_info.get("login"),
            user_id=user_info.get("id"),
        )

        # GitHub ids are integers; uid is stored as text
        uid = user_info.get("id")
        return {
            "provider": AuthProvider.GITHUB.value,
            "uid": str(uid) if uid is not None else None,
            "nickname": user_info.get("login"),
            "display_name": user_info.get("name"),
        }

    async def _exchange_code_for_token(self, code: str) -> str:
        """Exchange authorization code for access token.

        Args:
            code: Authorization code from callback

        Returns:
            Access token

        Raises:
            GitHubOAuthError: If token exchange fails
        """
        data = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "code": code,
            "redirect_uri": self.redirect_uri,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_url,
                    data=data,
                    headers={"Accept": "application/json"},
                    timeout=30.0,
                )

                if response.status_code != 200:
                    logfire.error(
                        "GitHub token exchange failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise GitHubOAuthError(
                        f"Token exchange failed: {response.status_code}"
                    )

                result = response.json()

        except httpx.HTTPError as e:
            logfire.error("GitHub token exchange HTTP error", error=str(e))
            raise GitHubOAuthError(f"HTTP error during token exchange: {e}")

        # GitHub reports OAuth errors with a 200 and an error field
        if "error" in result or "access_token" not in result:
            logfire.error(
                "GitHub token exchange rejected",
                error=result.get("error"),
                description=result.get("error_description"),
            )
            raise GitHubOAuthError(
                f"Token exchange rejected: {result.get('error', 'no access token')}"
            )

        return result["access_token"]

    async def _get_user_info(self, access_token: str) -> dict[str, Any]:
        """Get the authenticated user's profile from the GitHub API.

        Args:
            access_token: OAuth access token

        Returns:
            User information dictionary

        Raises:
            GitHubOAuthError: If API request fails
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.user_info_url,
                    headers={
                        "Authorization": f"Bearer {access_token}",
                        "Accept": "application/vnd.github+json",
                    },
                    timeout=30.0,
                )

                if response.status_code != 200:
                    logfire.error(
                        "GitHub user info request failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise GitHubOAuthError(
                        f"User info request failed: {response.status_code}"
                    )

                return response.json()

        except httpx.HTTPError as e:
            logfire.error("GitHub user info HTTP error", error=str(e))
            raise GitHubOAuthError(f"HTTP error fetching user info: {e}")


class MockGitHubOAuthClient(GitHubOAuthClient):
    """Mock GitHub OAuth client for testing.

    Returns deterministic test data without making real API calls. The
    code "bad-code" simulates a provider failure and "no-login" a profile
    without a login.
    """

    def __init__(self) -> None:
        """Initialize mock client without real OAuth configuration."""
        pass

    async def initiate_authorization(self, state: str) -> str:
        """Return mock authorization URL."""
        return f"https://github.com/login/oauth/authorize?state={state}&mock=true"

    async def complete_authorization(self, code: str, state: str) -> dict[str, Any]:
        """Return mock identity assertion.

        Raises:
            GitHubOAuthError: For the failure code
        """
        if code == "bad-code":
            raise GitHubOAuthError("Token exchange rejected: bad_verification_code")

        return {
            "provider": AuthProvider.GITHUB.value,
            "uid": "583231",
            "nickname": "" if code == "no-login" else "octocat",
            "display_name": "The Octocat",
        }
