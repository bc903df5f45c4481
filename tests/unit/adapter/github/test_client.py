"""Unit tests for the GitHub OAuth clients."""

from unittest.mock import AsyncMock, patch
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

from ranker.adapter.github.client import (
    STATE_TTL_SECONDS,
    GitHubOAuthError,
    MockGitHubOAuthClient,
    RealGitHubOAuthClient,
)

_RealAsyncClient = httpx.AsyncClient


def _client_factory(handler):
    """Build AsyncClient replacements that route requests to handler."""
    return lambda *args, **kwargs: _RealAsyncClient(
        transport=httpx.MockTransport(handler)
    )


class TestRealGitHubOAuthClient:
    """Tests for RealGitHubOAuthClient."""

    @pytest.fixture
    def oauth_client(self):
        """Create OAuth client with test configuration."""
        return RealGitHubOAuthClient(
            client_id="client-123",
            client_secret="secret-456",
            redirect_uri="http://localhost:8000/auth/github/callback",
        )


class TestInitiateAuthorization(TestRealGitHubOAuthClient):
    """Tests for initiate_authorization method."""

    @pytest.mark.asyncio
    async def test_builds_authorize_url(self, oauth_client):
        """The URL targets GitHub with client id, callback, scope and state."""
        url = await oauth_client.initiate_authorization("state-abc")

        parts = urlsplit(url)
        params = parse_qs(parts.query)
        assert f"{parts.scheme}://{parts.netloc}{parts.path}" == (
            "https://github.com/login/oauth/authorize"
        )
        assert params["client_id"] == ["client-123"]
        assert params["redirect_uri"] == ["http://localhost:8000/auth/github/callback"]
        assert params["scope"] == ["read:user"]
        assert params["state"] == ["state-abc"]


class TestCompleteAuthorization(TestRealGitHubOAuthClient):
    """Tests for complete_authorization method."""

    @pytest.mark.asyncio
    async def test_unknown_state_is_rejected(self, oauth_client):
        """States not issued by this client are refused before any request."""
        with patch.object(
            oauth_client, "_exchange_code_for_token", new_callable=AsyncMock
        ) as mock_exchange:
            with pytest.raises(GitHubOAuthError, match="state"):
                await oauth_client.complete_authorization("code", "forged")

            mock_exchange.assert_not_called()

    @pytest.mark.asyncio
    async def test_maps_profile_to_assertion(self, oauth_client):
        """The GitHub profile becomes a provider assertion."""
        await oauth_client.initiate_authorization("state-abc")

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/login/oauth/access_token":
                assert request.headers["accept"] == "application/json"
                return httpx.Response(200, json={"access_token": "gho_token"})
            assert request.headers["authorization"] == "Bearer gho_token"
            return httpx.Response(
                200, json={"id": 583231, "login": "octocat", "name": "The Octocat"}
            )

        with patch("httpx.AsyncClient", side_effect=_client_factory(handler)):
            assertion = await oauth_client.complete_authorization(
                "code-1", "state-abc"
            )

        assert assertion == {
            "provider": "github",
            "uid": "583231",
            "nickname": "octocat",
            "display_name": "The Octocat",
        }

    @pytest.mark.asyncio
    async def test_state_is_single_use(self, oauth_client):
        """A state cannot be replayed."""
        await oauth_client.initiate_authorization("state-abc")

        with (
            patch.object(
                oauth_client, "_exchange_code_for_token", new_callable=AsyncMock
            ) as mock_exchange,
            patch.object(
                oauth_client, "_get_user_info", new_callable=AsyncMock
            ) as mock_user_info,
        ):
            mock_exchange.return_value = "gho_token"
            mock_user_info.return_value = {"id": 1, "login": "ghost", "name": None}

            await oauth_client.complete_authorization("code-1", "state-abc")

            with pytest.raises(GitHubOAuthError):
                await oauth_client.complete_authorization("code-1", "state-abc")

    @pytest.mark.asyncio
    async def test_token_error_in_200_response(self, oauth_client):
        """GitHub reports bad codes with a 200 and an error field."""
        await oauth_client.initiate_authorization("state-abc")

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"error": "bad_verification_code"})

        with patch("httpx.AsyncClient", side_effect=_client_factory(handler)):
            with pytest.raises(GitHubOAuthError, match="bad_verification_code"):
                await oauth_client.complete_authorization("stale", "state-abc")

    @pytest.mark.asyncio
    async def test_user_info_failure(self, oauth_client):
        """A failed profile request raises GitHubOAuthError."""
        await oauth_client.initiate_authorization("state-abc")

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/login/oauth/access_token":
                return httpx.Response(200, json={"access_token": "gho_token"})
            return httpx.Response(401, json={"message": "Bad credentials"})

        with patch("httpx.AsyncClient", side_effect=_client_factory(handler)):
            with pytest.raises(GitHubOAuthError, match="401"):
                await oauth_client.complete_authorization("code-1", "state-abc")

    @pytest.mark.asyncio
    async def test_expired_state_is_rejected(self, oauth_client):
        """A login abandoned past the state TTL cannot be completed later."""
        oauth_client._clock = lambda: 1000.0
        await oauth_client.initiate_authorization("state-abc")

        oauth_client._clock = lambda: 1000.0 + STATE_TTL_SECONDS + 1
        with patch.object(
            oauth_client, "_exchange_code_for_token", new_callable=AsyncMock
        ) as mock_exchange:
            with pytest.raises(GitHubOAuthError, match="state"):
                await oauth_client.complete_authorization("code", "state-abc")

            mock_exchange.assert_not_called()

    @pytest.mark.asyncio
    async def test_abandoned_states_are_dropped(self, oauth_client):
        """Starting a new login discards states that have expired."""
        oauth_client._clock = lambda: 1000.0
        for i in range(5):
            await oauth_client.initiate_authorization(f"abandoned-{i}")

        oauth_client._clock = lambda: 1000.0 + STATE_TTL_SECONDS + 1
        await oauth_client.initiate_authorization("fresh")

        assert list(oauth_client._pending_states) == ["fresh"]


class TestMockGitHubOAuthClient:
    """Tests for the canned client used by the test container."""

    @pytest.mark.asyncio
    async def test_mock_flow(self):
        client = MockGitHubOAuthClient()

        url = await client.initiate_authorization("s")
        assertion = await client.complete_authorization("any", "s")

        assert "mock=true" in url
        assert assertion["nickname"] == "octocat"

    @pytest.mark.asyncio
    async def test_mock_failure_code(self):
        with pytest.raises(GitHubOAuthError):
            await MockGitHubOAuthClient().complete_authorization("bad-code", "s")
