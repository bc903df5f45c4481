"""Unit tests for IdentityService and AuthService."""

import pytest

from ranker.adapter.github import GitHubOAuthError
from ranker.domain.error import ValidationError
from ranker.domain.service import AuthService, IdentityService
from ranker.domain.value import AuthProvider, FederatedIdentity
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestParseAssertion:
    """Tests for IdentityService.parse_assertion."""

    def test_valid_assertion(self):
        """A complete assertion becomes a FederatedIdentity."""
        identity = IdentityService().parse_assertion(
            {
                "provider": "github",
                "uid": "583231",
                "nickname": "octocat",
                "display_name": "The Octocat",
            }
        )

        assert identity.provider == AuthProvider.GITHUB
        assert identity.uid == "583231"
        assert identity.nickname == "octocat"

    def test_display_name_is_optional(self):
        """Providers may omit the display name."""
        identity = IdentityService().parse_assertion(
            {"provider": "github", "uid": "1", "nickname": "ghost"}
        )

        assert identity.display_name is None

    @pytest.mark.parametrize(
        "assertion, bad_field",
        [
            ({"provider": "github", "nickname": "octocat"}, "uid"),
            ({"provider": "github", "uid": "1", "nickname": ""}, "nickname"),
            ({"provider": "github", "uid": "  ", "nickname": "octocat"}, "uid"),
            ({"provider": "gitlab", "uid": "1", "nickname": "octocat"}, "provider"),
        ],
    )
    def test_malformed_assertion_names_the_field(self, assertion, bad_field):
        """Missing or blank fields are reported by name."""
        with pytest.raises(ValidationError, match=bad_field):
            IdentityService().parse_assertion(assertion)


class TestResolveFromFederatedIdentity:
    """Tests for IdentityService.resolve_from_federated_identity."""

    def test_builds_unsaved_user(self):
        """Nickname becomes the username; provider data is carried over."""
        identity = FederatedIdentity(
            provider=AuthProvider.GITHUB,
            uid="583231",
            nickname="octocat",
            display_name="The Octocat",
        )

        user = IdentityService().resolve_from_federated_identity(identity)

        assert user.username.root == "octocat"
        assert user.provider == AuthProvider.GITHUB
        assert user.uid == "583231"
        assert user.name == "The Octocat"
        assert user.created_at.tzinfo is not None

    def test_overlong_nickname_is_rejected(self):
        """Nicknames must also be valid usernames."""
        identity = FederatedIdentity(
            provider=AuthProvider.GITHUB, uid="1", nickname="x" * 300
        )

        with pytest.raises(ValidationError):
            IdentityService().resolve_from_federated_identity(identity)


class TestAuthService:
    """Tests for AuthService against the mock GitHub client."""

    @pytest.mark.asyncio
    async def test_initiate_login_returns_provider_url(self, unit_env):
        """The authorization URL carries the state."""
        auth_service = await unit_env.get(AuthService)

        url = await auth_service.initiate_login(AuthProvider.GITHUB, "xyz")

        assert url.startswith("https://github.com/login/oauth/authorize")
        assert "state=xyz" in url

    @pytest.mark.asyncio
    async def test_complete_login_returns_validated_identity(self, unit_env):
        """A successful exchange yields a FederatedIdentity."""
        auth_service = await unit_env.get(AuthService)

        identity = await auth_service.complete_login(
            AuthProvider.GITHUB, "good-code", "xyz"
        )

        assert identity == FederatedIdentity(
            provider=AuthProvider.GITHUB,
            uid="583231",
            nickname="octocat",
            display_name="The Octocat",
        )

    @pytest.mark.asyncio
    async def test_complete_login_propagates_provider_errors(self, unit_env):
        """Provider failures surface as GitHubOAuthError."""
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(GitHubOAuthError):
            await auth_service.complete_login(AuthProvider.GITHUB, "bad-code", "xyz")

    @pytest.mark.asyncio
    async def test_complete_login_rejects_profile_without_login(self, unit_env):
        """A profile with a blank login is a malformed assertion."""
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError, match="nickname"):
            await auth_service.complete_login(AuthProvider.GITHUB, "no-login", "xyz")
