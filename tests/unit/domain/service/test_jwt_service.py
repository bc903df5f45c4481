"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from ranker.config import AuthSettings
from ranker.domain.service import JWTService
from ranker.util.jwt import JWTError


@pytest.fixture
def auth_settings():
    return AuthSettings(
        jwt_secret="test-secret-with-at-least-32-bytes!!", jwt_expiry_days=1
    )


class TestJWTService:
    """Tests for token creation and verification."""

    def test_round_trip(self, auth_settings):
        """A freshly issued token verifies to the same user."""
        service = JWTService(auth_settings)

        token = service.create_token("1b4e28ba-2fa1-11d2-883f-0016d3cca427", "alice")
        payload = service.verify_token(token)

        assert payload.user_id == "1b4e28ba-2fa1-11d2-883f-0016d3cca427"
        assert payload.username == "alice"
        assert payload.exp > datetime.now(timezone.utc)

    def test_wrong_secret_is_rejected(self, auth_settings):
        """Tokens signed with another key are invalid."""
        other = AuthSettings(jwt_secret="another-secret-with-at-least-32-bytes")
        token = JWTService(other).create_token("u", "a")

        with pytest.raises(JWTError, match="Invalid token"):
            JWTService(auth_settings).verify_token(token)

    def test_expired_token_is_rejected(self, auth_settings):
        """Expired tokens raise JWTError."""
        token = jwt.encode(
            {
                "user_id": "u",
                "username": "alice",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="expired"):
            JWTService(auth_settings).verify_token(token)

    def test_token_missing_claims_is_rejected(self, auth_settings):
        """A correctly signed token without a user_id is still invalid."""
        token = jwt.encode(
            {"exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            auth_settings.jwt_secret,
            algorithm=auth_settings.jwt_algorithm,
        )

        with pytest.raises(JWTError):
            JWTService(auth_settings).verify_token(token)

    def test_get_user_id_from_token_never_raises(self, auth_settings):
        """Missing and garbage tokens map to None."""
        service = JWTService(auth_settings)

        assert service.get_user_id_from_token(None) is None
        assert service.get_user_id_from_token("not-a-jwt") is None
        assert service.get_user_id_from_token(service.create_token("u", "a")) == "u"
