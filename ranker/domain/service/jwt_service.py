"""JWT session token domain service."""

import logfire

from ranker.config import AuthSettings
from ranker.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: str, username: str, session_version: int = 0
    ) -> str:
        """Create session token for user.

        Args:
            user_id: User ID
            username: Username
            session_version: The user's current session version

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(
                user_id, username, self.auth_settings, session_version
            )
            logfire.info("JWT token created", user_id=user_id, username=username)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify session token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Extract user ID from a session token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token).user_id
        except JWTError:
            return None
