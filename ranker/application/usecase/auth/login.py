"""Federated login use case."""

import logfire
from pydantic import BaseModel

from ranker.domain.service import (
    AuthService,
    IdentityService,
    JWTService,
    UserService,
)
from ranker.domain.value import AuthProvider


class LoginRequest(BaseModel):
    """Login request from OAuth callback.

    These parameters come from the OAuth provider in the callback URL.
    """

    provider: AuthProvider  # Which provider is handling this login
    code: str  # OAuth authorization code
    state: str  # State parameter for session verification


class LoginResponse(BaseModel):
    """Login response."""

    token: str
    user_id: str
    username: str


class LoginUseCase:
    """Use case for user login via an OAuth provider."""

    def __init__(
        self,
        auth_service: AuthService,
        identity_service: IdentityService,
        jwt_service: JWTService,
        user_service: UserService,
    ) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service (handles all providers)
            identity_service: Identity resolution domain service
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.auth_service = auth_service
        self.identity_service = identity_service
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute federated login flow.

        Steps:
        1. Complete OAuth flow with provider and validate the assertion
        2. Look up an existing user by (provider, uid)
        3. Otherwise build a User from the assertion and register it
        4. Issue a session token

        Args:
            request: Login request with OAuth callback parameters

        Returns:
            Session token and user details

        Raises:
            ProviderError: If the provider exchange fails
            ValidationError: If the assertion is malformed or the username
                is already taken
        """
        with logfire.span("login.execute", provider=request.provider.value):
            identity = await self.auth_service.complete_login(
                provider=request.provider,
                code=request.code,
                state=request.state,
            )

            user = await self.user_service.get_user_by_provider_identity(
                identity.provider, identity.uid
            )

            if user:
                logfire.info(
                    "Existing user logged in",
                    user_id=str(user.id),
                    provider=identity.provider.value,
                )
            else:
                user = await self.user_service.register(
                    self.identity_service.resolve_from_federated_identity(identity)
                )
                logfire.info(
                    "New user registered from federated identity",
                    user_id=str(user.id),
                    provider=identity.provider.value,
                )

            token = self.jwt_service.create_token(
                user_id=str(user.id),
                username=user.username.root,
                session_version=user.session_version,
            )

            return LoginResponse(
                token=token, user_id=str(user.id), username=user.username.root
            )
