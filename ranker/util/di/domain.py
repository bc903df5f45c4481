"""Domain layer DI providers."""

from dishka import Scope, provide

from ranker.config import AuthSettings
from ranker.domain.repository import UserRepository, VoteRepository, WorkRepository
from ranker.domain.service import (
    AuthService,
    IdentityService,
    JWTService,
    OAuthClient,
    UserService,
    VoteService,
    WorkService,
)
from ranker.domain.value import AuthProvider
from ranker.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_identity_service(self) -> IdentityService:
        """Provide identity resolution domain service."""
        return IdentityService()

    @provide
    def get_auth_service(
        self,
        oauth_clients: dict[AuthProvider, OAuthClient],
        identity_service: IdentityService,
    ) -> AuthService:
        """Provide multi-provider authentication domain service.

        Args:
            oauth_clients: Dictionary mapping providers to their OAuth clients
            identity_service: Identity assertion validation

        Returns:
            AuthService configured with all available OAuth clients
        """
        return AuthService(
            oauth_clients=oauth_clients, identity_service=identity_service
        )

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_work_service(
        self, work_repository: WorkRepository, vote_repository: VoteRepository
    ) -> WorkService:
        """Provide work catalog domain service."""
        return WorkService(
            work_repository=work_repository, vote_repository=vote_repository
        )

    @provide
    def get_user_service(
        self, user_repository: UserRepository, vote_repository: VoteRepository
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, vote_repository=vote_repository
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        work_service: WorkService,
        user_service: UserService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            work_service=work_service,
            user_service=user_service,
        )
