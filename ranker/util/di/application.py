"""Application layer DI providers."""

from dishka import Scope, provide

from ranker.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    LogoutUseCase,
    UsernameLoginUseCase,
)
from ranker.application.usecase.user import (
    DeleteUserUseCase,
    GetUserProfileUseCase,
    ListUsersUseCase,
)
from ranker.application.usecase.vote import UpvoteUseCase
from ranker.application.usecase.work import (
    CreateWorkUseCase,
    DeleteWorkUseCase,
    GetRankingsUseCase,
    GetWorkUseCase,
    ListWorksUseCase,
    UpdateWorkUseCase,
)
from ranker.config import Settings
from ranker.domain.service import (
    AuthService,
    IdentityService,
    JWTService,
    UserService,
    VoteService,
    WorkService,
)
from ranker.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        auth_service: AuthService,
        identity_service: IdentityService,
        jwt_service: JWTService,
        user_service: UserService,
    ) -> LoginUseCase:
        """Provide federated login use case."""
        return LoginUseCase(
            auth_service=auth_service,
            identity_service=identity_service,
            jwt_service=jwt_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_username_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> UsernameLoginUseCase:
        """Provide username login use case."""
        return UsernameLoginUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_logout_use_case(self, user_service: UserService) -> LogoutUseCase:
        """Provide logout use case."""
        return LogoutUseCase(user_service=user_service)

    # Work use cases
    @provide(scope=Scope.REQUEST)
    def get_create_work_use_case(self, work_service: WorkService) -> CreateWorkUseCase:
        """Provide create work use case."""
        return CreateWorkUseCase(work_service=work_service)

    @provide(scope=Scope.REQUEST)
    def get_get_work_use_case(
        self, work_service: WorkService, vote_service: VoteService
    ) -> GetWorkUseCase:
        """Provide get work use case."""
        return GetWorkUseCase(work_service=work_service, vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_list_works_use_case(self, work_service: WorkService) -> ListWorksUseCase:
        """Provide list works use case."""
        return ListWorksUseCase(work_service=work_service)

    @provide(scope=Scope.REQUEST)
    def get_update_work_use_case(self, work_service: WorkService) -> UpdateWorkUseCase:
        """Provide update work use case."""
        return UpdateWorkUseCase(work_service=work_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_work_use_case(self, work_service: WorkService) -> DeleteWorkUseCase:
        """Provide delete work use case."""
        return DeleteWorkUseCase(work_service=work_service)

    @provide(scope=Scope.REQUEST)
    def get_get_rankings_use_case(
        self, work_service: WorkService, settings: Settings
    ) -> GetRankingsUseCase:
        """Provide get rankings use case."""
        return GetRankingsUseCase(work_service=work_service, settings=settings)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_upvote_use_case(
        self, vote_service: VoteService, work_service: WorkService
    ) -> UpvoteUseCase:
        """Provide upvote use case."""
        return UpvoteUseCase(vote_service=vote_service, work_service=work_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self, user_service: UserService, work_service: WorkService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service, work_service=work_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)
