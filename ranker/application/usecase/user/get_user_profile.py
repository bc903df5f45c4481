"""Get user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ranker.application.usecase.work.list_works import WorkListItem
from ranker.domain.service import UserService, WorkService
from ranker.domain.value import AuthProvider, UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str  # UUID string


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    user_id: str
    username: str
    name: str | None
    provider: AuthProvider | None
    created_at: datetime
    voted_works: list[WorkListItem]


class GetUserProfileUseCase:
    """Use case for showing a user and the works they voted for."""

    def __init__(self, user_service: UserService, work_service: WorkService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            work_service: Work domain service
        """
        self.user_service = user_service
        self.work_service = work_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Args:
            request: Request with user ID

        Returns:
            User profile with voted works, most recent vote first

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        works = await self.work_service.works_voted_by(user.id)

        return GetUserProfileResponse(
            user_id=str(user.id),
            username=user.username.root,
            name=user.name,
            provider=user.provider,
            created_at=user.created_at,
            voted_works=[WorkListItem.from_work(work) for work in works],
        )
