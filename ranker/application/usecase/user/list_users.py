"""List users use case."""

from datetime import datetime

from pydantic import BaseModel

from ranker.domain.service import UserService


class UserListItem(BaseModel):
    """User list item in response."""

    user_id: str
    username: str
    name: str | None
    vote_count: int
    created_at: datetime


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserListItem]


class ListUsersUseCase:
    """Use case for listing users with their vote counts."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self) -> ListUsersResponse:
        """Execute list users flow.

        Returns:
            Users ordered by username
        """
        users = await self.user_service.list_users()
        counts = await self.user_service.vote_counts([user.id for user in users])

        return ListUsersResponse(
            users=[
                UserListItem(
                    user_id=str(user.id),
                    username=user.username.root,
                    name=user.name,
                    vote_count=counts.get(user.id, 0),
                    created_at=user.created_at,
                )
                for user in users
            ]
        )
