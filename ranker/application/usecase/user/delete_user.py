"""Delete user use case."""

from uuid import UUID

from pydantic import BaseModel

from ranker.domain.error import NotAuthorizedError, UnauthenticatedError
from ranker.domain.service import UserService
from ranker.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: str  # UUID string of the account to delete
    current_user_id: str | None = None  # Session user, None if not signed in


class DeleteUserResponse(BaseModel):
    """Delete user response."""

    user_id: str
    deleted: bool


class DeleteUserUseCase:
    """Use case for deleting an account and its votes.

    Users may only delete their own account.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize delete user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Execute delete user flow.

        Raises:
            UnauthenticatedError: If nobody is signed in
            NotFoundError: If user not found
            NotAuthorizedError: If the session user is somebody else
        """
        if request.current_user_id is None:
            raise UnauthenticatedError("delete an account")

        user_id = UserId(UUID(request.user_id))

        # Raises NotFoundError
        user = await self.user_service.get_by_id(user_id)

        if str(user.id) != request.current_user_id:
            raise NotAuthorizedError("User", request.user_id, request.current_user_id)

        await self.user_service.delete_user(user.id)
        return DeleteUserResponse(user_id=str(user.id), deleted=True)
