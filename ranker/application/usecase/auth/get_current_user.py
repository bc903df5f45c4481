"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ranker.domain.service import JWTService, UserService
from ranker.domain.value import AuthProvider, UserId
from ranker.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    username: str
    name: str | None
    provider: AuthProvider | None
    created_at: datetime


class GetCurrentUserUseCase:
    """Use case for resolving the session user from a token."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Args:
            request: Request with JWT token

        Returns:
            User information if token is valid and user exists

        Raises:
            JWTError: If token is invalid, expired or from an ended session
            NotFoundError: If the token's user no longer exists
        """
        # Raises JWTError if invalid
        payload = self.jwt_service.verify_token(request.token)

        try:
            user_id = UserId(UUID(payload.user_id))
        except ValueError:
            raise JWTError("Invalid token")

        # Raises NotFoundError if not found
        user = await self.user_service.get_by_id(user_id)

        if payload.ver != user.session_version:
            raise JWTError("Session has ended")

        return GetCurrentUserResponse(
            user_id=str(user.id),
            username=user.username.root,
            name=user.name,
            provider=user.provider,
            created_at=user.created_at,
        )
