"""Logout use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from ranker.domain.service import UserService
from ranker.domain.value import UserId


class LogoutRequest(BaseModel):
    """Logout request."""

    user_id: str | None = None  # Session user, None if the cookie did not resolve


class LogoutUseCase:
    """End the session user's sessions.

    Clearing the cookie is the route's job; this makes copies of the old
    token stop resolving too.
    """

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: LogoutRequest) -> None:
        if request.user_id is None:
            logfire.info("Logout without a session")
            return

        # Raises NotFoundError
        await self.user_service.end_sessions(UserId(UUID(request.user_id)))
