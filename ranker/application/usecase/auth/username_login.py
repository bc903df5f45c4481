"""Username login use case."""

import logfire
from pydantic import BaseModel

from ranker.domain.service import JWTService, UserService

from .login import LoginResponse


class UsernameLoginRequest(BaseModel):
    """Username login request from the login form."""

    username: str | None = None


class UsernameLoginUseCase:
    """Use case for signing in by username.

    An unknown username registers a new user on the spot.
    """

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize username login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: UsernameLoginRequest) -> LoginResponse:
        """Execute username login flow.

        Args:
            request: Username login request

        Returns:
            Session token and user details

        Raises:
            ValidationError: If the username is blank or too long
        """
        with logfire.span("username_login.execute", username=request.username):
            user = await self.user_service.find_or_register(request.username or "")

            token = self.jwt_service.create_token(
                user_id=str(user.id),
                username=user.username.root,
                session_version=user.session_version,
            )

            logfire.info(
                "User logged in", user_id=str(user.id), username=user.username.root
            )
            return LoginResponse(
                token=token, user_id=str(user.id), username=user.username.root
            )
