"""User domain service."""

from datetime import datetime, timezone
from typing import Sequence
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from ranker.domain.error import NotFoundError, ValidationError
from ranker.domain.model import User
from ranker.domain.repository import UserRepository, VoteRepository
from ranker.domain.value import AuthProvider, UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        vote_repository: VoteRepository,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            vote_repository: Vote repository (for vote counts and cascades)
        """
        self.user_repository = user_repository
        self.vote_repository = vote_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_users_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Get several users at once."""
        if not user_ids:
            return []
        return await self.user_repository.find_by_ids(list(set(user_ids)))

    async def get_user_by_username(self, username: Username) -> User | None:
        """Get user by username.

        Args:
            username: Username

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_username", username=username.root):
            user = await self.user_repository.find_by_username(username)
            if user:
                logfire.info("User found", username=username.root, user_id=str(user.id))
            else:
                logfire.info("User not found", username=username.root)
            return user

    async def get_user_by_provider_identity(
        self, provider: AuthProvider, uid: str
    ) -> User | None:
        """Get user by federated identity.

        Args:
            provider: Identity provider
            uid: Provider-specific user ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span(
            "user_service.get_user_by_provider_identity",
            provider=provider.value,
            uid=uid,
        ):
            return await self.user_repository.find_by_provider_identity(provider, uid)

    async def list_users(self) -> list[User]:
        """List all users ordered by username."""
        return await self.user_repository.find_all()

    async def vote_counts(self, user_ids: Sequence[UserId]) -> dict[UserId, int]:
        """Count votes cast by each user (batch query)."""
        if not user_ids:
            return {}
        return await self.vote_repository.count_by_users(list(user_ids))

    async def register(self, user: User) -> User:
        """Persist a new user.

        Args:
            user: User to register

        Returns:
            Saved user

        Raises:
            ValidationError: If the username is already taken
        """
        with logfire.span("user_service.register", username=user.username.root):
            existing = await self.user_repository.find_by_username(user.username)
            if existing:
                logfire.warn("Username already taken", username=user.username.root)
                raise ValidationError(
                    f"Username {user.username.root!r} has already been taken"
                )

            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Lost a race with a concurrent registration
                logfire.warn(
                    "Username collision on insert", username=user.username.root
                )
                raise ValidationError(
                    f"Username {user.username.root!r} has already been taken"
                )

            logfire.info(
                "User registered", user_id=str(saved.id), username=saved.username.root
            )
            return saved

    async def find_or_register(self, username: str) -> User:
        """Find a user by username, registering them if they don't exist.

        Args:
            username: Raw username from the login form

        Returns:
            Existing or newly registered user

        Raises:
            ValidationError: If the username is blank or too long
        """
        try:
            name = Username(username)
        except PydanticValidationError as e:
            raise ValidationError(e.errors()[0]["msg"])

        user = await self.get_user_by_username(name)
        if user:
            return user

        return await self.register(
            User(
                id=UserId(uuid4()),
                username=name,
                created_at=datetime.now(timezone.utc),
            )
        )

    async def delete_user(self, user_id: UserId) -> None:
        """Delete a user and every vote they cast.

        Args:
            user_id: User ID

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.delete_user", user_id=str(user_id)):
            await self.get_by_id(user_id)

            removed_votes = await self.vote_repository.delete_by_user(user_id)
            await self.user_repository.delete(user_id)

            logfire.info(
                "User deleted", user_id=str(user_id), removed_votes=removed_votes
            )

    async def end_sessions(self, user_id: UserId) -> None:
        """Invalidate every session token issued to a user so far.

        Args:
            user_id: User ID

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.end_sessions", user_id=str(user_id)):
            version = await self.user_repository.bump_session_version(user_id)
            if version is None:
                raise NotFoundError("User", str(user_id))

            logfire.info(
                "User sessions ended", user_id=str(user_id), session_version=version
            )
