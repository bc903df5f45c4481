"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ranker.domain.model.user import User
from ranker.domain.value import AuthProvider, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users by ID (batch query).

        Args:
            user_ids: IDs to look up

        Returns:
            The users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: The username (exact match)

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_provider_identity(
        self, provider: AuthProvider, uid: str
    ) -> Optional[User]:
        """Find a user by their federated identity.

        Args:
            provider: The identity provider
            uid: The user's ID on that provider

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """Find all users ordered by username.

        Returns:
            List of users
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create).

        Args:
            user: The user to save

        Returns:
            The saved user

        Raises:
            IntegrityError: If the username (or provider identity) is taken
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a user (hard delete).

        Args:
            user_id: The user ID to delete

        Returns:
            True if a user was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def bump_session_version(self, user_id: UserId) -> Optional[int]:
        """Increment a user's session version.

        Session tokens issued under the old version stop resolving.

        Args:
            user_id: The user ID

        Returns:
            The new version, or None if the user does not exist
        """
        pass
