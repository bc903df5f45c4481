"""In-memory user repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from ranker.domain.model.user import User
from ranker.domain.repository.user import UserRepository
from ranker.domain.value import AuthProvider, UserId, Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users by ID."""
        return [
            self._store.users[user_id]
            for user_id in user_ids
            if user_id in self._store.users
        ]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._store.users.values():
            if user.username == username:
                return user
        return None

    async def find_by_provider_identity(
        self, provider: AuthProvider, uid: str
    ) -> Optional[User]:
        """Find a user by their external provider identity."""
        for user in self._store.users.values():
            if user.provider == provider and user.uid == uid:
                return user
        return None

    async def find_all(self) -> list[User]:
        """Find all users ordered by username."""
        return sorted(self._store.users.values(), key=lambda u: u.username.root)

    async def save(self, user: User) -> User:
        """Save a user.

        Raises:
            IntegrityError: If the username or provider identity is taken
        """
        for existing in self._store.users.values():
            if existing.id == user.id:
                continue
            if existing.username == user.username:
                raise IntegrityError("Duplicate username", None, Exception())
            if (
                user.provider is not None
                and existing.provider == user.provider
                and existing.uid == user.uid
            ):
                raise IntegrityError("Duplicate provider identity", None, Exception())

        self._store.users[user.id] = user
        return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user."""
        return self._store.users.pop(user_id, None) is not None

    async def bump_session_version(self, user_id: UserId) -> Optional[int]:
        """Increment a user's session version."""
        user = self._store.users.get(user_id)
        if user is None:
            return None
        bumped = user.model_copy(update={"session_version": user.session_version + 1})
        self._store.users[user_id] = bumped
        return bumped.session_version
