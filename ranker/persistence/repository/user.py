"""PostgreSQL implementation of User repository."""

from typing import List, Optional, Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ranker.domain.model import User
from ranker.domain.repository import UserRepository
from ranker.domain.value import AuthProvider, UserId, Username
from ranker.persistence.mappers import row_to_user, user_to_dict
from ranker.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> List[User]:
        """Find several users by ID."""
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username.

        Args:
            username: Username to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_provider_identity(
        self, provider: AuthProvider, uid: str
    ) -> Optional[User]:
        """Find a user by their external provider identity.

        Args:
            provider: The authentication provider
            uid: The user's ID on that provider

        Returns:
            User if found, None otherwise
        """
        stmt = (
            select(users_table)
            .where(users_table.c.provider == provider.value)
            .where(users_table.c.uid == uid)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_all(self) -> List[User]:
        """Find all users ordered by username."""
        stmt = select(users_table).order_by(users_table.c.username)
        result = await self.session.execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]

    async def save(self, user: User) -> User:
        """Save a user (create).

        Runs in a SAVEPOINT so a unique violation on username or provider
        identity leaves the request transaction usable.

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)
        async with self.session.begin_nested():
            await self.session.execute(insert(users_table).values(**user_dict))
        return user

    async def delete(self, user_id: UserId) -> bool:
        """Delete a user (hard delete)."""
        stmt = delete(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def bump_session_version(self, user_id: UserId) -> Optional[int]:
        """Increment session_version in one statement and return the new value."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(session_version=users_table.c.session_version + 1)
            .returning(users_table.c.session_version)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
