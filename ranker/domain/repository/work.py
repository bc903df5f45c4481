"""Work repository interface."""

from abc import ABC, abstractmethod
from typing import AsyncIterator, List, Optional

from ranker.domain.model.work import Work
from ranker.domain.value import Category, UserId, WorkId


class WorkRepository(ABC):
    """Repository for Work aggregate.

    Defines the contract for work persistence operations.
    Implementations live in the infrastructure layer.

    Every Work returned carries a vote_count derived from the votes
    table at query time.
    """

    @abstractmethod
    async def find_by_id(self, work_id: WorkId) -> Optional[Work]:
        """Find a work by ID.

        Args:
            work_id: The work's unique identifier

        Returns:
            The work if found, None otherwise
        """
        pass

    @abstractmethod
    def iter_all(
        self,
        category: Optional[Category] = None,
        limit: Optional[int] = None,
    ) -> AsyncIterator[Work]:
        """Iterate works ordered by vote count (descending), then title.

        Each call starts a fresh query, so the sequence can be restarted
        by calling again.

        Args:
            category: Only yield works in this category (None for all)
            limit: Maximum number of works to yield (None for no limit)

        Returns:
            Async iterator over matching works
        """
        pass

    @abstractmethod
    async def count(self, category: Optional[Category] = None) -> int:
        """Count works, optionally within one category.

        Args:
            category: Category filter (None for all)

        Returns:
            Number of works
        """
        pass

    @abstractmethod
    async def find_voted_by_user(self, user_id: UserId) -> List[Work]:
        """Find the works a user has voted for (join through votes).

        Args:
            user_id: The voter's ID

        Returns:
            Works the user voted for, most recent vote first
        """
        pass

    @abstractmethod
    async def save(self, work: Work) -> Work:
        """Save a work (create or update).

        vote_count is never persisted.

        Args:
            work: The work to save

        Returns:
            The saved work
        """
        pass

    @abstractmethod
    async def update_title(self, work_id: WorkId, title: str) -> Optional[Work]:
        """Replace the title of a work.

        Args:
            work_id: ID of the work to update
            title: New title

        Returns:
            Updated Work entity, or None if the work doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, work_id: WorkId) -> bool:
        """Delete a work (hard delete).

        Args:
            work_id: The work ID to delete

        Returns:
            True if a work was deleted, False if none existed
        """
        pass
