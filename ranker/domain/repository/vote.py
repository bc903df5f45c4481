"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ranker.domain.model.vote import Vote
from ranker.domain.value import UserId, WorkId

# Unique (user_id, work_id) constraint; a violation naming it is a repeat vote
DUPLICATE_VOTE_CONSTRAINT = "uq_vote_user_work"


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_work(
        self, user_id: UserId, work_id: WorkId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific work.

        Args:
            user_id: The user's ID
            work_id: The work's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_work(self, work_id: WorkId) -> List[Vote]:
        """Find all votes on a work, most recent first.

        Args:
            work_id: The work's ID

        Returns:
            List of votes on the work
        """
        pass

    @abstractmethod
    async def count_by_work(self, work_id: WorkId) -> int:
        """Count votes on a work.

        Args:
            work_id: The work's ID

        Returns:
            Number of votes
        """
        pass

    @abstractmethod
    async def count_by_users(self, user_ids: List[UserId]) -> dict[UserId, int]:
        """Count votes cast by each of the given users (batch query).

        Args:
            user_ids: Users to count votes for

        Returns:
            Mapping of user ID to vote count (users without votes map to 0)
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        The insert must be atomic with respect to the (user, work)
        uniqueness check: the persistence layer's unique constraint is
        the only arbiter.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If a vote already exists for this user/work pair
        """
        pass

    @abstractmethod
    async def delete_by_work(self, work_id: WorkId) -> int:
        """Delete every vote on a work.

        Args:
            work_id: The work's ID

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every vote cast by a user.

        Args:
            user_id: The user's ID

        Returns:
            Number of votes deleted
        """
        pass
