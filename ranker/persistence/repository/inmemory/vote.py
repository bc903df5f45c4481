"""In-memory vote repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from ranker.domain.model.vote import Vote
from ranker.domain.repository.vote import DUPLICATE_VOTE_CONSTRAINT, VoteRepository
from ranker.domain.value import UserId, WorkId

from .store import InMemoryStore


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_user_and_work(
        self, user_id: UserId, work_id: WorkId
    ) -> Optional[Vote]:
        """Find a vote by user and work."""
        for vote in self._store.votes:
            if vote.user_id == user_id and vote.work_id == work_id:
                return vote
        return None

    async def find_by_work(self, work_id: WorkId) -> list[Vote]:
        """Find all votes on a work, most recent first."""
        return sorted(
            (v for v in self._store.votes if v.work_id == work_id),
            key=lambda v: v.created_at,
            reverse=True,
        )

    async def count_by_work(self, work_id: WorkId) -> int:
        """Count votes on a work."""
        return sum(1 for v in self._store.votes if v.work_id == work_id)

    async def count_by_users(self, user_ids: list[UserId]) -> dict[UserId, int]:
        """Count votes cast by each of the given users."""
        counts = {user_id: 0 for user_id in user_ids}
        for vote in self._store.votes:
            if vote.user_id in counts:
                counts[vote.user_id] += 1
        return counts

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        The duplicate check and the append run without yielding to the
        event loop, so concurrent saves behave like a unique constraint.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        for existing in self._store.votes:
            if existing.user_id == vote.user_id and existing.work_id == vote.work_id:
                raise IntegrityError(
                    "INSERT INTO votes",
                    None,
                    Exception(
                        "duplicate key value violates unique constraint "
                        f'"{DUPLICATE_VOTE_CONSTRAINT}"'
                    ),
                )

        self._store.votes.append(vote)
        return vote

    async def delete_by_work(self, work_id: WorkId) -> int:
        """Delete every vote on a work."""
        before = len(self._store.votes)
        self._store.votes[:] = [v for v in self._store.votes if v.work_id != work_id]
        return before - len(self._store.votes)

    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every vote cast by a user."""
        before = len(self._store.votes)
        self._store.votes[:] = [v for v in self._store.votes if v.user_id != user_id]
        return before - len(self._store.votes)
