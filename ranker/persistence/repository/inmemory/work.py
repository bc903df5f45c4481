"""In-memory work repository for testing."""

from typing import AsyncIterator, List, Optional

from ranker.domain.model.work import Work
from ranker.domain.repository.work import WorkRepository
from ranker.domain.value import Category, UserId, WorkId

from .store import InMemoryStore


class InMemoryWorkRepository(WorkRepository):
    """In-memory implementation of WorkRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    def _with_votes(self, work: Work) -> Work:
        count = sum(1 for v in self._store.votes if v.work_id == work.id)
        return work.model_copy(update={"vote_count": count})

    async def find_by_id(self, work_id: WorkId) -> Optional[Work]:
        """Find a work by ID."""
        work = self._store.works.get(work_id)
        return self._with_votes(work) if work else None

    async def iter_all(
        self,
        category: Optional[Category] = None,
        limit: Optional[int] = None,
    ) -> AsyncIterator[Work]:
        """Iterate works ordered by vote count, then title."""
        works = [
            self._with_votes(w)
            for w in self._store.works.values()
            if category is None or w.category == category
        ]
        works.sort(key=lambda w: (-w.vote_count, w.title, str(w.id)))

        if limit is not None:
            works = works[:limit]

        for work in works:
            yield work

    async def count(self, category: Optional[Category] = None) -> int:
        """Count works, optionally within one category."""
        return sum(
            1
            for w in self._store.works.values()
            if category is None or w.category == category
        )

    async def find_voted_by_user(self, user_id: UserId) -> List[Work]:
        """Find the works a user has voted for, most recent vote first."""
        votes = sorted(
            (v for v in self._store.votes if v.user_id == user_id),
            key=lambda v: v.created_at,
            reverse=True,
        )
        return [
            self._with_votes(self._store.works[v.work_id])
            for v in votes
            if v.work_id in self._store.works
        ]

    async def save(self, work: Work) -> Work:
        """Save or update a work."""
        self._store.works[work.id] = work.model_copy(update={"vote_count": 0})
        return work

    async def update_title(self, work_id: WorkId, title: str) -> Optional[Work]:
        """Replace the title of a work."""
        work = self._store.works.get(work_id)
        if not work:
            return None

        self._store.works[work_id] = work.model_copy(update={"title": title})
        return await self.find_by_id(work_id)

    async def delete(self, work_id: WorkId) -> bool:
        """Delete a work."""
        return self._store.works.pop(work_id, None) is not None
