"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, desc, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from ranker.domain.model import Vote
from ranker.domain.repository import VoteRepository
from ranker.domain.value import UserId, WorkId
from ranker.persistence.mappers import row_to_vote, vote_to_dict
from ranker.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_work(
        self, user_id: UserId, work_id: WorkId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific work."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.work_id == work_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_work(self, work_id: WorkId) -> List[Vote]:
        """Find all votes on a work, most recent first."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.work_id == work_id)
            .order_by(desc(votes_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def count_by_work(self, work_id: WorkId) -> int:
        """Count votes on a work."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.work_id == work_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_users(self, user_ids: List[UserId]) -> dict[UserId, int]:
        """Count votes cast by each of the given users (batch query)."""
        if not user_ids:
            return {}

        stmt = (
            select(votes_table.c.user_id, func.count().label("vote_count"))
            .where(votes_table.c.user_id.in_(user_ids))
            .group_by(votes_table.c.user_id)
        )
        result = await self.session.execute(stmt)

        counts = {user_id: 0 for user_id in user_ids}
        for row in result.fetchall():
            counts[UserId(row.user_id)] = row.vote_count
        return counts

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        The insert runs in a SAVEPOINT so a unique violation leaves the
        surrounding request transaction usable.
        """
        vote_dict = vote_to_dict(vote)
        async with self.session.begin_nested():
            await self.session.execute(insert(votes_table).values(**vote_dict))
        return vote

    async def delete_by_work(self, work_id: WorkId) -> int:
        """Delete every vote on a work."""
        stmt = delete(votes_table).where(votes_table.c.work_id == work_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete_by_user(self, user_id: UserId) -> int:
        """Delete every vote cast by a user."""
        stmt = delete(votes_table).where(votes_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
