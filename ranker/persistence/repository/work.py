"""PostgreSQL implementation of Work repository."""

from typing import AsyncIterator, List, Optional

import logfire
from sqlalchemy import delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ranker.domain.model import Work
from ranker.domain.repository import WorkRepository
from ranker.domain.value import Category, UserId, WorkId
from ranker.persistence.mappers import row_to_work, work_to_dict
from ranker.persistence.tables import votes_table, works_table

# Per-work vote totals, joined onto works so every Work carries vote_count
_vote_counts = (
    select(votes_table.c.work_id, func.count().label("vote_count"))
    .group_by(votes_table.c.work_id)
    .subquery("vote_counts")
)

_vote_count = func.coalesce(_vote_counts.c.vote_count, 0).label("vote_count")


def _select_works():
    return select(works_table, _vote_count).select_from(
        works_table.outerjoin(_vote_counts, works_table.c.id == _vote_counts.c.work_id)
    )


class PostgresWorkRepository(WorkRepository):
    """PostgreSQL implementation of WorkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, work_id: WorkId) -> Optional[Work]:
        """Find a work by ID."""
        stmt = _select_works().where(works_table.c.id == work_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_work(dict(row)) if row else None

    async def iter_all(
        self,
        category: Optional[Category] = None,
        limit: Optional[int] = None,
    ) -> AsyncIterator[Work]:
        """Iterate works ordered by vote count, then title."""
        with logfire.span(
            "work_repository.iter_all",
            category=category.value if category else None,
            limit=limit,
        ):
            stmt = _select_works()

            if category:
                stmt = stmt.where(works_table.c.category == category.value)

            stmt = stmt.order_by(
                desc(_vote_count), works_table.c.title, works_table.c.id
            )

            if limit is not None:
                stmt = stmt.limit(limit)

            # Rows are buffered so callers may stop early without leaving
            # a cursor open on the session
            result = await self.session.execute(stmt)
            rows = result.mappings().all()

        for row in rows:
            yield row_to_work(dict(row))

    async def count(self, category: Optional[Category] = None) -> int:
        """Count works, optionally within one category."""
        stmt = select(func.count()).select_from(works_table)
        if category:
            stmt = stmt.where(works_table.c.category == category.value)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_voted_by_user(self, user_id: UserId) -> List[Work]:
        """Find the works a user has voted for, most recent vote first."""
        with logfire.span("work_repository.find_voted_by_user", user_id=str(user_id)):
            stmt = (
                _select_works()
                .join(votes_table, votes_table.c.work_id == works_table.c.id)
                .where(votes_table.c.user_id == user_id)
                .order_by(desc(votes_table.c.created_at))
            )
            result = await self.session.execute(stmt)
            return [row_to_work(dict(row)) for row in result.mappings().all()]

    async def save(self, work: Work) -> Work:
        """Save a work (create or update)."""
        with logfire.span("work_repository.save", work_id=str(work.id)):
            existing = await self.find_by_id(work.id)

            work_dict = work_to_dict(work)

            if existing:
                logfire.info("Updating existing work", work_id=str(work.id))
                stmt = (
                    update(works_table)
                    .where(works_table.c.id == work.id)
                    .values(**work_dict, updated_at=func.now())
                )
            else:
                logfire.info(
                    "Inserting new work",
                    work_id=str(work.id),
                    title=work.title,
                    category=work.category.value,
                )
                stmt = insert(works_table).values(**work_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return work

    async def update_title(self, work_id: WorkId, title: str) -> Optional[Work]:
        """Replace the title of a work."""
        with logfire.span("work_repository.update_title", work_id=str(work_id)):
            stmt = (
                update(works_table)
                .where(works_table.c.id == work_id)
                .values(title=title, updated_at=func.now())
                .returning(works_table.c.id)
            )
            result = await self.session.execute(stmt)
            if result.fetchone() is None:
                logfire.warn("Work not found", work_id=str(work_id))
                return None

            await self.session.flush()
            return await self.find_by_id(work_id)

    async def delete(self, work_id: WorkId) -> bool:
        """Delete a work (hard delete)."""
        stmt = delete(works_table).where(works_table.c.id == work_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
