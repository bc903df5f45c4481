"""Work catalog domain service."""

from datetime import datetime, timezone
from typing import AsyncIterator, Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from ranker.domain.error import NotFoundError, ValidationError
from ranker.domain.model.work import Work
from ranker.domain.repository import VoteRepository, WorkRepository
from ranker.domain.value import Category, UserId, WorkId

from .base import Service


def _describe(error: PydanticValidationError) -> str:
    """Flatten a Pydantic error into a single human-readable line."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'value'}: {err['msg']}"
        for err in error.errors()
    )


class WorkService(Service):
    """Domain service for the work catalog."""

    def __init__(
        self, work_repository: WorkRepository, vote_repository: VoteRepository
    ) -> None:
        """Initialize work service.

        Args:
            work_repository: Work repository
            vote_repository: Vote repository (for cascading deletes)
        """
        self.work_repository = work_repository
        self.vote_repository = vote_repository

    async def create_work(
        self,
        title: str | None,
        category: str | None,
        creator: str | None = None,
        publication_year: int | None = None,
        description: str | None = None,
    ) -> Work:
        """Create and persist a new work.

        Args:
            title: Work title (must not be blank)
            category: Raw category string (exact match against Category)
            creator: Optional author/artist/director
            publication_year: Optional year of publication
            description: Optional free-text description

        Returns:
            The created work, with vote_count 0

        Raises:
            ValidationError: If title or category is invalid
        """
        with logfire.span(
            "work_service.create_work", title=title, category=category
        ):
            parsed_category = Category.parse(category)

            try:
                work = Work(
                    id=WorkId(uuid4()),
                    title=title,
                    category=parsed_category,
                    creator=creator,
                    publication_year=publication_year,
                    description=description,
                    vote_count=0,
                    created_at=datetime.now(timezone.utc),
                )
            except PydanticValidationError as e:
                logfire.warn("Invalid work data", error=_describe(e))
                raise ValidationError(_describe(e))

            saved = await self.work_repository.save(work)
            logfire.info(
                "Work created", work_id=str(saved.id), category=saved.category.value
            )
            return saved

    async def get_work(self, work_id: WorkId) -> Work:
        """Get a work by ID.

        Args:
            work_id: Work ID

        Returns:
            Work entity

        Raises:
            NotFoundError: If work not found
        """
        with logfire.span("work_service.get_work", work_id=str(work_id)):
            work = await self.work_repository.find_by_id(work_id)
            if not work:
                logfire.warn("Work not found", work_id=str(work_id))
                raise NotFoundError("Work", str(work_id))
            return work

    async def update_title(self, work_id: WorkId, title: str | None) -> Work:
        """Replace the title of an existing work.

        The category is immutable and is not touched.

        Args:
            work_id: Work ID
            title: New title (must not be blank)

        Returns:
            Updated work

        Raises:
            NotFoundError: If work not found
            ValidationError: If the new title is blank
        """
        with logfire.span("work_service.update_title", work_id=str(work_id)):
            work = await self.get_work(work_id)

            try:
                Work.model_validate({**work.model_dump(), "title": title})
            except PydanticValidationError as e:
                logfire.warn(
                    "Invalid work title", work_id=str(work_id), error=_describe(e)
                )
                raise ValidationError(_describe(e))

            updated = await self.work_repository.update_title(work_id, title)
            if updated is None:
                raise NotFoundError("Work", str(work_id))

            logfire.info("Work title updated", work_id=str(work_id), title=title)
            return updated

    async def delete_work(self, work_id: WorkId) -> None:
        """Delete a work and every vote cast for it.

        Args:
            work_id: Work ID

        Raises:
            NotFoundError: If work not found
        """
        with logfire.span("work_service.delete_work", work_id=str(work_id)):
            await self.get_work(work_id)

            removed_votes = await self.vote_repository.delete_by_work(work_id)
            await self.work_repository.delete(work_id)

            logfire.info(
                "Work deleted", work_id=str(work_id), removed_votes=removed_votes
            )

    def iter_works(
        self, category: Optional[Category] = None, limit: Optional[int] = None
    ) -> AsyncIterator[Work]:
        """Iterate works ordered by vote count.

        Args:
            category: Optional category filter
            limit: Optional maximum number of works

        Returns:
            Async iterator over works; call again to restart
        """
        return self.work_repository.iter_all(category=category, limit=limit)

    async def count_works(self, category: Optional[Category] = None) -> int:
        """Count works, optionally within one category."""
        return await self.work_repository.count(category=category)

    async def spotlight(self) -> Work | None:
        """Get the work with the most votes.

        Returns:
            Top-voted work, or None if the catalog is empty
        """
        with logfire.span("work_service.spotlight"):
            async for work in self.work_repository.iter_all(limit=1):
                return work
            return None

    async def top_by_category(self, limit: int) -> dict[Category, list[Work]]:
        """Get the top-voted works of every category.

        Args:
            limit: Maximum number of works per category

        Returns:
            Mapping with an entry (possibly empty) for every category
        """
        with logfire.span("work_service.top_by_category", limit=limit):
            ranking: dict[Category, list[Work]] = {}
            for category in Category:
                ranking[category] = [
                    work
                    async for work in self.work_repository.iter_all(
                        category=category, limit=limit
                    )
                ]
            return ranking

    async def works_voted_by(self, user_id: UserId) -> list[Work]:
        """Get the works a user has voted for.

        Args:
            user_id: User ID

        Returns:
            Works the user voted for
        """
        with logfire.span("work_service.works_voted_by", user_id=str(user_id)):
            works = await self.work_repository.find_voted_by_user(user_id)
            logfire.info(
                "Fetched voted works", user_id=str(user_id), count=len(works)
            )
            return works
