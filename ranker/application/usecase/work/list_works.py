"""List works use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from ranker.domain.model import Work
from ranker.domain.service import WorkService
from ranker.domain.value import Category


class WorkListItem(BaseModel):
    """Work list item in response."""

    work_id: str
    title: str
    category: Category
    creator: str | None
    publication_year: int | None
    vote_count: int
    created_at: datetime

    @classmethod
    def from_work(cls, work: Work) -> "WorkListItem":
        """Build a list item from a Work entity."""
        return cls(
            work_id=str(work.id),
            title=work.title,
            category=work.category,
            creator=work.creator,
            publication_year=work.publication_year,
            vote_count=work.vote_count,
            created_at=work.created_at,
        )


class ListWorksRequest(BaseModel):
    """List works request."""

    category: str | None = None  # Raw filter, validated against Category


class ListWorksResponse(BaseModel):
    """List works response."""

    works: list[WorkListItem]
    total: int
    category: Category | None


class ListWorksUseCase:
    """Use case for listing works ordered by votes."""

    def __init__(self, work_service: WorkService) -> None:
        """Initialize list works use case.

        Args:
            work_service: Work domain service
        """
        self.work_service = work_service

    async def execute(self, request: ListWorksRequest) -> ListWorksResponse:
        """Execute list works flow.

        Args:
            request: List works request with optional category filter

        Returns:
            Works ordered by vote count, then title

        Raises:
            ValidationError: If the category filter is not a known category
        """
        with logfire.span("list_works.execute", category=request.category):
            category = (
                Category.parse(request.category)
                if request.category is not None
                else None
            )

            works = [
                WorkListItem.from_work(work)
                async for work in self.work_service.iter_works(category=category)
            ]

            logfire.info("Listed works", count=len(works))
            return ListWorksResponse(works=works, total=len(works), category=category)
