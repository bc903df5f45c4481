"""Get rankings use case (home page)."""

import logfire
from pydantic import BaseModel, Field

from ranker.config import Settings
from ranker.domain.service import WorkService
from ranker.domain.value import Category

from .list_works import WorkListItem


class GetRankingsRequest(BaseModel):
    """Get rankings request."""

    limit: int | None = Field(default=None, ge=1)  # Per category


class GetRankingsResponse(BaseModel):
    """Get rankings response."""

    spotlight: WorkListItem | None
    categories: dict[Category, list[WorkListItem]]


class GetRankingsUseCase:
    """Use case for the spotlight work and the top works of each category."""

    def __init__(self, work_service: WorkService, settings: Settings) -> None:
        """Initialize get rankings use case.

        Args:
            work_service: Work domain service
            settings: Application settings
        """
        self.work_service = work_service
        self.settings = settings

    async def execute(self, request: GetRankingsRequest) -> GetRankingsResponse:
        """Execute get rankings flow.

        Every category is present in the response, empty or not.

        Args:
            request: Get rankings request

        Returns:
            Spotlight work (None for an empty catalog) and per-category tops
        """
        limit = request.limit or self.settings.ranking.top_per_category

        with logfire.span("get_rankings.execute", limit=limit):
            spotlight = await self.work_service.spotlight()
            ranking = await self.work_service.top_by_category(limit)

            return GetRankingsResponse(
                spotlight=WorkListItem.from_work(spotlight) if spotlight else None,
                categories={
                    category: [WorkListItem.from_work(work) for work in works]
                    for category, works in ranking.items()
                },
            )
