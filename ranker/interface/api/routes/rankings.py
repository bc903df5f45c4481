"""Home page rankings route."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from ranker.application.usecase.work import (
    GetRankingsRequest,
    GetRankingsResponse,
    GetRankingsUseCase,
)

router = APIRouter(tags=["rankings"], route_class=DishkaRoute)


@router.get("/", response_model=GetRankingsResponse)
async def get_rankings(
    get_rankings_use_case: FromDishka[GetRankingsUseCase],
    limit: int | None = Query(default=None, ge=1, le=100),
) -> GetRankingsResponse:
    """Spotlight work and the top works of each category.

    Always 200, even for an empty catalog: every category is present and
    spotlight is null.

    Args:
        get_rankings_use_case: Get rankings use case from DI
        limit: Works per category (defaults to the configured top count)

    Returns:
        Rankings
    """
    return await get_rankings_use_case.execute(GetRankingsRequest(limit=limit))
