"""Vote routes."""

from urllib.parse import urlsplit

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from ranker.application.usecase.auth import GetCurrentUserUseCase
from ranker.application.usecase.vote import UpvoteRequest, UpvoteUseCase
from ranker.config import Settings
from ranker.domain.error import NotFoundError
from ranker.interface.api.session import require_uuid, resolve_current_user

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


def _redirect_back(request: Request, fallback: str) -> str:
    """Referring page if it is on this site, otherwise the fallback."""
    referer = request.headers.get("referer")
    if not referer:
        return fallback

    parts = urlsplit(referer)
    if parts.netloc and parts.netloc != request.url.netloc:
        return fallback

    path = parts.path or "/"
    return f"{path}?{parts.query}" if parts.query else path


@router.post("/works/{work_id}/upvote", status_code=status.HTTP_302_FOUND)
async def upvote_work(
    work_id: str,
    request: Request,
    upvote_use_case: FromDishka[UpvoteUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Upvote a work and redirect back.

    Signed-out and repeated upvotes redirect the same way without
    recording anything.

    Args:
        work_id: Work UUID
        request: Incoming request (session cookie, Referer)
        upvote_use_case: Upvote use case from DI
        get_current_user_use_case: Session resolution from DI
        settings: Application settings from DI

    Returns:
        302 redirect to the referring page or the work page

    Raises:
        HTTPException: 404 if the work doesn't exist
    """
    work_id = require_uuid(work_id, "Work")
    user = await resolve_current_user(request, settings, get_current_user_use_case)

    try:
        result = await upvote_use_case.execute(
            UpvoteRequest(work_id=work_id, user_id=user.user_id if user else None)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    logfire.info(
        "Upvote handled",
        work_id=work_id,
        outcome=result.outcome.value,
        vote_count=result.vote_count,
    )

    return RedirectResponse(
        url=_redirect_back(request, f"/works/{work_id}"),
        status_code=status.HTTP_302_FOUND,
    )
