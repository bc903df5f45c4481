"""Work catalog routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field

from ranker.application.usecase.auth import GetCurrentUserUseCase
from ranker.application.usecase.work import (
    CreateWorkRequest,
    CreateWorkUseCase,
    DeleteWorkRequest,
    DeleteWorkUseCase,
    GetWorkRequest,
    GetWorkResponse,
    GetWorkUseCase,
    ListWorksRequest,
    ListWorksResponse,
    ListWorksUseCase,
    UpdateWorkRequest,
    UpdateWorkUseCase,
)
from ranker.config import Settings
from ranker.domain.error import NotFoundError, ValidationError
from ranker.domain.value import Category
from ranker.interface.api.session import require_uuid, resolve_current_user

router = APIRouter(prefix="/works", tags=["works"], route_class=DishkaRoute)


class CreateWorkAPIRequest(BaseModel):
    """API request for creating a work.

    title and category are optional here so that a missing value reaches
    the domain validation and is reported like any other invalid value.
    """

    title: str | None = None
    category: str | None = None
    creator: str | None = Field(default=None, max_length=255)
    publication_year: int | None = None
    description: str | None = Field(default=None, max_length=10000)


class UpdateWorkAPIRequest(BaseModel):
    """API request for updating a work. Only the title is editable."""

    title: str | None = None


class EditWorkResponse(BaseModel):
    """Data for the edit form."""

    work_id: str
    title: str
    category: Category
    creator: str | None
    publication_year: int | None
    description: str | None
    categories: list[Category]


@router.get("", response_model=ListWorksResponse)
async def list_works(
    list_works_use_case: FromDishka[ListWorksUseCase],
    category: str | None = None,
) -> ListWorksResponse:
    """List works ordered by vote count, optionally within one category.

    Raises:
        HTTPException: 400 for an unknown category
    """
    try:
        return await list_works_use_case.execute(ListWorksRequest(category=category))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("", status_code=status.HTTP_302_FOUND)
async def create_work(
    request: CreateWorkAPIRequest,
    create_work_use_case: FromDishka[CreateWorkUseCase],
) -> RedirectResponse:
    """Create a work and redirect to its page.

    Args:
        request: Work creation data
        create_work_use_case: Create work use case from DI

    Returns:
        302 redirect to /works/{id}

    Raises:
        HTTPException: 400 on invalid title or category
    """
    try:
        result = await create_work_use_case.execute(
            CreateWorkRequest(**request.model_dump())
        )
    except ValidationError as e:
        logfire.warn("Work creation rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return RedirectResponse(
        url=f"/works/{result.work_id}", status_code=status.HTTP_302_FOUND
    )


@router.get("/{work_id}", response_model=GetWorkResponse)
async def get_work(
    work_id: str,
    request: Request,
    get_work_use_case: FromDishka[GetWorkUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> GetWorkResponse:
    """Show a work with its vote count and voters.

    Raises:
        HTTPException: 404 if the work doesn't exist
    """
    work_id = require_uuid(work_id, "Work")
    user = await resolve_current_user(request, settings, get_current_user_use_case)

    try:
        return await get_work_use_case.execute(
            GetWorkRequest(work_id=work_id, user_id=user.user_id if user else None)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{work_id}/edit", response_model=EditWorkResponse)
async def edit_work(
    work_id: str,
    get_work_use_case: FromDishka[GetWorkUseCase],
) -> EditWorkResponse:
    """Data for the edit form, including the category options.

    Raises:
        HTTPException: 404 if the work doesn't exist
    """
    work_id = require_uuid(work_id, "Work")

    try:
        work = await get_work_use_case.execute(GetWorkRequest(work_id=work_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return EditWorkResponse(
        work_id=work.work_id,
        title=work.title,
        category=work.category,
        creator=work.creator,
        publication_year=work.publication_year,
        description=work.description,
        categories=list(Category),
    )


@router.patch("/{work_id}", status_code=status.HTTP_302_FOUND)
async def update_work(
    work_id: str,
    request: UpdateWorkAPIRequest,
    update_work_use_case: FromDishka[UpdateWorkUseCase],
) -> RedirectResponse:
    """Retitle a work and redirect to its page.

    An invalid title is reported as 404, like an unknown work.

    Raises:
        HTTPException: 404 if the work doesn't exist or the title is invalid
    """
    work_id = require_uuid(work_id, "Work")

    try:
        await update_work_use_case.execute(
            UpdateWorkRequest(work_id=work_id, title=request.title)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        logfire.warn("Work update rejected", work_id=work_id, error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return RedirectResponse(url=f"/works/{work_id}", status_code=status.HTTP_302_FOUND)


@router.delete("/{work_id}", status_code=status.HTTP_302_FOUND)
async def delete_work(
    work_id: str,
    delete_work_use_case: FromDishka[DeleteWorkUseCase],
) -> RedirectResponse:
    """Delete a work and its votes, then redirect to the home page.

    Raises:
        HTTPException: 404 if the work doesn't exist
    """
    work_id = require_uuid(work_id, "Work")

    try:
        await delete_work_use_case.execute(DeleteWorkRequest(work_id=work_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
