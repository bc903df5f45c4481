"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import RedirectResponse

from ranker.application.usecase.auth import GetCurrentUserUseCase
from ranker.application.usecase.user import (
    DeleteUserRequest,
    DeleteUserUseCase,
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    ListUsersResponse,
    ListUsersUseCase,
)
from ranker.config import Settings
from ranker.domain.error import (
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
)
from ranker.interface.api.session import (
    clear_session_cookie,
    require_uuid,
    resolve_current_user,
)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
) -> ListUsersResponse:
    """List users with the number of votes each has cast."""
    return await list_users_use_case.execute()


@router.get("/{user_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Show a user and the works they voted for.

    Raises:
        HTTPException: 404 if the user doesn't exist
    """
    user_id = require_uuid(user_id, "User")

    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{user_id}", status_code=status.HTTP_302_FOUND)
async def delete_user(
    user_id: str,
    request: Request,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Delete your own account and its votes, then sign out.

    Raises:
        HTTPException: 401 without a session, 403 for another user's
            account, 404 if the user doesn't exist
    """
    user_id = require_uuid(user_id, "User")
    current_user = await resolve_current_user(
        request, settings, get_current_user_use_case
    )

    try:
        await delete_user_use_case.execute(
            DeleteUserRequest(
                user_id=user_id,
                current_user_id=current_user.user_id if current_user else None,
            )
        )
    except UnauthenticatedError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))

    redirect_response = RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
    clear_session_cookie(redirect_response, settings)
    return redirect_response
