"""Session cookie helpers shared by the routers.

The current user is resolved only from the session cookie and handed to
use cases explicitly.
"""

from uuid import UUID

from fastapi import HTTPException, Request, Response, status

from ranker.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from ranker.config import Settings
from ranker.domain.error import NotFoundError
from ranker.util.jwt import JWTError


def session_token(request: Request, settings: Settings) -> str | None:
    """Read the JWT from the session cookie."""
    return request.cookies.get(settings.auth.cookie_name)


async def resolve_current_user(
    request: Request,
    settings: Settings,
    get_current_user_use_case: GetCurrentUserUseCase,
) -> GetCurrentUserResponse | None:
    """Resolve the signed-in user, or None.

    A missing, invalid or expired token, and a token whose user has since
    been deleted, all count as unauthenticated.
    """
    token = session_token(request, settings)
    if not token:
        return None

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except JWTError:
        return None
    except NotFoundError:
        # Orphaned token
        return None


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session cookie to a response."""
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    """Remove the session cookie (same path as when it was set)."""
    response.delete_cookie(
        key=settings.auth.cookie_name,
        path="/",
        secure=settings.secure_cookies,
        httponly=True,
        samesite="lax",
    )


def require_uuid(raw_id: str, resource: str) -> str:
    """Normalize a path id, treating a malformed one as unknown.

    Raises:
        HTTPException: 404 if raw_id is not a UUID
    """
    try:
        return str(UUID(raw_id))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource} not found: {raw_id}",
        )
