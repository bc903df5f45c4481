"""Authentication routes."""

import logging
import secrets
from urllib.parse import urlencode

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from ranker.adapter.error import ProviderError
from ranker.application.usecase.auth import (
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    LogoutRequest,
    LogoutUseCase,
    UsernameLoginRequest,
    UsernameLoginUseCase,
)
from ranker.config import Settings
from ranker.domain.error import NotFoundError, ValidationError
from ranker.domain.service import AuthService
from ranker.domain.value import AuthProvider
from ranker.interface.api.session import (
    clear_session_cookie,
    resolve_current_user,
    set_session_cookie,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"], route_class=DishkaRoute)


class UsernameLoginAPIRequest(BaseModel):
    """Login form data."""

    username: str | None = None


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


def _error_redirect(error: str, message: str | None = None) -> RedirectResponse:
    params = {"error": error}
    if message:
        params["message"] = message
    return RedirectResponse(
        url=f"/?{urlencode(params)}", status_code=status.HTTP_302_FOUND
    )


@router.post("/login", status_code=status.HTTP_302_FOUND)
async def login(
    request: UsernameLoginAPIRequest,
    username_login_use_case: FromDishka[UsernameLoginUseCase],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Sign in by username, registering the user if they are new.

    Args:
        request: Login form data
        username_login_use_case: Username login use case from DI
        settings: Application settings from DI

    Returns:
        302 redirect to / with the session cookie set

    Raises:
        HTTPException: 400 for a blank username
    """
    try:
        result = await username_login_use_case.execute(
            UsernameLoginRequest(username=request.username)
        )
    except ValidationError as e:
        logger.info(f"Username login rejected: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    logger.info(f"Login successful for user: {result.username}")

    # Cookies must be set on the response object that is returned
    redirect_response = RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
    set_session_cookie(redirect_response, result.token, settings)
    return redirect_response


@router.post("/logout", status_code=status.HTTP_302_FOUND)
async def logout(
    request: Request,
    logout_use_case: FromDishka[LogoutUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Sign out: end the user's sessions and clear the session cookie.

    Tokens issued before logout stop resolving, including copies taken
    from this browser.

    Returns:
        302 redirect to /
    """
    user = await resolve_current_user(request, settings, get_current_user_use_case)
    try:
        await logout_use_case.execute(
            LogoutRequest(user_id=user.user_id if user else None)
        )
    except NotFoundError:
        # Deleted while the request was in flight; nothing left to end
        logger.info("Logout for a user that no longer exists")

    redirect_response = RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
    clear_session_cookie(redirect_response, settings)
    return redirect_response


@router.get("/auth/github", status_code=status.HTTP_302_FOUND)
async def github_login(auth_service: FromDishka[AuthService]) -> RedirectResponse:
    """Start the GitHub OAuth flow.

    Returns:
        302 redirect to GitHub's authorization page
    """
    # Generate state for CSRF protection
    state = secrets.token_urlsafe(32)

    logger.info("Initiating github login")
    auth_url = await auth_service.initiate_login(AuthProvider.GITHUB, state)

    return RedirectResponse(url=auth_url, status_code=status.HTTP_302_FOUND)


@router.get("/auth/github/callback", status_code=status.HTTP_302_FOUND)
async def github_callback(
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
) -> RedirectResponse:
    """Handle the GitHub OAuth callback and complete login.

    Completes the OAuth flow, finds or registers the user, issues the
    session cookie and redirects home. Any failure redirects home with an
    error query parameter instead.

    Args:
        login_use_case: Login use case from DI
        settings: Application settings from DI
        code: Authorization code from GitHub
        state: State parameter issued by /auth/github
        error: Error code from GitHub (e.g. access_denied)

    Returns:
        HTTP 302 redirect to / with Set-Cookie header

    Example:
        GET /auth/github/callback?code=abc123&state=xyz789
    """
    logger.info(f"OAuth callback received: provider=github, state={state}")

    if error:
        logger.warning(f"GitHub returned an error: {error}")
        return _error_redirect("auth_failed", error)

    if not code or not state:
        return _error_redirect("auth_failed", "missing code or state")

    try:
        login_response = await login_use_case.execute(
            LoginRequest(provider=AuthProvider.GITHUB, code=code, state=state)
        )
    except ProviderError as e:
        logger.error(f"GitHub OAuth error during callback: {e}")
        return _error_redirect("auth_failed", str(e))
    except ValidationError as e:
        logger.error(f"Rejected GitHub identity: {e}")
        return _error_redirect("invalid_identity", str(e))

    logger.info(f"Login successful for user: {login_response.username}")

    redirect_response = RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)
    set_session_cookie(redirect_response, login_response.token, settings)
    return redirect_response


@router.get("/auth/me", response_model=AuthStatusResponse)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without a session: it reports authenticated=false instead
    of raising an error.
    """
    user = await resolve_current_user(request, settings, get_current_user_use_case)
    return AuthStatusResponse(authenticated=user is not None, user=user)
