"""Authentication use cases."""

from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .login import LoginRequest, LoginResponse, LoginUseCase
from .logout import LogoutRequest, LogoutUseCase
from .username_login import UsernameLoginRequest, UsernameLoginUseCase

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "LogoutRequest",
    "LogoutUseCase",
    "UsernameLoginRequest",
    "UsernameLoginUseCase",
]
