"""User use cases."""

from .delete_user import DeleteUserRequest, DeleteUserResponse, DeleteUserUseCase
from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from .list_users import ListUsersResponse, ListUsersUseCase, UserListItem

__all__ = [
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UserListItem",
]
