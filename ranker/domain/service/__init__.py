"""Domain services."""

from .auth_service import AuthService, OAuthClient
from .base import Service
from .identity_service import IdentityService
from .jwt_service import JWTService
from .user_service import UserService
from .vote_service import VoteService
from .work_service import WorkService

__all__ = [
    "AuthService",
    "IdentityService",
    "JWTService",
    "OAuthClient",
    "Service",
    "UserService",
    "VoteService",
    "WorkService",
]
