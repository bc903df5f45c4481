"""Domain value objects for Media Ranker."""

from ranker.domain.value.identifiers import UserId, VoteId, WorkId
from ranker.domain.value.types import (
    AuthProvider,
    Category,
    FederatedIdentity,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "WorkId",
    "VoteId",
    # Types
    "AuthProvider",
    "Category",
    "FederatedIdentity",
    "Username",
]
