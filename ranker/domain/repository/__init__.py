"""Repository interfaces for Media Ranker domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from ranker.domain.repository.user import UserRepository
from ranker.domain.repository.vote import DUPLICATE_VOTE_CONSTRAINT, VoteRepository
from ranker.domain.repository.work import WorkRepository

__all__ = [
    "DUPLICATE_VOTE_CONSTRAINT",
    "UserRepository",
    "VoteRepository",
    "WorkRepository",
]
