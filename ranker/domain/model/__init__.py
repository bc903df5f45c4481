"""Domain model entities for Media Ranker."""

from ranker.domain.model.user import User
from ranker.domain.model.vote import Vote
from ranker.domain.model.work import Work

__all__ = [
    "User",
    "Vote",
    "Work",
]
