"""PostgreSQL repository implementations."""

from ranker.persistence.repository.user import PostgresUserRepository
from ranker.persistence.repository.vote import PostgresVoteRepository
from ranker.persistence.repository.work import PostgresWorkRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresVoteRepository",
    "PostgresWorkRepository",
]
