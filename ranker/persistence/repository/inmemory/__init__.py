"""In-memory repository implementations for testing."""

from .store import InMemoryStore
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository
from .work import InMemoryWorkRepository

__all__ = [
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
    "InMemoryWorkRepository",
]
