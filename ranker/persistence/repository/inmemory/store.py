"""Shared backing store for the in-memory repositories."""

from ranker.domain.model import User, Vote, Work
from ranker.domain.value import UserId, WorkId


class InMemoryStore:
    """Rows shared by the in-memory repositories.

    One store stands in for one database: repositories built on the same
    store see each other's writes, which the work repository needs to
    derive vote counts.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.works: dict[WorkId, Work] = {}
        self.votes: list[Vote] = []
