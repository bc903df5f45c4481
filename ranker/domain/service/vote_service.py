"""Vote domain service."""

from datetime import datetime, timezone
from typing import NoReturn
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from ranker.domain.error import (
    AlreadyVotedError,
    NotFoundError,
    UnauthenticatedError,
)
from ranker.domain.model import User, Vote
from ranker.domain.repository import DUPLICATE_VOTE_CONSTRAINT, VoteRepository
from ranker.domain.value import UserId, VoteId, WorkId

from .base import Service
from .user_service import UserService
from .work_service import WorkService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        work_service: WorkService,
        user_service: UserService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            work_service: Work domain service
            user_service: User domain service
        """
        self.vote_repository = vote_repository
        self.work_service = work_service
        self.user_service = user_service

    async def upvote(self, user_id: UserId | None, work_id: WorkId) -> Vote:
        """Upvote a work on behalf of the current user.

        There is no check-then-insert: the unique (user, work) constraint
        decides, so concurrent duplicates lose with AlreadyVotedError.

        Args:
            user_id: Current session user, or None if nobody is signed in
            work_id: Work ID

        Returns:
            Created vote

        Raises:
            UnauthenticatedError: If no user is signed in, or the voter is gone
            NotFoundError: If the work does not exist
            AlreadyVotedError: If the user already voted for this work
        """
        with logfire.span(
            "upvote_work",
            work_id=str(work_id),
            user_id=str(user_id) if user_id else None,
        ):
            if user_id is None:
                logfire.info("Anonymous upvote ignored", work_id=str(work_id))
                raise UnauthenticatedError("vote")

            # Raises NotFoundError
            await self.work_service.get_work(work_id)

            vote = Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                work_id=work_id,
                created_at=datetime.now(timezone.utc),
            )

            try:
                saved_vote = await self.vote_repository.save(vote)
            except IntegrityError as e:
                self._raise_for_rejected_vote(e, user_id, work_id)

            logfire.info(
                "Work upvoted",
                vote_id=str(saved_vote.id),
                user_id=str(user_id),
                work_id=str(work_id),
            )
            return saved_vote

    async def has_voted(self, user_id: UserId, work_id: WorkId) -> bool:
        """Check whether a user has voted for a work."""
        vote = await self.vote_repository.find_by_user_and_work(user_id, work_id)
        return vote is not None

    async def get_voters(self, work_id: WorkId) -> list[tuple[Vote, User]]:
        """List the votes on a work together with their voters.

        Args:
            work_id: Work ID

        Returns:
            (vote, user) pairs, most recent vote first
        """
        with logfire.span("vote_service.get_voters", work_id=str(work_id)):
            votes = await self.vote_repository.find_by_work(work_id)
            if not votes:
                return []

            # Batch query to fetch all voters at once (avoid N+1)
            users = await self.user_service.get_users_by_ids(
                [vote.user_id for vote in votes]
            )
            users_by_id = {user.id: user for user in users}

            return [
                (vote, users_by_id[vote.user_id])
                for vote in votes
                if vote.user_id in users_by_id
            ]

    @staticmethod
    def _raise_for_rejected_vote(
        error: IntegrityError, user_id: UserId, work_id: WorkId
    ) -> NoReturn:
        """Translate a rejected vote insert into the domain error it means.

        Only the unique (user, work) constraint means a repeat vote. A
        foreign key violation means the work or the voter was deleted
        after the checks above.
        """
        detail = str(error.orig)

        if DUPLICATE_VOTE_CONSTRAINT in detail:
            logfire.warn(
                "Duplicate vote attempt", user_id=str(user_id), work_id=str(work_id)
            )
            raise AlreadyVotedError(str(user_id), str(work_id)) from error

        logfire.warn(
            "Vote insert rejected",
            user_id=str(user_id),
            work_id=str(work_id),
            detail=detail,
        )
        if "work_id" in detail:
            raise NotFoundError("Work", str(work_id)) from error
        raise UnauthenticatedError("vote") from error
