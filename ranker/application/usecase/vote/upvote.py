"""Upvote use case."""

from enum import Enum
from uuid import UUID

from pydantic import BaseModel

from ranker.domain.error import AlreadyVotedError, UnauthenticatedError
from ranker.domain.service import VoteService, WorkService
from ranker.domain.value import UserId, WorkId


class UpvoteOutcome(str, Enum):
    """What an upvote attempt did."""

    VOTED = "voted"
    ALREADY_VOTED = "already_voted"
    UNAUTHENTICATED = "unauthenticated"


class UpvoteRequest(BaseModel):
    """Upvote request."""

    work_id: str  # UUID string
    user_id: str | None = None  # Current user ID, None if not signed in


class UpvoteResponse(BaseModel):
    """Upvote response."""

    work_id: str
    outcome: UpvoteOutcome
    vote_id: str | None
    vote_count: int | None  # None when nobody is signed in; the work is not looked up


class UpvoteUseCase:
    """Use case for upvoting a work.

    Unauthenticated and repeated upvotes are soft failures: they are
    reported in the outcome and leave the vote count unchanged.
    """

    def __init__(self, vote_service: VoteService, work_service: WorkService) -> None:
        """Initialize upvote use case.

        Args:
            vote_service: Vote domain service
            work_service: Work domain service
        """
        self.vote_service = vote_service
        self.work_service = work_service

    async def execute(self, request: UpvoteRequest) -> UpvoteResponse:
        """Execute upvote flow.

        Args:
            request: Upvote request

        Returns:
            Upvote outcome with the work's current vote count

        Raises:
            NotFoundError: If a signed-in user upvotes an unknown work
        """
        work_id = WorkId(UUID(request.work_id))
        user_id = UserId(UUID(request.user_id)) if request.user_id else None

        vote_id = None
        try:
            vote = await self.vote_service.upvote(user_id, work_id)
            vote_id = str(vote.id)
            outcome = UpvoteOutcome.VOTED
        except UnauthenticatedError:
            return UpvoteResponse(
                work_id=request.work_id,
                outcome=UpvoteOutcome.UNAUTHENTICATED,
                vote_id=None,
                vote_count=None,
            )
        except AlreadyVotedError:
            outcome = UpvoteOutcome.ALREADY_VOTED

        work = await self.work_service.get_work(work_id)

        return UpvoteResponse(
            work_id=str(work.id),
            outcome=outcome,
            vote_id=vote_id,
            vote_count=work.vote_count,
        )
