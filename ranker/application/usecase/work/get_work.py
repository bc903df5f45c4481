"""Get work use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from ranker.domain.service import VoteService, WorkService
from ranker.domain.value import Category, UserId, WorkId


class VoterInfo(BaseModel):
    """A user who voted for the work."""

    user_id: str
    username: str
    voted_at: datetime


class GetWorkRequest(BaseModel):
    """Get work request."""

    work_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetWorkResponse(BaseModel):
    """Get work response."""

    work_id: str
    title: str
    category: Category
    creator: str | None
    publication_year: int | None
    description: str | None
    vote_count: int
    created_at: datetime
    voters: list[VoterInfo]
    has_voted: bool


class GetWorkUseCase:
    """Use case for showing a work with its voters."""

    def __init__(self, work_service: WorkService, vote_service: VoteService) -> None:
        """Initialize get work use case.

        Args:
            work_service: Work domain service
            vote_service: Vote domain service
        """
        self.work_service = work_service
        self.vote_service = vote_service

    async def execute(self, request: GetWorkRequest) -> GetWorkResponse:
        """Execute get work flow.

        Args:
            request: Get work request with work ID and optional user ID

        Returns:
            Work details with voters

        Raises:
            NotFoundError: If work not found
        """
        work = await self.work_service.get_work(WorkId(UUID(request.work_id)))
        voters = await self.vote_service.get_voters(work.id)

        has_voted = False
        if request.user_id:
            has_voted = await self.vote_service.has_voted(
                UserId(UUID(request.user_id)), work.id
            )

        return GetWorkResponse(
            work_id=str(work.id),
            title=work.title,
            category=work.category,
            creator=work.creator,
            publication_year=work.publication_year,
            description=work.description,
            vote_count=work.vote_count,
            created_at=work.created_at,
            voters=[
                VoterInfo(
                    user_id=str(user.id),
                    username=user.username.root,
                    voted_at=vote.created_at,
                )
                for vote, user in voters
            ],
            has_voted=has_voted,
        )
