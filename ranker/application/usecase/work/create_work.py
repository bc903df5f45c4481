"""Create work use case."""

from datetime import datetime

from pydantic import BaseModel

from ranker.domain.service import WorkService
from ranker.domain.value import Category


class CreateWorkRequest(BaseModel):
    """Create work request.

    Fields are loosely typed on purpose: the domain service owns title and
    category validation.
    """

    title: str | None = None
    category: str | None = None
    creator: str | None = None
    publication_year: int | None = None
    description: str | None = None


class CreateWorkResponse(BaseModel):
    """Create work response."""

    work_id: str
    title: str
    category: Category
    vote_count: int
    created_at: datetime


class CreateWorkUseCase:
    """Use case for adding a work to the catalog."""

    def __init__(self, work_service: WorkService) -> None:
        """Initialize create work use case.

        Args:
            work_service: Work domain service
        """
        self.work_service = work_service

    async def execute(self, request: CreateWorkRequest) -> CreateWorkResponse:
        """Execute create work flow.

        Args:
            request: Create work request

        Returns:
            Created work details

        Raises:
            ValidationError: If title or category is invalid
        """
        work = await self.work_service.create_work(
            title=request.title,
            category=request.category,
            creator=request.creator,
            publication_year=request.publication_year,
            description=request.description,
        )

        return CreateWorkResponse(
            work_id=str(work.id),
            title=work.title,
            category=work.category,
            vote_count=work.vote_count,
            created_at=work.created_at,
        )
