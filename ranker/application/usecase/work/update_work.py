"""Update work use case."""

from uuid import UUID

from pydantic import BaseModel

from ranker.domain.service import WorkService
from ranker.domain.value import WorkId


class UpdateWorkRequest(BaseModel):
    """Update work request. Only the title can change."""

    work_id: str  # UUID string
    title: str | None = None


class UpdateWorkResponse(BaseModel):
    """Update work response."""

    work_id: str
    title: str


class UpdateWorkUseCase:
    """Use case for retitling a work."""

    def __init__(self, work_service: WorkService) -> None:
        """Initialize update work use case.

        Args:
            work_service: Work domain service
        """
        self.work_service = work_service

    async def execute(self, request: UpdateWorkRequest) -> UpdateWorkResponse:
        """Execute update work flow.

        Args:
            request: Update work request

        Returns:
            Updated work details

        Raises:
            NotFoundError: If work not found
            ValidationError: If the new title is blank
        """
        work = await self.work_service.update_title(
            WorkId(UUID(request.work_id)), request.title
        )
        return UpdateWorkResponse(work_id=str(work.id), title=work.title)
