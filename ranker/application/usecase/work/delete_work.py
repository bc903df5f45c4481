"""Delete work use case."""

from uuid import UUID

from pydantic import BaseModel

from ranker.domain.service import WorkService
from ranker.domain.value import WorkId


class DeleteWorkRequest(BaseModel):
    """Delete work request."""

    work_id: str  # UUID string


class DeleteWorkResponse(BaseModel):
    """Delete work response."""

    work_id: str
    deleted: bool


class DeleteWorkUseCase:
    """Use case for removing a work and its votes."""

    def __init__(self, work_service: WorkService) -> None:
        """Initialize delete work use case.

        Args:
            work_service: Work domain service
        """
        self.work_service = work_service

    async def execute(self, request: DeleteWorkRequest) -> DeleteWorkResponse:
        """Execute delete work flow.

        Raises:
            NotFoundError: If work not found
        """
        await self.work_service.delete_work(WorkId(UUID(request.work_id)))
        return DeleteWorkResponse(work_id=request.work_id, deleted=True)
