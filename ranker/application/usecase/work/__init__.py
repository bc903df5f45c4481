"""Work use cases."""

from .create_work import CreateWorkRequest, CreateWorkResponse, CreateWorkUseCase
from .delete_work import DeleteWorkRequest, DeleteWorkResponse, DeleteWorkUseCase
from .get_rankings import GetRankingsRequest, GetRankingsResponse, GetRankingsUseCase
from .get_work import GetWorkRequest, GetWorkResponse, GetWorkUseCase, VoterInfo
from .list_works import (
    ListWorksRequest,
    ListWorksResponse,
    ListWorksUseCase,
    WorkListItem,
)
from .update_work import UpdateWorkRequest, UpdateWorkResponse, UpdateWorkUseCase

__all__ = [
    "CreateWorkRequest",
    "CreateWorkResponse",
    "CreateWorkUseCase",
    "DeleteWorkRequest",
    "DeleteWorkResponse",
    "DeleteWorkUseCase",
    "GetRankingsRequest",
    "GetRankingsResponse",
    "GetRankingsUseCase",
    "GetWorkRequest",
    "GetWorkResponse",
    "GetWorkUseCase",
    "ListWorksRequest",
    "ListWorksResponse",
    "ListWorksUseCase",
    "UpdateWorkRequest",
    "UpdateWorkResponse",
    "UpdateWorkUseCase",
    "VoterInfo",
    "WorkListItem",
]
