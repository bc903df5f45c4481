"""Vote entity.

A vote records that a user endorsed a work. Upvotes only, one per
user per work.
"""

from datetime import datetime, timezone

from pydantic import Field

from ranker.domain.model.common import DomainModel
from ranker.domain.value import UserId, VoteId, WorkId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per work (enforced by database unique constraint)
    - Never updated; removed only when its user or work is destroyed
    """

    id: VoteId
    user_id: UserId
    work_id: WorkId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
