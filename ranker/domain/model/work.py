"""Work aggregate root.

A work is a catalogued album, book or movie that users can upvote.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator

from ranker.domain.model.common import DomainModel
from ranker.domain.value import Category, WorkId


class Work(DomainModel):
    """Work aggregate root.

    vote_count is derived from the votes table by the repository and is
    never written back.
    """

    id: WorkId
    title: str = Field(min_length=1, max_length=255)
    category: Category
    creator: Optional[str] = Field(default=None, max_length=255)
    publication_year: Optional[int] = None
    description: Optional[str] = Field(default=None, max_length=10000)
    vote_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("title")
    @classmethod
    def validate_title_present(cls, v: str) -> str:
        """Reject whitespace-only titles."""
        if not v.strip():
            raise ValueError("Title can't be blank")
        return v
