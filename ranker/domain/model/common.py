"""Shared base for Media Ranker entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity base.

    Entities are replaced, not mutated: callers build a new instance with
    ``model_copy(update=...)`` and hand it to the repository.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        validate_assignment=True,
    )
