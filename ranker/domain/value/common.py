"""Value object bases."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Immutable, compared by its fields (e.g. a federated identity assertion)."""

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive (e.g. a username).

    The wrapped value lives in ``.root`` and ``model_dump()`` returns it bare.
    """

    model_config = ConfigDict(
        frozen=True,
    )

    def __str__(self) -> str:
        return str(self.root)
