"""Domain value objects for Media Ranker.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from ranker.domain.error import ValidationError
from ranker.domain.value.common import RootValueObject, ValueObject


class Category(str, Enum):
    """Category of a catalogued work."""

    ALBUM = "album"
    BOOK = "book"
    MOVIE = "movie"

    @classmethod
    def parse(cls, value: object) -> "Category":
        """Parse a raw category string.

        Matching is exact and case-sensitive: no trimming, no prefix match.

        Raises:
            ValidationError: If value is not one of the known categories
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for category in cls:
                if category.value == value:
                    return category
        raise ValidationError(
            f"Invalid category {value!r}; expected one of "
            + ", ".join(c.value for c in cls)
        )


class AuthProvider(str, Enum):
    """Supported federated identity providers."""

    GITHUB = "github"


class Username(RootValueObject[str]):
    """Unique, human-readable user name.

    Must not be blank and at most 255 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is present and within length limits."""
        if not v.strip():
            raise ValueError("Username can't be blank")
        if len(v) > 255:
            raise ValueError("Username must be at most 255 characters")
        return v


class FederatedIdentity(ValueObject):
    """Normalized identity assertion returned by an OAuth provider."""

    provider: AuthProvider
    uid: str  # Permanent provider-scoped user id
    nickname: str  # Provider login, becomes the username
    display_name: str | None = None

    @field_validator("uid", "nickname")
    @classmethod
    def validate_required(cls, v: str) -> str:
        """Reject blank identity fields."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v
