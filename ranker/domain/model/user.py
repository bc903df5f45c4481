"""User aggregate root.

Users sign in either by username or through a federated identity
provider (GitHub), and cast votes on works.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from ranker.domain.model.common import DomainModel
from ranker.domain.value import AuthProvider, UserId, Username


class User(DomainModel):
    """User aggregate root.

    Business rules:
    - username is globally unique (enforced by database unique constraint)
    - provider/uid are only set for federated sign-ins
    """

    id: UserId
    username: Username
    provider: Optional[AuthProvider] = None
    uid: Optional[str] = None  # Provider-scoped external identifier
    name: Optional[str] = None  # Display name
    session_version: int = 0  # Bumped on logout; older session tokens stop resolving
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
