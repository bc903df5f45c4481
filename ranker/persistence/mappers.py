"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from ranker.domain.model import User, Vote, Work
from ranker.domain.value import (
    AuthProvider,
    Category,
    UserId,
    Username,
    VoteId,
    WorkId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        provider=AuthProvider(row["provider"]) if row.get("provider") else None,
        uid=row.get("uid"),
        name=row.get("name"),
        session_version=row.get("session_version") or 0,
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "provider": user.provider.value if user.provider else None,
        "uid": user.uid,
        "name": user.name,
        "session_version": user.session_version,
        "created_at": user.created_at,
    }


def row_to_work(row: Dict[str, Any]) -> Work:
    """Convert database row to Work domain model.

    The row may carry a computed vote_count column; it defaults to 0.

    Args:
        row: Database row as dict

    Returns:
        Work domain model
    """
    return Work(
        id=WorkId(_uuid(row["id"])),
        title=row["title"],
        category=Category(row["category"]),
        creator=row.get("creator"),
        publication_year=row.get("publication_year"),
        description=row.get("description"),
        vote_count=row.get("vote_count") or 0,
        created_at=row["created_at"],
    )


def work_to_dict(work: Work) -> Dict[str, Any]:
    """Convert Work domain model to database dict.

    vote_count is derived and never written.

    Args:
        work: Work domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": work.id,
        "title": work.title,
        "category": work.category.value,
        "creator": work.creator,
        "publication_year": work.publication_year,
        "description": work.description,
        "created_at": work.created_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        work_id=WorkId(_uuid(row["work_id"])),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()
