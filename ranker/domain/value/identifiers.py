"""Strongly typed identifiers for Media Ranker domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
WorkId = NewType("WorkId", UUID)
VoteId = NewType("VoteId", UUID)
