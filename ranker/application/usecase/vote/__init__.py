"""Vote use cases."""

from .upvote import UpvoteOutcome, UpvoteRequest, UpvoteResponse, UpvoteUseCase

__all__ = [
    "UpvoteOutcome",
    "UpvoteRequest",
    "UpvoteResponse",
    "UpvoteUseCase",
]
