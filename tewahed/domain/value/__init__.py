"""Domain value objects for the forum."""

from tewahed.domain.value.identifiers import (
    AnswerId,
    CommentId,
    LikeId,
    QuestionId,
    UserId,
)
from tewahed.domain.value.types import DiscussionRoot, LikeTargetType

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "LikeId",
    # Types
    "DiscussionRoot",
    "LikeTargetType",
]
