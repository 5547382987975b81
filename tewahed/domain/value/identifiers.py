"""Strongly typed identifiers for forum entities.

Questions, answers, comments and likes use store-assigned integer keys.
User ids come from the identity provider and are opaque strings.
"""

from typing import NewType

UserId = NewType("UserId", str)
QuestionId = NewType("QuestionId", int)
AnswerId = NewType("AnswerId", int)
CommentId = NewType("CommentId", int)
LikeId = NewType("LikeId", int)
