"""Comment entity and its thread view.

Comments attach to either a question or an answer and may reply to
another comment on the same root. Nesting is capped at three levels
(0, 1 and 2); the cap is enforced when replies are created and again
when threads are assembled for display.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from tewahed.domain.model.author import Author
from tewahed.domain.model.common import DomainModel
from tewahed.domain.value import (
    AnswerId,
    CommentId,
    DiscussionRoot,
    QuestionId,
    UserId,
)
from tewahed.util.clock import utc_now


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through ``parent_id`` only; a comment's level is
    derived by walking parents rather than stored.
    """

    id: CommentId
    content: str = Field(min_length=1, max_length=2000)
    author_id: UserId
    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_single_root(self) -> "Comment":
        """A comment belongs to a question or an answer, never both or neither."""
        if (self.question_id is None) == (self.answer_id is None):
            raise ValueError("Comment must belong to exactly one question or answer")
        return self

    @property
    def root(self) -> DiscussionRoot:
        """Discussion root this comment is attached to."""
        return DiscussionRoot(question_id=self.question_id, answer_id=self.answer_id)


class NewComment(DomainModel):
    """Data for a comment that has not been stored yet.

    The store assigns ``id`` and the timestamps.
    """

    content: str = Field(min_length=1, max_length=2000)
    author_id: UserId
    root: DiscussionRoot
    parent_id: Optional[CommentId] = None


class CommentView(Comment):
    """A comment enriched for display.

    Built per request by the tree builder and discarded afterwards.
    """

    author: Optional[Author] = None
    like_count: int = Field(default=0, ge=0)
    is_liked_by_viewer: bool = False
    level: int = Field(default=0, ge=0)
    replies: list["CommentView"] = Field(default_factory=list)
