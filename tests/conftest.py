"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import logfire

from tewahed.domain.model import Comment
from tewahed.domain.value import AnswerId, CommentId, QuestionId, UserId

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def pytest_configure(config):
    """Keep logfire local and quiet during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def make_comment(
    comment_id: int,
    parent_id: int | None = None,
    question_id: int | None = 1,
    answer_id: int | None = None,
    author_id: str = "user-a",
    content: str | None = None,
    minutes: int = 0,
    created_at: datetime | None = None,
) -> Comment:
    """Helper to build a stored comment for tests.

    Args:
        comment_id: Comment ID
        parent_id: Parent comment ID (None for top-level)
        question_id: Question root (ignored when answer_id is given)
        answer_id: Answer root
        author_id: Author user ID
        content: Comment text (defaults to "comment <id>")
        minutes: Offset from BASE_TIME for created_at
        created_at: Explicit creation time (overrides minutes)

    Returns:
        Comment domain model
    """
    timestamp = created_at or BASE_TIME + timedelta(minutes=minutes)
    return Comment(
        id=CommentId(comment_id),
        content=content or f"comment {comment_id}",
        author_id=UserId(author_id),
        question_id=QuestionId(question_id) if answer_id is None else None,
        answer_id=AnswerId(answer_id) if answer_id is not None else None,
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        created_at=timestamp,
        updated_at=timestamp,
    )
