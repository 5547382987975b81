"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
rather than through SQLAlchemy's imperative mapping.
"""

from typing import Any, Dict

from tewahed.domain.model import Comment, Like, NewComment, UserProfile
from tewahed.domain.value import (
    AnswerId,
    CommentId,
    LikeId,
    LikeTargetType,
    QuestionId,
    UserId,
)


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        content=row["content"],
        author_id=UserId(row["author_id"]),
        question_id=QuestionId(row["question_id"])
        if row.get("question_id") is not None
        else None,
        answer_id=AnswerId(row["answer_id"])
        if row.get("answer_id") is not None
        else None,
        parent_id=CommentId(row["parent_id"])
        if row.get("parent_id") is not None
        else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def new_comment_to_dict(comment: NewComment) -> Dict[str, Any]:
    """Convert a NewComment to a dict for insertion.

    ``id`` and timestamps are left to the database.

    Args:
        comment: Comment data

    Returns:
        Dict suitable for database insertion
    """
    return {
        "content": comment.content,
        "author_id": comment.author_id,
        "question_id": comment.root.question_id,
        "answer_id": comment.root.answer_id,
        "parent_id": comment.parent_id,
    }


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model.

    Args:
        row: Database row as dict

    Returns:
        Like domain model
    """
    return Like(
        id=LikeId(row["id"]),
        user_id=UserId(row["user_id"]),
        target_type=LikeTargetType(row["target_type"]),
        target_id=row["target_id"],
        created_at=row["created_at"],
    )


def row_to_user_profile(row: Dict[str, Any]) -> UserProfile:
    """Convert database row to UserProfile domain model.

    Args:
        row: Database row as dict

    Returns:
        UserProfile domain model
    """
    return UserProfile(
        id=UserId(row["id"]),
        name=row.get("name"),
        display_name=row.get("display_name"),
        image=row.get("image"),
        is_admin=bool(row.get("is_admin")),
    )
