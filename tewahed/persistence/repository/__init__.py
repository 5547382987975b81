"""PostgreSQL repository implementations."""

from tewahed.persistence.repository.comment import PostgresCommentRepository
from tewahed.persistence.repository.like import PostgresLikeRepository
from tewahed.persistence.repository.root import PostgresDiscussionRootRepository
from tewahed.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresDiscussionRootRepository",
    "PostgresLikeRepository",
    "PostgresUserRepository",
]
