"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .root import InMemoryDiscussionRootRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDiscussionRootRepository",
    "InMemoryLikeRepository",
    "InMemoryUserRepository",
]
