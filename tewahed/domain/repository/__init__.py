"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from tewahed.domain.repository.comment import CommentRepository
from tewahed.domain.repository.like import LikeRepository
from tewahed.domain.repository.root import DiscussionRootRepository
from tewahed.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "DiscussionRootRepository",
    "LikeRepository",
    "UserRepository",
]
