"""Domain services."""

from .author_service import AuthorService
from .base import Service
from .comment_service import CommentService
from .comment_tree import MAX_LEVEL, build_comment_tree, count_comments
from .jwt_service import JWTService
from .like_service import LikeService, aggregate_likes
from .moderation import AUTHOR_DELETE_WINDOW, can_delete, can_nest
from .thread_service import LikeToggleResult, ThreadService, store_errors

__all__ = [
    "AUTHOR_DELETE_WINDOW",
    "AuthorService",
    "CommentService",
    "JWTService",
    "LikeService",
    "LikeToggleResult",
    "MAX_LEVEL",
    "Service",
    "ThreadService",
    "aggregate_likes",
    "build_comment_tree",
    "can_delete",
    "can_nest",
    "count_comments",
    "store_errors",
]
