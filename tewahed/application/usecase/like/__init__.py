"""Like use cases."""

from .get_like_status import GetLikeStatusUseCase, LikeRequest, LikeStatusResponse
from .like_comment import LikeCommentUseCase
from .toggle_like import ToggleLikeResponse, ToggleLikeUseCase
from .unlike_comment import UnlikeCommentUseCase

__all__ = [
    "GetLikeStatusUseCase",
    "LikeCommentUseCase",
    "LikeRequest",
    "LikeStatusResponse",
    "ToggleLikeResponse",
    "ToggleLikeUseCase",
    "UnlikeCommentUseCase",
]
