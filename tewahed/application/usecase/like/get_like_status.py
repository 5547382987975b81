"""Get like status use case."""

from pydantic import BaseModel

from tewahed.domain.model import LikeSummary, Viewer
from tewahed.domain.service import ThreadService
from tewahed.domain.value import CommentId


class LikeRequest(BaseModel):
    """Request addressing a viewer's like on a comment."""

    comment_id: int
    viewer: Viewer | None = None


class LikeStatusResponse(BaseModel):
    """Like state of a comment."""

    comment_id: int
    like_count: int
    is_liked: bool

    @classmethod
    def from_summary(cls, comment_id: int, summary: LikeSummary) -> "LikeStatusResponse":
        return cls(
            comment_id=comment_id,
            like_count=summary.count,
            is_liked=summary.liked_by_viewer,
        )


class GetLikeStatusUseCase:
    """Use case for reading a comment's like count.

    Anonymous readers get the count with ``is_liked`` false.
    """

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get like status use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: LikeRequest) -> LikeStatusResponse:
        summary = await self.thread_service.get_like_status(
            CommentId(request.comment_id), request.viewer
        )
        return LikeStatusResponse.from_summary(request.comment_id, summary)
