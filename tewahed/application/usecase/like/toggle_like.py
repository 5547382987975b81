"""Toggle like use case."""

from pydantic import BaseModel

from tewahed.domain.service import ThreadService
from tewahed.domain.value import CommentId

from .get_like_status import LikeRequest


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    comment_id: int
    liked: bool
    like_count: int


class ToggleLikeUseCase:
    """Use case for flipping the viewer's like on a comment."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize toggle like use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: LikeRequest) -> ToggleLikeResponse:
        """Execute toggle flow.

        Args:
            request: Comment and viewer

        Returns:
            Whether the comment is liked afterwards, and its like count

        Raises:
            UnauthenticatedError: If there is no viewer
            NotFoundError: If the comment does not exist
        """
        result = await self.thread_service.toggle_like(
            CommentId(request.comment_id), request.viewer
        )
        return ToggleLikeResponse(
            comment_id=request.comment_id,
            liked=result.liked,
            like_count=result.like_count,
        )
