"""Like comment use case."""

from tewahed.domain.service import ThreadService
from tewahed.domain.value import CommentId

from .get_like_status import LikeRequest, LikeStatusResponse


class LikeCommentUseCase:
    """Use case for liking a comment."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize like comment use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: LikeRequest) -> LikeStatusResponse:
        """Execute like flow.

        Liking a comment twice succeeds without adding a second like.

        Args:
            request: Comment and viewer

        Returns:
            Like state after the operation

        Raises:
            UnauthenticatedError: If there is no viewer
            NotFoundError: If the comment does not exist
        """
        summary = await self.thread_service.like_comment(
            CommentId(request.comment_id), request.viewer
        )
        return LikeStatusResponse.from_summary(request.comment_id, summary)
