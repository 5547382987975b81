"""Unlike comment use case."""

from tewahed.domain.service import ThreadService
from tewahed.domain.value import CommentId

from .get_like_status import LikeRequest, LikeStatusResponse


class UnlikeCommentUseCase:
    """Use case for removing a like from a comment."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize unlike comment use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: LikeRequest) -> LikeStatusResponse:
        """Execute unlike flow.

        Args:
            request: Comment and viewer

        Returns:
            Like state after the operation

        Raises:
            UnauthenticatedError: If there is no viewer
            NotFoundError: If the viewer had not liked the comment
        """
        summary = await self.thread_service.unlike_comment(
            CommentId(request.comment_id), request.viewer
        )
        return LikeStatusResponse.from_summary(request.comment_id, summary)
