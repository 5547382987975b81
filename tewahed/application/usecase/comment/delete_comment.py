"""Delete comment use case."""

from pydantic import BaseModel

from tewahed.domain.model import Viewer
from tewahed.domain.service import ThreadService
from tewahed.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    viewer: Viewer | None = None


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool
    comment_id: int


class DeleteCommentUseCase:
    """Use case for deleting a comment together with its replies."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            UnauthenticatedError: If there is no viewer
            NotFoundError: If the comment does not exist
            ForbiddenError: If the viewer may not delete the comment
        """
        await self.thread_service.delete_comment(
            CommentId(request.comment_id), request.viewer
        )
        return DeleteCommentResponse(success=True, comment_id=request.comment_id)
