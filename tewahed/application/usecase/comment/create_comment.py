"""Create comment use case."""

from datetime import datetime

from pydantic import BaseModel

from tewahed.domain.model import Viewer
from tewahed.domain.service import ThreadService
from tewahed.domain.value import CommentId, DiscussionRoot


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    content: str
    question_id: int | None = None
    answer_id: int | None = None
    parent_id: int | None = None  # Parent comment ID for replies
    author: Viewer | None = None  # Authenticated user


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: int
    content: str
    author_id: str
    question_id: int | None
    answer_id: int | None
    parent_id: int | None
    created_at: datetime


class CreateCommentUseCase:
    """Use case for commenting on a question or answer, or replying to a comment."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize create comment use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Resolve the question or answer being discussed
        2. Create the comment via the thread service (validates content,
           root existence, parent and nesting depth)

        Args:
            request: Create comment request

        Returns:
            Create comment response with comment details

        Raises:
            UnauthenticatedError: If there is no author
            ValidationError: If the input or nesting is invalid
            NotFoundError: If the root or parent comment does not exist
        """
        root = DiscussionRoot.from_ids(request.question_id, request.answer_id)

        comment = await self.thread_service.create_comment(
            root=root,
            content=request.content,
            author=request.author,
            parent_id=CommentId(request.parent_id)
            if request.parent_id is not None
            else None,
        )

        return CreateCommentResponse(
            comment_id=comment.id,
            content=comment.content,
            author_id=comment.author_id,
            question_id=comment.question_id,
            answer_id=comment.answer_id,
            parent_id=comment.parent_id,
            created_at=comment.created_at,
        )
