"""Get comment thread use case."""

from datetime import datetime

from pydantic import BaseModel

from tewahed.domain.model import Author, CommentView, Viewer
from tewahed.domain.service import ThreadService, count_comments
from tewahed.domain.value import DiscussionRoot


class AuthorItem(BaseModel):
    """Comment author in response."""

    id: str
    name: str
    image: str | None
    is_admin: bool

    @classmethod
    def from_author(cls, author: Author) -> "AuthorItem":
        return cls(
            id=author.id,
            name=author.name,
            image=author.image,
            is_admin=author.is_admin,
        )


class CommentItem(BaseModel):
    """Comment item in response, with its replies nested."""

    comment_id: int
    content: str
    author_id: str
    author: AuthorItem
    question_id: int | None
    answer_id: int | None
    parent_id: int | None
    created_at: datetime
    updated_at: datetime
    level: int
    like_count: int
    is_liked: bool
    replies: list["CommentItem"]

    @classmethod
    def from_view(cls, view: CommentView) -> "CommentItem":
        return cls(
            comment_id=view.id,
            content=view.content,
            author_id=view.author_id,
            author=AuthorItem.from_author(
                view.author or Author.from_profile(view.author_id)
            ),
            question_id=view.question_id,
            answer_id=view.answer_id,
            parent_id=view.parent_id,
            created_at=view.created_at,
            updated_at=view.updated_at,
            level=view.level,
            like_count=view.like_count,
            is_liked=view.is_liked_by_viewer,
            replies=[cls.from_view(reply) for reply in view.replies],
        )


class GetThreadRequest(BaseModel):
    """Get thread request."""

    question_id: int | None = None
    answer_id: int | None = None
    viewer: Viewer | None = None  # None for anonymous readers


class GetThreadResponse(BaseModel):
    """Get thread response."""

    question_id: int | None
    answer_id: int | None
    comments: list[CommentItem]
    total: int


class GetThreadUseCase:
    """Use case for reading the comment thread of a question or answer."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        If a viewer is given, each comment says whether they liked it.

        Args:
            request: Root reference and optional viewer

        Returns:
            Nested thread with like data

        Raises:
            ValidationError: If not exactly one of question_id/answer_id is set
        """
        root = DiscussionRoot.from_ids(request.question_id, request.answer_id)
        tree = await self.thread_service.get_thread(root, request.viewer)

        return GetThreadResponse(
            question_id=root.question_id,
            answer_id=root.answer_id,
            comments=[CommentItem.from_view(view) for view in tree],
            total=count_comments(tree),
        )
