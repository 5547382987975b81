"""Thread domain service.

Entry point for everything a reader or author does with a comment thread:
reading it, posting, deleting and liking. Identity checks, the moderation
policy and error translation for the store all happen here; the comment
and like services below it only talk to repositories.
"""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

import logfire
from sqlalchemy.exc import SQLAlchemyError

from tewahed.config import ThreadSettings
from tewahed.domain.error import (
    ForbiddenError,
    NotFoundError,
    StoreError,
    UnauthenticatedError,
)
from tewahed.domain.model import Comment, CommentView, LikeSummary, Viewer
from tewahed.domain.value import CommentId, DiscussionRoot, LikeTargetType
from tewahed.util.clock import utc_now

from .author_service import AuthorService
from .base import Service
from .comment_service import CommentService
from .comment_tree import build_comment_tree, count_comments
from .like_service import LikeService
from .moderation import can_delete


@dataclass
class LikeToggleResult:
    """Like state of a comment after a toggle."""

    liked: bool
    like_count: int


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Re-raise persistence failures as an opaque StoreError."""
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error(
            "Store operation failed",
            operation=operation,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise StoreError(operation) from e


class ThreadService(Service):
    """Domain service orchestrating comment threads."""

    def __init__(
        self,
        comment_service: CommentService,
        like_service: LikeService,
        author_service: AuthorService,
        settings: ThreadSettings,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize thread service.

        Args:
            comment_service: Comment domain service
            like_service: Like domain service
            author_service: Author lookup for thread display
            settings: Thread rules (nesting depth, delete window, length)
            clock: Source of the current time
        """
        self.comment_service = comment_service
        self.like_service = like_service
        self.author_service = author_service
        self.settings = settings
        self.clock = clock

    async def get_thread(
        self, root: DiscussionRoot, viewer: Optional[Viewer] = None
    ) -> list[CommentView]:
        """Get the nested comment thread of a question or answer.

        Steps:
        1. Fetch all comments for the root
        2. Fetch like summaries and authors for those comments in one batch each
        3. Build the reply tree with like and author data merged in

        Args:
            root: Question or answer
            viewer: Requesting identity, None when unauthenticated

        Returns:
            Top-level comments with nested replies (empty when none exist)
        """
        with logfire.span(
            "thread_service.get_thread",
            root=str(root),
            viewer_id=viewer.user_id if viewer else None,
        ):
            with store_errors("load comments"):
                comments = await self.comment_service.get_comments_for_root(root)
                likes = await self.like_service.summarize(
                    LikeTargetType.COMMENT,
                    {comment.id for comment in comments},
                    viewer.user_id if viewer else None,
                )
                authors = await self.author_service.get_authors(
                    {comment.author_id for comment in comments}
                )

            tree = build_comment_tree(
                comments,
                likes,
                max_level=self.settings.max_level,
                authors=authors,
            )
            shown = count_comments(tree)
            if shown != len(comments):
                logfire.warn(
                    "Comments left out of thread",
                    root=str(root),
                    stored=len(comments),
                    shown=shown,
                )
            return tree

    async def create_comment(
        self,
        root: DiscussionRoot,
        content: str,
        author: Optional[Viewer],
        parent_id: Optional[CommentId] = None,
    ) -> Comment:
        """Post a comment or a reply.

        Args:
            root: Question or answer the comment belongs to
            content: Comment text
            author: Posting identity
            parent_id: Comment being replied to, None for top-level

        Returns:
            The stored comment (without like data)

        Raises:
            UnauthenticatedError: If there is no author
            ValidationError: If the content or nesting is invalid
            NotFoundError: If the root or parent does not exist
            StoreError: If the store fails
        """
        if author is None:
            raise UnauthenticatedError("create comments")

        with store_errors("create comment"):
            return await self.comment_service.create_comment(
                root=root,
                author_id=author.user_id,
                content=content,
                parent_id=parent_id,
                max_level=self.settings.max_level,
                max_length=self.settings.max_content_length,
            )

    async def delete_comment(
        self, comment_id: CommentId, viewer: Optional[Viewer]
    ) -> None:
        """Delete a comment and its replies.

        Args:
            comment_id: Comment to delete
            viewer: Requesting identity

        Raises:
            UnauthenticatedError: If there is no viewer
            NotFoundError: If the comment does not exist
            ForbiddenError: If the moderation policy denies the delete
            StoreError: If the store fails
        """
        if viewer is None:
            raise UnauthenticatedError("delete comments")

        with logfire.span(
            "thread_service.delete_comment",
            comment_id=comment_id,
            viewer_id=viewer.user_id,
            is_admin=viewer.is_admin,
        ):
            with store_errors("delete comment"):
                comment = await self.comment_service.get_comment_by_id(comment_id)

                grace_period = timedelta(
                    seconds=self.settings.author_delete_window_seconds
                )
                if not can_delete(comment, viewer, self.clock(), grace_period):
                    logfire.warn(
                        "Comment delete denied",
                        comment_id=comment_id,
                        viewer_id=viewer.user_id,
                        author_id=comment.author_id,
                    )
                    raise ForbiddenError(
                        "You can only delete your own comments within "
                        f"{_describe(grace_period)}, or be an admin"
                    )

                await self.comment_service.delete_comment(comment_id)

    async def toggle_like(
        self, comment_id: CommentId, viewer: Optional[Viewer]
    ) -> LikeToggleResult:
        """Like a comment, or remove the like if it is already there.

        Args:
            comment_id: Comment to toggle
            viewer: Requesting identity

        Returns:
            Whether the comment is liked afterwards and its like count

        Raises:
            UnauthenticatedError: If there is no viewer
            NotFoundError: If the comment does not exist
            StoreError: If the store fails
        """
        if viewer is None:
            raise UnauthenticatedError("like comments")

        with store_errors("toggle like"):
            await self.comment_service.get_comment_by_id(comment_id)
            liked = await self.like_service.toggle(
                viewer.user_id, LikeTargetType.COMMENT, comment_id
            )
            summary = await self._summary(comment_id, viewer)
            return LikeToggleResult(liked=liked, like_count=summary.count)

    async def like_comment(
        self, comment_id: CommentId, viewer: Optional[Viewer]
    ) -> LikeSummary:
        """Like a comment; liking twice is a no-op.

        Raises:
            UnauthenticatedError: If there is no viewer
            NotFoundError: If the comment does not exist
            StoreError: If the store fails
        """
        if viewer is None:
            raise UnauthenticatedError("like comments")

        with store_errors("like comment"):
            await self.comment_service.get_comment_by_id(comment_id)
            await self.like_service.like(
                viewer.user_id, LikeTargetType.COMMENT, comment_id
            )
            return await self._summary(comment_id, viewer)

    async def unlike_comment(
        self, comment_id: CommentId, viewer: Optional[Viewer]
    ) -> LikeSummary:
        """Remove a like from a comment.

        Raises:
            UnauthenticatedError: If there is no viewer
            NotFoundError: If the viewer had not liked the comment
            StoreError: If the store fails
        """
        if viewer is None:
            raise UnauthenticatedError("unlike comments")

        with store_errors("unlike comment"):
            removed = await self.like_service.unlike(
                viewer.user_id, LikeTargetType.COMMENT, comment_id
            )
            if not removed:
                raise NotFoundError("Like", str(comment_id))
            return await self._summary(comment_id, viewer)

    async def get_like_status(
        self, comment_id: CommentId, viewer: Optional[Viewer] = None
    ) -> LikeSummary:
        """Get the like count of a comment and whether the viewer liked it."""
        with store_errors("load likes"):
            return await self._summary(comment_id, viewer)

    async def _summary(
        self, comment_id: CommentId, viewer: Optional[Viewer]
    ) -> LikeSummary:
        summaries = await self.like_service.summarize(
            LikeTargetType.COMMENT,
            {comment_id},
            viewer.user_id if viewer else None,
        )
        return summaries[comment_id]


def _describe(period: timedelta) -> str:
    """Human-readable form of the delete window, e.g. "1 hour"."""
    seconds = int(period.total_seconds())
    if seconds % 3600 == 0:
        hours = seconds // 3600
        return f"{hours} hour" + ("s" if hours != 1 else "")
    minutes = seconds // 60
    return f"{minutes} minute" + ("s" if minutes != 1 else "")
