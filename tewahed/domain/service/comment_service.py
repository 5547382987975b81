"""Comment domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from tewahed.domain.error import NotFoundError, ValidationError
from tewahed.domain.model import Comment, NewComment
from tewahed.domain.repository import CommentRepository, DiscussionRootRepository
from tewahed.domain.value import CommentId, DiscussionRoot, UserId

from .base import Service
from .comment_tree import MAX_LEVEL
from .moderation import can_nest


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        root_repository: DiscussionRootRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            root_repository: Question/answer lookup
        """
        self.comment_repository = comment_repository
        self.root_repository = root_repository

    async def create_comment(
        self,
        root: DiscussionRoot,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
        max_level: int = MAX_LEVEL,
        max_length: int = 2000,
    ) -> Comment:
        """Create a comment on a question or answer, or a reply to a comment.

        Args:
            root: Question or answer the comment belongs to
            author_id: Author user ID
            content: Comment text (surrounding whitespace is stripped)
            parent_id: Parent comment ID for replies (None for top-level)
            max_level: Deepest level a comment may occupy
            max_length: Maximum content length after stripping

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty or too long, the parent is on
                another root, or the parent is already at ``max_level``
            NotFoundError: If the root or the parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            root=str(root),
            author_id=author_id,
            parent_id=parent_id,
        ):
            content = content.strip()
            if not content:
                raise ValidationError("Comment content must not be empty")
            if len(content) > max_length:
                raise ValidationError(
                    f"Comment content must be at most {max_length} characters"
                )

            if not await self.root_repository.exists(root):
                logfire.warn("Comment on non-existent root", root=str(root))
                raise NotFoundError(root.kind.value.capitalize(), str(root.target_id))

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=parent_id,
                        root=str(root),
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.root != root:
                    logfire.warn(
                        "Parent comment belongs to a different root",
                        parent_id=parent_id,
                        parent_root=str(parent.root),
                        target_root=str(root),
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this discussion"
                    )

                ancestors = await self.get_ancestors(parent, limit=max_level + 1)
                if not can_nest(parent, ancestors, max_level=max_level):
                    logfire.info(
                        "Reply rejected at maximum nesting level",
                        parent_id=parent_id,
                        parent_level=len(ancestors),
                    )
                    raise ValidationError(
                        f"Maximum nesting level reached ({max_level + 1} levels)"
                    )

            try:
                saved = await self.comment_repository.create(
                    NewComment(
                        content=content,
                        author_id=author_id,
                        root=root,
                        parent_id=parent_id,
                    )
                )
            except IntegrityError:
                # The parent or root may have been deleted since the checks above
                await self._raise_if_gone(root, parent_id)
                raise

            logfire.info(
                "Comment created",
                comment_id=saved.id,
                root=str(root),
                parent_id=parent_id,
            )
            return saved

    async def _raise_if_gone(
        self, root: DiscussionRoot, parent_id: CommentId | None
    ) -> None:
        """Raise NotFoundError if the parent comment or the root is missing."""
        if parent_id is not None:
            if await self.comment_repository.find_by_id(parent_id) is None:
                logfire.warn(
                    "Parent comment deleted while replying",
                    parent_id=parent_id,
                    root=str(root),
                )
                raise NotFoundError("Parent comment", str(parent_id))
        if not await self.root_repository.exists(root):
            logfire.warn("Root deleted while commenting", root=str(root))
            raise NotFoundError(root.kind.value.capitalize(), str(root.target_id))

    async def get_ancestors(self, comment: Comment, limit: int) -> list[Comment]:
        """Walk up from a comment's parent, nearest ancestor first.

        Stops at a top-level comment, at a missing ancestor, or after
        ``limit`` hops, whichever comes first.

        Args:
            comment: Comment whose ancestors to fetch
            limit: Maximum number of hops

        Returns:
            Ancestors of the comment, excluding the comment itself
        """
        ancestors: list[Comment] = []
        next_id = comment.parent_id
        while next_id is not None and len(ancestors) < limit:
            ancestor = await self.comment_repository.find_by_id(next_id)
            if ancestor is None:
                break
            ancestors.append(ancestor)
            next_id = ancestor.parent_id
        return ancestors

    async def get_comments_for_root(self, root: DiscussionRoot) -> list[Comment]:
        """Get all comments of a question or answer.

        Args:
            root: The discussion root

        Returns:
            Flat list of comments, any order
        """
        with logfire.span("comment_service.get_comments_for_root", root=str(root)):
            comments = await self.comment_repository.list_by_root(root)
            logfire.info("Comments retrieved", root=str(root), count=len(comments))
            return comments

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            The comment

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=comment_id
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment together with all of its replies.

        Args:
            comment_id: Comment ID
        """
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=comment_id)
