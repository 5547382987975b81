"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from tewahed.domain.model.comment import Comment, NewComment
from tewahed.domain.value import CommentId, DiscussionRoot


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_root(self, root: DiscussionRoot) -> List[Comment]:
        """List every comment attached to a question or answer.

        Returned in a single read. Order is unspecified; callers that
        need thread order build it themselves.

        Args:
            root: The discussion root

        Returns:
            All comments for the root, at any level
        """
        pass

    @abstractmethod
    async def create(self, comment: NewComment) -> Comment:
        """Store a new comment.

        Args:
            comment: Comment data without id or timestamps

        Returns:
            The stored comment with id and timestamps assigned

        Raises:
            IntegrityError: If the parent comment or the root no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and all of its replies.

        The cascade must happen atomically with the delete itself.

        Args:
            comment_id: The comment ID to delete
        """
        pass
