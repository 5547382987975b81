"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.exc import IntegrityError

from tewahed.domain.model.comment import Comment, NewComment
from tewahed.domain.repository.comment import CommentRepository
from tewahed.domain.value import CommentId, DiscussionRoot
from tewahed.util.clock import utc_now


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._next_id = 1
        self._clock = clock

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def list_by_root(self, root: DiscussionRoot) -> list[Comment]:
        """List all comments of a question or answer."""
        return [c for c in self._comments.values() if c.root == root]

    async def create(self, comment: NewComment) -> Comment:
        """Store a comment under the next free id.

        Raises:
            IntegrityError: If the parent comment does not exist
        """
        if comment.parent_id is not None and comment.parent_id not in self._comments:
            raise IntegrityError("Parent comment missing", None, Exception())

        now = self._clock()
        saved = Comment(
            id=CommentId(self._next_id),
            content=comment.content,
            author_id=comment.author_id,
            question_id=comment.root.question_id,
            answer_id=comment.root.answer_id,
            parent_id=comment.parent_id,
            created_at=now,
            updated_at=now,
        )
        return await self.save(saved)

    async def save(self, comment: Comment) -> Comment:
        """Store a fully-formed comment as is (used to seed tests)."""
        self._comments[comment.id] = comment
        self._next_id = max(self._next_id, comment.id + 1)
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and its replies."""
        doomed = {comment_id}
        frontier = [comment_id]
        while frontier:
            parent_id = frontier.pop()
            for c in self._comments.values():
                if c.parent_id == parent_id and c.id not in doomed:
                    doomed.add(c.id)
                    frontier.append(c.id)

        for doomed_id in doomed:
            self._comments.pop(doomed_id, None)
