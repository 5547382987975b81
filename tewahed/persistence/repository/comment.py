"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from tewahed.domain.model import Comment, NewComment
from tewahed.domain.repository import CommentRepository
from tewahed.domain.value import CommentId, DiscussionRoot
from tewahed.persistence.mappers import new_comment_to_dict, row_to_comment
from tewahed.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def list_by_root(self, root: DiscussionRoot) -> List[Comment]:
        """List all comments of a question or answer."""
        if root.question_id is not None:
            condition = comments_table.c.question_id == root.question_id
        else:
            condition = comments_table.c.answer_id == root.answer_id

        stmt = select(comments_table).where(condition)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def create(self, comment: NewComment) -> Comment:
        """Insert a comment; the database assigns id and timestamps.

        Runs in a savepoint so a foreign key violation from a parent deleted
        in the meantime leaves the surrounding request transaction usable.
        """
        stmt = (
            insert(comments_table)
            .values(**new_comment_to_dict(comment))
            .returning(comments_table)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict())  # type: ignore[union-attr]

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment; replies go with it through ON DELETE CASCADE."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()
