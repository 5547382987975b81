"""PostgreSQL implementation of DiscussionRoot repository."""

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from tewahed.domain.repository import DiscussionRootRepository
from tewahed.domain.value import DiscussionRoot
from tewahed.persistence.tables import answers_table, questions_table


class PostgresDiscussionRootRepository(DiscussionRootRepository):
    """Checks questions and answers tables for comment roots."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, root: DiscussionRoot) -> bool:
        """Check whether the question or answer exists."""
        if root.question_id is not None:
            condition = questions_table.c.id == root.question_id
        else:
            condition = answers_table.c.id == root.answer_id

        stmt = select(exists().where(condition))
        result = await self.session.execute(stmt)
        return bool(result.scalar())
