"""PostgreSQL implementation of Like repository."""

from typing import Collection, List, Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from tewahed.domain.model import Like
from tewahed.domain.repository import LikeRepository
from tewahed.domain.value import LikeTargetType, UserId
from tewahed.persistence.mappers import row_to_like
from tewahed.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: int,
    ) -> Optional[Like]:
        """Find a user's like on a specific item."""
        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.target_type == target_type.value,
                likes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def list_by_targets(
        self,
        target_type: LikeTargetType,
        target_ids: Collection[int],
    ) -> List[Like]:
        """List all likes on multiple items (batch query)."""
        if not target_ids:
            return []

        stmt = select(likes_table).where(
            and_(
                likes_table.c.target_type == target_type.value,
                likes_table.c.target_id.in_(list(target_ids)),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    async def create(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: int,
    ) -> Like:
        """Insert a like.

        Runs in a savepoint so a unique-constraint violation leaves the
        surrounding request transaction usable.
        """
        stmt = (
            insert(likes_table)
            .values(
                user_id=user_id,
                target_type=target_type.value,
                target_id=target_id,
            )
            .returning(likes_table)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_like(row._asdict())  # type: ignore[union-attr]

    async def delete(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: int,
    ) -> bool:
        """Delete a user's like on an item."""
        stmt = delete(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.target_type == target_type.value,
                likes_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
