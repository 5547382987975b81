"""PostgreSQL implementation of User repository."""

from typing import Collection, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tewahed.domain.model import UserProfile
from tewahed.domain.repository import UserRepository
from tewahed.domain.value import UserId
from tewahed.persistence.mappers import row_to_user_profile
from tewahed.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """Reads author profiles from the users table."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def list_by_ids(self, user_ids: Collection[UserId]) -> List[UserProfile]:
        """List profiles for a set of users (batch query)."""
        if not user_ids:
            return []

        stmt = select(
            users_table.c.id,
            users_table.c.name,
            users_table.c.display_name,
            users_table.c.image,
            users_table.c.is_admin,
        ).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user_profile(row._asdict()) for row in result.fetchall()]
