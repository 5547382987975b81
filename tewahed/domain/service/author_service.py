"""Author domain service."""

from typing import Collection

import logfire

from tewahed.domain.model import Author
from tewahed.domain.repository import UserRepository
from tewahed.domain.value import UserId

from .base import Service


class AuthorService(Service):
    """Domain service resolving comment authors for display."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize author service.

        Args:
            user_repository: User profile repository
        """
        self.user_repository = user_repository

    async def get_authors(self, user_ids: Collection[UserId]) -> dict[UserId, Author]:
        """Get author summaries for several users at once.

        Args:
            user_ids: IDs of the comment authors

        Returns:
            Dictionary mapping every requested ID to an author summary;
            users without a stored profile are shown as anonymous
        """
        if not user_ids:
            return {}

        with logfire.span("author_service.get_authors", count=len(user_ids)):
            # Batch query to fetch all profiles at once (avoid N+1)
            profiles = await self.user_repository.list_by_ids(user_ids)
            by_id = {profile.id: profile for profile in profiles}
            missing = [uid for uid in user_ids if uid not in by_id]
            if missing:
                logfire.info("Comment authors without profile", count=len(missing))
            return {uid: Author.from_profile(uid, by_id.get(uid)) for uid in user_ids}
