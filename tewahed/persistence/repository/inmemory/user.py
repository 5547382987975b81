"""In-memory user repository for testing."""

from typing import Collection

from tewahed.domain.model.author import UserProfile
from tewahed.domain.repository.user import UserRepository
from tewahed.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Profiles are registered with ``add``.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, UserProfile] = {}

    def add(self, profile: UserProfile) -> UserProfile:
        """Register a user profile."""
        self._users[profile.id] = profile
        return profile

    async def list_by_ids(self, user_ids: Collection[UserId]) -> list[UserProfile]:
        """List profiles for a set of users."""
        return [self._users[uid] for uid in user_ids if uid in self._users]
