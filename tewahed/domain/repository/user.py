"""User profile repository interface."""

from abc import ABC, abstractmethod
from typing import Collection, List

from tewahed.domain.model.author import UserProfile
from tewahed.domain.value import UserId


class UserRepository(ABC):
    """Read-only access to the user profiles of comment authors."""

    @abstractmethod
    async def list_by_ids(self, user_ids: Collection[UserId]) -> List[UserProfile]:
        """List profiles for a set of users (batch query).

        Args:
            user_ids: IDs of the users

        Returns:
            Profiles of the users that exist; unknown IDs are skipped
        """
        pass
