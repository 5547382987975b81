"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Collection, List, Optional

from tewahed.domain.model.like import Like
from tewahed.domain.value import LikeTargetType, UserId


class LikeRepository(ABC):
    """Repository for Like entity.

    Defines the contract for like persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: int,
    ) -> Optional[Like]:
        """Find a user's like on a specific item.

        Args:
            user_id: The user's ID
            target_type: Type of item
            target_id: ID of the item

        Returns:
            The like if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_targets(
        self,
        target_type: LikeTargetType,
        target_ids: Collection[int],
    ) -> List[Like]:
        """List all likes on a set of items (batch query).

        Must be a single read so that counts for different items come
        from the same snapshot.

        Args:
            target_type: Type of items
            target_ids: IDs of the items

        Returns:
            Every like on any of the items
        """
        pass

    @abstractmethod
    async def create(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: int,
    ) -> Like:
        """Store a like.

        Args:
            user_id: The liking user
            target_type: Type of item
            target_id: ID of the item

        Returns:
            The stored like

        Raises:
            IntegrityError: If the user already likes the item
        """
        pass

    @abstractmethod
    async def delete(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: int,
    ) -> bool:
        """Delete a user's like on an item.

        Args:
            user_id: The user's ID
            target_type: Type of item
            target_id: ID of the item

        Returns:
            True if a like was deleted, False if none existed
        """
        pass
