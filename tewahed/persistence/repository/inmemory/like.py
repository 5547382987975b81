"""In-memory like repository for testing."""

from typing import Collection, Optional

from sqlalchemy.exc import IntegrityError

from tewahed.domain.model.like import Like
from tewahed.domain.repository.like import LikeRepository
from tewahed.domain.value import LikeId, LikeTargetType, UserId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[Like] = []
        self._next_id = 1

    async def find(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: int,
    ) -> Optional[Like]:
        """Find a like by user and item."""
        for like in self._likes:
            if (
                like.user_id == user_id
                and like.target_type == target_type
                and like.target_id == target_id
            ):
                return like
        return None

    async def list_by_targets(
        self,
        target_type: LikeTargetType,
        target_ids: Collection[int],
    ) -> list[Like]:
        """List all likes on multiple items (batch query)."""
        wanted = set(target_ids)
        return [
            like
            for like in self._likes
            if like.target_type == target_type and like.target_id in wanted
        ]

    async def create(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: int,
    ) -> Like:
        """Store a like.

        Raises:
            IntegrityError: If the like already exists (duplicate)
        """
        if await self.find(user_id, target_type, target_id):
            raise IntegrityError("Duplicate like", None, Exception())

        like = Like(
            id=LikeId(self._next_id),
            user_id=user_id,
            target_type=target_type,
            target_id=target_id,
        )
        self._next_id += 1
        self._likes.append(like)
        return like

    async def delete(
        self,
        user_id: UserId,
        target_type: LikeTargetType,
        target_id: int,
    ) -> bool:
        """Delete a like by user and item."""
        for i, like in enumerate(self._likes):
            if (
                like.user_id == user_id
                and like.target_type == target_type
                and like.target_id == target_id
            ):
                self._likes.pop(i)
                return True
        return False
