"""Like domain service."""

from collections import Counter
from typing import Collection, Iterable, Optional

import logfire
from sqlalchemy.exc import IntegrityError

from tewahed.domain.model import Like, LikeSummary
from tewahed.domain.repository import LikeRepository
from tewahed.domain.value import LikeTargetType, UserId

from .base import Service


def aggregate_likes(
    target_ids: Iterable[int],
    likes: Iterable[Like],
    viewer_id: Optional[UserId],
    target_type: LikeTargetType = LikeTargetType.COMMENT,
) -> dict[int, LikeSummary]:
    """Summarize like rows per target.

    Every requested ID gets an entry, zero likes included. Rows for other
    targets or other target types are ignored.

    Args:
        target_ids: IDs to summarize
        likes: Like rows fetched for those IDs
        viewer_id: Requesting user, None when unauthenticated
        target_type: Type of the targets

    Returns:
        Dictionary mapping target ID to its like summary
    """
    wanted = set(target_ids)
    counts: Counter[int] = Counter()
    liked: set[int] = set()

    for like in likes:
        if like.target_type != target_type or like.target_id not in wanted:
            continue
        counts[like.target_id] += 1
        if viewer_id is not None and like.user_id == viewer_id:
            liked.add(like.target_id)

    return {
        target_id: LikeSummary(
            count=counts[target_id], liked_by_viewer=target_id in liked
        )
        for target_id in wanted
    }


class LikeService(Service):
    """Domain service for like operations."""

    def __init__(self, like_repository: LikeRepository) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
        """
        self.like_repository = like_repository

    async def summarize(
        self,
        target_type: LikeTargetType,
        target_ids: Collection[int],
        viewer_id: Optional[UserId],
    ) -> dict[int, LikeSummary]:
        """Get like counts and viewer state for several items at once.

        Args:
            target_type: Type of items
            target_ids: IDs of the items
            viewer_id: Requesting user, None when unauthenticated

        Returns:
            Dictionary mapping every target ID to its like summary
        """
        if not target_ids:
            return {}

        with logfire.span(
            "like_service.summarize",
            target_type=target_type.value,
            count=len(target_ids),
        ):
            # Batch query to fetch all likes at once (avoid N+1)
            likes = await self.like_repository.list_by_targets(
                target_type=target_type,
                target_ids=target_ids,
            )
            return aggregate_likes(target_ids, likes, viewer_id, target_type)

    async def like(
        self, user_id: UserId, target_type: LikeTargetType, target_id: int
    ) -> bool:
        """Like an item.

        Liking an already-liked item is not an error.

        Args:
            user_id: User ID
            target_type: Type of item
            target_id: ID of the item

        Returns:
            True if a like was created, False if it already existed
        """
        with logfire.span(
            "like_service.like",
            user_id=user_id,
            target_type=target_type.value,
            target_id=target_id,
        ):
            try:
                await self.like_repository.create(user_id, target_type, target_id)
            except IntegrityError:
                logfire.info(
                    "Item already liked",
                    user_id=user_id,
                    target_type=target_type.value,
                    target_id=target_id,
                )
                return False

            logfire.info(
                "Like created",
                user_id=user_id,
                target_type=target_type.value,
                target_id=target_id,
            )
            return True

    async def unlike(
        self, user_id: UserId, target_type: LikeTargetType, target_id: int
    ) -> bool:
        """Remove a like.

        Args:
            user_id: User ID
            target_type: Type of item
            target_id: ID of the item

        Returns:
            True if a like was removed, False if none existed
        """
        with logfire.span(
            "like_service.unlike",
            user_id=user_id,
            target_type=target_type.value,
            target_id=target_id,
        ):
            deleted = await self.like_repository.delete(
                user_id, target_type, target_id
            )
            if deleted:
                logfire.info("Like removed", user_id=user_id, target_id=target_id)
            else:
                logfire.info("No like to remove", user_id=user_id, target_id=target_id)
            return deleted

    async def toggle(
        self, user_id: UserId, target_type: LikeTargetType, target_id: int
    ) -> bool:
        """Flip a user's like on an item.

        Args:
            user_id: User ID
            target_type: Type of item
            target_id: ID of the item

        Returns:
            True if the item is liked afterwards, False otherwise
        """
        existing = await self.like_repository.find(user_id, target_type, target_id)
        if existing is not None:
            await self.unlike(user_id, target_type, target_id)
            return False

        # A concurrent like from the same user lands here as "already liked"
        await self.like(user_id, target_type, target_id)
        return True
