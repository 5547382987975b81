"""Like entity.

A like is one user's endorsement of a question, answer or comment.
Each user can like a given item at most once.
"""

from datetime import datetime

from pydantic import Field

from tewahed.domain.model.common import DomainModel
from tewahed.domain.value import LikeId, LikeTargetType, UserId
from tewahed.util.clock import utc_now


class Like(DomainModel):
    """Like entity.

    Business rules:
    - One like per user per item (enforced by a unique index in the store)
    - Polymorphic reference to the liked item via target_type/target_id
    - Created and destroyed, never updated
    """

    id: LikeId
    user_id: UserId
    target_type: LikeTargetType
    target_id: int
    created_at: datetime = Field(default_factory=utc_now)


class LikeSummary(DomainModel):
    """Aggregated like state of a single item for one viewer."""

    count: int = Field(default=0, ge=0)
    liked_by_viewer: bool = False
