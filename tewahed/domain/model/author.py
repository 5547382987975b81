"""Comment author profiles.

Users are owned by the identity service; comment threads only read the
handful of fields needed to show who wrote a comment.
"""

from typing import Optional

from tewahed.domain.model.common import DomainModel
from tewahed.domain.value import UserId

ANONYMOUS_NAME = "Anonymous"


class UserProfile(DomainModel):
    """Public profile fields of a user as stored."""

    id: UserId
    name: Optional[str] = None
    display_name: Optional[str] = None
    image: Optional[str] = None
    is_admin: bool = False


class Author(DomainModel):
    """Author summary shown next to a comment."""

    id: UserId
    name: str = ANONYMOUS_NAME
    image: Optional[str] = None
    is_admin: bool = False

    @classmethod
    def from_profile(
        cls, user_id: UserId, profile: Optional[UserProfile] = None
    ) -> "Author":
        """Summarize a profile, preferring the display name over the name.

        Args:
            user_id: Author user ID
            profile: Stored profile, None when the user is unknown

        Returns:
            Author summary; unnamed or unknown users are shown as "Anonymous"
        """
        if profile is None:
            return cls(id=user_id)
        return cls(
            id=user_id,
            name=profile.display_name or profile.name or ANONYMOUS_NAME,
            image=profile.image,
            is_admin=profile.is_admin,
        )
