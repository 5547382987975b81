"""Moderation policy for comment threads.

Both checks are pure: callers fetch whatever data is needed and pass the
current time in explicitly.
"""

from datetime import datetime, timedelta
from typing import Optional, Sequence

from tewahed.domain.model import Comment, Viewer

AUTHOR_DELETE_WINDOW = timedelta(hours=1)


def can_delete(
    comment: Comment,
    viewer: Optional[Viewer],
    now: datetime,
    grace_period: timedelta = AUTHOR_DELETE_WINDOW,
) -> bool:
    """Decide whether ``viewer`` may delete ``comment``.

    Administrators may delete any comment at any time. Authors may delete
    their own comment while it is younger than ``grace_period``; a comment
    exactly ``grace_period`` old is no longer deletable.

    Args:
        comment: The comment to delete
        viewer: Requesting identity, None when unauthenticated
        now: Current time
        grace_period: How long authors keep the right to delete

    Returns:
        True if the delete is permitted
    """
    if viewer is None:
        return False
    if viewer.is_admin:
        return True
    if comment.author_id != viewer.user_id:
        return False
    return now - comment.created_at < grace_period


def can_nest(
    parent: Optional[Comment],
    ancestors: Sequence[Comment],
    max_level: int,
) -> bool:
    """Decide whether ``parent`` may receive a reply.

    The parent's level equals the number of hops from it up to a
    top-level comment. ``ancestors`` is that upward chain (parent's parent
    first), collected with a hop limit so a corrupt chain still yields a
    finite list that is at least ``max_level`` long.

    Args:
        parent: Comment being replied to, None for a top-level comment
        ancestors: The parent's ancestors, nearest first
        max_level: Deepest level a comment may occupy

    Returns:
        True if the reply would sit no deeper than ``max_level``
    """
    if parent is None:
        return True
    return len(ancestors) < max_level
