"""Comment thread assembly.

Turns the flat list of comments stored for one question or answer into
the nested structure shown to readers.
"""

from collections import defaultdict
from typing import Iterable, Mapping, Optional

from tewahed.domain.model import Author, Comment, CommentView, LikeSummary
from tewahed.domain.value import CommentId, UserId

MAX_LEVEL = 2

_NO_LIKES = LikeSummary()
_COMMENT_FIELDS = set(Comment.model_fields)


def thread_order(comment: Comment) -> tuple:
    """Sort key for siblings: oldest first, id breaks timestamp ties."""
    return (comment.created_at, comment.id)


def build_comment_tree(
    comments: Iterable[Comment],
    likes: Optional[Mapping[CommentId, LikeSummary]] = None,
    max_level: int = MAX_LEVEL,
    authors: Optional[Mapping[UserId, Author]] = None,
) -> list[CommentView]:
    """Build a bounded-depth reply forest.

    Algorithm:
    1. Index children by parent_id in one pass
    2. Sort each sibling list by (created_at, id)
    3. Walk down from the top-level comments, stopping at ``max_level``

    Comments whose parent is not part of the input are never reached from
    a top-level comment, so orphans and everything below them drop out
    without an error. Rows deeper than ``max_level`` are dropped the same
    way; they should not exist, but stored data is not trusted here.

    Args:
        comments: All comments of one discussion root, in any order
        likes: Like summaries by comment ID (missing IDs count as no likes)
        max_level: Deepest level that is rendered
        authors: Author summaries by user ID (missing users show as anonymous)

    Returns:
        Top-level comment views with replies populated recursively
    """
    likes = likes or {}
    authors = authors or {}

    children: dict[Optional[CommentId], list[Comment]] = defaultdict(list)
    for comment in comments:
        children[comment.parent_id].append(comment)

    for siblings in children.values():
        siblings.sort(key=thread_order)

    def build_node(comment: Comment, level: int) -> CommentView:
        summary = likes.get(comment.id, _NO_LIKES)
        if level < max_level:
            replies = [
                build_node(child, level + 1) for child in children.get(comment.id, [])
            ]
        else:
            replies = []

        return CommentView(
            **comment.model_dump(include=_COMMENT_FIELDS),
            author=authors.get(comment.author_id)
            or Author.from_profile(comment.author_id),
            like_count=summary.count,
            is_liked_by_viewer=summary.liked_by_viewer,
            level=level,
            replies=replies,
        )

    return [build_node(comment, 0) for comment in children.get(None, [])]


def count_comments(tree: Iterable[CommentView]) -> int:
    """Count every node in a comment forest."""
    return sum(1 + count_comments(node.replies) for node in tree)
