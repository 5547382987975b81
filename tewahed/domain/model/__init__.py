"""Domain model entities for the forum."""

from tewahed.domain.model.author import ANONYMOUS_NAME, Author, UserProfile
from tewahed.domain.model.comment import Comment, CommentView, NewComment
from tewahed.domain.model.like import Like, LikeSummary
from tewahed.domain.model.viewer import Viewer

__all__ = [
    "ANONYMOUS_NAME",
    "Author",
    "Comment",
    "CommentView",
    "NewComment",
    "UserProfile",
    "Like",
    "LikeSummary",
    "Viewer",
]
