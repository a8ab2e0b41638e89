"""Domain model entities for Commentary."""

from commentary.domain.model.comment import MAX_CONTENT_LENGTH, Comment
from commentary.domain.model.post import Post
from commentary.domain.model.user import AuthorSummary, User

__all__ = [
    "AuthorSummary",
    "Comment",
    "MAX_CONTENT_LENGTH",
    "Post",
    "User",
]
