"""Comment entity.

Comments are threaded discussions on posts with unlimited depth.
Each comment stores a materialized path (its ancestor ids, root first) and
the id of its thread root, both computed once when the comment is created.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentary.domain.model.common import DomainModel
from commentary.domain.value import CommentId, PostId, UserId

MAX_CONTENT_LENGTH = 10000


class Comment(DomainModel):
    """Comment entity.

    Represents a top-level comment on a post or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - path: Ancestor ids from the thread root down to the direct parent
      (empty for top-level comments)
    - thread_id: Id of the thread root (equal to `id` for top-level comments)
    - replies_count: Number of live direct replies, maintained atomically
      by the store and never set by clients
    """

    id: CommentId
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    post_id: PostId
    parent_id: Optional[CommentId] = None
    path: list[CommentId] = Field(default_factory=list)
    thread_id: CommentId
    replies_count: int = Field(default=0, ge=0)
    created_by: Optional[UserId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @property
    def depth(self) -> int:
        """1-based nesting level (top-level comments have depth 1)."""
        return len(self.path) + 1

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def is_authored_by(self, user_id: UserId) -> bool:
        """Check whether the given user owns this comment."""
        return self.created_by is not None and self.created_by == user_id
