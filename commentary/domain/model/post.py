"""Post entity.

Posts are owned by the post directory; comments only need to know
whether a post exists and is live.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentary.domain.model.common import DomainModel
from commentary.domain.value import PostId, UserId


class Post(DomainModel):
    """Post that comments are attached to."""

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    content: Optional[str] = None
    created_by: Optional[UserId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
