"""User entity and the public author summary attached to comments."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentary.domain.model.common import DomainModel
from commentary.domain.value import UserId
from commentary.domain.value.common import ValueObject
from commentary.domain.value.types import Handle


class User(DomainModel):
    """User account as exposed by the user directory.

    Credentials and sessions live outside this service.
    """

    id: UserId
    username: Handle
    email: Optional[str] = None
    display_name: Optional[str] = Field(default=None, max_length=100)
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    def to_summary(self) -> "AuthorSummary":
        """Public projection of the user (no email)."""
        return AuthorSummary(
            id=self.id,
            username=self.username,
            display_name=self.display_name,
            avatar_url=self.avatar_url,
        )


class AuthorSummary(ValueObject):
    """Public author information attached to comments in API responses."""

    id: UserId
    username: Handle
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
