"""Domain value objects for Commentary."""

from commentary.domain.value.identifiers import CommentId, PostId, UserId
from commentary.domain.value.types import (
    MAX_PAGE_LIMIT,
    MIN_PAGE_LIMIT,
    Handle,
    PageRequest,
    Pagination,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "Handle",
    "PageRequest",
    "Pagination",
    "MIN_PAGE_LIMIT",
    "MAX_PAGE_LIMIT",
]
