"""Domain value objects for Commentary.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from typing import Optional

from pydantic import field_validator

from commentary.domain.value.common import RootValueObject, ValueObject

# Hard bounds for any paginated listing
MIN_PAGE_LIMIT = 1
MAX_PAGE_LIMIT = 100


class Handle(RootValueObject[str]):
    """Public username of a user.

    Must be 3-50 characters: letters, digits, underscores, dots or hyphens.
    """

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle length and characters."""
        if not re.match(r"^[A-Za-z0-9_.-]{3,50}$", v):
            raise ValueError(
                "Handle must be 3-50 characters of letters, digits, '_', '.' or '-'"
            )
        return v


class PageRequest(ValueObject):
    """A window into an ordered listing.

    Always built through `PageRequest.clamp`, so `limit` is within
    [MIN_PAGE_LIMIT, MAX_PAGE_LIMIT] and `offset` is never negative.
    """

    limit: int
    offset: int

    @classmethod
    def clamp(
        cls,
        limit: Optional[int],
        offset: Optional[int],
        default_limit: int,
        max_limit: int = MAX_PAGE_LIMIT,
    ) -> "PageRequest":
        """Build a page request, clamping out-of-range values.

        Args:
            limit: Requested page size (None uses default_limit)
            offset: Requested offset (None means 0)
            default_limit: Page size used when none is requested
            max_limit: Upper bound for the page size

        Returns:
            PageRequest with clamped values
        """
        upper = max(MIN_PAGE_LIMIT, min(max_limit, MAX_PAGE_LIMIT))
        size = default_limit if limit is None else limit
        return cls(
            limit=max(MIN_PAGE_LIMIT, min(size, upper)),
            offset=max(0, offset or 0),
        )


class Pagination(ValueObject):
    """Pagination envelope returned alongside a page of items."""

    limit: int
    offset: int
    total: int
    has_more: bool

    @classmethod
    def for_page(cls, page: PageRequest, returned: int, total: int) -> "Pagination":
        """Describe a page of `returned` items out of `total`."""
        return cls(
            limit=page.limit,
            offset=page.offset,
            total=total,
            has_more=page.offset + returned < total,
        )
