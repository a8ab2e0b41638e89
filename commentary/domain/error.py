"""Domain layer errors.

Every domain error carries an `ErrorKind`; the interface layer maps kinds
1:1 to caller-visible errors.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Caller-visible error categories."""

    NOT_FOUND = "not_found"
    INVALID_REFERENCE = "invalid_reference"
    VALIDATION_FAILED = "validation_failed"
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind = ErrorKind.INTERNAL


class NotFoundError(DomainError):
    """Raised when a comment, post or parent is missing or soft-deleted."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidReferenceError(DomainError):
    """Raised when a parent comment belongs to a different post."""

    kind = ErrorKind.INVALID_REFERENCE

    def __init__(self, parent_id: str, post_id: str):
        self.parent_id = parent_id
        self.post_id = post_id
        super().__init__(f"Parent comment {parent_id} does not belong to post {post_id}")


class ValidationError(DomainError):
    """Domain validation error (e.g. empty or oversized content)."""

    kind = ErrorKind.VALIDATION_FAILED


class ForbiddenError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class ConflictError(DomainError):
    """Raised when an entity with the same id already exists."""

    kind = ErrorKind.CONFLICT

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")


class InternalError(DomainError):
    """Store or infrastructure failure. Details are never shown to callers."""

    kind = ErrorKind.INTERNAL
