"""Repository interfaces for Commentary domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from commentary.domain.repository.comment import CommentRepository
from commentary.domain.repository.post import PostRepository
from commentary.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "PostRepository",
    "UserRepository",
]
