"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from commentary.domain.model import Comment, Post, User
from commentary.domain.value import CommentId, PostId, UserId
from commentary.domain.value.types import Handle


def _uuid(value: Any) -> Optional[UUID]:
    """Coerce a driver value (UUID or str) to UUID."""
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Handle(row["username"]),
        email=row.get("email"),
        display_name=row.get("display_name"),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["username"] = str(user.username)
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    created_by = _uuid(row.get("created_by"))
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        content=row.get("content"),
        created_by=UserId(created_by) if created_by else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = _uuid(row.get("parent_id"))
    created_by = _uuid(row.get("created_by"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        content=row["content"],
        post_id=PostId(_uuid(row["post_id"])),
        parent_id=CommentId(parent_id) if parent_id else None,
        path=[CommentId(_uuid(p)) for p in row.get("path") or []],
        thread_id=CommentId(_uuid(row["thread_id"])),
        replies_count=row["replies_count"],
        created_by=UserId(created_by) if created_by else None,
        created_at=row["created_at"],
        updated_at=row.get("updated_at"),
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Derived properties (depth, is_root, is_deleted) are not stored.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return comment.model_dump()
