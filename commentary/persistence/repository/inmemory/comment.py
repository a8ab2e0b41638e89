"""In-memory comment repository for testing."""

import asyncio
from datetime import datetime
from itertools import count
from typing import Optional

from commentary.domain.error import ConflictError
from commentary.domain.model.comment import Comment
from commentary.domain.repository.comment import CommentRepository
from commentary.domain.value import CommentId, PostId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Every operation first yields to the event loop, like a database round
    trip, then runs without awaiting. Each operation is therefore atomic,
    while a read followed by a separate write can interleave with other
    tasks and lose updates, as it would against PostgreSQL.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        # Insertion order breaks created_at ties
        self._sequence: dict[CommentId, int] = {}
        self._counter = count()

    def _live(self) -> list[Comment]:
        return [c for c in self._comments.values() if c.deleted_at is None]

    def _chronological(self, comment: Comment) -> tuple:
        return (comment.created_at, self._sequence[comment.id])

    async def _checkpoint(self) -> None:
        await asyncio.sleep(0)

    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        await self._checkpoint()
        if comment.id in self._comments:
            raise ConflictError("Comment", str(comment.id))
        self._comments[comment.id] = comment
        self._sequence[comment.id] = next(self._counter)
        return comment

    async def find_by_id(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        await self._checkpoint()
        comment = self._comments.get(comment_id)
        if comment is None or (comment.is_deleted and not include_deleted):
            return None
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a live comment."""
        await self._checkpoint()
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        updated = comment.model_copy(
            update={"content": content, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def soft_delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Tombstone a live comment."""
        await self._checkpoint()
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        deleted = comment.model_copy(update={"deleted_at": datetime.now()})
        self._comments[comment_id] = deleted
        return deleted

    async def find_top_level(
        self, post_id: PostId, limit: int = 10, offset: int = 0
    ) -> list[Comment]:
        """Find live root comments of a post, newest first."""
        await self._checkpoint()
        comments = [
            c for c in self._live() if c.post_id == post_id and c.parent_id is None
        ]
        comments.sort(key=self._chronological, reverse=True)
        return comments[offset : offset + limit]

    async def count_top_level(self, post_id: PostId) -> int:
        """Count live root comments of a post."""
        await self._checkpoint()
        return sum(
            1 for c in self._live() if c.post_id == post_id and c.parent_id is None
        )

    async def find_replies(
        self, parent_id: CommentId, limit: int = 20, offset: int = 0
    ) -> list[Comment]:
        """Find live direct replies, oldest first."""
        await self._checkpoint()
        comments = [c for c in self._live() if c.parent_id == parent_id]
        comments.sort(key=self._chronological)
        return comments[offset : offset + limit]

    async def count_replies(self, parent_id: CommentId) -> int:
        """Count live direct replies."""
        await self._checkpoint()
        return sum(1 for c in self._live() if c.parent_id == parent_id)

    async def find_by_thread(self, thread_id: CommentId) -> list[Comment]:
        """Find all live comments of a thread in path order."""
        await self._checkpoint()
        comments = [c for c in self._live() if c.thread_id == thread_id]
        comments.sort(key=lambda c: (*c.path, c.id))
        return comments

    async def find_by_author(
        self, author_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[Comment]:
        """Find live comments by a user, newest first."""
        await self._checkpoint()
        comments = [c for c in self._live() if c.created_by == author_id]
        comments.sort(key=self._chronological, reverse=True)
        return comments[offset : offset + limit]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count live comments by a user."""
        await self._checkpoint()
        return sum(1 for c in self._live() if c.created_by == author_id)

    async def increment_replies_count(self, comment_id: CommentId) -> None:
        """Increment replies_count by 1."""
        await self._checkpoint()
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(
                update={"replies_count": comment.replies_count + 1}
            )

    async def decrement_replies_count(self, comment_id: CommentId) -> None:
        """Decrement replies_count by 1 (minimum 0)."""
        await self._checkpoint()
        comment = self._comments.get(comment_id)
        if comment and comment.replies_count > 0:
            self._comments[comment_id] = comment.model_copy(
                update={"replies_count": comment.replies_count - 1}
            )

    async def set_replies_count(self, comment_id: CommentId, count: int) -> None:
        """Overwrite replies_count."""
        await self._checkpoint()
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(
                update={"replies_count": max(count, 0)}
            )
