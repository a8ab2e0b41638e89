"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from commentary.domain.model.comment import Comment
from commentary.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.

    The repository is a dumb persistence layer: it never checks who is
    asking. Listings only ever return live (not soft-deleted) comments.
    """

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert (path and thread_id already set)

        Returns:
            The stored comment

        Raises:
            ConflictError: If a comment with the same id already exists
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier
            include_deleted: Whether a soft-deleted comment may be returned

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a live comment and bump updated_at.

        Args:
            comment_id: The comment ID
            content: New content

        Returns:
            The updated comment, None if the comment is missing or deleted
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Set deleted_at on a live comment.

        The check and the write happen in a single conditional update, so of
        two concurrent deletes of the same comment only one succeeds.

        Args:
            comment_id: The comment ID

        Returns:
            The tombstoned comment, None if missing or already deleted
        """
        pass

    @abstractmethod
    async def find_top_level(
        self, post_id: PostId, limit: int = 10, offset: int = 0
    ) -> List[Comment]:
        """Find live top-level comments of a post, newest first.

        Args:
            post_id: The post ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of top-level comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count_top_level(self, post_id: PostId) -> int:
        """Count live top-level comments of a post."""
        pass

    @abstractmethod
    async def find_replies(
        self, parent_id: CommentId, limit: int = 20, offset: int = 0
    ) -> List[Comment]:
        """Find live direct replies of a comment, oldest first.

        Args:
            parent_id: The parent comment ID
            limit: Maximum number of replies to return
            offset: Number of replies to skip

        Returns:
            List of replies ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def count_replies(self, parent_id: CommentId) -> int:
        """Count live direct replies of a comment."""
        pass

    @abstractmethod
    async def find_by_thread(self, thread_id: CommentId) -> List[Comment]:
        """Find every live comment of a thread in tree order.

        Comments are ordered by their path followed by their own id, so a
        parent always precedes its descendants. One query, no recursion.

        Args:
            thread_id: Id of the thread root

        Returns:
            List of comments in tree order
        """
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Comment]:
        """Find live comments written by a user, newest first.

        Args:
            author_id: The author's user ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of comments by the author
        """
        pass

    @abstractmethod
    async def count_by_author(self, author_id: UserId) -> int:
        """Count live comments written by a user."""
        pass

    @abstractmethod
    async def increment_replies_count(self, comment_id: CommentId) -> None:
        """Atomically increment replies_count by 1.

        Must be a single atomic store operation, never a read-then-write
        in application code, so concurrent replies are all counted.

        Args:
            comment_id: Comment ID
        """
        pass

    @abstractmethod
    async def decrement_replies_count(self, comment_id: CommentId) -> None:
        """Atomically decrement replies_count by 1 (minimum 0).

        Args:
            comment_id: Comment ID
        """
        pass

    @abstractmethod
    async def set_replies_count(self, comment_id: CommentId, count: int) -> None:
        """Overwrite replies_count (used only to repair drifted counters).

        Args:
            comment_id: Comment ID
            count: The recomputed number of live direct replies
        """
        pass
