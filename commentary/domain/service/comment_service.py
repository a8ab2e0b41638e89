"""Comment domain service."""

from datetime import datetime

import logfire

from commentary.domain.error import NotFoundError, ValidationError
from commentary.domain.model.comment import MAX_CONTENT_LENGTH, Comment
from commentary.domain.repository import CommentRepository
from commentary.domain.value import CommentId, PageRequest, PostId, UserId

from .base import Service
from .thread_service import ThreadPlacement


class CommentService(Service):
    """Domain service for comment storage operations.

    Wraps the comment repository: absent or soft-deleted comments become
    `NotFoundError`, content length is checked before anything is written.
    Ownership checks belong to the use cases.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        max_content_length: int = MAX_CONTENT_LENGTH,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            max_content_length: Maximum accepted content length
        """
        self.comment_repository = comment_repository
        self.max_content_length = max_content_length

    def validate_content(self, content: str) -> None:
        """Check content length.

        Raises:
            ValidationError: If content is empty or too long
        """
        if not content or not content.strip():
            raise ValidationError("Comment content must not be empty")
        if len(content) > self.max_content_length:
            raise ValidationError(
                f"Comment content must be at most {self.max_content_length} characters"
            )

    async def create_comment(
        self,
        comment_id: CommentId,
        post_id: PostId,
        content: str,
        created_by: UserId,
        placement: ThreadPlacement,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment at a precomputed position in its thread.

        Args:
            comment_id: Newly allocated comment ID
            post_id: Post ID
            content: Comment content (pre-sanitized)
            created_by: Author user ID
            placement: Path and thread id computed by the thread assigner
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty or too long
            ConflictError: If the id is already taken
        """
        with logfire.span(
            "comment_service.create_comment",
            comment_id=str(comment_id),
            post_id=str(post_id),
            created_by=str(created_by),
            parent_id=str(parent_id) if parent_id else None,
        ):
            self.validate_content(content)

            comment = Comment(
                id=comment_id,
                content=content,
                post_id=post_id,
                parent_id=parent_id,
                path=placement.path,
                thread_id=placement.thread_id,
                replies_count=0,
                created_by=created_by,
                created_at=datetime.now(),
                updated_at=None,
                deleted_at=None,
            )

            saved = await self.comment_repository.create(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                thread_id=str(saved.thread_id),
                depth=saved.depth,
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a live comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            The comment

        Raises:
            NotFoundError: If the comment is missing or soft-deleted
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Update the content of a live comment.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            Updated comment

        Raises:
            ValidationError: If content is empty or too long
            NotFoundError: If the comment is missing or soft-deleted
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            content_length=len(content),
        ):
            self.validate_content(content)

            updated = await self.comment_repository.update_content(comment_id, content)
            if updated is None:
                logfire.warn(
                    "Comment not found or deleted for content update",
                    comment_id=str(comment_id),
                )
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment content updated",
                comment_id=str(comment_id),
                post_id=str(updated.post_id),
                content_length=len(updated.content),
            )
            return updated

    async def soft_delete(self, comment_id: CommentId) -> Comment:
        """Tombstone a live comment.

        Descendants are untouched and keep the comment in their path.

        Args:
            comment_id: Comment ID

        Returns:
            The tombstoned comment

        Raises:
            NotFoundError: If the comment is missing or already deleted
        """
        with logfire.span("comment_service.soft_delete", comment_id=str(comment_id)):
            deleted = await self.comment_repository.soft_delete(comment_id)
            if deleted is None:
                logfire.warn(
                    "Comment not found or already deleted", comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment soft-deleted",
                comment_id=str(comment_id),
                parent_id=str(deleted.parent_id) if deleted.parent_id else None,
            )
            return deleted

    async def list_top_level(
        self, post_id: PostId, page: PageRequest
    ) -> tuple[list[Comment], int]:
        """Get one page of top-level comments for a post, newest first.

        Args:
            post_id: Post ID
            page: Clamped page window

        Returns:
            Tuple of (comments, total live top-level comments)
        """
        with logfire.span(
            "comment_service.list_top_level",
            post_id=str(post_id),
            limit=page.limit,
            offset=page.offset,
        ):
            total = await self.comment_repository.count_top_level(post_id)
            comments = await self.comment_repository.find_top_level(
                post_id, limit=page.limit, offset=page.offset
            )
            logfire.info(
                "Top-level comments retrieved",
                post_id=str(post_id),
                count=len(comments),
                total=total,
            )
            return comments, total

    async def list_replies(
        self, parent_id: CommentId, page: PageRequest
    ) -> tuple[list[Comment], int]:
        """Get one page of direct replies to a comment, oldest first.

        Args:
            parent_id: Parent comment ID
            page: Clamped page window

        Returns:
            Tuple of (replies, total live direct replies)
        """
        with logfire.span(
            "comment_service.list_replies",
            parent_id=str(parent_id),
            limit=page.limit,
            offset=page.offset,
        ):
            total = await self.comment_repository.count_replies(parent_id)
            replies = await self.comment_repository.find_replies(
                parent_id, limit=page.limit, offset=page.offset
            )
            logfire.info(
                "Replies retrieved",
                parent_id=str(parent_id),
                count=len(replies),
                total=total,
            )
            return replies, total

    async def list_thread(self, thread_id: CommentId) -> list[Comment]:
        """Get every live comment of a thread in tree order.

        Args:
            thread_id: Thread root ID

        Returns:
            Comments ordered by path
        """
        with logfire.span("comment_service.list_thread", thread_id=str(thread_id)):
            comments = await self.comment_repository.find_by_thread(thread_id)
            logfire.info(
                "Thread retrieved", thread_id=str(thread_id), count=len(comments)
            )
            return comments

    async def list_by_author(
        self, author_id: UserId, page: PageRequest
    ) -> tuple[list[Comment], int]:
        """Get one page of a user's comments, newest first.

        Args:
            author_id: Author user ID
            page: Clamped page window

        Returns:
            Tuple of (comments, total live comments by the author)
        """
        with logfire.span(
            "comment_service.list_by_author",
            author_id=str(author_id),
            limit=page.limit,
            offset=page.offset,
        ):
            total = await self.comment_repository.count_by_author(author_id)
            comments = await self.comment_repository.find_by_author(
                author_id, limit=page.limit, offset=page.offset
            )
            return comments, total

    async def get_thread_root(self, thread_id: CommentId) -> Comment:
        """Get the root comment of a thread, tombstoned or not.

        A soft-deleted root still anchors its live descendants.

        Args:
            thread_id: Thread root ID

        Returns:
            The root comment

        Raises:
            NotFoundError: If no root comment has this id
        """
        with logfire.span("comment_service.get_thread_root", thread_id=str(thread_id)):
            root = await self.comment_repository.find_by_id(
                thread_id, include_deleted=True
            )
            if root is None or not root.is_root:
                logfire.warn("Thread not found", thread_id=str(thread_id))
                raise NotFoundError("Thread", str(thread_id))
            return root
