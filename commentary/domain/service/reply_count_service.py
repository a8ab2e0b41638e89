"""Reply count domain service."""

import logfire

from commentary.domain.model import Comment
from commentary.domain.repository import CommentRepository
from commentary.domain.value import CommentId

from .base import Service


class ReplyCountService(Service):
    """Keeps a comment's replies_count equal to its live direct replies.

    Only the direct parent is ever touched. The counter moves through
    the repository's atomic primitives, never a read-then-write here.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize reply count service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def on_reply_created(self, comment: Comment) -> None:
        """Count a newly created comment against its parent.

        Args:
            comment: The comment that was just stored
        """
        if comment.parent_id is None:
            return

        with logfire.span(
            "reply_count_service.on_reply_created",
            comment_id=str(comment.id),
            parent_id=str(comment.parent_id),
        ):
            await self.comment_repository.increment_replies_count(comment.parent_id)

    async def on_comment_deleted(self, comment: Comment) -> None:
        """Stop counting a soft-deleted comment against its parent.

        The deleted comment's own counter is left as it is.

        Args:
            comment: The comment that was just tombstoned
        """
        if comment.parent_id is None:
            return

        with logfire.span(
            "reply_count_service.on_comment_deleted",
            comment_id=str(comment.id),
            parent_id=str(comment.parent_id),
        ):
            await self.comment_repository.decrement_replies_count(comment.parent_id)

    async def recount(self, comment_id: CommentId) -> int:
        """Recompute a counter from the live direct replies.

        Repair tool for counters that drifted (e.g. rows edited by hand).

        Args:
            comment_id: Comment whose counter is rebuilt

        Returns:
            The recomputed count
        """
        with logfire.span("reply_count_service.recount", comment_id=str(comment_id)):
            count = await self.comment_repository.count_replies(comment_id)
            await self.comment_repository.set_replies_count(comment_id, count)
            logfire.info(
                "Reply count recomputed", comment_id=str(comment_id), replies_count=count
            )
            return count
