"""Comment tree assembly.

Turns flat comment listings into display nodes with authors attached.
"""

from dataclasses import dataclass, field
from typing import Optional

import logfire

from commentary.domain.model import AuthorSummary, Comment
from commentary.domain.value import CommentId, PageRequest, PostId

from .base import Service
from .comment_service import CommentService
from .user_service import UserService


@dataclass
class CommentNode:
    """A comment with its author and (in the thread view) nested replies."""

    comment: Comment
    author: Optional[AuthorSummary] = None
    replies: list["CommentNode"] = field(default_factory=list)


class TreeAssembler(Service):
    """Builds comment nodes for the read paths.

    Default rendering is lazy: a page of top-level comments, then a page
    of replies per expanded comment. The full thread view is for bounded
    use such as moderation.
    """

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize tree assembler.

        Args:
            comment_service: Comment service
            user_service: User service (author lookups)
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def to_nodes(self, comments: list[Comment]) -> list[CommentNode]:
        """Attach authors to comments with one batch lookup."""
        authors = await self.user_service.get_author_summaries(
            c.created_by for c in comments if c.created_by is not None
        )
        return [
            CommentNode(
                comment=c,
                author=authors.get(c.created_by) if c.created_by else None,
            )
            for c in comments
        ]

    async def assemble_top_level(
        self, post_id: PostId, page: PageRequest
    ) -> tuple[list[CommentNode], int]:
        """Get one page of top-level comment nodes for a post.

        Replies are not fetched; each node reports its replies_count so
        clients can expand lazily.

        Args:
            post_id: Post ID
            page: Clamped page window

        Returns:
            Tuple of (nodes, total top-level comments)
        """
        with logfire.span(
            "tree_assembler.assemble_top_level",
            post_id=str(post_id),
            limit=page.limit,
            offset=page.offset,
        ):
            comments, total = await self.comment_service.list_top_level(post_id, page)
            return await self.to_nodes(comments), total

    async def assemble_replies(
        self, parent_id: CommentId, page: PageRequest
    ) -> tuple[list[CommentNode], int]:
        """Get one page of direct reply nodes for a comment.

        Args:
            parent_id: Parent comment ID
            page: Clamped page window

        Returns:
            Tuple of (nodes, total direct replies)
        """
        with logfire.span(
            "tree_assembler.assemble_replies",
            parent_id=str(parent_id),
            limit=page.limit,
            offset=page.offset,
        ):
            comments, total = await self.comment_service.list_replies(parent_id, page)
            return await self.to_nodes(comments), total

    async def assemble_thread(self, thread_id: CommentId) -> tuple[list[CommentNode], int]:
        """Build the complete nested view of a thread.

        The thread is read with a single path-ordered query, so every
        ancestor precedes its descendants and one pass over the arena is
        enough. A comment whose parent is soft-deleted hangs off its
        nearest live ancestor, or becomes a top-level node when none of
        its ancestors is live.

        Args:
            thread_id: Thread root ID

        Returns:
            Tuple of (top-level nodes, total live comments in the thread)
        """
        with logfire.span("tree_assembler.assemble_thread", thread_id=str(thread_id)):
            comments = await self.comment_service.list_thread(thread_id)
            arena = await self.to_nodes(comments)
            index: dict[CommentId, CommentNode] = {n.comment.id: n for n in arena}

            top_level: list[CommentNode] = []
            for node in arena:
                anchor = None
                for ancestor_id in reversed(node.comment.path):
                    anchor = index.get(ancestor_id)
                    if anchor is not None:
                        break
                if anchor is None:
                    top_level.append(node)
                else:
                    anchor.replies.append(node)

            # Path order groups subtrees; siblings read chronologically.
            top_level.sort(key=lambda n: n.comment.created_at)
            for node in arena:
                node.replies.sort(key=lambda n: n.comment.created_at)

            logfire.info(
                "Thread assembled",
                thread_id=str(thread_id),
                total=len(arena),
                top_level=len(top_level),
            )
            return top_level, len(arena)
