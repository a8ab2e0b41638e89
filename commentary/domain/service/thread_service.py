"""Thread placement domain service.

Computes where a new comment sits in its thread: the materialized path of
its ancestors and the id of the thread root.
"""

from dataclasses import dataclass, field

import logfire

from commentary.domain.error import InvalidReferenceError, NotFoundError
from commentary.domain.repository import CommentRepository
from commentary.domain.value import CommentId, PostId

from .base import Service


@dataclass(frozen=True)
class ThreadPlacement:
    """Position of a comment in its thread."""

    thread_id: CommentId
    path: list[CommentId] = field(default_factory=list)

    @property
    def depth(self) -> int:
        return len(self.path) + 1


class ThreadAssigner(Service):
    """Assigns path and thread id to new comments.

    Placement is computed once at write time and never changes: there is
    no operation that moves a comment to another parent.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize thread assigner.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def assign(
        self,
        post_id: PostId,
        parent_id: CommentId | None,
        new_id: CommentId,
    ) -> ThreadPlacement:
        """Compute the placement of a new comment.

        A top-level comment starts its own thread. A reply extends its
        parent's path with the parent id and inherits the parent's thread.
        Replying to a soft-deleted comment is not allowed.

        Args:
            post_id: Post the new comment belongs to
            parent_id: Parent comment ID (None for top-level)
            new_id: Newly allocated ID of the comment being created

        Returns:
            ThreadPlacement for the new comment

        Raises:
            NotFoundError: If the parent is missing or soft-deleted
            InvalidReferenceError: If the parent belongs to another post
        """
        if parent_id is None:
            return ThreadPlacement(thread_id=new_id, path=[])

        with logfire.span(
            "thread_assigner.assign",
            post_id=str(post_id),
            parent_id=str(parent_id),
        ):
            parent = await self.comment_repository.find_by_id(parent_id)
            if parent is None:
                logfire.warn(
                    "Parent comment not found",
                    parent_id=str(parent_id),
                    post_id=str(post_id),
                )
                raise NotFoundError("Parent comment", str(parent_id))

            if parent.post_id != post_id:
                logfire.warn(
                    "Parent comment does not belong to post",
                    parent_id=str(parent_id),
                    parent_post_id=str(parent.post_id),
                    target_post_id=str(post_id),
                )
                raise InvalidReferenceError(str(parent_id), str(post_id))

            placement = ThreadPlacement(
                thread_id=parent.thread_id,
                path=[*parent.path, parent.id],
            )
            logfire.debug(
                "Reply placed",
                parent_id=str(parent_id),
                thread_id=str(placement.thread_id),
                depth=placement.depth,
            )
            return placement
