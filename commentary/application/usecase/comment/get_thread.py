"""Get thread use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.domain.error import NotFoundError
from commentary.domain.service import CommentService, TreeAssembler
from commentary.domain.value import CommentId

from .common import ThreadCommentItem


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: str


class GetThreadResponse(BaseModel):
    """Get thread response."""

    thread_id: str
    comments: list[ThreadCommentItem]  # Display order, nested via anchor_id
    total: int  # Live comments in the thread


class GetThreadUseCase:
    """Use case for the complete view of one thread.

    Meant for bounded views such as moderation tooling; post pages use
    the paginated top-level and replies listings instead.
    """

    def __init__(
        self, comment_service: CommentService, tree_assembler: TreeAssembler
    ) -> None:
        self.comment_service = comment_service
        self.tree_assembler = tree_assembler

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        A thread whose root is deleted is still shown while any of its
        comments are live.

        Args:
            request: Get thread request

        Returns:
            Thread comments in display order

        Raises:
            NotFoundError: If the thread root does not exist, or it is
                deleted and no live comment remains
        """
        thread_id = CommentId(UUID(request.thread_id))
        root = await self.comment_service.get_thread_root(thread_id)

        nodes, total = await self.tree_assembler.assemble_thread(thread_id)
        if root.is_deleted and total == 0:
            raise NotFoundError("Thread", str(thread_id))

        return GetThreadResponse(
            thread_id=str(thread_id),
            comments=ThreadCommentItem.flatten(nodes),
            total=total,
        )
