"""Recount replies use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.domain.service import CommentService, ReplyCountService
from commentary.domain.value import CommentId


class RecountRepliesRequest(BaseModel):
    """Recount replies request."""

    comment_id: str


class RecountRepliesResponse(BaseModel):
    """Recount replies response."""

    comment_id: str
    previous_count: int
    replies_count: int


class RecountRepliesUseCase:
    """Use case for repairing a drifted replies_count."""

    def __init__(
        self,
        comment_service: CommentService,
        reply_count_service: ReplyCountService,
    ) -> None:
        self.comment_service = comment_service
        self.reply_count_service = reply_count_service

    async def execute(self, request: RecountRepliesRequest) -> RecountRepliesResponse:
        """Recompute a comment's counter from its live replies.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment_id = CommentId(UUID(request.comment_id))
        comment = await self.comment_service.get_comment(comment_id)
        count = await self.reply_count_service.recount(comment_id)

        return RecountRepliesResponse(
            comment_id=str(comment_id),
            previous_count=comment.replies_count,
            replies_count=count,
        )
