"""Get comment use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.domain.service import CommentService, UserService
from commentary.domain.value import CommentId

from .common import CommentItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str


class GetCommentResponse(CommentItem):
    """Get comment response."""


class GetCommentUseCase:
    """Use case for fetching a single live comment with its author."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Get a comment.

        Raises:
            NotFoundError: If the comment is missing or soft-deleted
        """
        comment = await self.comment_service.get_comment(
            CommentId(UUID(request.comment_id))
        )

        author = None
        if comment.created_by:
            authors = await self.user_service.get_author_summaries([comment.created_by])
            author = authors.get(comment.created_by)

        return GetCommentResponse.from_comment(comment, author)
