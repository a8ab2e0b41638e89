"""Delete comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.error import ForbiddenError
from commentary.domain.service import CommentService, ReplyCountService
from commentary.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # User deleting the comment (must be the author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool
    message: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft-deleting a comment.

    The comment becomes a tombstone: its replies stay in place and keep it
    in their path. Only the direct parent's counter changes.
    """

    def __init__(
        self,
        comment_service: CommentService,
        reply_count_service: ReplyCountService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            reply_count_service: Reply count service
        """
        self.comment_service = comment_service
        self.reply_count_service = reply_count_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Args:
            request: Delete comment request

        Returns:
            Confirmation

        Raises:
            NotFoundError: If the comment is missing or already deleted
            ForbiddenError: If the user is not the author
        """
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "delete_comment.execute", comment_id=str(comment_id), user_id=str(user_id)
        ):
            comment = await self.comment_service.get_comment(comment_id)

            if not comment.is_authored_by(user_id):
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise ForbiddenError("comment", str(comment_id), str(user_id))

            # Raises NotFoundError when a concurrent delete won the race
            deleted = await self.comment_service.soft_delete(comment_id)
            await self.reply_count_service.on_comment_deleted(deleted)

            return DeleteCommentResponse(
                success=True, message="Comment deleted successfully"
            )
