"""Update comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.error import ForbiddenError
from commentary.domain.service import CommentService, UserService
from commentary.domain.value import CommentId, UserId

from .common import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str
    user_id: str  # User making the edit (must be the author)
    content: str


class UpdateCommentResponse(CommentItem):
    """Update comment response (the edited comment)."""


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Only the author can edit. Placement fields never change.

        Args:
            request: Update comment request

        Returns:
            The updated comment

        Raises:
            NotFoundError: If the comment is missing or soft-deleted
            ForbiddenError: If the user is not the author
            ValidationError: If content is empty or too long
        """
        comment_id = CommentId(UUID(request.comment_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "update_comment.execute", comment_id=str(comment_id), user_id=str(user_id)
        ):
            comment = await self.comment_service.get_comment(comment_id)

            if not comment.is_authored_by(user_id):
                logfire.warn(
                    "Unauthorized comment edit attempt",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                    created_by=str(comment.created_by),
                )
                raise ForbiddenError("comment", str(comment_id), str(user_id))

            updated = await self.comment_service.update_content(
                comment_id, request.content
            )

            authors = await self.user_service.get_author_summaries([user_id])
            return UpdateCommentResponse.from_comment(updated, authors.get(user_id))
