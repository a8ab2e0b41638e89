"""Create comment use case."""

from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import (
    CommentService,
    PostService,
    ReplyCountService,
    ThreadAssigner,
    UserService,
)
from commentary.domain.value import CommentId, PostId, UserId

from .common import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    content: str
    created_by: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(CommentItem):
    """Create comment response (the created comment)."""


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        thread_assigner: ThreadAssigner,
        reply_count_service: ReplyCountService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            thread_assigner: Thread placement service
            reply_count_service: Reply count service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.thread_assigner = thread_assigner
        self.reply_count_service = reply_count_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify the post exists and is live
        2. Compute path and thread id from the parent (if replying)
        3. Store the comment
        4. Count the reply against its parent
        5. Attach the author

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            NotFoundError: If the post or parent is missing or deleted
            InvalidReferenceError: If the parent belongs to another post
            ValidationError: If content is empty or too long
        """
        post_id = PostId(UUID(request.post_id))
        created_by = UserId(UUID(request.created_by))
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None

        with logfire.span(
            "create_comment.execute",
            post_id=str(post_id),
            parent_id=request.parent_id,
            created_by=str(created_by),
        ):
            await self.post_service.get_live_post(post_id)

            comment_id = CommentId(uuid4())
            placement = await self.thread_assigner.assign(post_id, parent_id, comment_id)

            comment = await self.comment_service.create_comment(
                comment_id=comment_id,
                post_id=post_id,
                content=request.content,
                created_by=created_by,
                placement=placement,
                parent_id=parent_id,
            )

            await self.reply_count_service.on_reply_created(comment)

            authors = await self.user_service.get_author_summaries([created_by])
            return CreateCommentResponse.from_comment(comment, authors.get(created_by))
