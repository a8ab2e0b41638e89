"""List user comments use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.config import CommentSettings
from commentary.domain.service import CommentService, TreeAssembler
from commentary.domain.value import PageRequest, Pagination, UserId

from .common import CommentItem


class ListUserCommentsRequest(BaseModel):
    """List user comments request."""

    user_id: str
    limit: int | None = None
    offset: int | None = None


class ListUserCommentsResponse(BaseModel):
    """List user comments response."""

    comments: list[CommentItem]
    pagination: Pagination


class ListUserCommentsUseCase:
    """Use case for listing a user's live comments across posts, newest first."""

    def __init__(
        self,
        comment_service: CommentService,
        tree_assembler: TreeAssembler,
        comment_settings: CommentSettings,
    ) -> None:
        self.comment_service = comment_service
        self.tree_assembler = tree_assembler
        self.comment_settings = comment_settings

    async def execute(
        self, request: ListUserCommentsRequest
    ) -> ListUserCommentsResponse:
        """Execute list user comments flow.

        Args:
            request: List user comments request

        Returns:
            Page of comments with pagination envelope
        """
        user_id = UserId(UUID(request.user_id))
        page = PageRequest.clamp(
            request.limit,
            request.offset,
            default_limit=self.comment_settings.user_comments_page_size,
            max_limit=self.comment_settings.max_page_size,
        )

        comments, total = await self.comment_service.list_by_author(user_id, page)
        nodes = await self.tree_assembler.to_nodes(comments)

        return ListUserCommentsResponse(
            comments=[CommentItem.from_node(node) for node in nodes],
            pagination=Pagination.for_page(page, len(nodes), total),
        )
