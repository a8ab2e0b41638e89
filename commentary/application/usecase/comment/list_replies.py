"""List replies use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.config import CommentSettings
from commentary.domain.service import CommentService, TreeAssembler
from commentary.domain.value import CommentId, PageRequest, Pagination

from .common import CommentItem


class ListRepliesRequest(BaseModel):
    """List replies request."""

    comment_id: str  # Parent comment
    limit: int | None = None
    offset: int | None = None


class ListRepliesResponse(BaseModel):
    """List replies response."""

    replies: list[CommentItem]
    pagination: Pagination


class ListRepliesUseCase:
    """Use case for listing one page of a comment's direct replies, oldest first."""

    def __init__(
        self,
        comment_service: CommentService,
        tree_assembler: TreeAssembler,
        comment_settings: CommentSettings,
    ) -> None:
        self.comment_service = comment_service
        self.tree_assembler = tree_assembler
        self.comment_settings = comment_settings

    async def execute(self, request: ListRepliesRequest) -> ListRepliesResponse:
        """Execute list replies flow.

        Args:
            request: List replies request

        Returns:
            Page of replies with pagination envelope

        Raises:
            NotFoundError: If the parent comment is missing or deleted
        """
        parent_id = CommentId(UUID(request.comment_id))
        await self.comment_service.get_comment(parent_id)

        page = PageRequest.clamp(
            request.limit,
            request.offset,
            default_limit=self.comment_settings.replies_page_size,
            max_limit=self.comment_settings.max_page_size,
        )
        nodes, total = await self.tree_assembler.assemble_replies(parent_id, page)

        return ListRepliesResponse(
            replies=[CommentItem.from_node(node) for node in nodes],
            pagination=Pagination.for_page(page, len(nodes), total),
        )
