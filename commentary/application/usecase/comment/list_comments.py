"""List top-level comments use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.config import CommentSettings
from commentary.domain.service import PostService, TreeAssembler
from commentary.domain.value import PageRequest, Pagination, PostId

from .common import CommentItem


class ListCommentsRequest(BaseModel):
    """List comments request."""

    post_id: str
    limit: int | None = None  # Defaults to the configured top-level page size
    offset: int | None = None


class ListCommentsResponse(BaseModel):
    """List comments response."""

    comments: list[CommentItem]
    pagination: Pagination


class ListCommentsUseCase:
    """Use case for listing one page of a post's top-level comments.

    Comments come newest first. Replies are not included; each item
    carries replies_count so clients can expand it.
    """

    def __init__(
        self,
        post_service: PostService,
        tree_assembler: TreeAssembler,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize list comments use case.

        Args:
            post_service: Post domain service
            tree_assembler: Tree assembler
            comment_settings: Page size configuration
        """
        self.post_service = post_service
        self.tree_assembler = tree_assembler
        self.comment_settings = comment_settings

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Out-of-range limits and offsets are clamped, not rejected.

        Args:
            request: List comments request

        Returns:
            Page of comments with pagination envelope

        Raises:
            NotFoundError: If the post is missing or deleted
        """
        post_id = PostId(UUID(request.post_id))
        await self.post_service.get_live_post(post_id)

        page = PageRequest.clamp(
            request.limit,
            request.offset,
            default_limit=self.comment_settings.top_level_page_size,
            max_limit=self.comment_settings.max_page_size,
        )
        nodes, total = await self.tree_assembler.assemble_top_level(post_id, page)

        return ListCommentsResponse(
            comments=[CommentItem.from_node(node) for node in nodes],
            pagination=Pagination.for_page(page, len(nodes), total),
        )
