"""Post domain service."""

import logfire

from commentary.domain.error import NotFoundError
from commentary.domain.model.post import Post
from commentary.domain.repository import PostRepository
from commentary.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for post lookups."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_live_post(self, post_id: PostId) -> Post:
        """Get a post that can receive comments.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post is missing or soft-deleted
        """
        with logfire.span("post_service.get_live_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post is None or post.is_deleted:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            return post
