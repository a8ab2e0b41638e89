"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from commentary.domain.model.post import Post
from commentary.domain.value import PostId


class PostRepository(ABC):
    """Repository for posts.

    Comments only read posts; `save` exists so posts can be seeded by
    fixtures and tooling.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found (deleted or not), None otherwise
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass
