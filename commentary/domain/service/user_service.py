"""User domain service."""

from typing import Iterable

import logfire

from commentary.domain.model import AuthorSummary
from commentary.domain.repository import UserRepository
from commentary.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user directory lookups."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_author_summaries(
        self, user_ids: Iterable[UserId]
    ) -> dict[UserId, AuthorSummary]:
        """Get public author summaries for a batch of users.

        Args:
            user_ids: User IDs (duplicates allowed)

        Returns:
            Mapping of user ID to author summary; unknown or deleted users
            are absent
        """
        unique_ids = set(user_ids)
        if not unique_ids:
            return {}

        with logfire.span("user_service.get_author_summaries", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            missing = len(unique_ids) - len(users)
            if missing:
                logfire.debug("Authors not found in user directory", missing=missing)
            return {user_id: user.to_summary() for user_id, user in users.items()}
