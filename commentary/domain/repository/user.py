"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from commentary.domain.model.user import User
from commentary.domain.value import UserId


class UserRepository(ABC):
    """Repository for users.

    Defines the contract for user lookups needed to attach authors to comments.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a live user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Find live users by ID in a single query.

        Args:
            user_ids: User IDs to look up (duplicates allowed)

        Returns:
            Mapping of user ID to user; unknown or deleted IDs are absent
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
