"""In-memory user repository for testing."""

from typing import Iterable, Optional

from commentary.domain.model.user import User
from commentary.domain.repository.user import UserRepository
from commentary.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a live user by ID."""
        user = self._users.get(user_id)
        if user is None or user.deleted_at is not None:
            return None
        return user

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Find live users by ID."""
        found = {}
        for user_id in set(user_ids):
            user = self._users.get(user_id)
            if user is not None and user.deleted_at is None:
                found[user_id] = user
        return found

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
