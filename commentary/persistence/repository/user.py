"""PostgreSQL implementation of User repository."""

from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from commentary.domain.model import User
from commentary.domain.repository import UserRepository
from commentary.domain.value import UserId
from commentary.persistence.mappers import row_to_user, user_to_dict
from commentary.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a live user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = (
            select(users_table)
            .where(users_table.c.id == user_id)
            .where(users_table.c.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Find live users by ID with a single IN query."""
        ids = list(set(user_ids))
        if not ids:
            return {}

        stmt = (
            select(users_table)
            .where(users_table.c.id.in_(ids))
            .where(users_table.c.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        users = [row_to_user(dict(row)) for row in result.mappings().all()]
        return {user.id: user for user in users}

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)
        existing = await self.session.execute(
            select(users_table.c.id).where(users_table.c.id == user.id)
        )

        if existing.first():
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return user
