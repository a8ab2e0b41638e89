"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from commentary.domain.error import ConflictError, InternalError
from commentary.domain.model import Comment
from commentary.domain.repository import CommentRepository
from commentary.domain.value import CommentId, PostId, UserId
from commentary.persistence.mappers import comment_to_dict, row_to_comment
from commentary.persistence.tables import comments_table

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Every mutation is a single statement: counters are updated in SQL
    and soft delete only matches live rows, so concurrent requests never
    lose an increment or decrement a parent twice.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _live(self, stmt):
        return stmt.where(comments_table.c.deleted_at.is_(None))

    async def create(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = (
            comments_table.insert()
            .values(**comment_to_dict(comment))
            .returning(*comments_table.c)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as e:
            if getattr(e.orig, "sqlstate", None) == UNIQUE_VIOLATION:
                raise ConflictError("Comment", str(comment.id)) from e
            logfire.error(
                "Comment insert violated a constraint",
                comment_id=str(comment.id),
                error=str(e),
            )
            raise InternalError("Failed to store comment") from e
        except SQLAlchemyError as e:
            logfire.error(
                "Comment insert failed", comment_id=str(comment.id), error=str(e)
            )
            raise InternalError("Failed to store comment") from e

        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def find_by_id(
        self, comment_id: CommentId, include_deleted: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        if not include_deleted:
            stmt = self._live(stmt)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a live comment."""
        stmt = self._live(
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(content=content, updated_at=func.now())
            .returning(*comments_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else None

    async def soft_delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Tombstone a live comment in one conditional update."""
        stmt = self._live(
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(deleted_at=func.now())
            .returning(*comments_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level(
        self, post_id: PostId, limit: int = 10, offset: int = 0
    ) -> List[Comment]:
        """Find live root comments of a post, newest first."""
        stmt = (
            self._live(select(comments_table))
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
            .order_by(desc(comments_table.c.created_at), comments_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_top_level(self, post_id: PostId) -> int:
        """Count live root comments of a post."""
        stmt = (
            self._live(select(func.count()).select_from(comments_table))
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_replies(
        self, parent_id: CommentId, limit: int = 20, offset: int = 0
    ) -> List[Comment]:
        """Find live direct replies, oldest first."""
        stmt = (
            self._live(select(comments_table))
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_replies(self, parent_id: CommentId) -> int:
        """Count live direct replies."""
        stmt = self._live(
            select(func.count()).select_from(comments_table)
        ).where(comments_table.c.parent_id == parent_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_by_thread(self, thread_id: CommentId) -> List[Comment]:
        """Find all live comments of a thread in path order."""
        # Postgres compares arrays element by element, which is tree order.
        stmt = (
            self._live(select(comments_table))
            .where(comments_table.c.thread_id == thread_id)
            .order_by(func.array_append(comments_table.c.path, comments_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_author(
        self, author_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Comment]:
        """Find live comments by a user, newest first."""
        stmt = (
            self._live(select(comments_table))
            .where(comments_table.c.created_by == author_id)
            .order_by(desc(comments_table.c.created_at), comments_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_author(self, author_id: UserId) -> int:
        """Count live comments by a user."""
        stmt = self._live(
            select(func.count()).select_from(comments_table)
        ).where(comments_table.c.created_by == author_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def increment_replies_count(self, comment_id: CommentId) -> None:
        """Increment replies_count in SQL."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(replies_count=comments_table.c.replies_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_replies_count(self, comment_id: CommentId) -> None:
        """Decrement replies_count in SQL, never below zero."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.replies_count > 0)
            .values(replies_count=comments_table.c.replies_count - 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def set_replies_count(self, comment_id: CommentId, count: int) -> None:
        """Overwrite replies_count."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(replies_count=max(count, 0))
        )
        await self.session.execute(stmt)
        await self.session.flush()
