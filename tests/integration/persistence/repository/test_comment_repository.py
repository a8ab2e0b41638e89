"""Integration tests for PostgresCommentRepository.

These run against a migrated PostgreSQL at DATABASE__URL and are skipped
when it is not set.
"""

import asyncio
import os
from uuid import UUID, uuid4

import pytest
import pytest_asyncio

from commentary.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from commentary.domain.error import ConflictError, NotFoundError
from commentary.domain.repository import CommentRepository, PostRepository
from commentary.domain.value import CommentId
from tests.conftest import make_comment, make_post, seed_post, seed_user
from tests.di import build_test_container
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ,
    reason="DATABASE__URL not set; PostgreSQL integration tests skipped",
)

integration_env = create_env_fixture(unmock={"persistence"})


class TestCommentRepositoryIntegration:
    """Integration tests for the comment table queries."""

    @pytest.mark.asyncio
    async def test_thread_is_returned_in_path_order(self, integration_env):
        """Parents precede descendants in the single thread query."""
        # Arrange
        post = await (await integration_env.get(PostRepository)).save(make_post())
        comment_repo = await integration_env.get(CommentRepository)
        root = await comment_repo.create(make_comment(post.id))
        child = await comment_repo.create(make_comment(post.id, parent=root))
        grandchild = await comment_repo.create(make_comment(post.id, parent=child))
        sibling = await comment_repo.create(make_comment(post.id, parent=root))

        # Act
        thread = await comment_repo.find_by_thread(root.id)

        # Assert
        ids = [c.id for c in thread]
        assert ids[0] == root.id
        assert ids.index(child.id) < ids.index(grandchild.id)
        assert set(ids) == {root.id, child.id, grandchild.id, sibling.id}
        assert next(c for c in thread if c.id == grandchild.id).path == [
            root.id,
            child.id,
        ]

    @pytest.mark.asyncio
    async def test_counters_and_conditional_delete(self, integration_env):
        """Counter updates happen in SQL and a second delete matches nothing."""
        # Arrange
        post = await (await integration_env.get(PostRepository)).save(make_post())
        comment_repo = await integration_env.get(CommentRepository)
        root = await comment_repo.create(make_comment(post.id))
        reply = await comment_repo.create(make_comment(post.id, parent=root))

        # Act
        await comment_repo.increment_replies_count(root.id)
        await comment_repo.increment_replies_count(root.id)
        await comment_repo.decrement_replies_count(root.id)
        first_delete = await comment_repo.soft_delete(reply.id)
        second_delete = await comment_repo.soft_delete(reply.id)

        # Assert
        assert (await comment_repo.find_by_id(root.id)).replies_count == 1
        assert first_delete is not None
        assert second_delete is None
        assert await comment_repo.count_replies(root.id) == 0

    @pytest.mark.asyncio
    async def test_duplicate_id_raises_conflict(self, integration_env):
        # Arrange
        post = await (await integration_env.get(PostRepository)).save(make_post())
        comment_repo = await integration_env.get(CommentRepository)
        comment = make_comment(post.id)
        await comment_repo.create(comment)

        # Act & Assert
        with pytest.raises(ConflictError):
            await comment_repo.create(comment)

    @pytest.mark.asyncio
    async def test_unknown_comment_is_none(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)

        assert await comment_repo.find_by_id(uuid4()) is None


@pytest_asyncio.fixture
async def app_container():
    """App-scoped container so each task can open its own request scope."""
    container = build_test_container(unmock={"persistence"})
    yield container
    await container.close()


class TestConcurrentRequestsIntegration:
    """Concurrent requests, each with its own session and transaction."""

    @pytest.mark.asyncio
    async def test_concurrent_replies_are_all_counted(self, app_container):
        # Arrange
        user = await seed_user(app_container, f"user_{uuid4().hex[:12]}")
        post = await seed_post(app_container)
        async with app_container() as request_container:
            use_case = await request_container.get(CreateCommentUseCase)
            parent = await use_case.execute(
                CreateCommentRequest(
                    post_id=str(post.id), content="Parent", created_by=str(user.id)
                )
            )

        async def reply(i: int) -> None:
            async with app_container() as request_container:
                use_case = await request_container.get(CreateCommentUseCase)
                await use_case.execute(
                    CreateCommentRequest(
                        post_id=str(post.id),
                        content=f"Reply {i}",
                        created_by=str(user.id),
                        parent_id=parent.id,
                    )
                )

        # Act
        await asyncio.gather(*(reply(i) for i in range(20)))

        # Assert
        async with app_container() as request_container:
            comment_repo = await request_container.get(CommentRepository)
            stored = await comment_repo.find_by_id(CommentId(UUID(parent.id)))
        assert stored.replies_count == 20

    @pytest.mark.asyncio
    async def test_concurrent_deletes_decrement_parent_once(self, app_container):
        # Arrange
        user = await seed_user(app_container, f"user_{uuid4().hex[:12]}")
        post = await seed_post(app_container)
        async with app_container() as request_container:
            use_case = await request_container.get(CreateCommentUseCase)
            parent = await use_case.execute(
                CreateCommentRequest(
                    post_id=str(post.id), content="Parent", created_by=str(user.id)
                )
            )
            for content in ("First", "Second"):
                reply = await use_case.execute(
                    CreateCommentRequest(
                        post_id=str(post.id),
                        content=content,
                        created_by=str(user.id),
                        parent_id=parent.id,
                    )
                )

        async def delete() -> None:
            async with app_container() as request_container:
                use_case = await request_container.get(DeleteCommentUseCase)
                await use_case.execute(
                    DeleteCommentRequest(comment_id=reply.id, user_id=str(user.id))
                )

        # Act
        results = await asyncio.gather(
            *(delete() for _ in range(10)), return_exceptions=True
        )

        # Assert
        failures = [r for r in results if isinstance(r, Exception)]
        assert len(failures) == 9
        assert all(isinstance(f, NotFoundError) for f in failures)
        async with app_container() as request_container:
            comment_repo = await request_container.get(CommentRepository)
            stored = await comment_repo.find_by_id(CommentId(UUID(parent.id)))
        assert stored.replies_count == 1
