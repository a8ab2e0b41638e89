"""Unit tests for ReplyCountService."""

import asyncio
from uuid import uuid4

import pytest

from commentary.domain.repository import CommentRepository
from commentary.domain.service import ReplyCountService
from commentary.domain.value import PostId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestOnReplyCreated:
    """Tests for on_reply_created."""

    @pytest.mark.asyncio
    async def test_increments_only_direct_parent(self, unit_env):
        """A reply bumps its parent, not the grandparent."""
        # Arrange
        service = await unit_env.get(ReplyCountService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        root = await comment_repo.create(make_comment(post_id))
        child = await comment_repo.create(make_comment(post_id, parent=root))
        await service.on_reply_created(child)
        grandchild = await comment_repo.create(make_comment(post_id, parent=child))

        # Act
        await service.on_reply_created(grandchild)

        # Assert
        assert (await comment_repo.find_by_id(root.id)).replies_count == 1
        assert (await comment_repo.find_by_id(child.id)).replies_count == 1

    @pytest.mark.asyncio
    async def test_top_level_comment_changes_nothing(self, unit_env):
        """Root comments have no parent counter to bump."""
        # Arrange
        service = await unit_env.get(ReplyCountService)
        comment_repo = await unit_env.get(CommentRepository)
        root = await comment_repo.create(make_comment(PostId(uuid4())))

        # Act
        await service.on_reply_created(root)

        # Assert
        assert (await comment_repo.find_by_id(root.id)).replies_count == 0

    @pytest.mark.asyncio
    async def test_concurrent_replies_are_all_counted(self, unit_env):
        """N concurrent replies leave the parent at exactly N."""
        # Arrange
        service = await unit_env.get(ReplyCountService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        root = await comment_repo.create(make_comment(post_id))

        async def reply():
            child = await comment_repo.create(make_comment(post_id, parent=root))
            await asyncio.sleep(0)
            await service.on_reply_created(child)

        # Act
        await asyncio.gather(*(reply() for _ in range(50)))

        # Assert
        assert (await comment_repo.find_by_id(root.id)).replies_count == 50
        assert await comment_repo.count_replies(root.id) == 50


class TestOnCommentDeleted:
    """Tests for on_comment_deleted."""

    @pytest.mark.asyncio
    async def test_decrements_parent(self, unit_env):
        """Deleting a reply lowers its parent's counter."""
        # Arrange
        service = await unit_env.get(ReplyCountService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        root = await comment_repo.create(make_comment(post_id))
        child = await comment_repo.create(make_comment(post_id, parent=root))
        await service.on_reply_created(child)

        # Act
        deleted = await comment_repo.soft_delete(child.id)
        await service.on_comment_deleted(deleted)

        # Assert
        assert (await comment_repo.find_by_id(root.id)).replies_count == 0

    @pytest.mark.asyncio
    async def test_counter_never_goes_negative(self, unit_env):
        """Decrementing a zero counter leaves it at zero."""
        # Arrange
        service = await unit_env.get(ReplyCountService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        root = await comment_repo.create(make_comment(post_id))
        child = await comment_repo.create(make_comment(post_id, parent=root))

        # Act
        await service.on_comment_deleted(child)

        # Assert
        assert (await comment_repo.find_by_id(root.id)).replies_count == 0


class TestRecount:
    """Tests for recount."""

    @pytest.mark.asyncio
    async def test_recount_repairs_drifted_counter(self, unit_env):
        """recount sets the counter to the number of live direct replies."""
        # Arrange
        service = await unit_env.get(ReplyCountService)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        root = await comment_repo.create(make_comment(post_id))
        for _ in range(3):
            await comment_repo.create(make_comment(post_id, parent=root))
        gone = await comment_repo.create(make_comment(post_id, parent=root))
        await comment_repo.soft_delete(gone.id)
        await comment_repo.set_replies_count(root.id, 17)

        # Act
        count = await service.recount(root.id)

        # Assert
        assert count == 3
        assert (await comment_repo.find_by_id(root.id)).replies_count == 3
