"""Unit tests for ThreadAssigner."""

from uuid import uuid4

import pytest

from commentary.domain.error import InvalidReferenceError, NotFoundError
from commentary.domain.repository import CommentRepository
from commentary.domain.service import ThreadAssigner
from commentary.domain.value import CommentId, PostId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestAssign:
    """Tests for ThreadAssigner.assign."""

    @pytest.mark.asyncio
    async def test_top_level_comment_starts_its_own_thread(self, unit_env):
        """A comment without parent has an empty path and is its own thread."""
        # Arrange
        assigner = await unit_env.get(ThreadAssigner)
        new_id = CommentId(uuid4())

        # Act
        placement = await assigner.assign(PostId(uuid4()), None, new_id)

        # Assert
        assert placement.path == []
        assert placement.thread_id == new_id
        assert placement.depth == 1

    @pytest.mark.asyncio
    async def test_reply_extends_parent_path(self, unit_env):
        """A reply's path is the parent's path plus the parent id."""
        # Arrange
        assigner = await unit_env.get(ThreadAssigner)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        root = await comment_repo.create(make_comment(post_id))
        child = await comment_repo.create(make_comment(post_id, parent=root))

        # Act
        placement = await assigner.assign(post_id, child.id, CommentId(uuid4()))

        # Assert
        assert placement.path == [root.id, child.id]
        assert placement.thread_id == root.id
        assert placement.depth == 3

    @pytest.mark.asyncio
    async def test_thread_id_is_inherited_at_any_depth(self, unit_env):
        """Deeply nested replies keep the root's id as thread id."""
        # Arrange
        assigner = await unit_env.get(ThreadAssigner)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        root = await comment_repo.create(make_comment(post_id))

        parent = root
        for _ in range(25):
            parent = await comment_repo.create(make_comment(post_id, parent=parent))

        # Act
        placement = await assigner.assign(post_id, parent.id, CommentId(uuid4()))

        # Assert
        assert placement.thread_id == root.id
        assert len(placement.path) == 26
        assert placement.path[0] == root.id
        assert placement.path[-1] == parent.id

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env):
        """Replying to an unknown comment fails."""
        # Arrange
        assigner = await unit_env.get(ThreadAssigner)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await assigner.assign(
                PostId(uuid4()), CommentId(uuid4()), CommentId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_deleted_parent_raises_not_found(self, unit_env):
        """Replying to a soft-deleted comment is not allowed."""
        # Arrange
        assigner = await unit_env.get(ThreadAssigner)
        comment_repo = await unit_env.get(CommentRepository)
        post_id = PostId(uuid4())
        root = await comment_repo.create(make_comment(post_id))
        await comment_repo.soft_delete(root.id)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await assigner.assign(post_id, root.id, CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_parent_on_other_post_raises_invalid_reference(self, unit_env):
        """A parent must belong to the same post."""
        # Arrange
        assigner = await unit_env.get(ThreadAssigner)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_repo.create(make_comment(PostId(uuid4())))

        # Act & Assert
        with pytest.raises(InvalidReferenceError):
            await assigner.assign(PostId(uuid4()), parent.id, CommentId(uuid4()))
