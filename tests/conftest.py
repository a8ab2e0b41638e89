"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire
from dishka import AsyncContainer

from commentary.domain.model import Comment, Post, User
from commentary.domain.repository import PostRepository, UserRepository
from commentary.domain.service import JWTService
from commentary.domain.value import CommentId, PostId, UserId
from commentary.domain.value.types import Handle

# Keep spans local; nothing is exported from test runs
logfire.configure(send_to_logfire=False, console=False)


def make_user(username: str = "alice") -> User:
    """Build a user with a fresh ID."""
    return User(
        id=UserId(uuid4()),
        username=Handle(username),
        email=f"{username}@example.com",
        display_name=username.title(),
        avatar_url=None,
        created_at=datetime.now(),
        updated_at=datetime.now(),
    )


def make_post(created_by: UserId | None = None, deleted: bool = False) -> Post:
    """Build a post with a fresh ID."""
    return Post(
        id=PostId(uuid4()),
        title="Test Post",
        content="Test content",
        created_by=created_by,
        created_at=datetime.now(),
        updated_at=datetime.now(),
        deleted_at=datetime.now() if deleted else None,
    )


async def seed_user(container: AsyncContainer, username: str = "alice") -> User:
    """Save a new user through the container's user repository."""
    async with container() as request_container:
        user_repo = await request_container.get(UserRepository)
        return await user_repo.save(make_user(username))


async def seed_post(
    container: AsyncContainer,
    created_by: UserId | None = None,
    deleted: bool = False,
) -> Post:
    """Save a new post through the container's post repository."""
    async with container() as request_container:
        post_repo = await request_container.get(PostRepository)
        return await post_repo.save(make_post(created_by, deleted=deleted))


async def auth_headers(container: AsyncContainer, user: User) -> dict[str, str]:
    """Bearer header with a token signed by the app's own JWT service."""
    async with container() as request_container:
        jwt_service = await request_container.get(JWTService)
        token = jwt_service.create_token(str(user.id), str(user.username))
    return {"Authorization": f"Bearer {token}"}


def make_comment(
    post_id: PostId,
    parent: Comment | None = None,
    created_by: UserId | None = None,
    content: str = "Test comment",
    created_at: datetime | None = None,
) -> Comment:
    """Build a correctly placed comment (root, or reply to `parent`)."""
    comment_id = CommentId(uuid4())
    return Comment(
        id=comment_id,
        content=content,
        post_id=post_id,
        parent_id=parent.id if parent else None,
        path=[*parent.path, parent.id] if parent else [],
        thread_id=parent.thread_id if parent else comment_id,
        replies_count=0,
        created_by=created_by,
        created_at=created_at or datetime.now(),
    )
