"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, Query, status
from pydantic import BaseModel

from commentary.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    ListRepliesRequest,
    ListRepliesResponse,
    ListRepliesUseCase,
    ListUserCommentsRequest,
    ListUserCommentsResponse,
    ListUserCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from commentary.domain.service import JWTService
from commentary.interface.error import to_http_exception

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


def require_user_id(
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
) -> str:
    """Resolve the authenticated user from the auth cookie or a bearer token.

    Args:
        jwt_service: JWT service
        auth_token: JWT token from cookie
        authorization: Authorization header value

    Returns:
        User ID of the caller

    Raises:
        HTTPException: 401 if no valid token is presented
    """
    token = auth_token
    if not token and authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            token = credentials.strip()

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    user_id = jwt_service.get_user_id_from_token(token)
    try:
        UUID(user_id or "")
    except ValueError:
        logfire.warn("Rejected request with invalid token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
        )
    return user_id


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str
    parent_id: UUID | None = None


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str


@router.post(
    "/posts/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Create a comment on a post, or a reply when parent_id is given.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment content and optional parent
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Created comment

    Raises:
        HTTPException: 401 unauthenticated, 404 post or parent missing,
            400 parent on another post, 422 invalid content
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=str(post_id),
                content=request.content,
                created_by=user_id,
                parent_id=str(request.parent_id) if request.parent_id else None,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create comment")


@router.get("/posts/{post_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    post_id: UUID,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    limit: int | None = Query(default=None),
    offset: int | None = Query(default=None),
) -> ListCommentsResponse:
    """List top-level comments of a post, newest first.

    Out-of-range limit and offset values are clamped.

    Args:
        post_id: Post UUID
        list_comments_use_case: List comments use case from DI
        limit: Page size (1-100, default 10)
        offset: Number of comments to skip

    Returns:
        Comments and pagination envelope
    """
    try:
        return await list_comments_use_case.execute(
            ListCommentsRequest(post_id=str(post_id), limit=limit, offset=offset)
        )
    except Exception as e:
        raise to_http_exception(e, "list comments")


@router.get("/comments/{comment_id}", response_model=GetCommentResponse)
async def get_comment(
    comment_id: UUID,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> GetCommentResponse:
    """Get a single comment."""
    try:
        return await get_comment_use_case.execute(
            GetCommentRequest(comment_id=str(comment_id))
        )
    except Exception as e:
        raise to_http_exception(e, "fetch comment")


@router.patch("/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UpdateCommentResponse:
    """Edit a comment's content.

    Only the author can edit.

    Args:
        comment_id: Comment UUID
        request: New content
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Updated comment
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=str(comment_id),
                user_id=user_id,
                content=request.content,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "update comment")


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Soft-delete a comment.

    Only the author can delete. Replies stay visible.

    Args:
        comment_id: Comment UUID
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service from DI
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        Confirmation
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=str(comment_id), user_id=user_id)
        )
    except Exception as e:
        raise to_http_exception(e, "delete comment")


@router.get("/comments/{comment_id}/replies", response_model=ListRepliesResponse)
async def list_replies(
    comment_id: UUID,
    list_replies_use_case: FromDishka[ListRepliesUseCase],
    limit: int | None = Query(default=None),
    offset: int | None = Query(default=None),
) -> ListRepliesResponse:
    """List direct replies to a comment, oldest first.

    Args:
        comment_id: Parent comment UUID
        list_replies_use_case: List replies use case from DI
        limit: Page size (1-100, default 20)
        offset: Number of replies to skip

    Returns:
        Replies and pagination envelope
    """
    try:
        return await list_replies_use_case.execute(
            ListRepliesRequest(comment_id=str(comment_id), limit=limit, offset=offset)
        )
    except Exception as e:
        raise to_http_exception(e, "list replies")


@router.get("/threads/{thread_id}", response_model=GetThreadResponse)
async def get_thread(
    thread_id: UUID,
    get_thread_use_case: FromDishka[GetThreadUseCase],
) -> GetThreadResponse:
    """Get a complete thread as a flat, display-ordered list.

    Args:
        thread_id: Thread root comment UUID
        get_thread_use_case: Get thread use case from DI

    Returns:
        Thread comments; each names the comment it hangs under (anchor_id)
    """
    try:
        return await get_thread_use_case.execute(
            GetThreadRequest(thread_id=str(thread_id))
        )
    except Exception as e:
        raise to_http_exception(e, "fetch thread")


@router.get("/users/{user_id}/comments", response_model=ListUserCommentsResponse)
async def list_user_comments(
    user_id: UUID,
    list_user_comments_use_case: FromDishka[ListUserCommentsUseCase],
    limit: int | None = Query(default=None),
    offset: int | None = Query(default=None),
) -> ListUserCommentsResponse:
    """List a user's comments, newest first."""
    try:
        return await list_user_comments_use_case.execute(
            ListUserCommentsRequest(user_id=str(user_id), limit=limit, offset=offset)
        )
    except Exception as e:
        raise to_http_exception(e, "list user comments")
