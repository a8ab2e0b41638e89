"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .post_service import PostService
from .reply_count_service import ReplyCountService
from .thread_service import ThreadAssigner, ThreadPlacement
from .tree_service import CommentNode, TreeAssembler
from .user_service import UserService

__all__ = [
    "CommentNode",
    "CommentService",
    "JWTService",
    "PostService",
    "ReplyCountService",
    "Service",
    "ThreadAssigner",
    "ThreadPlacement",
    "TreeAssembler",
    "UserService",
]
