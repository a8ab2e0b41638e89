"""Domain layer DI providers."""

from dishka import Scope, provide

from commentary.config import AuthSettings, CommentSettings
from commentary.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from commentary.domain.service import (
    CommentService,
    JWTService,
    PostService,
    ReplyCountService,
    ThreadAssigner,
    TreeAssembler,
    UserService,
)
from commentary.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            max_content_length=comment_settings.max_content_length,
        )

    @provide
    def get_thread_assigner(
        self, comment_repository: CommentRepository
    ) -> ThreadAssigner:
        """Provide thread placement service."""
        return ThreadAssigner(comment_repository=comment_repository)

    @provide
    def get_reply_count_service(
        self, comment_repository: CommentRepository
    ) -> ReplyCountService:
        """Provide reply count service."""
        return ReplyCountService(comment_repository=comment_repository)

    @provide
    def get_tree_assembler(
        self, comment_service: CommentService, user_service: UserService
    ) -> TreeAssembler:
        """Provide comment tree assembler."""
        return TreeAssembler(comment_service=comment_service, user_service=user_service)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
