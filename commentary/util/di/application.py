"""Application layer DI providers."""

from dishka import Scope, provide

from commentary.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentUseCase,
    GetThreadUseCase,
    ListCommentsUseCase,
    ListRepliesUseCase,
    ListUserCommentsUseCase,
    RecountRepliesUseCase,
    UpdateCommentUseCase,
)
from commentary.config import CommentSettings
from commentary.domain.service import (
    CommentService,
    PostService,
    ReplyCountService,
    ThreadAssigner,
    TreeAssembler,
    UserService,
)
from commentary.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Write use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        thread_assigner: ThreadAssigner,
        reply_count_service: ReplyCountService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            thread_assigner=thread_assigner,
            reply_count_service=reply_count_service,
            user_service=user_service,
        )

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_delete_comment_use_case(
        self,
        comment_service: CommentService,
        reply_count_service: ReplyCountService,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service,
            reply_count_service=reply_count_service,
        )

    @provide
    def get_recount_replies_use_case(
        self,
        comment_service: CommentService,
        reply_count_service: ReplyCountService,
    ) -> RecountRepliesUseCase:
        """Provide recount replies use case."""
        return RecountRepliesUseCase(
            comment_service=comment_service,
            reply_count_service=reply_count_service,
        )

    # Read use cases
    @provide
    def get_get_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide
    def get_list_comments_use_case(
        self,
        post_service: PostService,
        tree_assembler: TreeAssembler,
        comment_settings: CommentSettings,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            post_service=post_service,
            tree_assembler=tree_assembler,
            comment_settings=comment_settings,
        )

    @provide
    def get_list_replies_use_case(
        self,
        comment_service: CommentService,
        tree_assembler: TreeAssembler,
        comment_settings: CommentSettings,
    ) -> ListRepliesUseCase:
        """Provide list replies use case."""
        return ListRepliesUseCase(
            comment_service=comment_service,
            tree_assembler=tree_assembler,
            comment_settings=comment_settings,
        )

    @provide
    def get_get_thread_use_case(
        self, comment_service: CommentService, tree_assembler: TreeAssembler
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            comment_service=comment_service, tree_assembler=tree_assembler
        )

    @provide
    def get_list_user_comments_use_case(
        self,
        comment_service: CommentService,
        tree_assembler: TreeAssembler,
        comment_settings: CommentSettings,
    ) -> ListUserCommentsUseCase:
        """Provide list user comments use case."""
        return ListUserCommentsUseCase(
            comment_service=comment_service,
            tree_assembler=tree_assembler,
            comment_settings=comment_settings,
        )
