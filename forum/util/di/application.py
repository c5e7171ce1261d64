"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
    ToggleCommentLikeUseCase,
)
from forum.application.usecase.reply import AddReplyUseCase, DeleteReplyUseCase
from forum.application.usecase.thread import AddThreadUseCase, GetThreadUseCase
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_add_thread_use_case(
        self, thread_repository: ThreadRepository
    ) -> AddThreadUseCase:
        """Provide add thread use case."""
        return AddThreadUseCase(thread_repository=thread_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
            reply_repository=reply_repository,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_toggle_comment_like_use_case(
        self, comment_repository: CommentRepository
    ) -> ToggleCommentLikeUseCase:
        """Provide toggle comment like use case."""
        return ToggleCommentLikeUseCase(comment_repository=comment_repository)

    # Reply use cases
    @provide(scope=Scope.REQUEST)
    def get_add_reply_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> AddReplyUseCase:
        """Provide add reply use case."""
        return AddReplyUseCase(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
            reply_repository=reply_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_reply_use_case(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> DeleteReplyUseCase:
        """Provide delete reply use case."""
        return DeleteReplyUseCase(
            thread_repository=thread_repository,
            comment_repository=comment_repository,
            reply_repository=reply_repository,
        )
