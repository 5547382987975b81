"""Application layer DI providers."""

from dishka import Scope, provide

from tewahed.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetThreadUseCase,
)
from tewahed.application.usecase.like import (
    GetLikeStatusUseCase,
    LikeCommentUseCase,
    ToggleLikeUseCase,
    UnlikeCommentUseCase,
)
from tewahed.domain.service import ThreadService
from tewahed.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(self, thread_service: ThreadService) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, thread_service: ThreadService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, thread_service: ThreadService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(thread_service=thread_service)

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(
        self, thread_service: ThreadService
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_like_comment_use_case(
        self, thread_service: ThreadService
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_comment_use_case(
        self, thread_service: ThreadService
    ) -> UnlikeCommentUseCase:
        """Provide unlike comment use case."""
        return UnlikeCommentUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_like_status_use_case(
        self, thread_service: ThreadService
    ) -> GetLikeStatusUseCase:
        """Provide get like status use case."""
        return GetLikeStatusUseCase(thread_service=thread_service)
