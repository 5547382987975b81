"""Domain layer DI providers."""

from dishka import Scope, provide

from tewahed.config import AuthSettings, ThreadSettings
from tewahed.domain.repository import (
    CommentRepository,
    DiscussionRootRepository,
    LikeRepository,
    UserRepository,
)
from tewahed.domain.service import (
    AuthorService,
    CommentService,
    JWTService,
    LikeService,
    ThreadService,
)
from tewahed.util.di.base import ProviderBase


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
        root_repository: DiscussionRootRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository, root_repository=root_repository
        )

    @provide
    def get_like_service(self, like_repository: LikeRepository) -> LikeService:
        """Provide like domain service."""
        return LikeService(like_repository=like_repository)

    @provide
    def get_author_service(self, user_repository: UserRepository) -> AuthorService:
        """Provide author domain service."""
        return AuthorService(user_repository=user_repository)

    @provide
    def get_thread_service(
        self,
        comment_service: CommentService,
        like_service: LikeService,
        author_service: AuthorService,
        thread_settings: ThreadSettings,
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            comment_service=comment_service,
            like_service=like_service,
            author_service=author_service,
            settings=thread_settings,
        )
