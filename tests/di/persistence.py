"""Mock persistence providers for testing."""

from dishka import Scope, provide

from tewahed.domain.repository import (
    CommentRepository,
    DiscussionRootRepository,
    LikeRepository,
    UserRepository,
)
from tewahed.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDiscussionRootRepository,
    InMemoryLikeRepository,
    InMemoryUserRepository,
)
from tewahed.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that every request against one container
    sees the same data; each test builds its own container for isolation.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_like_repository(self) -> LikeRepository:
        """Provide in-memory like repository."""
        return InMemoryLikeRepository()

    @provide(scope=Scope.APP)
    def get_root_repository(self) -> DiscussionRootRepository:
        """Provide in-memory question/answer registry."""
        return InMemoryDiscussionRootRepository()

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user profile registry."""
        return InMemoryUserRepository()
