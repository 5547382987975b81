"""Unit tests for DeleteCommentUseCase."""

import pytest

from tewahed.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from tewahed.domain.error import ForbiddenError
from tewahed.domain.model import Viewer
from tewahed.domain.repository import CommentRepository
from tewahed.domain.value import CommentId, UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_admin_deletes(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(1, author_id="someone"))
        admin = Viewer(user_id=UserId("mod"), is_admin=True)

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(comment_id=1, viewer=admin)
        )

        # Assert
        assert response.success is True
        assert response.comment_id == 1
        assert await comment_repo.find_by_id(CommentId(1)) is None

    @pytest.mark.asyncio
    async def test_old_comment_refused_for_author(self, unit_env):
        """make_comment timestamps are far in the past, outside the window."""
        use_case = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(1, author_id="someone"))

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                DeleteCommentRequest(
                    comment_id=1, viewer=Viewer(user_id=UserId("someone"))
                )
            )
