"""Unit tests for CreateCommentUseCase."""

import pytest

from tewahed.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from tewahed.domain.error import NotFoundError, UnauthenticatedError, ValidationError
from tewahed.domain.model import Viewer
from tewahed.domain.repository import DiscussionRootRepository
from tewahed.domain.value import UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

AUTHOR = Viewer(user_id=UserId("user-a"))


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_on_question(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        roots = await unit_env.get(DiscussionRootRepository)
        roots.add_question(3)

        request = CreateCommentRequest(content="Nice", question_id=3, author=AUTHOR)

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.comment_id > 0
        assert response.content == "Nice"
        assert response.author_id == "user-a"
        assert response.question_id == 3
        assert response.answer_id is None
        assert response.parent_id is None

    @pytest.mark.asyncio
    async def test_create_reply_on_answer(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        roots = await unit_env.get(DiscussionRootRepository)
        roots.add_answer(8)
        parent = await use_case.execute(
            CreateCommentRequest(content="Top", answer_id=8, author=AUTHOR)
        )

        # Act
        reply = await use_case.execute(
            CreateCommentRequest(
                content="Reply",
                answer_id=8,
                parent_id=parent.comment_id,
                author=AUTHOR,
            )
        )

        # Assert
        assert reply.parent_id == parent.comment_id
        assert reply.answer_id == 8

    @pytest.mark.asyncio
    async def test_both_roots_rejected(self, unit_env):
        """A comment cannot belong to a question and an answer at once."""
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError, match="Exactly one"):
            await use_case.execute(
                CreateCommentRequest(
                    content="Hi", question_id=1, answer_id=1, author=AUTHOR
                )
            )

    @pytest.mark.asyncio
    async def test_no_root_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError, match="Exactly one"):
            await use_case.execute(CreateCommentRequest(content="Hi", author=AUTHOR))

    @pytest.mark.asyncio
    async def test_unknown_answer(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError, match="Answer not found: 5"):
            await use_case.execute(
                CreateCommentRequest(content="Hi", answer_id=5, author=AUTHOR)
            )

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        roots = await unit_env.get(DiscussionRootRepository)
        roots.add_question(1)

        with pytest.raises(UnauthenticatedError):
            await use_case.execute(CreateCommentRequest(content="Hi", question_id=1))
