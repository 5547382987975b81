"""Unit tests for GetThreadUseCase."""

import pytest

from tewahed.application.usecase.comment import GetThreadRequest, GetThreadUseCase
from tewahed.domain.error import ValidationError
from tewahed.domain.model import UserProfile, Viewer
from tewahed.domain.repository import CommentRepository, UserRepository
from tewahed.domain.service import ThreadService
from tewahed.domain.value import CommentId, UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetThreadUseCase:
    """Tests for GetThreadUseCase."""

    @pytest.mark.asyncio
    async def test_nested_response(self, unit_env):
        """Response nests replies and counts every comment."""
        # Arrange
        use_case = await unit_env.get(GetThreadUseCase)
        thread_service = await unit_env.get(ThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(1, question_id=2, minutes=0))
        await comment_repo.save(make_comment(2, parent_id=1, question_id=2, minutes=1))
        await comment_repo.save(make_comment(3, question_id=2, minutes=2))
        viewer = Viewer(user_id=UserId("reader"))
        await thread_service.like_comment(CommentId(2), viewer)

        # Act
        response = await use_case.execute(
            GetThreadRequest(question_id=2, viewer=viewer)
        )

        # Assert
        assert response.question_id == 2
        assert response.answer_id is None
        assert response.total == 3
        assert [item.comment_id for item in response.comments] == [1, 3]
        reply = response.comments[0].replies[0]
        assert reply.comment_id == 2
        assert reply.level == 1
        assert reply.like_count == 1
        assert reply.is_liked is True

    @pytest.mark.asyncio
    async def test_author_summaries(self, unit_env):
        """Display name wins over name; unnamed or unknown users are anonymous."""
        # Arrange
        use_case = await unit_env.get(GetThreadUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        user_repo.add(
            UserProfile(
                id=UserId("abba"),
                name="Tesfaye",
                display_name="Abba Tesfaye",
                image="https://img.example/abba.png",
                is_admin=True,
            )
        )
        user_repo.add(UserProfile(id=UserId("named"), name="Mulu"))
        user_repo.add(UserProfile(id=UserId("blank")))
        await comment_repo.save(make_comment(1, author_id="abba", minutes=0))
        await comment_repo.save(make_comment(2, author_id="named", minutes=1))
        await comment_repo.save(make_comment(3, author_id="blank", minutes=2))
        await comment_repo.save(make_comment(4, author_id="ghost", minutes=3))

        # Act
        response = await use_case.execute(GetThreadRequest(question_id=1))

        # Assert
        authors = [item.author for item in response.comments]
        assert [a.name for a in authors] == [
            "Abba Tesfaye",
            "Mulu",
            "Anonymous",
            "Anonymous",
        ]
        assert authors[0].image == "https://img.example/abba.png"
        assert authors[0].is_admin is True
        assert authors[3].id == "ghost"
        assert authors[3].is_admin is False

    @pytest.mark.asyncio
    async def test_anonymous_empty_thread(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)

        response = await use_case.execute(GetThreadRequest(answer_id=4))

        assert response.comments == []
        assert response.total == 0
        assert response.answer_id == 4

    @pytest.mark.asyncio
    async def test_requires_single_root(self, unit_env):
        use_case = await unit_env.get(GetThreadUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(GetThreadRequest())
