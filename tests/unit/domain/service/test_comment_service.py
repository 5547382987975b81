"""Unit tests for CommentService."""

import pytest
from sqlalchemy.exc import IntegrityError

from tewahed.domain.error import NotFoundError, ValidationError
from tewahed.domain.repository import CommentRepository, DiscussionRootRepository
from tewahed.domain.service import CommentService
from tewahed.domain.value import CommentId, DiscussionRoot, UserId
from tewahed.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDiscussionRootRepository,
)
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

AUTHOR = UserId("user-a")


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Top-level comment is stored with trimmed content and new id."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        roots = await unit_env.get(DiscussionRootRepository)
        root = roots.add_question(1)

        # Act
        result = await comment_service.create_comment(
            root=root, author_id=AUTHOR, content="  Great question  "
        )

        # Assert
        assert result.content == "Great question"
        assert result.question_id == 1
        assert result.answer_id is None
        assert result.parent_id is None
        assert await comment_repo.find_by_id(result.id) == result

    @pytest.mark.asyncio
    async def test_create_comment_on_answer(self, unit_env):
        """Comments can attach to answers."""
        comment_service = await unit_env.get(CommentService)
        roots = await unit_env.get(DiscussionRootRepository)
        root = roots.add_answer(4)

        result = await comment_service.create_comment(
            root=root, author_id=AUTHOR, content="Thanks"
        )

        assert result.answer_id == 4
        assert result.question_id is None

    @pytest.mark.asyncio
    async def test_blank_content_rejected(self, unit_env):
        """Whitespace-only content is empty after trimming."""
        comment_service = await unit_env.get(CommentService)
        roots = await unit_env.get(DiscussionRootRepository)
        root = roots.add_question(1)

        with pytest.raises(ValidationError, match="must not be empty"):
            await comment_service.create_comment(
                root=root, author_id=AUTHOR, content="   "
            )

    @pytest.mark.asyncio
    async def test_content_length_limit(self, unit_env):
        """2000 characters pass, 2001 do not."""
        comment_service = await unit_env.get(CommentService)
        roots = await unit_env.get(DiscussionRootRepository)
        root = roots.add_question(1)

        accepted = await comment_service.create_comment(
            root=root, author_id=AUTHOR, content="x" * 2000
        )
        assert len(accepted.content) == 2000

        with pytest.raises(ValidationError, match="at most 2000"):
            await comment_service.create_comment(
                root=root, author_id=AUTHOR, content="x" * 2001
            )

    @pytest.mark.asyncio
    async def test_missing_root_raises_not_found(self, unit_env):
        """Commenting on an unknown question fails."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Question not found: 42"):
            await comment_service.create_comment(
                root=DiscussionRoot.for_question(42),
                author_id=AUTHOR,
                content="Hello",
            )

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env):
        """Replying to a comment that does not exist fails."""
        comment_service = await unit_env.get(CommentService)
        roots = await unit_env.get(DiscussionRootRepository)
        root = roots.add_question(1)

        with pytest.raises(NotFoundError, match="Parent comment not found"):
            await comment_service.create_comment(
                root=root,
                author_id=AUTHOR,
                content="Reply",
                parent_id=CommentId(99),
            )

    @pytest.mark.asyncio
    async def test_parent_on_other_root_rejected(self, unit_env):
        """A reply must stay on its parent's question or answer."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        roots = await unit_env.get(DiscussionRootRepository)
        roots.add_question(1)
        other_root = roots.add_question(2)
        await comment_repo.save(make_comment(1, question_id=1))

        # Act & Assert
        with pytest.raises(ValidationError, match="does not belong"):
            await comment_service.create_comment(
                root=other_root,
                author_id=AUTHOR,
                content="Reply",
                parent_id=CommentId(1),
            )

    @pytest.mark.asyncio
    async def test_reply_to_level_two_rejected(self, unit_env):
        """Replies may go two levels deep but no further."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        roots = await unit_env.get(DiscussionRootRepository)
        root = roots.add_question(1)

        top = await comment_service.create_comment(
            root=root, author_id=AUTHOR, content="level 0"
        )
        middle = await comment_service.create_comment(
            root=root, author_id=AUTHOR, content="level 1", parent_id=top.id
        )
        deep = await comment_service.create_comment(
            root=root, author_id=AUTHOR, content="level 2", parent_id=middle.id
        )

        # Act & Assert
        with pytest.raises(ValidationError, match="Maximum nesting level reached"):
            await comment_service.create_comment(
                root=root, author_id=AUTHOR, content="level 3", parent_id=deep.id
            )

    @pytest.mark.asyncio
    async def test_rejects_reply_under_corrupt_deep_chain(self, unit_env):
        """Stored rows deeper than allowed still block further replies."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        roots = await unit_env.get(DiscussionRootRepository)
        root = roots.add_question(1)
        for comment_id in range(1, 7):
            parent = comment_id - 1 if comment_id > 1 else None
            await comment_repo.save(make_comment(comment_id, parent_id=parent))

        # Act & Assert
        with pytest.raises(ValidationError):
            await comment_service.create_comment(
                root=root, author_id=AUTHOR, content="deep", parent_id=CommentId(6)
            )


class TestGetAncestors:
    """Tests for get_ancestors method."""

    @pytest.mark.asyncio
    async def test_ancestors_nearest_first_and_limited(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        for comment_id in range(1, 6):
            parent = comment_id - 1 if comment_id > 1 else None
            await comment_repo.save(make_comment(comment_id, parent_id=parent))
        leaf = await comment_repo.find_by_id(CommentId(5))

        # Act
        all_ancestors = await comment_service.get_ancestors(leaf, limit=10)
        limited = await comment_service.get_ancestors(leaf, limit=2)

        # Assert
        assert [c.id for c in all_ancestors] == [4, 3, 2, 1]
        assert [c.id for c in limited] == [4, 3]


class TestGetAndDelete:
    """Tests for lookup and deletion."""

    @pytest.mark.asyncio
    async def test_get_missing_comment_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError, match="Comment not found: 5"):
            await comment_service.get_comment_by_id(CommentId(5))

    @pytest.mark.asyncio
    async def test_delete_removes_descendants(self, unit_env):
        """Deleting a comment takes its whole subtree with it."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(1))
        await comment_repo.save(make_comment(2, parent_id=1, minutes=1))
        await comment_repo.save(make_comment(3, parent_id=2, minutes=2))
        await comment_repo.save(make_comment(4, minutes=3))

        # Act
        await comment_service.delete_comment(CommentId(2))

        # Assert
        remaining = await comment_service.get_comments_for_root(
            DiscussionRoot.for_question(1)
        )
        assert sorted(c.id for c in remaining) == [1, 4]


class ParentDeletedBeforeInsert(InMemoryCommentRepository):
    """Deletes the parent between the service's checks and the insert."""

    async def create(self, comment):
        if comment.parent_id is not None:
            await self.delete(comment.parent_id)
        return await super().create(comment)


class ConflictOnInsert(InMemoryCommentRepository):
    """Fails every insert with a constraint violation."""

    async def create(self, comment):
        raise IntegrityError("INSERT", {}, Exception("check constraint"))


class TestCreateCommentRaces:
    """Inserts that lose a race against a concurrent delete."""

    @pytest.mark.asyncio
    async def test_parent_deleted_during_reply_raises_not_found(self):
        # Arrange
        comment_repo = ParentDeletedBeforeInsert()
        roots = InMemoryDiscussionRootRepository()
        root = roots.add_question(1)
        await comment_repo.save(make_comment(1))
        comment_service = CommentService(comment_repo, roots)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Parent comment not found: 1"):
            await comment_service.create_comment(
                root=root, author_id=AUTHOR, content="Reply", parent_id=CommentId(1)
            )
        assert await comment_repo.list_by_root(root) == []

    @pytest.mark.asyncio
    async def test_other_integrity_errors_propagate(self):
        """A violation not explained by a missing parent or root is re-raised."""
        # Arrange
        comment_repo = ConflictOnInsert()
        roots = InMemoryDiscussionRootRepository()
        root = roots.add_question(1)
        await comment_repo.save(make_comment(1))
        comment_service = CommentService(comment_repo, roots)

        # Act & Assert
        with pytest.raises(IntegrityError):
            await comment_service.create_comment(
                root=root, author_id=AUTHOR, content="Reply", parent_id=CommentId(1)
            )
