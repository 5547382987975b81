"""In-memory discussion root repository for testing."""

from tewahed.domain.repository.root import DiscussionRootRepository
from tewahed.domain.value import AnswerId, DiscussionRoot, QuestionId


class InMemoryDiscussionRootRepository(DiscussionRootRepository):
    """In-memory implementation of DiscussionRootRepository for testing.

    Questions and answers are registered with ``add_question`` and
    ``add_answer``.
    """

    def __init__(self) -> None:
        self._questions: set[QuestionId] = set()
        self._answers: set[AnswerId] = set()

    def add_question(self, question_id: int) -> DiscussionRoot:
        """Register a question and return it as a root."""
        self._questions.add(QuestionId(question_id))
        return DiscussionRoot.for_question(question_id)

    def add_answer(self, answer_id: int) -> DiscussionRoot:
        """Register an answer and return it as a root."""
        self._answers.add(AnswerId(answer_id))
        return DiscussionRoot.for_answer(answer_id)

    async def exists(self, root: DiscussionRoot) -> bool:
        """Check whether the question or answer was registered."""
        if root.question_id is not None:
            return root.question_id in self._questions
        return root.answer_id in self._answers
