"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import ValidationError as PydanticValidationError
from pydantic import model_validator

from tewahed.domain.error import ValidationError
from tewahed.domain.value.common import ValueObject
from tewahed.domain.value.identifiers import AnswerId, QuestionId


class LikeTargetType(str, Enum):
    """Type of entity that can be liked."""

    QUESTION = "question"
    ANSWER = "answer"
    COMMENT = "comment"


class DiscussionRoot(ValueObject):
    """The question or answer a comment thread hangs off.

    Exactly one of ``question_id`` and ``answer_id`` is set.
    """

    question_id: QuestionId | None = None
    answer_id: AnswerId | None = None

    @model_validator(mode="after")
    def validate_single_root(self) -> "DiscussionRoot":
        """Require exactly one of question_id / answer_id."""
        if (self.question_id is None) == (self.answer_id is None):
            raise ValueError("Exactly one of question_id or answer_id must be provided")
        return self

    @classmethod
    def from_ids(
        cls, question_id: int | None, answer_id: int | None
    ) -> "DiscussionRoot":
        """Build a root from optional request fields.

        Raises:
            ValidationError: (domain) If not exactly one ID is given
        """
        try:
            return cls(question_id=question_id, answer_id=answer_id)
        except PydanticValidationError as e:
            raise ValidationError(
                "Exactly one of question_id or answer_id must be provided"
            ) from e

    @classmethod
    def for_question(cls, question_id: int) -> "DiscussionRoot":
        return cls(question_id=QuestionId(question_id))

    @classmethod
    def for_answer(cls, answer_id: int) -> "DiscussionRoot":
        return cls(answer_id=AnswerId(answer_id))

    @property
    def kind(self) -> LikeTargetType:
        """Entity type of the root."""
        if self.question_id is not None:
            return LikeTargetType.QUESTION
        return LikeTargetType.ANSWER

    @property
    def target_id(self) -> int:
        """Id of the root entity, interpreted according to ``kind``."""
        if self.question_id is not None:
            return self.question_id
        return self.answer_id  # type: ignore[return-value]

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.target_id}"
