"""Multiple-choice question schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator


class Question(BaseModel):
    """A multiple-choice question from a question bank.

    Validation is strict: ``answerIndex`` must be a real integer (not a bool
    or float) pointing into ``choices``.
    """

    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    question: str = Field(..., description="Prompt text")
    choices: list[str] = Field(..., min_length=2, description="Answer choices")
    answer_index: int = Field(..., alias="answerIndex", description="Correct choice")
    explanation: str | None = Field(None, description="Why the answer is right")
    difficulty: str | None = Field(None, description="Free-form difficulty label")

    @model_validator(mode="after")
    def _answer_in_range(self) -> "Question":
        if not 0 <= self.answer_index < len(self.choices):
            raise ValueError(
                f"answerIndex {self.answer_index} outside 0..{len(self.choices) - 1}"
            )
        return self

    @property
    def correct_choice(self) -> str:
        return self.choices[self.answer_index]


def parse_question(raw: Any) -> Question | None:
    """Validate a raw question entry, returning None when it does not qualify."""
    if not isinstance(raw, dict):
        return None
    try:
        return Question.model_validate(raw)
    except ValidationError:
        return None


def valid_questions(entries: Any) -> list[Question]:
    """Validate every entry of a decoded question bank; non-lists yield nothing."""
    if not isinstance(entries, list):
        return []
    questions = []
    for raw in entries:
        question = parse_question(raw)
        if question is not None:
            questions.append(question)
    return questions
