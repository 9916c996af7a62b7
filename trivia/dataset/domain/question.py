"""QuestionRecord domain value object — one question/answer pair from a quiz file."""

from pydantic import BaseModel, ConfigDict, Field


class QuestionRecord(BaseModel, frozen=True):
    """Immutable value object representing a single question and its expected answer."""

    model_config = ConfigDict(frozen=True)

    prompt: str = Field(min_length=1)
    expected_answer: str = Field(min_length=1)
