"""QuestionSet — the result of loading a quiz file."""

from pydantic import BaseModel, Field

from trivia.dataset.domain.format import QuestionFormat
from trivia.dataset.domain.question import QuestionRecord


class QuestionSet(BaseModel, frozen=True):
    """Immutable value object returned by a QuestionLoader.

    Carries the parsed records in source order, the format they were decoded
    from, and the SHA-256 hex digest of the raw file bytes.
    """

    records: list[QuestionRecord]
    source_format: QuestionFormat
    sha256: str = Field(min_length=1)
