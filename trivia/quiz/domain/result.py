"""QuizResult — the final tally of one quiz session."""

from typing import Self

from pydantic import BaseModel, Field, model_validator


class QuizResult(BaseModel, frozen=True):
    """Immutable outcome of a session, read once when the quiz is over.

    ``answered`` counts the questions whose answer arrived before the deadline;
    questions left when time ran out are never scored.
    """

    score: int = Field(ge=0)
    total: int = Field(ge=0)
    answered: int = Field(ge=0)
    timed_out: bool = False

    @model_validator(mode="after")
    def _check_bounds(self) -> Self:
        if not self.score <= self.answered <= self.total:
            raise ValueError(
                f"expected score <= answered <= total, got "
                f"{self.score}, {self.answered}, {self.total}"
            )
        return self
