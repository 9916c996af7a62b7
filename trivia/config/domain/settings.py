"""QuizSettings — the resolved configuration for one trivia invocation."""

from pathlib import Path
from typing import Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

LogFormat: TypeAlias = Literal["console", "json"]

DEFAULT_QUESTIONS_PATH = Path("problems.csv")
DEFAULT_DURATION_SECONDS = 1000


class QuizSettings(BaseModel, frozen=True):
    """Root configuration for a quiz run.

    ``separator`` is accepted for compatibility with existing invocations but
    no decoder reads it. ``duration_seconds`` only applies when ``timed`` is
    set; zero or negative values end the quiz before the first answer.
    """

    model_config = ConfigDict(extra="forbid")

    path: Path = DEFAULT_QUESTIONS_PATH
    separator: str = Field(default=",", min_length=1)
    debug: bool = False
    duration_seconds: int = DEFAULT_DURATION_SECONDS
    timed: bool = True
    log_format: LogFormat = "console"

    @property
    def time_budget(self) -> float | None:
        """Seconds allowed for the whole session, or None when untimed."""
        return float(self.duration_seconds) if self.timed else None
