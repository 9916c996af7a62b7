"""QuestionLoader Protocol — structural interface for loading quiz questions."""

from pathlib import Path
from typing import Protocol

from trivia.dataset.domain.question_set import QuestionSet


class QuestionLoader(Protocol):
    """Loads an ordered QuestionSet from the file at path."""

    def load(self, path: Path) -> QuestionSet: ...
