"""Error types raised by dataset infrastructure."""

from trivia.core.errors import TriviaError


class DatasetLoadError(TriviaError):
    """Raised when a quiz file cannot be read or is malformed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to load questions: {reason}")
