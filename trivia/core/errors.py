"""Base exception class for all trivia-specific errors."""


class TriviaError(Exception):
    """Base class for all trivia errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
