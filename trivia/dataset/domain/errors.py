"""Error types raised by the dataset domain."""

from pathlib import Path

from trivia.core.errors import TriviaError


class UnsupportedFormatError(TriviaError):
    """Raised when a quiz file has an extension no decoder is registered for."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Failed to load questions: unsupported file type for {path}; "
            "the file needs to end with .csv, .json or .xml"
        )
