"""Error types raised by config infrastructure."""

from pathlib import Path

from trivia.core.errors import TriviaError


class ConfigLoadError(TriviaError):
    """Raised when the settings file cannot be opened, read or parsed."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        self.path = path
        super().__init__(f"Failed to load config: {reason}: {path}")


class ConfigValidationError(TriviaError):
    """Raised when the merged settings fail validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")
