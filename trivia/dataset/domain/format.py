"""QuestionFormat — the file formats a quiz can be loaded from."""

from enum import StrEnum
from pathlib import Path

from trivia.dataset.domain.errors import UnsupportedFormatError


class QuestionFormat(StrEnum):
    CSV = "csv"
    JSON = "json"
    XML = "xml"

    @classmethod
    def from_path(cls, path: Path) -> "QuestionFormat":
        """Infer the format from the file extension.

        Raises:
            UnsupportedFormatError: if the extension is not csv, json or xml.
        """
        extension = path.suffix.lstrip(".").lower()
        try:
            return cls(extension)
        except ValueError:
            raise UnsupportedFormatError(path=path) from None
